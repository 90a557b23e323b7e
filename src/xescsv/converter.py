from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .columns import build_header
from .errors import InvalidExtensionError
from .reader import read_log
from .rows import iter_rows
from .settings import ColumnOrder, Settings
from .writer import write_csv

logger = logging.getLogger(__name__)

XES_SUFFIX = ".xes"


@dataclass
class ConversionResult:
    input_path: Path
    output_path: Path
    header: List[str] = field(default_factory=list)
    traces: int = 0
    rows: int = 0


def is_xes_path(path: str | Path) -> bool:
    return str(path).lower().endswith(XES_SUFFIX)


def convert_xes_to_csv(
    xes_path: str | Path,
    csv_path: str | Path,
    *,
    column_order: Optional[ColumnOrder] = None,
    settings: Optional[Settings] = None,
) -> ConversionResult:
    """
    Flattens an XES log into a CSV table, one row per event.

    The input is fully parsed before the output is opened, so a bad input
    never creates or truncates the CSV file.
    """
    input_path = Path(os.path.normpath(str(xes_path)))
    if not is_xes_path(input_path):
        raise InvalidExtensionError(f"Input file must be an XES file: {input_path}", path=str(input_path))

    if column_order is None:
        column_order = (settings or Settings()).column_order

    log = read_log(input_path)
    header = build_header(log, column_order)
    logger.debug("Header (%s): %s", column_order.value, header)

    output_path = Path(os.path.normpath(str(csv_path)))
    n = write_csv(output_path, header, iter_rows(log, header))

    logger.info("Converted %s -> %s (%d rows, %d columns)", input_path, output_path, n, len(header))
    return ConversionResult(
        input_path=input_path,
        output_path=output_path,
        header=header,
        traces=len(log.traces),
        rows=n,
    )
