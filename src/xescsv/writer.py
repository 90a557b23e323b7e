from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import IO, Iterable, List

from .errors import FileCreateError, WriteError

logger = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"


def _write_records(f: IO[str], out_path: Path, header: List[str], rows: Iterable[List[str]]) -> int:
    try:
        f.write(UTF8_BOM)
    except OSError as e:
        raise WriteError(f"Failed to write UTF-8 BOM: {e}", path=str(out_path)) from e

    writer = csv.writer(f, lineterminator="\n")
    try:
        writer.writerow(header)
    except (OSError, csv.Error) as e:
        raise WriteError(f"Failed to write CSV header: {e}", path=str(out_path)) from e

    n = 0
    for row in rows:
        try:
            writer.writerow(row)
        except (OSError, csv.Error) as e:
            raise WriteError(f"Failed to write CSV record {n + 1}: {e}", path=str(out_path)) from e
        n += 1

    try:
        f.flush()
    except OSError as e:
        raise WriteError(f"Failed to flush CSV file: {e}", path=str(out_path)) from e
    return n


def write_csv(out_path: str | Path, header: List[str], rows: Iterable[List[str]]) -> int:
    """
    Writes a UTF-8 CSV prefixed with a BOM: header first, then one record per row.
    Returns the number of data rows. A failure mid-way leaves a partial file behind.
    """
    out_path = Path(out_path)
    try:
        f = out_path.open("w", encoding="utf-8", newline="")
    except OSError as e:
        raise FileCreateError(f"Failed to create CSV file: {out_path}: {e}", path=str(out_path)) from e

    # record errors are already WriteError; a bare OSError here comes from close()
    try:
        with f:
            n = _write_records(f, out_path, header, rows)
    except OSError as e:
        raise WriteError(f"Failed to close CSV file: {e}", path=str(out_path)) from e

    logger.debug("Wrote %d rows x %d columns -> %s", n, len(header), out_path)
    return n
