from __future__ import annotations

from typing import Dict, Iterator, List

from .columns import case_key, column_index, column_name
from .models import XesAttribute, XesLog


def _set_cell(row: List[str], index: Dict[str, int], key: str, attr: XesAttribute) -> None:
    pos = index.get(column_name(key))
    if pos is None:
        # unknown column: skipped
        return
    row[pos] = attr.value.strip()


def iter_rows(log: XesLog, header: List[str]) -> Iterator[List[str]]:
    """
    One row per event, in trace order then event order.

    Cells are written event strings -> event dates -> trace strings,
    so a trace attribute overwrites an event attribute sharing its column.
    """
    index = column_index(header)
    width = len(header)

    for trace in log.traces:
        for event in trace.events:
            row = [""] * width
            for attr in event.string_attributes:
                _set_cell(row, index, attr.key, attr)
            for attr in event.date_attributes:
                _set_cell(row, index, attr.key, attr)
            for attr in trace.string_attributes:
                _set_cell(row, index, case_key(attr.key), attr)
            yield row
