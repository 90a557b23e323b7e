from __future__ import annotations

from typing import Dict, List, Set

from .models import XesLog
from .settings import ColumnOrder

TRACE_NAME_KEY = "concept:name"
CASE_NAME_KEY = "case:concept:name"


def case_key(key: str) -> str:
    """
    Column name for a trace-level attribute key.
    The trace's concept:name becomes case:concept:name; other keys pass through.
    """
    return CASE_NAME_KEY if key == TRACE_NAME_KEY else key


def column_name(key: str) -> str:
    return key.strip()


def iter_attribute_keys(log: XesLog):
    # document order: trace attributes, then each event's strings and dates
    for trace in log.traces:
        for attr in trace.string_attributes:
            yield column_name(case_key(attr.key))
        for event in trace.events:
            for attr in event.attributes():
                yield column_name(attr.key)


def collect_attribute_keys(log: XesLog) -> Set[str]:
    return set(iter_attribute_keys(log))


def build_header(log: XesLog, order: ColumnOrder = ColumnOrder.SORTED) -> List[str]:
    if order == ColumnOrder.FIRST_SEEN:
        return list(dict.fromkeys(iter_attribute_keys(log)))
    return sorted(collect_attribute_keys(log))


def column_index(header: List[str]) -> Dict[str, int]:
    return {name: i for i, name in enumerate(header)}
