from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Tuple


class AttributeKind(str, Enum):
    STRING = "string"
    DATE = "date"


@dataclass(frozen=True)
class XesAttribute:
    key: str
    value: str
    kind: AttributeKind = AttributeKind.STRING  # dates stay as literal text


@dataclass(frozen=True)
class XesEvent:
    string_attributes: Tuple[XesAttribute, ...] = field(default_factory=tuple)
    date_attributes: Tuple[XesAttribute, ...] = field(default_factory=tuple)

    def attributes(self) -> Iterator[XesAttribute]:
        """
        String attributes first, then dates.
        This is the order cells are written when flattening an event.
        """
        yield from self.string_attributes
        yield from self.date_attributes


@dataclass(frozen=True)
class XesTrace:
    string_attributes: Tuple[XesAttribute, ...] = field(default_factory=tuple)
    events: Tuple[XesEvent, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class XesLog:
    traces: Tuple[XesTrace, ...] = field(default_factory=tuple)

    def event_count(self) -> int:
        return sum(len(t.events) for t in self.traces)
