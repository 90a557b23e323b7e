from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterator, List, Tuple, Union

from lxml import etree

from .errors import FileOpenError, ParseError
from .models import AttributeKind, XesAttribute, XesEvent, XesLog, XesTrace

logger = logging.getLogger(__name__)

XesSource = Union[bytes, bytearray, IO[bytes]]


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=True,
        remove_comments=True,
        remove_pis=True,
    )


def _localname(elem: etree._Element) -> str:
    # "{http://www.xes-standard.org/}trace" -> "trace"
    return etree.QName(elem).localname


def iter_children(elem: etree._Element, child_localname: str) -> Iterator[etree._Element]:
    for ch in elem:
        # entity references and the like have a non-string tag
        if not isinstance(ch.tag, str):
            continue
        if _localname(ch) == child_localname:
            yield ch


def _attributes(elem: etree._Element, tag: str, kind: AttributeKind) -> Tuple[XesAttribute, ...]:
    return tuple(
        XesAttribute(key=ch.get("key", ""), value=ch.get("value", ""), kind=kind)
        for ch in iter_children(elem, tag)
    )


def _event_from_element(elem: etree._Element) -> XesEvent:
    return XesEvent(
        string_attributes=_attributes(elem, "string", AttributeKind.STRING),
        date_attributes=_attributes(elem, "date", AttributeKind.DATE),
    )


def _trace_from_element(elem: etree._Element) -> XesTrace:
    return XesTrace(
        string_attributes=_attributes(elem, "string", AttributeKind.STRING),
        events=tuple(_event_from_element(ev) for ev in iter_children(elem, "event")),
    )


def log_from_element(root: etree._Element) -> XesLog:
    """
    Maps a parsed <log> element onto the document model.
    Only log/trace/event/string/date and key/value are read; anything else is ignored.
    """
    if _localname(root) != "log":
        raise ParseError(f"Expected root element <log>, found <{_localname(root)}>")

    traces: List[XesTrace] = [_trace_from_element(t) for t in iter_children(root, "trace")]
    return XesLog(traces=tuple(traces))


def parse_log(source: XesSource) -> XesLog:
    parser = _make_parser()
    try:
        if isinstance(source, (bytes, bytearray)):
            root = etree.fromstring(bytes(source), parser)
        else:
            root = etree.parse(source, parser).getroot()
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Failed to decode XES document: {e}") from e
    except OSError as e:
        raise ParseError(f"Failed to read XES document: {e}") from e

    if root is None:
        raise ParseError("Failed to decode XES document: no root element")
    return log_from_element(root)


def read_log(xes_path: str | Path) -> XesLog:
    """
    Reads the whole file into memory, then parses it.
    """
    xes_path = Path(xes_path)
    try:
        data = xes_path.read_bytes()
    except OSError as e:
        raise FileOpenError(f"Failed to open XES file: {xes_path}: {e}", path=str(xes_path)) from e

    logger.debug("Read %d bytes from %s", len(data), xes_path)
    try:
        log = parse_log(data)
    except ParseError as e:
        e.path = str(xes_path)
        raise

    logger.info("Parsed %s: %d traces, %d events", xes_path.name, len(log.traces), log.event_count())
    return log
