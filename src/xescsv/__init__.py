from __future__ import annotations

from .converter import ConversionResult, convert_xes_to_csv, is_xes_path
from .errors import (
    FileCreateError,
    FileOpenError,
    InvalidExtensionError,
    ParseError,
    WriteError,
    XesConversionError,
)
from .models import AttributeKind, XesAttribute, XesEvent, XesLog, XesTrace

__all__ = [
    "AttributeKind",
    "ConversionResult",
    "FileCreateError",
    "FileOpenError",
    "InvalidExtensionError",
    "ParseError",
    "WriteError",
    "XesAttribute",
    "XesConversionError",
    "XesEvent",
    "XesLog",
    "XesTrace",
    "convert_xes_to_csv",
    "is_xes_path",
]

__version__ = "0.1.0"
