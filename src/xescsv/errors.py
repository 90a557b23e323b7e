from __future__ import annotations

from typing import Optional


class XesConversionError(Exception):
    """
    Base error for a failed conversion.
    `stage` names the step that failed (validate, open, parse, create, write).
    """

    stage = "convert"

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidExtensionError(XesConversionError, ValueError):
    stage = "validate"


class FileOpenError(XesConversionError):
    stage = "open"


class ParseError(XesConversionError):
    stage = "parse"


class FileCreateError(XesConversionError):
    stage = "create"


class WriteError(XesConversionError):
    stage = "write"


class SettingsError(ValueError):
    pass
