from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .errors import SettingsError

ENV_COLUMN_ORDER = "XESCSV_COLUMN_ORDER"
ENV_LOG_LEVEL = "XESCSV_LOG_LEVEL"


class ColumnOrder(str, Enum):
    SORTED = "sorted"
    FIRST_SEEN = "first-seen"


@dataclass(frozen=True)
class Settings:
    column_order: ColumnOrder = ColumnOrder.SORTED
    log_level: int = logging.WARNING


def parse_column_order(raw: Optional[str]) -> ColumnOrder:
    value = (raw or "").strip().lower().replace("_", "-")
    if not value:
        return ColumnOrder.SORTED
    try:
        return ColumnOrder(value)
    except ValueError:
        allowed = ", ".join(o.value for o in ColumnOrder)
        raise SettingsError(f"Invalid {ENV_COLUMN_ORDER}={raw!r} (expected one of: {allowed})") from None


def parse_log_level(raw: Optional[str]) -> int:
    value = (raw or "").strip().upper()
    if not value:
        return logging.WARNING
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    if not isinstance(level, int):
        raise SettingsError(f"Invalid {ENV_LOG_LEVEL}={raw!r}")
    return level


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    *,
    use_dotenv: bool = True,
    dotenv_path: Optional[str] = None,
) -> Settings:
    """
    Reads settings from the environment.
    A .env file (if any, searched from the working directory up) is loaded first;
    variables already set win.
    """
    if environ is None:
        if use_dotenv:
            load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        environ = os.environ

    return Settings(
        column_order=parse_column_order(environ.get(ENV_COLUMN_ORDER)),
        log_level=parse_log_level(environ.get(ENV_LOG_LEVEL)),
    )
