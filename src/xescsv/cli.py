from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .converter import convert_xes_to_csv
from .errors import SettingsError, XesConversionError
from .settings import load_settings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="xescsv", description="Convert an XES event log into a CSV table (one row per event).")
    p.add_argument("-input", "--input", dest="input", required=True, help="Path to the .xes input file")
    p.add_argument("-output", "--output", dest="output", required=True, help="Path to the CSV output file")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings()
    except SettingsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        result = convert_xes_to_csv(args.input, args.output, settings=settings)
    except XesConversionError as e:
        print(f"error: {e.stage}: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {result.rows} rows ({len(result.header)} columns) -> {result.output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
