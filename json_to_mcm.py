#!/usr/bin/env python3
"""
Encode a JSON font document back into MAX7456 .mcm text.  Glyphs missing from
the JSON are written as fully transparent characters.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from osdfont import FontDocument, FormatError, mcm


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a JSON font document to .mcm.")
    parser.add_argument("input", type=Path, help="Source JSON font document")
    parser.add_argument("--output", type=Path, help="Destination .mcm path (default: input with .mcm suffix)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        document = FontDocument.from_json(args.input.read_text(encoding="utf-8"))
    except FormatError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    output_path = args.output or args.input.with_suffix(".mcm")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(mcm.encode(document), encoding="ascii", newline="\n")
    print(f"[+] MCM written to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
