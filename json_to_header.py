#!/usr/bin/env python3
"""
Export a JSON font document as a C header holding the 16 KiB font array.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from osdfont import FontDocument, FormatError, header


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a JSON font document to a C header.")
    parser.add_argument("input", type=Path, help="Source JSON font document")
    parser.add_argument("--output", type=Path, help="Destination header (default: font.h next to the input)")
    parser.add_argument("--array-name", default="font_data", help="Name of the generated byte array")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        document = FontDocument.from_json(args.input.read_text(encoding="utf-8"))
    except FormatError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    output_path = args.output or args.input.with_name("font.h")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(header.encode(document, array_name=args.array_name), encoding="ascii")
    print(f"[+] Header written to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
