#!/usr/bin/env python3
"""
Decode a MAX7456 .mcm font into the JSON document model.

    python mcm_to_json.py font.mcm --output font.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from osdfont import mcm


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a MAX7456 .mcm font to JSON.")
    parser.add_argument("input", type=Path, help="Source .mcm file")
    parser.add_argument("--output", type=Path, help="Destination JSON path (default: input with .json suffix)")
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print the JSON with this indent")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    text = args.input.read_text(encoding="ascii", errors="replace")
    print(f"[+] Loaded {args.input} ({len(text.splitlines())} lines)")
    result = mcm.decode(text)
    if not result.ok:
        print(f"[error] {result.error.kind.value}: {result.error}", file=sys.stderr)
        return 1
    output_path = args.output or args.input.with_suffix(".json")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.document.to_json(indent=args.indent), encoding="utf-8")
    print(f"[+] JSON written to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
