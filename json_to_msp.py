#!/usr/bin/env python3
"""
Build the 256 MSP_OSD_CHAR_WRITE packets for a JSON font document.

By default the packets are concatenated into one binary file ready to stream
to a flight controller; ``--base64`` writes one base64 packet per line.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from osdfont import FontDocument, FormatError, msp


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a JSON font document to MSP packets.")
    parser.add_argument("input", type=Path, help="Source JSON font document")
    parser.add_argument("--output", type=Path, help="Destination path (default: input with .msp suffix)")
    parser.add_argument("--base64", action="store_true", help="Write one base64-encoded packet per line")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        document = FontDocument.from_json(args.input.read_text(encoding="utf-8"))
    except FormatError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    packets = msp.encode(document)
    output_path = args.output or args.input.with_suffix(".msp")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if args.base64:
        output_path.write_text("\n".join(msp.to_base64(packets)) + "\n", encoding="ascii")
    else:
        output_path.write_bytes(b"".join(packets))
    print(f"[+] {len(packets)} packets written to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
