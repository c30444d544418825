#!/usr/bin/env python3
"""
Render a PNG showing how an image will look once quantized to OSD pixels.

Usage:
    python image_preview.py INPUT_IMAGE OUTPUT_PNG

Exit codes:
    0 -> success
    1 -> the image could not be read
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from PIL import UnidentifiedImageError

from osdfont import render_preview


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Preview an image after OSD quantization.")
    parser.add_argument("input", type=Path, help="Source image")
    parser.add_argument("output", type=Path, help="Destination PNG path")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        preview = render_preview(args.input.read_bytes())
    except (OSError, UnidentifiedImageError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_bytes(preview)
    print(f"[+] Preview PNG written to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
