#!/usr/bin/env python3
"""
Quantize an image into 96 glyph tiles and place them at characters 160..255
of a font.  The font can be an .mcm file, a JSON document, or omitted to
start from a blank font.

    python image_to_font.py logo.png --font base.mcm --output logo.mcm
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from PIL import UnidentifiedImageError

from osdfont import FontDocument, FormatError, import_image, mcm


def load_document(path: Path | None) -> FontDocument:
    if path is None:
        return FontDocument.blank()
    text = path.read_text(encoding="utf-8", errors="replace")
    if path.suffix.lower() == ".mcm":
        return mcm.parse(text)
    return FontDocument.from_json(text)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import an image into glyphs 160..255 of a font.")
    parser.add_argument("image", type=Path, help="Source image (any format Pillow can read)")
    parser.add_argument("--font", type=Path, help="Existing .mcm or JSON font to update")
    parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Destination font; a .mcm suffix writes MCM, anything else writes JSON",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        document = load_document(args.font)
    except FormatError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    try:
        written = import_image(document, args.image.read_bytes())
    except (OSError, UnidentifiedImageError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    print(f"[+] Placed {written} tiles from {args.image}")
    args.output.parent.mkdir(parents=True, exist_ok=True)
    if args.output.suffix.lower() == ".mcm":
        args.output.write_text(mcm.encode(document), encoding="ascii", newline="\n")
    else:
        args.output.write_text(document.to_json(), encoding="utf-8")
    print(f"[+] Font written to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
