"""
Image import and preview.  Pillow handles decode, scaling and compositing;
the quantizer turns the resulting RGBA raster into font pixels.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
import re
from typing import List

import numpy as np
from PIL import Image, ImageOps

from .constants import GLYPH_COUNT, GLYPH_HEIGHT, GLYPH_WIDTH, IMPORT_FIRST_GLYPH, IMPORT_HEIGHT, IMPORT_WIDTH
from .document import FontCharacter, FontDocument, PixelValue
from .quantize import quantize_array

logger = logging.getLogger(__name__)

_DATA_URL_PREFIX = re.compile(r"^data:image/[a-z]+;base64,")

PREVIEW_COLORS = {
    PixelValue.BLACK: (0, 0, 0, 255),
    PixelValue.WHITE: (255, 255, 255, 255),
}
PREVIEW_CLEAR = (0, 0, 0, 0)


def decode_image_data(text: str) -> bytes:
    payload = _DATA_URL_PREFIX.sub("", text.strip())
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid image data format: {exc}") from exc


def _open_rgba(image_bytes: bytes) -> Image.Image:
    with Image.open(io.BytesIO(image_bytes)) as image:
        return image.convert("RGBA")


def image_to_tiles(image_bytes: bytes) -> List[FontCharacter]:
    """
    Stretch the image to 288x72 with nearest-neighbour sampling and cut it
    into 24x4 glyph tiles, numbered from glyph 160 in row-major order.
    """

    image = _open_rgba(image_bytes).resize((IMPORT_WIDTH, IMPORT_HEIGHT), Image.Resampling.NEAREST)
    levels = quantize_array(np.asarray(image, dtype=np.uint8))
    tiles_wide = IMPORT_WIDTH // GLYPH_WIDTH
    tiles_high = IMPORT_HEIGHT // GLYPH_HEIGHT
    tiles: List[FontCharacter] = []
    for tile_y in range(tiles_high):
        for tile_x in range(tiles_wide):
            top = tile_y * GLYPH_HEIGHT
            left = tile_x * GLYPH_WIDTH
            block = levels[top : top + GLYPH_HEIGHT, left : left + GLYPH_WIDTH]
            tiles.append(
                FontCharacter(
                    index=IMPORT_FIRST_GLYPH + tile_y * tiles_wide + tile_x,
                    pixels=block.tolist(),
                )
            )
    return tiles


def import_image(document: FontDocument, image_bytes: bytes) -> int:
    written = 0
    for tile in image_to_tiles(image_bytes):
        if IMPORT_FIRST_GLYPH <= tile.index < GLYPH_COUNT:
            document.replace_glyph(tile)
            written += 1
    logger.debug("Imported %d image tiles starting at glyph %d", written, IMPORT_FIRST_GLYPH)
    return written


def render_preview(image_bytes: bytes) -> bytes:
    """Show how an image will look once quantized, as PNG bytes."""

    source = _open_rgba(image_bytes)
    fitted = ImageOps.contain(source, (IMPORT_WIDTH, IMPORT_HEIGHT), method=Image.Resampling.LANCZOS)
    canvas = Image.new("RGBA", (IMPORT_WIDTH, IMPORT_HEIGHT), (128, 128, 128, 0))
    offset = ((IMPORT_WIDTH - fitted.width) // 2, (IMPORT_HEIGHT - fitted.height) // 2)
    canvas.paste(fitted, offset)

    levels = quantize_array(np.asarray(canvas, dtype=np.uint8))
    out = np.zeros(levels.shape + (4,), dtype=np.uint8)
    out[...] = PREVIEW_CLEAR
    for value, color in PREVIEW_COLORS.items():
        out[levels == value] = color
    buffer = io.BytesIO()
    Image.fromarray(out).save(buffer, format="PNG")
    return buffer.getvalue()
