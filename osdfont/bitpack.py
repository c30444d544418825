"""
Canonical MAX7456 glyph packing: 12x18 pixels, four 2-bit pixels per byte,
most significant pair first, three bytes per row, 54 data bytes followed by
ten 0x55 padding bytes.
"""

from __future__ import annotations

from typing import List, Sequence

from .constants import (
    BYTES_PER_GLYPH,
    BYTES_PER_ROW,
    DATA_BYTES_PER_GLYPH,
    GLYPH_HEIGHT,
    GLYPH_WIDTH,
    PADDING_BYTE,
    PIXELS_PER_BYTE,
)
from .document import PixelValue


def _byte_origin(byte_index: int) -> tuple[int, int]:
    return byte_index // BYTES_PER_ROW, (byte_index % BYTES_PER_ROW) * PIXELS_PER_BYTE


def pack(grid: Sequence[Sequence[int]]) -> bytes:
    """Pack a pixel grid into 64 bytes.  Cells missing from a short row count as transparent."""

    packed = bytearray()
    for byte_index in range(DATA_BYTES_PER_GLYPH):
        row, col_start = _byte_origin(byte_index)
        cells = grid[row] if row < len(grid) else ()
        value = 0
        for slot in range(PIXELS_PER_BYTE):
            col = col_start + slot
            pixel = cells[col] if col < len(cells) else PixelValue.TRANSPARENT
            value |= (int(pixel) & 0x3) << (6 - slot * 2)
        packed.append(value)
    packed.extend([PADDING_BYTE] * (BYTES_PER_GLYPH - len(packed)))
    return bytes(packed)


def unpack(data: bytes) -> List[List[int]]:
    if len(data) < DATA_BYTES_PER_GLYPH:
        raise ValueError(f"glyph data needs at least {DATA_BYTES_PER_GLYPH} bytes, got {len(data)}")
    grid = [[0] * GLYPH_WIDTH for _ in range(GLYPH_HEIGHT)]
    for byte_index in range(DATA_BYTES_PER_GLYPH):
        row, col_start = _byte_origin(byte_index)
        value = data[byte_index]
        for slot in range(PIXELS_PER_BYTE):
            grid[row][col_start + slot] = (value >> (6 - slot * 2)) & 0x3
    return grid
