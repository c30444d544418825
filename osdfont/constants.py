from __future__ import annotations

GLYPH_WIDTH = 12
GLYPH_HEIGHT = 18
GLYPH_COUNT = 256

PIXELS_PER_BYTE = 4
BYTES_PER_ROW = GLYPH_WIDTH // PIXELS_PER_BYTE
DATA_BYTES_PER_GLYPH = GLYPH_HEIGHT * BYTES_PER_ROW
BYTES_PER_GLYPH = 64
PADDING_BYTE = 0x55
FONT_DATA_SIZE = GLYPH_COUNT * BYTES_PER_GLYPH

MCM_TAG = "MAX7456"
MCM_PADDING_LINE = "00000000"
MCM_LINE_COUNT = 1 + GLYPH_COUNT * BYTES_PER_GLYPH

MSP_HEADER = bytes((0x24, 0x4D, 0x3C))
MSP_OSD_CHAR_WRITE = 87
MSP_PACKET_SIZE = len(MSP_HEADER) + 2 + 1 + BYTES_PER_GLYPH + 1

ALPHA_CUTOFF = 128
BLACK_BELOW = 85
WHITE_ABOVE = 170

IMPORT_WIDTH = 288
IMPORT_HEIGHT = 72
IMPORT_FIRST_GLYPH = 160
