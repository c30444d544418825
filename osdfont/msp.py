from __future__ import annotations

import base64
from functools import reduce
from operator import xor
from typing import Iterable, List

from .bitpack import pack
from .constants import BYTES_PER_GLYPH, MSP_HEADER, MSP_OSD_CHAR_WRITE
from .document import FontDocument


def checksum(data: Iterable[int]) -> int:
    return reduce(xor, data, 0)


def build_char_write_packet(index: int, data: bytes) -> bytes:
    """
    Frame one MSP v1 OSD character write: ``$M<``, length, command, glyph
    index, glyph bytes and an XOR checksum over everything after the header.
    """

    if len(data) != BYTES_PER_GLYPH:
        raise ValueError(f"glyph data must be {BYTES_PER_GLYPH} bytes, got {len(data)}")
    body = bytes((1 + len(data), MSP_OSD_CHAR_WRITE, index & 0xFF)) + data
    return MSP_HEADER + body + bytes((checksum(body),))


def encode(document: FontDocument) -> List[bytes]:
    return [build_char_write_packet(glyph.index, pack(glyph.pixels)) for glyph in document.iter_glyphs()]


def to_base64(packets: Iterable[bytes]) -> List[str]:
    return [base64.b64encode(packet).decode("ascii") for packet in packets]
