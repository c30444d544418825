from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List

from .bitpack import pack, unpack
from .constants import (
    BYTES_PER_GLYPH,
    DATA_BYTES_PER_GLYPH,
    GLYPH_COUNT,
    MCM_LINE_COUNT,
    MCM_PADDING_LINE,
    MCM_TAG,
)
from .document import FontCharacter, FontDocument
from .errors import ErrorKind, FormatError

logger = logging.getLogger(__name__)

_BYTE_TOKEN = re.compile(r"[01]{8}")


@dataclass(frozen=True)
class DecodeResult:
    document: FontDocument | None = None
    error: FormatError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse(text: str) -> FontDocument:
    """
    Parse MCM text into a document, raising ``FormatError`` on the first
    problem.  Only the first 54 lines of each 64-line glyph block carry
    pixels; the trailing ten lines are not inspected.
    """

    lines = re.split(r"\r?\n", text)
    if lines and lines[-1] == "":
        lines.pop()
    if len(lines) < MCM_LINE_COUNT:
        raise FormatError(
            ErrorKind.WRONG_LINE_COUNT,
            f"content has {len(lines)} lines, {MCM_LINE_COUNT} expected (1 metadata + {MCM_LINE_COUNT - 1} data)",
        )
    tag = lines[0].strip()
    if tag != MCM_TAG:
        raise FormatError(
            ErrorKind.BAD_METADATA_TAG,
            f"first line does not match {MCM_TAG!r}, found {tag!r}",
            line=1,
            value=tag,
        )

    characters: List[FontCharacter] = []
    for index in range(GLYPH_COUNT):
        block_start = 1 + index * BYTES_PER_GLYPH
        data = bytearray(BYTES_PER_GLYPH)
        for byte_index in range(DATA_BYTES_PER_GLYPH):
            token = lines[block_start + byte_index].strip()
            if not _BYTE_TOKEN.fullmatch(token):
                line_number = block_start + byte_index + 1
                raise FormatError(
                    ErrorKind.MALFORMED_BYTE_TOKEN,
                    f"invalid byte format {token!r} on line {line_number}",
                    line=line_number,
                    value=token,
                )
            data[byte_index] = int(token, 2)
        characters.append(FontCharacter(index=index, pixels=unpack(bytes(data))))
    return FontDocument(characters=characters, metadata=MCM_TAG)


def decode(text: str) -> DecodeResult:
    try:
        document = parse(text)
    except FormatError as exc:
        logger.debug("MCM decode failed (%s): %s", exc.kind.value, exc)
        return DecodeResult(error=exc)
    return DecodeResult(document=document)


def encode(document: FontDocument) -> str:
    out: List[str] = [MCM_TAG]
    for character in document.iter_glyphs():
        packed = pack(character.pixels)
        out.extend(f"{value:08b}" for value in packed[:DATA_BYTES_PER_GLYPH])
        out.extend([MCM_PADDING_LINE] * (BYTES_PER_GLYPH - DATA_BYTES_PER_GLYPH))
    return "\n".join(out) + "\n"
