from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Iterator, List

from .constants import GLYPH_COUNT, GLYPH_HEIGHT, GLYPH_WIDTH, MCM_TAG
from .errors import ErrorKind, FormatError, OutOfRangeError


class PixelValue(IntEnum):
    BLACK = 0
    TRANSPARENT = 1
    WHITE = 2
    GRAY = 3


def blank_pixels(width: int = GLYPH_WIDTH, height: int = GLYPH_HEIGHT) -> List[List[int]]:
    return [[int(PixelValue.TRANSPARENT)] * width for _ in range(height)]


@dataclass
class FontCharacter:
    index: int
    pixels: List[List[int]]
    width: int = GLYPH_WIDTH
    height: int = GLYPH_HEIGHT

    @classmethod
    def blank(cls, index: int) -> FontCharacter:
        return cls(index=index, pixels=blank_pixels())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "width": self.width,
            "height": self.height,
            "pixels": [list(row) for row in self.pixels],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FontCharacter:
        if not isinstance(data, dict) or "index" not in data or "pixels" not in data:
            raise FormatError(ErrorKind.INVALID_DOCUMENT, "character entries need 'index' and 'pixels'")
        pixels = data["pixels"]
        if not isinstance(pixels, list) or not all(isinstance(row, list) for row in pixels):
            raise FormatError(
                ErrorKind.INVALID_DOCUMENT,
                f"character {data['index']} has malformed pixel rows",
            )
        try:
            return cls(
                index=int(data["index"]),
                pixels=[[int(value) for value in row] for row in pixels],
                width=int(data.get("width", GLYPH_WIDTH)),
                height=int(data.get("height", GLYPH_HEIGHT)),
            )
        except (TypeError, ValueError) as exc:
            raise FormatError(
                ErrorKind.INVALID_DOCUMENT,
                f"character {data['index']!r} has a non-integer field: {exc}",
            ) from exc


@dataclass
class FontDocument:
    """
    The 256-glyph font being edited.  The list is kept sorted by glyph index
    with every index present exactly once; gaps are filled with transparent
    glyphs on construction.
    """

    characters: List[FontCharacter] = field(default_factory=list)
    metadata: str = MCM_TAG

    def __post_init__(self) -> None:
        by_index: Dict[int, FontCharacter] = {}
        for character in self.characters:
            if not 0 <= character.index < GLYPH_COUNT:
                raise FormatError(
                    ErrorKind.INVALID_DOCUMENT,
                    f"character index {character.index} is outside 0..{GLYPH_COUNT - 1}",
                )
            if character.index in by_index:
                raise FormatError(
                    ErrorKind.INVALID_DOCUMENT,
                    f"character index {character.index} appears more than once",
                )
            by_index[character.index] = character
        self.characters = [by_index.get(idx) or FontCharacter.blank(idx) for idx in range(GLYPH_COUNT)]

    @classmethod
    def blank(cls) -> FontDocument:
        return cls()

    def glyph(self, index: int) -> FontCharacter:
        if not 0 <= index < GLYPH_COUNT:
            raise OutOfRangeError(f"character index {index} is outside 0..{GLYPH_COUNT - 1}")
        return self.characters[index]

    def iter_glyphs(self) -> Iterator[FontCharacter]:
        for index in range(GLYPH_COUNT):
            yield self.glyph(index)

    def replace_glyph(self, character: FontCharacter) -> None:
        if not 0 <= character.index < GLYPH_COUNT:
            raise OutOfRangeError(f"character index {character.index} is outside 0..{GLYPH_COUNT - 1}")
        self.characters[character.index] = character

    def contains(self, index: int, x: int, y: int) -> bool:
        if not 0 <= index < GLYPH_COUNT:
            return False
        pixels = self.characters[index].pixels
        return 0 <= y < len(pixels) and 0 <= x < len(pixels[y])

    def _cell(self, index: int, x: int, y: int) -> FontCharacter:
        character = self.glyph(index)
        if not self.contains(index, x, y):
            raise OutOfRangeError(f"pixel ({x},{y}) is outside character {index}")
        return character

    def get_pixel(self, index: int, x: int, y: int) -> int:
        return self._cell(index, x, y).pixels[y][x]

    def set_pixel(self, index: int, x: int, y: int, value: int) -> None:
        # In-place write; the document is the sole owner of its pixel rows.
        self._cell(index, x, y).pixels[y][x] = value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata,
            "characterCount": GLYPH_COUNT,
            "characters": [character.to_dict() for character in self.iter_glyphs()],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FontDocument:
        if not isinstance(data, dict):
            raise FormatError(ErrorKind.INVALID_DOCUMENT, "font data must be a JSON object")
        entries = data.get("characters")
        if not isinstance(entries, list):
            raise FormatError(ErrorKind.INVALID_DOCUMENT, "missing or invalid characters array")
        characters = [FontCharacter.from_dict(entry) for entry in entries]
        return cls(characters=characters, metadata=str(data.get("metadata") or MCM_TAG))

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> FontDocument:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise FormatError(ErrorKind.INVALID_DOCUMENT, f"font data is not valid JSON: {exc}") from exc
        return cls.from_dict(data)
