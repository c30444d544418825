from __future__ import annotations

import logging

from .constants import GLYPH_COUNT
from .document import FontCharacter, FontDocument, PixelValue
from .errors import OutOfRangeError
from .history import EditHistory, PixelChange

logger = logging.getLogger(__name__)


class FontSession:
    """One editing session: the document, its history and the selected glyph."""

    def __init__(self, document: FontDocument | None = None) -> None:
        self.document = document if document is not None else FontDocument.blank()
        self.history = EditHistory(self.document)
        self.selected_index = 0

    def load(self, document: FontDocument) -> None:
        self.document = document
        self.history.document = document
        self.history.clear_history()
        self.selected_index = 0

    def reset(self) -> None:
        self.load(FontDocument.blank())

    def select_character(self, index: int) -> bool:
        if 0 <= index < GLYPH_COUNT:
            self.selected_index = index
            return True
        return False

    @property
    def selected_character(self) -> FontCharacter:
        return self.document.glyph(self.selected_index)

    def pixel_value(self, index: int, x: int, y: int) -> int:
        # Reads outside the document fall back to transparent.
        try:
            return self.document.get_pixel(index, x, y)
        except OutOfRangeError:
            return int(PixelValue.TRANSPARENT)

    def update_pixel(self, x: int, y: int, value: int) -> PixelChange | None:
        index = self.selected_index
        value = int(value) & 0x3
        try:
            old_value = self.document.get_pixel(index, x, y)
        except OutOfRangeError:
            logger.debug("Ignoring write outside character %d at (%d,%d)", index, x, y)
            return None
        if old_value == value:
            return None
        self.document.set_pixel(index, x, y, value)
        change = PixelChange(index, x, y, old_value, value)
        self.history.record_change(change)
        return change

    def begin_stroke(self) -> None:
        self.history.begin_stroke()

    def end_stroke(self) -> None:
        self.history.end_stroke()

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()
