from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple

from .document import FontDocument

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int, int]


@dataclass(frozen=True)
class PixelChange:
    character_index: int
    x: int
    y: int
    old_value: int
    new_value: int

    @property
    def coordinate(self) -> Coordinate:
        return (self.character_index, self.x, self.y)

    def swapped(self) -> PixelChange:
        return PixelChange(self.character_index, self.x, self.y, self.new_value, self.old_value)


@dataclass(frozen=True)
class Stroke:
    changes: Tuple[PixelChange, ...]

    def swapped(self) -> Stroke:
        return Stroke(tuple(change.swapped() for change in self.changes))

    def __len__(self) -> int:
        return len(self.changes)


class EditHistory:
    """
    Stroke-based undo/redo over a document owned by the caller.

    A stroke keeps at most one change per ``(character, x, y)``: the first
    touch wins, so undoing restores the value the pixel had before the
    gesture started.  Only diffs are stored, never document snapshots.
    """

    def __init__(self, document: FontDocument) -> None:
        self.document = document
        self.undo_stack: List[Stroke] = []
        self.redo_stack: List[Stroke] = []
        self._current: List[PixelChange] = []
        self._touched: Set[Coordinate] = set()
        self._recording = False

    @property
    def is_recording(self) -> bool:
        return self._recording

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    @property
    def current_stroke(self) -> Tuple[PixelChange, ...]:
        return tuple(self._current)

    def _reset_buffer(self) -> None:
        self._current = []
        self._touched = set()

    def begin_stroke(self) -> None:
        self._recording = True
        self._reset_buffer()

    def _accepts(self, change: PixelChange) -> bool:
        if self.document.contains(change.character_index, change.x, change.y):
            return True
        logger.debug("Ignoring change at %s outside the document", change.coordinate)
        return False

    def add_to_stroke(self, change: PixelChange) -> bool:
        if not self._accepts(change):
            return False
        if not self._recording:
            logger.debug("Ignoring change at %s outside of a stroke", change.coordinate)
            return False
        if change.coordinate in self._touched:
            return False
        self._touched.add(change.coordinate)
        self._current.append(change)
        return True

    def end_stroke(self) -> None:
        if self._current:
            self.undo_stack.append(Stroke(tuple(self._current)))
            self.redo_stack.clear()
            logger.debug("Recorded stroke with %d pixel changes", len(self._current))
        self._reset_buffer()
        self._recording = False

    def record_change(self, change: PixelChange) -> bool:
        if self._recording:
            return self.add_to_stroke(change)
        if not self._accepts(change):
            return False
        self.undo_stack.append(Stroke((change,)))
        self.redo_stack.clear()
        logger.debug(
            "Recorded individual change: (%d,%d) from %d to %d",
            change.x,
            change.y,
            change.old_value,
            change.new_value,
        )
        return True

    def _apply_old_values(self, changes: Iterable[PixelChange]) -> None:
        # Cells outside the document are skipped.
        for change in changes:
            if not self.document.contains(change.character_index, change.x, change.y):
                continue
            self.document.set_pixel(change.character_index, change.x, change.y, change.old_value)

    def undo(self) -> bool:
        if not self.undo_stack:
            return False
        stroke = self.undo_stack.pop()
        self._apply_old_values(reversed(stroke.changes))
        self.redo_stack.append(stroke.swapped())
        logger.debug("Undid stroke with %d pixel changes", len(stroke))
        return True

    def redo(self) -> bool:
        if not self.redo_stack:
            return False
        stroke = self.redo_stack.pop()
        # After the swap, old_value holds what the original stroke wrote.
        self._apply_old_values(stroke.changes)
        self.undo_stack.append(stroke.swapped())
        logger.debug("Redid stroke with %d pixel changes", len(stroke))
        return True

    def clear_history(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()
        self._reset_buffer()
        self._recording = False
