from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    WRONG_LINE_COUNT = "wrong_line_count"
    BAD_METADATA_TAG = "bad_metadata_tag"
    MALFORMED_BYTE_TOKEN = "malformed_byte_token"
    OUT_OF_RANGE = "out_of_range"
    INVALID_DOCUMENT = "invalid_document"


class FontError(Exception):
    """Base class for every failure raised by the font tooling."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class FormatError(FontError, ValueError):
    """Input text or JSON does not describe a MAX7456 font."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        line: int | None = None,
        value: str | None = None,
    ) -> None:
        super().__init__(kind, message)
        self.line = line
        self.value = value


class OutOfRangeError(FontError, IndexError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.OUT_OF_RANGE, message)
