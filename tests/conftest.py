from __future__ import annotations

import io

import pytest
from PIL import Image

from osdfont import FontCharacter, FontDocument


def patterned_pixels(index: int) -> list[list[int]]:
    return [[(index + x * 3 + y) % 4 for x in range(12)] for y in range(18)]


@pytest.fixture
def patterned_document() -> FontDocument:
    return FontDocument(characters=[FontCharacter(index=i, pixels=patterned_pixels(i)) for i in range(256)])


@pytest.fixture
def blank_document() -> FontDocument:
    return FontDocument.blank()


def png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
