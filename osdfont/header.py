from __future__ import annotations

from typing import List, Sequence

from .bitpack import pack
from .constants import FONT_DATA_SIZE, GLYPH_COUNT
from .document import FontDocument

VALUES_PER_LINE = 16
INDENT = "    "


def format_hex_block(data: Sequence[int], values_per_line: int = VALUES_PER_LINE) -> List[str]:
    literals = [f"0x{value:02X}" for value in data]
    lines: List[str] = []
    for start in range(0, len(literals), values_per_line):
        line = INDENT + ", ".join(literals[start : start + values_per_line])
        if start + values_per_line < len(literals):
            line += ","
        lines.append(line)
    return lines


def encode(document: FontDocument, *, array_name: str = "font_data") -> str:
    lines: List[str] = [
        "#pragma once",
        "#include <stdint.h>",
        "",
        '__attribute__((section(".font")))',
        f"const uint8_t {array_name}[{FONT_DATA_SIZE}] = {{",
    ]
    for character in document.iter_glyphs():
        lines.append(f"/* Character 0x{character.index:02X} */")
        block = format_hex_block(pack(character.pixels))
        if character.index < GLYPH_COUNT - 1:
            block[-1] += ","
        lines.extend(block)
        lines.append("")
    lines.append("};")
    return "\n".join(lines) + "\n"
