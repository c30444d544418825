from __future__ import annotations

from osdfont import ErrorKind, FontDocument, mcm


def test_round_trip(patterned_document):
    result = mcm.decode(mcm.encode(patterned_document))
    assert result.ok
    assert result.document.metadata == "MAX7456"
    for expected, actual in zip(patterned_document.characters, result.document.characters):
        assert actual.index == expected.index
        assert actual.pixels == expected.pixels


def test_encode_shape(blank_document):
    lines = mcm.encode(blank_document).splitlines()
    assert len(lines) == 16385
    assert lines[0] == "MAX7456"
    glyph = lines[1:65]
    assert glyph[:54] == ["01010101"] * 54
    assert glyph[54:] == ["00000000"] * 10


def test_missing_glyphs_are_transparent():
    document = FontDocument.from_dict({"metadata": "MAX7456", "characters": []})
    decoded = mcm.parse(mcm.encode(document))
    assert decoded.characters[200].pixels == [[1] * 12 for _ in range(18)]


def test_truncated_input_fails_without_partial_document(patterned_document):
    lines = mcm.encode(patterned_document).splitlines()
    result = mcm.decode("\n".join(lines[:16384]))
    assert not result.ok
    assert result.document is None
    assert result.error.kind is ErrorKind.WRONG_LINE_COUNT


def test_bad_metadata_tag(blank_document):
    text = mcm.encode(blank_document).replace("MAX7456", "MAX7457", 1)
    result = mcm.decode(text)
    assert result.error.kind is ErrorKind.BAD_METADATA_TAG


def test_metadata_line_is_trimmed(blank_document):
    text = "  MAX7456 \r\n" + mcm.encode(blank_document).split("\n", 1)[1]
    assert mcm.decode(text).ok


def test_malformed_token_reports_file_line(blank_document):
    lines = mcm.encode(blank_document).splitlines()
    lines[1 + 2 * 64 + 5] = "0101012"
    result = mcm.decode("\n".join(lines))
    assert result.error.kind is ErrorKind.MALFORMED_BYTE_TOKEN
    assert result.error.line == 2 * 64 + 7
    assert result.error.value == "0101012"


def test_padding_lines_are_not_validated(blank_document):
    lines = mcm.encode(blank_document).splitlines()
    lines[1 + 60] = "garbage"
    assert mcm.decode("\n".join(lines)).ok


def test_crlf_input(patterned_document):
    text = mcm.encode(patterned_document).replace("\n", "\r\n")
    assert mcm.parse(text).characters[17].pixels == patterned_document.characters[17].pixels


def test_only_newlines_split_lines(blank_document):
    lines = mcm.encode(blank_document).splitlines()
    lines[1] = "01010101\x0c"
    lines[2] = "0101\x1c0101"
    result = mcm.decode("\n".join(lines) + "\n")
    assert result.error.kind is ErrorKind.MALFORMED_BYTE_TOKEN
    assert result.error.line == 3


def test_trailing_newline_is_optional(blank_document):
    text = mcm.encode(blank_document)
    assert mcm.decode(text).ok
    assert mcm.decode(text.rstrip("\n")).ok
