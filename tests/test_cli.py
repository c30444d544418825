from __future__ import annotations

import base64
import json

from PIL import Image

import image_preview
import image_to_font
import json_to_header
import json_to_mcm
import json_to_msp
import mcm_to_json
from osdfont import mcm

from .conftest import png_bytes


def test_mcm_json_round_trip(tmp_path, patterned_document):
    source = tmp_path / "font.mcm"
    source.write_text(mcm.encode(patterned_document), encoding="ascii")
    assert mcm_to_json.main([str(source)]) == 0
    data = json.loads((tmp_path / "font.json").read_text(encoding="utf-8"))
    assert data["characters"][200]["pixels"] == patterned_document.characters[200].pixels

    rebuilt = tmp_path / "rebuilt.mcm"
    assert json_to_mcm.main([str(tmp_path / "font.json"), "--output", str(rebuilt)]) == 0
    assert rebuilt.read_text(encoding="ascii") == source.read_text(encoding="ascii")


def test_mcm_to_json_reports_decode_failure(tmp_path, capsys):
    source = tmp_path / "broken.mcm"
    source.write_text("MAX7456\n01010101\n", encoding="ascii")
    assert mcm_to_json.main([str(source)]) == 1
    assert "wrong_line_count" in capsys.readouterr().err
    assert not (tmp_path / "broken.json").exists()


def test_header_and_msp_exports(tmp_path, blank_document):
    source = tmp_path / "font.json"
    source.write_text(blank_document.to_json(), encoding="utf-8")

    assert json_to_header.main([str(source), "--array-name", "osd_font"]) == 0
    assert "const uint8_t osd_font[16384] = {" in (tmp_path / "font.h").read_text(encoding="ascii")

    assert json_to_msp.main([str(source)]) == 0
    assert len((tmp_path / "font.msp").read_bytes()) == 256 * 71

    encoded = tmp_path / "packets.txt"
    assert json_to_msp.main([str(source), "--base64", "--output", str(encoded)]) == 0
    lines = encoded.read_text(encoding="ascii").splitlines()
    assert len(lines) == 256
    assert len(base64.b64decode(lines[255])) == 71


def test_image_tools(tmp_path):
    image_path = tmp_path / "logo.png"
    image_path.write_bytes(png_bytes(Image.new("RGB", (288, 72), (0, 0, 0))))

    font_path = tmp_path / "logo.mcm"
    assert image_to_font.main([str(image_path), "--output", str(font_path)]) == 0
    document = mcm.parse(font_path.read_text(encoding="ascii"))
    assert document.glyph(160).pixels[0][0] == 0
    assert document.glyph(159).pixels[0][0] == 1

    preview_path = tmp_path / "preview.png"
    assert image_preview.main([str(image_path), str(preview_path)]) == 0
    assert Image.open(preview_path).size == (288, 72)

    bogus = tmp_path / "bogus.png"
    bogus.write_bytes(b"not an image")
    assert image_preview.main([str(bogus), str(preview_path)]) == 1
    assert image_to_font.main([str(bogus), "--output", str(tmp_path / "bogus.mcm")]) == 1
    assert not (tmp_path / "bogus.mcm").exists()


def test_json_tools_report_malformed_documents(tmp_path, capsys):
    source = tmp_path / "font.json"
    source.write_text('{"characters": [{"index": 0, "pixels": [[null]]}]}', encoding="utf-8")
    assert json_to_mcm.main([str(source)]) == 1
    assert json_to_header.main([str(source)]) == 1
    assert json_to_msp.main([str(source)]) == 1
    assert "[error]" in capsys.readouterr().err
    assert not (tmp_path / "font.mcm").exists()
