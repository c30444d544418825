from __future__ import annotations

from osdfont import FontDocument, FontSession, PixelValue


def test_select_character_bounds():
    session = FontSession()
    assert session.select_character(255)
    assert session.selected_index == 255
    assert not session.select_character(256)
    assert not session.select_character(-1)
    assert session.selected_index == 255


def test_soft_pixel_reads_default_to_transparent(patterned_document):
    session = FontSession(patterned_document)
    assert session.pixel_value(0, 0, 0) == patterned_document.get_pixel(0, 0, 0)
    assert session.pixel_value(300, 0, 0) == PixelValue.TRANSPARENT
    assert session.pixel_value(0, 12, 0) == PixelValue.TRANSPARENT
    assert session.pixel_value(0, 0, -1) == PixelValue.TRANSPARENT


def test_update_pixel_records_history():
    session = FontSession()
    session.select_character(7)
    change = session.update_pixel(3, 4, PixelValue.WHITE)
    assert change is not None and change.old_value == PixelValue.TRANSPARENT
    assert session.document.get_pixel(7, 3, 4) == PixelValue.WHITE
    assert session.update_pixel(3, 4, PixelValue.WHITE) is None
    assert session.update_pixel(12, 0, PixelValue.WHITE) is None
    assert session.undo()
    assert session.document.get_pixel(7, 3, 4) == PixelValue.TRANSPARENT
    assert session.redo()
    assert session.document.get_pixel(7, 3, 4) == PixelValue.WHITE


def test_drag_stroke_undoes_as_one_unit():
    session = FontSession()
    session.begin_stroke()
    session.update_pixel(0, 0, PixelValue.BLACK)
    session.update_pixel(1, 0, PixelValue.BLACK)
    session.update_pixel(0, 0, PixelValue.WHITE)
    session.end_stroke()
    assert session.document.get_pixel(0, 0, 0) == PixelValue.WHITE
    assert session.undo()
    assert session.document.get_pixel(0, 0, 0) == PixelValue.TRANSPARENT
    assert session.document.get_pixel(0, 1, 0) == PixelValue.TRANSPARENT
    assert not session.undo()


def test_load_clears_history(patterned_document):
    session = FontSession()
    session.update_pixel(0, 0, PixelValue.BLACK)
    session.load(patterned_document)
    assert session.document is patterned_document
    assert session.history.document is patterned_document
    assert not session.undo()
    session.update_pixel(0, 0, PixelValue.GRAY)
    session.reset()
    assert session.document.get_pixel(0, 0, 0) == PixelValue.TRANSPARENT
    assert isinstance(session.document, FontDocument)


def test_update_pixel_masks_to_two_bits():
    session = FontSession()
    change = session.update_pixel(0, 0, 7)
    assert change is not None and change.new_value == PixelValue.GRAY
    assert session.document.get_pixel(0, 0, 0) == PixelValue.GRAY
    assert session.update_pixel(0, 0, 3) is None
