from conftest import output_record
from screen_placer import config
from screen_placer.draw import DrawCommand, build_frame, hex_color
from screen_placer.editor import Editor
from screen_placer.events import PointerDown
from screen_placer.text_view import render_text
from screen_placer.view import Viewport


def _editor(make_registry, records):
    registry, _ = make_registry(records)
    return Editor(registry, Viewport(800, 600, scale=1))


def test_frame_lists_active_then_inactive(make_registry):
    editor = _editor(make_registry, [output_record("A", 1), output_record("B", 2, 120, 0), output_record("C")])
    frame = build_frame(editor)
    assert [(c.kind, c.label) for c in frame] == [("active", "A"), ("active", "B"), ("inactive", "C")]
    assert frame[1].bounds == (120, 0, 100, 50)
    assert frame[2].bounds == (0, 0, config.CELL_SIZE, config.CELL_SIZE)


def test_drag_adds_ghost_and_highlights_selection(make_registry):
    editor = _editor(make_registry, [output_record("A", 1), output_record("B", 2, 120, 0)])
    editor.handle(PointerDown(10, 10))
    frame = build_frame(editor)
    assert frame[0].kind == "ghost"
    assert frame[0].color == config.MOVED_COLOR
    assert frame[1].color == config.SELECTED_COLOR
    assert frame[2].color == config.OUTPUT_COLORS[1]


def test_hex_color():
    assert hex_color((255, 0, 16)) == "#ff0010"


def test_render_text_places_labels(make_registry):
    editor = _editor(make_registry, [output_record("A", 1, 0, 0, 32, 32), output_record("B", 2, 32, 0, 32, 32)])
    text = render_text(build_frame(editor), 64, 32, cols_px=8, rows_px=16)
    assert text.splitlines() == ["A###B%%%", "####%%%%"]


def test_render_text_skips_rectangles_outside_the_grid():
    commands = [
        DrawCommand("active", (-200, 0, 100, 32), config.OUTPUT_COLORS[0], "LEFT"),
        DrawCommand("active", (0, -100, 64, 50), config.OUTPUT_COLORS[1], "ABOVE"),
    ]
    assert render_text(commands, 64, 32, cols_px=8, rows_px=16).strip() == ""


def test_render_text_clips_partly_visible_rectangle():
    commands = [DrawCommand("active", (-16, 0, 32, 16), config.OUTPUT_COLORS[0], "X")]
    assert render_text(commands, 64, 32, cols_px=8, rows_px=16).splitlines()[0] == "X#"
