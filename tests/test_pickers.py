import pytest

from drawingboard.color import BLACK
from drawingboard.config import COLOR_CELL_SCALE, THICKNESS_CELL_SCALE
from drawingboard.geometry import Point
from drawingboard.pickers import ColorPicker, PickerKind, ThicknessPicker


def color_cells(scene):
    # the backing panel is placed first
    return [g for g in scene.named("colorPicker")[1:] if g.touch_handler]


def thickness_targets(scene):
    return [g for g in scene.named("thicknessPicker")[1:] if g.touch_handler]


# -- ColorPicker -----------------------------------------------------------
def test_color_picker_grid_shape(scene):
    picker = ColorPicker(scene)
    picker.draw(Point(-460, 0))

    assert picker.kind is PickerKind.COLOR
    assert picker.is_open
    assert (picker.rows, picker.columns) == (5, 10)
    assert len(color_cells(scene)) == 50
    # panel plus cells, all tagged with the picker name
    assert len(scene.named("colorPicker")) == 51


def test_color_picker_panel_is_left_anchored(scene):
    picker = ColorPicker(scene)
    picker.draw(Point(-460, 0))

    panel = scene.named("colorPicker")[0]
    assert panel.position.x - panel.size.width / 2 == pytest.approx(-460)


@pytest.mark.parametrize("row", range(1, 6))
@pytest.mark.parametrize("column", range(1, 10))
def test_color_cell_hue_and_saturation(scene, row, column):
    color = ColorPicker(scene).color_at(row, column)
    assert color.hue == pytest.approx(column / 10)
    assert color.saturation == pytest.approx(row / 5)
    assert color.brightness == pytest.approx(1.0)


@pytest.mark.parametrize("row", range(1, 6))
def test_last_column_is_grayscale(scene, row):
    color = ColorPicker(scene).color_at(row, 10)
    assert color.is_gray
    assert color.white == pytest.approx(row / 5)


def test_color_cells_are_laid_out_row_by_row(scene):
    picker = ColorPicker(scene)
    picker.draw(Point(0, 0))

    cells = color_cells(scene)
    assert cells[0].background_color == picker.color_at(1, 1)
    assert cells[12].background_color == picker.color_at(2, 3)
    # rows go down, columns go right
    assert cells[10].position.y < cells[0].position.y
    assert cells[1].position.x > cells[0].position.x


def test_color_selection_fires_after_animation_then_dismisses(scene):
    picker = ColorPicker(scene)
    events = []
    picker.on_selected = lambda color: events.append(
        ("selected", color, len(scene.named("colorPicker")))
    )
    picker.draw(Point(0, 0))

    cell = color_cells(scene)[12]
    cell.touch()
    assert events == []
    assert cell.runs == [(COLOR_CELL_SCALE, pytest.approx(0.2))]

    scene.advance()
    (name, color, graphics_at_callback) = events[0]
    assert color == picker.color_at(2, 3)
    # the grid is still there while the callback runs
    assert graphics_at_callback == 51
    assert scene.named("colorPicker") == []
    assert not picker.is_open


def test_second_cell_touch_in_the_same_session_is_ignored(scene):
    picker = ColorPicker(scene)
    chosen = []
    picker.on_selected = chosen.append
    picker.draw(Point(0, 0))

    cells = color_cells(scene)
    cells[0].touch()
    cells[5].touch()
    scene.advance()

    assert chosen == [picker.color_at(1, 1)]
    assert cells[5].runs == []


def test_dismiss_during_animation_still_delivers_the_value(scene):
    picker = ColorPicker(scene)
    chosen = []
    picker.on_selected = chosen.append
    picker.draw(Point(0, 0))

    color_cells(scene)[3].touch()
    picker.dismiss()
    scene.advance()

    assert chosen == [picker.color_at(1, 4)]
    assert scene.named("colorPicker") == []


def test_stale_completion_after_redraw_is_dropped(scene):
    picker = ColorPicker(scene)
    chosen = []
    picker.on_selected = chosen.append
    picker.draw(Point(0, 0))
    color_cells(scene)[3].touch()

    picker.dismiss()
    picker.draw(Point(0, 0))
    scene.advance()

    assert chosen == []
    assert picker.is_open
    assert len(scene.named("colorPicker")) == 51


def test_dismiss_restores_icon_outline(scene):
    picker = ColorPicker(scene)
    picker.draw(Point(0, 0))
    picker.icon.stroke_width = 1
    picker.dismiss()

    assert picker.icon.stroke_color == BLACK
    assert picker.icon.stroke_width == 6


def test_dismiss_is_idempotent(scene):
    picker = ColorPicker(scene)
    picker.dismiss()
    assert scene.graphics == []

    other = scene.rectangle(10, 10, 0, BLACK)
    scene.place(other, at=Point(0, 0))
    picker.draw(Point(0, 0))
    picker.dismiss()
    snapshot = list(scene.graphics)
    picker.dismiss()

    assert scene.graphics == snapshot == [other]


@pytest.mark.parametrize(
    "width,height,element_size",
    [(400, 200, 0), (400, 200, -5), (30, 200, 40), (400, 10, 40)],
)
def test_degenerate_color_grid_draws_only_the_panel(scene, width, height, element_size):
    picker = ColorPicker(scene, width=width, height=height, element_size=element_size)
    picker.draw(Point(0, 0))

    assert len(scene.named("colorPicker")) == 1
    assert color_cells(scene) == []
    picker.dismiss()
    assert scene.graphics == []


# -- ThicknessPicker -------------------------------------------------------
def test_thickness_picker_single_row(scene):
    picker = ThicknessPicker(scene)
    picker.draw(Point(-460, -100))

    assert picker.kind is PickerKind.THICKNESS
    targets = thickness_targets(scene)
    samples = [g for g in scene.named("thicknessPicker") if g.kind == "sample"]
    assert len(targets) == len(samples) == 10
    assert {t.position.y for t in targets} == {-100}
    assert [s.size.height for s in samples] == [3 * i for i in range(1, 11)]


@pytest.mark.parametrize("column", range(1, 11))
def test_thickness_cell_value(scene, column):
    picker = ThicknessPicker(scene)
    chosen = []
    picker.on_selected = chosen.append
    picker.draw(Point(0, 0))

    thickness_targets(scene)[column - 1].touch()
    scene.advance()

    assert chosen == [3 * column]
    assert scene.named("thicknessPicker") == []


def test_thickness_animation_scales_the_sample(scene):
    picker = ThicknessPicker(scene)
    picker.draw(Point(0, 0))
    sample = [g for g in scene.named("thicknessPicker") if g.kind == "sample"][2]

    thickness_targets(scene)[2].touch()

    assert sample.runs == [(THICKNESS_CELL_SCALE, pytest.approx(0.2))]


def test_thickness_dismiss_when_never_opened(scene):
    picker = ThicknessPicker(scene)
    picker.dismiss()
    picker.dismiss()
    assert scene.graphics == []
    assert not picker.is_open


def test_degenerate_thickness_row(scene):
    picker = ThicknessPicker(scene, element_size=0)
    picker.draw(Point(0, 0))
    assert len(scene.named("thicknessPicker")) == 1


@pytest.mark.parametrize("make", [ColorPicker, ThicknessPicker])
def test_cancel_drops_the_selection_in_flight(scene, make):
    picker = make(scene)
    chosen = []
    picker.on_selected = chosen.append
    picker.draw(Point(0, 0))
    cells = color_cells(scene) or thickness_targets(scene)
    cells[0].touch()

    picker.cancel()
    scene.advance()

    assert chosen == []
    assert not picker.is_open
    assert scene.graphics == []


def test_cancel_when_closed_is_harmless(scene):
    picker = ColorPicker(scene)
    picker.cancel()
    picker.draw(Point(0, 0))
    chosen = []
    picker.on_selected = chosen.append
    color_cells(scene)[0].touch()
    scene.advance()

    assert chosen == [picker.color_at(1, 1)]
