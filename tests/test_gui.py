import pytest

from voxelclient.gui import (
    BLOCKED,
    HOT_COLOR,
    IDLE_COLOR,
    NO_ITEM,
    SHADOW_COLOR,
    Gui,
    PrimitiveBuffer,
    RectanglePrimitive,
)

WHITE = (1.0, 1.0, 1.0, 1.0)


def frame(gui, build):
    gui.prepare()
    result = build(gui)
    gui.finish()
    return result


def click_button(gui):
    return gui.button(0, 10, 10, 100, 20).build()


def test_button_click_after_press_and_release_inside():
    gui = Gui()
    gui.update_mouse_position(50, 15)
    gui.update_mouse_button(True)
    assert frame(gui, click_button) is False
    assert gui.active_item == 2
    gui.update_mouse_button(False)
    assert frame(gui, click_button) is True
    assert gui.active_item == NO_ITEM


def test_no_click_when_released_outside():
    gui = Gui()
    gui.update_mouse_position(50, 15)
    gui.update_mouse_button(True)
    frame(gui, click_button)
    gui.update_mouse_position(500, 500)
    gui.update_mouse_button(False)
    assert frame(gui, click_button) is False


def test_dragging_pressed_mouse_onto_button_does_not_activate():
    gui = Gui()
    gui.update_mouse_position(500, 500)
    gui.update_mouse_button(True)
    frame(gui, click_button)
    assert gui.active_item == BLOCKED
    gui.update_mouse_position(50, 15)
    frame(gui, click_button)
    assert gui.active_item == BLOCKED
    gui.update_mouse_button(False)
    assert frame(gui, click_button) is False


@pytest.mark.parametrize(
    "pos, inside",
    [((10, 10), True), ((109, 29), True), ((110, 15), False), ((50, 30), False), ((9, 15), False)],
)
def test_is_mouse_inside_bounds(pos, inside):
    gui = Gui()
    gui.update_mouse_position(*pos)
    assert gui.is_mouse_inside(10, 10, 100, 20) is inside


def test_idle_button_draws_shadow_and_body():
    gui = Gui()
    gui.update_mouse_position(500, 500)
    gui.prepare()
    gui.button(3, 10, 20, 100, 30).build()
    rects = gui.primitives.rectangle
    assert len(rects) == 2
    assert (rects[0].x, rects[0].y) == (13, 23)
    assert rects[0].color == SHADOW_COLOR
    assert rects[1] == RectanglePrimitive(10, 20, 100, 30, IDLE_COLOR, 0.01)


def test_hot_active_button_is_drawn_pressed():
    gui = Gui()
    gui.update_mouse_position(50, 25)
    gui.update_mouse_button(True)
    gui.prepare()
    gui.button(0, 10, 20, 100, 30).text("Go", WHITE).build()
    body = gui.primitives.rectangle[1]
    assert (body.x, body.y) == (12, 22)
    assert body.color == HOT_COLOR
    label = gui.primitives.text[0]
    assert (label.x, label.y) == (12, 22)
    assert label.parts[0].text == "Go"
    assert label.parts[0].color == WHITE


def test_hot_button_not_active_is_not_shifted():
    gui = Gui()
    gui.update_mouse_position(50, 25)
    gui.prepare()
    gui.button(0, 10, 20, 100, 30).build()
    body = gui.primitives.rectangle[1]
    assert (body.x, body.y) == (10, 20)
    assert body.color == HOT_COLOR


def test_drain_primitives_returns_and_resets():
    gui = Gui()
    gui.text(4, 4, 20, "hello", WHITE, 0.02)
    drained = gui.drain_primitives()
    assert [t.parts[0].text for t in drained.text] == ["hello"]
    assert gui.primitives == PrimitiveBuffer()


def test_draw_text_simple_is_left_aligned_and_vertically_centered():
    buffer = PrimitiveBuffer()
    buffer.draw_text_simple(4, 8, 20, "line", WHITE, 0.02)
    text = buffer.text[0]
    assert text.center_vertically is True
    assert text.center_horizontally is False
    assert text.h == 20
    assert text.w is None
    assert text.z == 0.02