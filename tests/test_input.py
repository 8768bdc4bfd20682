import pytest

from voxelclient.input import (
    MOVE_FORWARD,
    MOVE_LEFT,
    TOGGLE_CULLING,
    TOGGLE_FLIGHT,
    ElementState,
    InputState,
    MouseButton,
    YawPitch,
)

P = ElementState.PRESSED
R = ElementState.RELEASED


def test_yaw_pitch_defaults():
    yp = YawPitch()
    assert (yp.yaw, yp.pitch) == (-127.0, -17.0)


def test_pitch_is_clamped():
    yp = YawPitch()
    yp.update_cursor(0, 1000)
    assert yp.pitch == -90.0
    yp.update_cursor(0, -5000)
    assert yp.pitch == 90.0


def test_yaw_wraps_around():
    yp = YawPitch(yaw=-179.0, pitch=0.0)
    yp.update_cursor(10, 0)
    assert yp.yaw == pytest.approx(179.0)
    assert -180.0 <= yp.yaw <= 180.0


def test_keyboard_state_changes():
    state = InputState()
    assert state.process_keyboard_input(MOVE_FORWARD, P) is True
    assert state.process_keyboard_input(MOVE_FORWARD, P) is False
    assert state.process_keyboard_input(MOVE_FORWARD, R) is True
    assert state.get_key_state(MOVE_FORWARD) is R


def test_unknown_key_is_released():
    assert InputState().get_key_state(99) is R
    assert InputState().is_key_pressed(99) is False


def test_toggle_flight_after_press():
    state = InputState()
    state.process_keyboard_input(TOGGLE_FLIGHT, P)
    assert state.flying is True
    state.process_keyboard_input(TOGGLE_FLIGHT, R)
    assert state.flying is False


def test_toggle_culling_after_press():
    state = InputState()
    state.process_keyboard_input(TOGGLE_CULLING, P)
    state.process_keyboard_input(TOGGLE_CULLING, P)
    assert state.enable_culling is False


def test_mouse_input_changes():
    state = InputState()
    assert state.process_mouse_input(P, MouseButton.LEFT) is True
    assert state.process_mouse_input(P, MouseButton.LEFT) is False
    assert state.process_mouse_input(R, MouseButton.LEFT) is True


def test_clear_forgets_keys():
    state = InputState()
    state.process_keyboard_input(MOVE_LEFT, P)
    state.process_mouse_input(P, MouseButton.RIGHT)
    state.clear()
    assert state.is_key_pressed(MOVE_LEFT) is False
    assert state.process_mouse_input(P, MouseButton.RIGHT) is True


def test_physics_input_movement():
    state = InputState()
    state.process_keyboard_input(MOVE_FORWARD, P)
    yp = YawPitch(yaw=10.0, pitch=20.0)
    allowed = state.get_physics_input(yp, True)
    assert allowed.key_move_forward is True
    assert allowed.key_move_left is False
    assert (allowed.yaw, allowed.pitch, allowed.flying) == (10.0, 20.0, True)
    blocked = state.get_physics_input(yp, False)
    assert blocked.key_move_forward is False