import math

import pytest

from rayshooter.input import (
    UP_DOWN_ANGLE_CLAMP,
    InputHandler,
    InputState,
    Key,
    MouseButton,
    lerp,
)


def test_fresh_handler_has_no_dirty_state():
    handler = InputHandler()
    assert handler.take_state() is None
    assert handler.peek_state() == InputState()


@pytest.mark.parametrize(
    "key, field",
    [(Key.W, "forward"), (Key.A, "left"), (Key.S, "backward"),
     (Key.D, "right"), (Key.SPACE, "shoot")],
)
def test_movement_keys_set_state(key, field):
    handler = InputHandler()
    assert handler.handle_key(key, True) is True
    state = handler.take_state()
    assert getattr(state, field) is True
    assert handler.take_state() is None
    handler.handle_key(key, False)
    assert getattr(handler.take_state(), field) is False


def test_taken_state_is_a_copy():
    handler = InputHandler()
    handler.handle_key(Key.W, True)
    state = handler.take_state()
    handler.handle_key(Key.W, False)
    assert state.forward is True
    assert handler.peek_state().forward is False


def test_shift_toggles_slow_look_without_dirtying():
    handler = InputHandler()
    assert handler.handle_key(Key.LSHIFT, True) is False
    assert handler.slow_look is True
    assert handler.take_state() is None
    handler.handle_key(Key.RSHIFT, False)
    assert handler.slow_look is False


def test_unknown_key_is_ignored():
    handler = InputHandler()
    assert handler.handle_key(Key.TAB, True) is False
    assert handler.take_state() is None


def test_left_click_locks_and_shoots_escape_unlocks():
    handler = InputHandler()
    assert handler.handle_click(MouseButton.LEFT, True) is True
    assert handler.mouse_locked is True
    assert handler.peek_state().shoot is True
    assert handler.handle_key(Key.ESCAPE, True) is False
    assert handler.mouse_locked is False


def test_right_click_is_ignored():
    handler = InputHandler()
    assert handler.handle_click(MouseButton.RIGHT, True) is False
    assert handler.mouse_locked is False


def test_mouse_delta_needs_lock():
    handler = InputHandler()
    assert handler.apply_mouse_delta(100, 0) is False
    assert handler.peek_state().look_angle == 0.0
    handler.handle_click(MouseButton.LEFT, False)
    handler.take_state()
    assert handler.apply_mouse_delta(0, 0) is False
    assert handler.apply_mouse_delta(100, 0) is True
    assert handler.take_state().look_angle > math.pi


def test_look_angle_stays_in_range():
    handler = InputHandler()
    for delta in (-10.0, 3.0, 25.0, -0.5):
        handler.apply_look_delta(delta, 0.0)
        assert 0.0 <= handler.peek_state().look_angle <= 2 * math.pi


def test_vertical_look_is_clamped():
    handler = InputHandler()
    handler.apply_look_delta(0.0, 10.0)
    assert handler.up_down_angle == UP_DOWN_ANGLE_CLAMP
    handler.apply_look_delta(0.0, -20.0)
    assert handler.up_down_angle == -UP_DOWN_ANGLE_CLAMP


def test_tick_without_keys_is_clean_and_decays():
    handler = InputHandler()
    handler.apply_look_delta(0.0, 0.5)
    handler.tick(0.05, set())
    assert handler.take_state() is None
    assert 0.0 < handler.up_down_angle < 0.5


def test_left_then_right_cancel():
    handler = InputHandler()
    handler.tick(0.1, {Key.LEFT})
    assert handler.take_state() is not None
    handler.tick(0.1, {Key.RIGHT})
    angle = handler.peek_state().look_angle
    assert min(angle, 2 * math.pi - angle) == pytest.approx(0.0, abs=1e-9)


def test_slow_look_turns_a_third():
    fast = InputHandler()
    fast.tick(0.1, {Key.LEFT})
    slow = InputHandler()
    slow.handle_key(Key.LSHIFT, True)
    slow.tick(0.1, {Key.LEFT})
    fast_turn = 2 * math.pi - fast.peek_state().look_angle
    slow_turn = 2 * math.pi - slow.peek_state().look_angle
    assert fast_turn == pytest.approx(3 * slow_turn)


def test_up_and_down_keys_clamp():
    handler = InputHandler()
    handler.tick(1.0, {Key.UP})
    assert handler.up_down_angle == UP_DOWN_ANGLE_CLAMP
    other = InputHandler()
    other.tick(1.0, {Key.DOWN})
    assert other.up_down_angle == -UP_DOWN_ANGLE_CLAMP


def test_lerp_endpoints():
    assert lerp(2.0, 7.0, 0.0) == 2.0
    assert lerp(2.0, 7.0, 1.0) == 7.0