import pytest

from spacefighter.input import (
    Button,
    ButtonState,
    GamePadState,
    Key,
    MouseButton,
)
from spacefighter.vector2 import Vector2


def _press(state, button):
    fields = {
        Button.A: (state.buttons, "a"),
        Button.B: (state.buttons, "b"),
        Button.X: (state.buttons, "x"),
        Button.Y: (state.buttons, "y"),
        Button.START: (state.buttons, "start"),
        Button.BACK: (state.buttons, "back"),
        Button.LEFT_STICK: (state.buttons, "left_stick"),
        Button.LEFT_SHOULDER: (state.buttons, "left_shoulder"),
        Button.RIGHT_STICK: (state.buttons, "right_stick"),
        Button.RIGHT_SHOULDER: (state.buttons, "right_shoulder"),
        Button.DPAD_UP: (state.dpad, "up"),
        Button.DPAD_DOWN: (state.dpad, "down"),
        Button.DPAD_LEFT: (state.dpad, "left"),
        Button.DPAD_RIGHT: (state.dpad, "right"),
    }
    target, name = fields[button]
    setattr(target, name, ButtonState.PRESSED)


def test_new_state_has_all_buttons_up():
    state = GamePadState()
    assert all(state.is_button_up(b) for b in Button)
    assert not any(state.is_button_down(b) for b in Button)


@pytest.mark.parametrize("button", list(Button))
def test_pressing_one_button_reports_only_that_button(button):
    state = GamePadState()
    _press(state, button)
    assert state.is_button_down(button)
    assert not state.is_button_up(button)
    others = [b for b in Button if b is not button]
    assert all(state.is_button_up(b) for b in others)


def test_reset_releases_buttons_and_triggers_but_keeps_sticks():
    state = GamePadState(is_connected=True)
    for button in Button:
        _press(state, button)
    state.triggers.left = 0.75
    state.triggers.right = 0.5
    state.thumbsticks.left = Vector2(0.25, -0.5)

    state.reset()

    assert all(state.is_button_up(b) for b in Button)
    assert state.triggers.left == 0
    assert state.triggers.right == 0
    assert state.thumbsticks.left == Vector2(0.25, -0.5)
    assert state.is_connected is True


def test_unknown_button_is_not_down():
    state = GamePadState()
    assert state.is_button_down("not a button") is False


@pytest.mark.parametrize(
    "key, value",
    [
        (Key.A, 1),
        (Key.F1, 47),
        (Key.ESCAPE, 59),
        (Key.INSERT, 76),
        (Key.PAD_SLASH, 86),
        (Key.PRINTSCREEN, 92),
        (Key.LSHIFT, 215),
    ],
)
def test_key_anchor_values(key, value):
    assert int(key) == value


@pytest.mark.parametrize(
    "first, last",
    [
        (Key.A, Key.Z),
        (Key.NUM_0, Key.PAD_9),
        (Key.F1, Key.F12),
        (Key.ESCAPE, Key.SPACE),
        (Key.INSERT, Key.DOWN),
        (Key.PAD_SLASH, Key.PAD_ENTER),
        (Key.LSHIFT, Key.MAX),
    ],
)
def test_key_runs_are_consecutive(first, last):
    run = [k for k in Key if first <= k <= last]
    assert [int(k) for k in run] == list(range(int(first), int(last) + 1))


def test_key_sections_follow_each_other():
    assert Key(int(Key.PAD_9) + 1) is Key.F1
    assert Key(int(Key.F12) + 1) is Key.ESCAPE
    assert Key(int(Key.SPACE) + 1) is Key.INSERT
    assert Key(int(Key.DOWN) + 1) is Key.PAD_SLASH
    assert Key(int(Key.PAD_ENTER) + 1) is Key.PRINTSCREEN
    assert Key(int(Key.CAPSLOCK) + 1) is Key.MAX


def test_mouse_buttons_start_at_one_and_are_consecutive():
    assert MouseButton(1) is MouseButton.LEFT
    values = [int(b) for b in MouseButton]
    assert values == list(range(1, len(values) + 1))
    assert MouseButton(max(values)) is MouseButton.FORWARD