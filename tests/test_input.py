import pygame
import pytest

from saltengine.input import Input, Key, MouseButton, to_pygame_key
from saltengine.window import Window


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    win = Window(64, 48, "input")
    win.open()
    yield win
    win.close()


def test_key_codes_fixed_by_source():
    assert Key(32) is Key.SPACE
    assert Key(256) is Key.ESCAPE
    assert Key(348) is Key.MENU
    assert to_pygame_key(Key(256)) == pygame.K_ESCAPE


def test_mouse_button_aliases():
    assert MouseButton(0) is MouseButton.LEFT
    assert MouseButton(1) is MouseButton.RIGHT
    assert MouseButton(2) is MouseButton.MIDDLE
    assert MouseButton(7) is MouseButton.LAST
    assert MouseButton.LEFT is MouseButton.BUTTON_1
    assert MouseButton.LAST is MouseButton.BUTTON_8


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (Key.A, pygame.K_a),
        (Key.Z, pygame.K_z),
        (Key.DIGIT_5, pygame.K_5),
        (Key.SPACE, pygame.K_SPACE),
        (Key.ENTER, pygame.K_RETURN),
        (Key.LEFT_SHIFT, pygame.K_LSHIFT),
        (Key.F1, pygame.K_F1),
    ],
)
def test_to_pygame_key(key, expected):
    assert to_pygame_key(key) == expected


def test_to_pygame_key_accepts_int():
    assert to_pygame_key(65) == pygame.K_a


def test_unmapped_key_raises():
    with pytest.raises(KeyError):
        to_pygame_key(Key.WORLD_1)


def test_unknown_code_raises():
    with pytest.raises(ValueError):
        to_pygame_key(999)


def test_no_key_pressed(window):
    inp = Input(window)
    inp.update()
    assert inp.is_key_pressed(Key.A) is False
    assert inp.is_key_pressed(Key.WORLD_1) is False


def test_no_button_pressed(window):
    inp = Input(window)
    assert inp.is_mouse_button_pressed(MouseButton.LEFT) is False
    assert inp.is_mouse_button_pressed(MouseButton.BUTTON_8) is False


def test_mouse_position_matches_pygame(window):
    inp = Input(window)
    x, y = pygame.mouse.get_pos()
    assert inp.mouse_x() == float(x)
    assert inp.mouse_y() == float(y)


def test_update_keeps_quit_for_window(window):
    inp = Input(window)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    inp.update()
    assert window.should_close() is True


def test_update_drains_other_events(window):
    inp = Input(window)
    pygame.event.post(pygame.event.Event(pygame.USEREVENT))
    inp.update()
    assert window.should_close() is False
    assert pygame.event.peek(pygame.USEREVENT) is False