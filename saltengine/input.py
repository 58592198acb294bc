"""Keyboard and mouse state, with key and button codes."""

from __future__ import annotations

import enum
import string

import pygame

from saltengine.window import Window


class Key(enum.IntEnum):
    """Keyboard key codes."""

    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    DIGIT_0 = 48
    DIGIT_1 = 49
    DIGIT_2 = 50
    DIGIT_3 = 51
    DIGIT_4 = 52
    DIGIT_5 = 53
    DIGIT_6 = 54
    DIGIT_7 = 55
    DIGIT_8 = 56
    DIGIT_9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    WORLD_1 = 161
    WORLD_2 = 162
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314
    KP_0 = 320
    KP_1 = 321
    KP_2 = 322
    KP_3 = 323
    KP_4 = 324
    KP_5 = 325
    KP_6 = 326
    KP_7 = 327
    KP_8 = 328
    KP_9 = 329
    KP_DECIMAL = 330
    KP_DIVIDE = 331
    KP_MULTIPLY = 332
    KP_SUBTRACT = 333
    KP_ADD = 334
    KP_ENTER = 335
    KP_EQUAL = 336
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348


class MouseButton(enum.IntEnum):
    """Mouse button codes."""

    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    LAST = 7
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


_PYGAME_NAMES: dict[Key, tuple[str, ...]] = {
    Key.SPACE: ("K_SPACE",),
    Key.APOSTROPHE: ("K_QUOTE",),
    Key.COMMA: ("K_COMMA",),
    Key.MINUS: ("K_MINUS",),
    Key.PERIOD: ("K_PERIOD",),
    Key.SLASH: ("K_SLASH",),
    Key.SEMICOLON: ("K_SEMICOLON",),
    Key.EQUAL: ("K_EQUALS",),
    Key.LEFT_BRACKET: ("K_LEFTBRACKET",),
    Key.BACKSLASH: ("K_BACKSLASH",),
    Key.RIGHT_BRACKET: ("K_RIGHTBRACKET",),
    Key.GRAVE_ACCENT: ("K_BACKQUOTE",),
    Key.ESCAPE: ("K_ESCAPE",),
    Key.ENTER: ("K_RETURN",),
    Key.TAB: ("K_TAB",),
    Key.BACKSPACE: ("K_BACKSPACE",),
    Key.INSERT: ("K_INSERT",),
    Key.DELETE: ("K_DELETE",),
    Key.RIGHT: ("K_RIGHT",),
    Key.LEFT: ("K_LEFT",),
    Key.DOWN: ("K_DOWN",),
    Key.UP: ("K_UP",),
    Key.PAGE_UP: ("K_PAGEUP",),
    Key.PAGE_DOWN: ("K_PAGEDOWN",),
    Key.HOME: ("K_HOME",),
    Key.END: ("K_END",),
    Key.CAPS_LOCK: ("K_CAPSLOCK",),
    Key.SCROLL_LOCK: ("K_SCROLLLOCK", "K_SCROLLOCK"),
    Key.NUM_LOCK: ("K_NUMLOCK", "K_NUMLOCKCLEAR"),
    Key.PRINT_SCREEN: ("K_PRINTSCREEN", "K_PRINT"),
    Key.PAUSE: ("K_PAUSE",),
    Key.KP_DECIMAL: ("K_KP_PERIOD",),
    Key.KP_DIVIDE: ("K_KP_DIVIDE",),
    Key.KP_MULTIPLY: ("K_KP_MULTIPLY",),
    Key.KP_SUBTRACT: ("K_KP_MINUS",),
    Key.KP_ADD: ("K_KP_PLUS",),
    Key.KP_ENTER: ("K_KP_ENTER",),
    Key.KP_EQUAL: ("K_KP_EQUALS",),
    Key.LEFT_SHIFT: ("K_LSHIFT",),
    Key.LEFT_CONTROL: ("K_LCTRL",),
    Key.LEFT_ALT: ("K_LALT",),
    Key.LEFT_SUPER: ("K_LGUI", "K_LSUPER", "K_LMETA"),
    Key.RIGHT_SHIFT: ("K_RSHIFT",),
    Key.RIGHT_CONTROL: ("K_RCTRL",),
    Key.RIGHT_ALT: ("K_RALT",),
    Key.RIGHT_SUPER: ("K_RGUI", "K_RSUPER", "K_RMETA"),
    Key.MENU: ("K_MENU",),
}
_PYGAME_NAMES.update({Key[c]: (f"K_{c.lower()}",) for c in string.ascii_uppercase})
_PYGAME_NAMES.update({Key[f"DIGIT_{d}"]: (f"K_{d}",) for d in string.digits})
_PYGAME_NAMES.update({Key[f"KP_{d}"]: (f"K_KP_{d}", f"K_KP{d}") for d in string.digits})
_PYGAME_NAMES.update({Key[f"F{n}"]: (f"K_F{n}",) for n in range(1, 26)})


def _resolve(names: tuple[str, ...]) -> int | None:
    for name in names:
        code = getattr(pygame, name, None)
        if code is not None:
            return code
    return None


_PYGAME_KEYS: dict[Key, int] = {
    key: code for key, names in _PYGAME_NAMES.items() if (code := _resolve(names)) is not None
}

# Pygame reports buttons as (left, middle, right, back, forward).
_PYGAME_BUTTON_INDEX = {0: 0, 1: 2, 2: 1, 3: 3, 4: 4}


def to_pygame_key(key: Key | int) -> int:
    """Return the pygame key constant for a key code."""
    key = Key(key)
    try:
        return _PYGAME_KEYS[key]
    except KeyError:
        raise KeyError(f"key {key.name} has no pygame equivalent") from None


class Input:
    """Reads keyboard and mouse state of a window."""

    def __init__(self, window: Window) -> None:
        self.window = window

    def update(self) -> None:
        """Process pending events; a close request is left for the window."""
        pygame.event.get(exclude=pygame.QUIT)

    def is_key_pressed(self, key: Key | int) -> bool:
        """Whether *key* is held down; keys without a mapping never are."""
        try:
            code = to_pygame_key(key)
        except (KeyError, ValueError):
            return False
        return bool(pygame.key.get_pressed()[code])

    def is_mouse_button_pressed(self, button: MouseButton | int) -> bool:
        """Whether mouse *button* is held down."""
        index = _PYGAME_BUTTON_INDEX.get(int(button))
        if index is None:
            return False
        return bool(pygame.mouse.get_pressed(num_buttons=5)[index])

    def mouse_x(self) -> float:
        """Cursor x position in pixels."""
        return float(pygame.mouse.get_pos()[0])

    def mouse_y(self) -> float:
        """Cursor y position in pixels."""
        return float(pygame.mouse.get_pos()[1])