"""Sprite and text drawing into a per-frame batch."""

from __future__ import annotations

from typing import Any

from saltengine.batch import Batch
from saltengine.color import Color
from saltengine.fonts import FontManager
from saltengine.quad import Quad
from saltengine.textures import BLANK_TEXTURE, TextureManager


def pix_x(px: float, width: float) -> float:
    """Convert a horizontal pixel count into screen coordinates."""
    return px / width


def pix_y(px: float, height: float) -> float:
    """Convert a vertical pixel count into screen coordinates."""
    return px / height


def sc(c: float) -> float:
    """Return a screen coordinate as a float, to pair with pix_x and pix_y."""
    return float(c)


class Renderer:
    """Owns the textures, fonts and the batch of quads for the current frame."""

    def __init__(self) -> None:
        self.textures = TextureManager()
        self.batch = Batch()
        self.fonts = FontManager()

    def draw_sprite(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        texture_name: str | Color = BLANK_TEXTURE,
        color: Color | None = None,
    ) -> None:
        """Queue a textured rectangle; a Color in place of the name tints ``_blank``."""
        if isinstance(texture_name, Color):
            texture_name, color = BLANK_TEXTURE, texture_name
        if color is None:
            color = Color()
        quad = Quad()
        quad.set_display_rect(x, y, x + width, y + height)
        quad.set_color(color.r, color.g, color.b, color.a)
        quad.set_texture_id(self.textures.bind_index(texture_name))
        quad.set_texture_rect(0.0, 0.0, 1.0, 1.0)
        self.batch.add_quad(quad)

    def draw_text(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        size: float,
        text: str,
        font_name: str,
        color: Color | None = None,
    ) -> None:
        """Queue text inside a box, wrapping lines and cutting off what falls below it.

        Wrapped and new lines restart at the left screen edge.
        """
        font = self.fonts.font(font_name)
        if font is None:
            raise KeyError(f"font {font_name!r} was removed")
        if color is None:
            color = Color()
        pos_x, pos_y = x, y
        size_x = size * font.char_pix_x / font.char_pix_y
        for char in text:
            if char == "\n":
                pos_y += size
                pos_x = 0.0
            else:
                font.draw_char(char, pos_x, pos_y, size, color, self.textures, self.batch)
                if pos_x + size_x > x + width:
                    pos_y += size
                    pos_x = 0.0
                else:
                    pos_x += size_x
            if pos_y + size > y + height:
                break

    def update(self, window: Any) -> None:
        """Present the frame's batch on *window* and start a new frame."""
        window.clear()
        window.draw_batch(self.batch, self.textures)
        self.batch.clear()
        window.swap_buffers()