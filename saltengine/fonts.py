"""Bitmap fonts: a glyph grid image plus a text map of its characters."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from saltengine.batch import Batch
from saltengine.color import Color
from saltengine.containers import NameIdContainer
from saltengine.quad import Quad
from saltengine.textures import TextureManager

FONTS_MAX = 16


def _read_lines(path: Path) -> list[str]:
    text = path.read_text()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class Font:
    """A font read from ``<folder>/<name>.txt`` and ``<folder>/<name>.png``.

    The first text line is ``<columns>x<rows>``; each further line lists the
    characters of one row of the glyph grid.
    """

    chars_in_tex_row: int
    chars_in_tex_col: int
    char_size_x: float
    char_size_y: float
    char_pix_x: float
    char_pix_y: float
    texture_name: str
    char_map: str

    @classmethod
    def load(cls, folder: str | os.PathLike[str], textures: TextureManager) -> Font:
        """Read a font folder and load its glyph image into *textures*."""
        folder = Path(folder)
        name = folder.name
        lines = _read_lines(folder / f"{name}.txt")
        if not lines:
            raise ValueError(f"font description for {name!r} is empty")
        header, _, rest = lines[0].partition("x")
        if not _:
            raise ValueError(f"font header {lines[0]!r} lacks an 'x'")
        columns, rows = int(header), int(rest)
        if columns <= 0 or rows <= 0:
            raise ValueError(f"font grid {lines[0]!r} must be positive")
        texture_name = f"_font_{name}"
        width, height = textures.load_texture(texture_name, folder / f"{name}.png")
        return cls(
            chars_in_tex_row=columns,
            chars_in_tex_col=rows,
            char_size_x=1.0 / columns,
            char_size_y=1.0 / rows,
            char_pix_x=float(width // columns),
            char_pix_y=float(height // rows),
            texture_name=texture_name,
            char_map="".join(line + "\n" for line in lines[1:]),
        )

    def glyph_cell(self, char: str) -> tuple[int, int]:
        """Return the (column, row) of *char* in the glyph grid.

        A character missing from the map gives the cell after the last one.
        """
        cx = cy = 0
        for mapped in self.char_map:
            if mapped == "\n":
                cy += 1
                cx = 0
            elif mapped == char:
                break
            else:
                cx += 1
        return cx, cy

    def draw_char(
        self,
        char: str,
        x: float,
        y: float,
        size_y: float,
        color: Color,
        textures: TextureManager,
        batch: Batch,
    ) -> None:
        """Add a quad showing *char* with its top-left corner at (x, y)."""
        cx, cy = self.glyph_cell(char)
        quad = Quad()
        quad.set_display_rect(x, y, x + size_y * self.char_pix_x / self.char_pix_y, y + size_y)
        quad.set_color(color.r, color.g, color.b, color.a)
        quad.set_texture_id(textures.bind_index(self.texture_name))
        quad.set_texture_rect(
            cx * self.char_size_x,
            cy * self.char_size_y,
            (cx + 1) * self.char_size_x,
            (cy + 1) * self.char_size_y,
        )
        batch.add_quad(quad)


class FontManager:
    """Fonts registered under their folder names."""

    def __init__(self) -> None:
        self.fonts: NameIdContainer[Font] = NameIdContainer(FONTS_MAX)

    def add_font(self, folder: str | os.PathLike[str], textures: TextureManager) -> int:
        """Load the font in *folder* and register it under the folder's name."""
        font = Font.load(folder, textures)
        return self.fonts.add(font, Path(folder).name)

    def font(self, name: str) -> Font | None:
        """Return the font called *name*."""
        return self.fonts.get(name)