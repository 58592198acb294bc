"""Vertices and screen quads in normalised device coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field

FLOATS_PER_VERTEX = 10


@dataclass
class Vertex:
    """One vertex: position, colour, texture coordinates and texture slot."""

    pos: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    color_rgba: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 0.0])
    texture_pos: list[float] = field(default_factory=lambda: [0.0, 0.0])
    texture_id: float = 0.0


class Quad:
    """Four vertices in the order top-right, bottom-right, bottom-left, top-left."""

    def __init__(self) -> None:
        self.vertices: list[Vertex] = [Vertex() for _ in range(4)]

    def set_display_rect(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Place the quad; screen coordinates run 0..1 left-right and top-down."""
        corners = ((x2, y1), (x2, y2), (x1, y2), (x1, y1))
        for vertex, (x, y) in zip(self.vertices, corners):
            vertex.pos = [x * 2.0 - 1.0, y * -2.0 + 1.0, 0.0]

    def set_color(self, r: float, g: float, b: float, a: float) -> None:
        """Set every vertex colour from 8-bit channel values."""
        rgba = [r / 256.0, g / 256.0, b / 256.0, a / 256.0]
        for vertex in self.vertices:
            vertex.color_rgba = list(rgba)

    def set_texture_rect(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Select the texture region; coordinates run 0..1 with y top-down."""
        corners = ((x2, y1), (x2, y2), (x1, y2), (x1, y1))
        for vertex, (x, y) in zip(self.vertices, corners):
            vertex.texture_pos = [x, 1.0 - y]

    def set_texture_id(self, index: float) -> None:
        """Set the texture slot sampled by every vertex."""
        for vertex in self.vertices:
            vertex.texture_id = float(index)