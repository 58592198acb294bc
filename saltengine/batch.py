"""A batch of quads collected during one frame and drawn together."""

from __future__ import annotations

import copy
from array import array
from collections.abc import Iterator

from saltengine.quad import Quad

MAX_QUADS_IN_BATCH = 1024

_QUAD_INDICES = (0, 1, 2, 0, 2, 3)


class Batch:
    """Holds up to MAX_QUADS_IN_BATCH quads; further quads are dropped."""

    def __init__(self) -> None:
        self._quads: list[Quad] = []
        self._index = array(
            "I",
            (quad * 4 + corner for quad in range(MAX_QUADS_IN_BATCH) for corner in _QUAD_INDICES),
        )

    def add_quad(self, quad: Quad) -> bool:
        """Store a copy of *quad*; return False if the batch is full."""
        if len(self._quads) >= MAX_QUADS_IN_BATCH:
            return False
        self._quads.append(copy.deepcopy(quad))
        return True

    def clear(self) -> None:
        """Drop all quads."""
        self._quads.clear()

    def vertex_data(self) -> array:
        """Flat float32 data: per vertex position, colour, texture position, slot."""
        data = array("f")
        for quad in self._quads:
            for vertex in quad.vertices:
                data.extend(vertex.pos)
                data.extend(vertex.color_rgba)
                data.extend(vertex.texture_pos)
                data.append(vertex.texture_id)
        return data

    def index_data(self) -> array:
        """Triangle indices for every quad the batch can hold, six per quad."""
        return array("I", self._index)

    def __len__(self) -> int:
        return len(self._quads)

    def __iter__(self) -> Iterator[Quad]:
        return iter(self._quads)