"""Fixed table of loaded textures addressed by name and slot index."""

from __future__ import annotations

import os

from PIL import Image

from saltengine.containers import ContainerFullError

MAX_TEXTURE_NUMBER = 16
BLANK_TEXTURE = "_blank"


class TextureManager:
    """Up to MAX_TEXTURE_NUMBER RGBA images; slot 0 is a 1x1 white ``_blank``.

    Images are kept top row first, as stored in their files.
    """

    def __init__(self) -> None:
        self._names: list[str | None] = [None] * MAX_TEXTURE_NUMBER
        self._filenames: list[str | None] = [None] * MAX_TEXTURE_NUMBER
        self._images: list[Image.Image | None] = [None] * MAX_TEXTURE_NUMBER
        self._names[0] = BLANK_TEXTURE
        self._images[0] = Image.new("RGBA", (1, 1), (255, 255, 255, 255))

    def _free_slot(self, name: str) -> int:
        for index, existing in enumerate(self._names):
            if existing is None:
                return index
            if existing == name:
                raise ValueError(f"texture with name {name!r} is already created")
        raise ContainerFullError(
            f"unable to add texture {name!r}: max texture number is reached"
        )

    def load_texture(self, name: str, filename: str | os.PathLike[str]) -> tuple[int, int]:
        """Load an image file into the first free slot; return its (width, height)."""
        if not name:
            raise ValueError("texture name must not be empty")
        index = self._free_slot(name)
        with Image.open(filename) as img:
            image = img.convert("RGBA")
        self._names[index] = name
        self._filenames[index] = os.fspath(filename)
        self._images[index] = image
        return image.size

    def bind_index(self, name: str) -> int:
        """Return the slot of the texture called *name*, or 0 if there is none."""
        for index, existing in enumerate(self._names):
            if existing == name:
                return index
        return 0

    def image(self, index: int) -> Image.Image | None:
        """Return the image in slot *index*, or None if the slot is empty."""
        if not 0 <= index < MAX_TEXTURE_NUMBER:
            raise IndexError(f"texture slot {index} is outside 0..{MAX_TEXTURE_NUMBER - 1}")
        return self._images[index]

    def loaded(self) -> list[tuple[int, str]]:
        """Return (slot, name) for every loaded texture in slot order."""
        return [
            (index, name) for index, name in enumerate(self._names) if name is not None
        ]