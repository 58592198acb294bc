"""A window that presents batches of textured quads, drawn with pygame."""

from __future__ import annotations

from collections.abc import Sequence

import pygame
from PIL import Image

from saltengine.batch import Batch
from saltengine.quad import Quad
from saltengine.textures import TextureManager

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 450
DEFAULT_TITLE = "SALT"

_CLEAR_COLOR = (0, 0, 0, 255)
_NO_TINT = (255, 255, 255, 255)


def _to_unit(pos: Sequence[float]) -> tuple[float, float]:
    """Map a normalised device position back to 0..1 screen coordinates."""
    return (pos[0] + 1.0) / 2.0, (1.0 - pos[1]) / 2.0


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def to_screen_rect(quad: Quad, width: float, height: float) -> pygame.Rect:
    """Return the pixel rectangle a quad covers on a surface of the given size."""
    x1, y1 = _to_unit(quad.vertices[3].pos)
    x2, y2 = _to_unit(quad.vertices[1].pos)
    left = round(min(x1, x2) * width)
    right = round(max(x1, x2) * width)
    top = round(min(y1, y2) * height)
    bottom = round(max(y1, y2) * height)
    return pygame.Rect(left, top, right - left, bottom - top)


def _texture_region(quad: Quad, size: tuple[int, int]) -> pygame.Rect:
    """Return the pixel region of a texture of *size* that a quad samples."""
    width, height = size
    u1 = quad.vertices[3].texture_pos[0]
    u2 = quad.vertices[1].texture_pos[0]
    v1 = 1.0 - quad.vertices[3].texture_pos[1]
    v2 = 1.0 - quad.vertices[1].texture_pos[1]
    left = _clamp(round(min(u1, u2) * width), 0, width - 1)
    right = _clamp(round(max(u1, u2) * width), left + 1, width)
    top = _clamp(round(min(v1, v2) * height), 0, height - 1)
    bottom = _clamp(round(max(v1, v2) * height), top + 1, height)
    return pygame.Rect(left, top, right - left, bottom - top)


def _tint(quad: Quad) -> tuple[int, ...]:
    return tuple(_clamp(round(c * 256.0), 0, 255) for c in quad.vertices[0].color_rgba)


class Window:
    """A resizable window; quads are drawn onto it and shown on swap."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        title: str = DEFAULT_TITLE,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self._size = (width, height)
        self.title = title
        self._surface: pygame.Surface | None = None
        self._texture_cache: dict[int, tuple[Image.Image, pygame.Surface]] = {}

    def __enter__(self) -> Window:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def open(self) -> None:
        """Create the window; does nothing if it is already open."""
        if self._surface is not None:
            return
        pygame.display.init()
        self._surface = pygame.display.set_mode(self._size, pygame.RESIZABLE)
        pygame.display.set_caption(self.title)

    def close(self) -> None:
        """Destroy the window; does nothing if it is not open."""
        if self._surface is None:
            return
        self._surface = None
        self._texture_cache.clear()
        pygame.display.quit()

    def _display(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("window is not open")
        return pygame.display.get_surface() or self._surface

    def should_close(self) -> bool:
        """Whether the window is closed or the user asked to close it."""
        if self._surface is None:
            return True
        return bool(pygame.event.peek(pygame.QUIT))

    def clear(self) -> None:
        """Fill the window with black."""
        self._display().fill(_CLEAR_COLOR)

    def _texture_surface(self, textures: TextureManager, index: int) -> pygame.Surface | None:
        image = textures.image(index)
        if image is None:
            return None
        cached = self._texture_cache.get(index)
        if cached is not None and cached[0] is image:
            return cached[1]
        surface = pygame.image.frombuffer(image.tobytes(), image.size, "RGBA").copy()
        self._texture_cache[index] = (image, surface)
        return surface

    def draw_batch(self, batch: Batch, textures: TextureManager) -> None:
        """Draw every quad of *batch* with its texture region and colour tint."""
        display = self._display()
        width, height = display.get_size()
        for quad in batch:
            rect = to_screen_rect(quad, width, height)
            if rect.width <= 0 or rect.height <= 0:
                continue
            source = self._texture_surface(textures, int(quad.vertices[0].texture_id))
            if source is None:
                continue
            region = _texture_region(quad, source.get_size())
            sprite = pygame.transform.scale(source.subsurface(region), rect.size)
            tint = _tint(quad)
            if tint != _NO_TINT:
                sprite.fill(tint, special_flags=pygame.BLEND_RGBA_MULT)
            display.blit(sprite, rect.topleft)

    def swap_buffers(self) -> None:
        """Show what has been drawn since the last swap."""
        self._display()
        pygame.display.flip()

    def width(self) -> float:
        """Current width in pixels."""
        if self._surface is None:
            return float(self._size[0])
        return float(self._display().get_width())

    def height(self) -> float:
        """Current height in pixels."""
        if self._surface is None:
            return float(self._size[1])
        return float(self._display().get_height())