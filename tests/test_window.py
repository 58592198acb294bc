import pygame
import pytest
from PIL import Image

from saltengine.batch import Batch
from saltengine.color import Color
from saltengine.quad import Quad
from saltengine.renderer import Renderer
from saltengine.textures import TextureManager
from saltengine.window import Window, to_screen_rect


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    win = Window(100, 80, "test")
    win.open()
    yield win
    win.close()


def _pixel(x, y):
    return tuple(pygame.display.get_surface().get_at((x, y)))[:3]


def test_full_quad_covers_whole_surface():
    quad = Quad()
    quad.set_display_rect(0.0, 0.0, 1.0, 1.0)
    assert to_screen_rect(quad, 200, 100) == pygame.Rect(0, 0, 200, 100)


def test_half_quad_covers_half_width():
    quad = Quad()
    quad.set_display_rect(0.0, 0.0, 0.5, 1.0)
    rect = to_screen_rect(quad, 200, 100)
    assert rect.width * 2 == 200
    assert rect.height == 100
    assert rect.topleft == (0, 0)


def test_unopened_window_reports_configured_size():
    win = Window(320, 240, "t")
    assert win.width() == 320.0
    assert win.height() == 240.0
    assert win.should_close() is True


def test_default_size_is_source_window():
    win = Window()
    assert (win.width(), win.height()) == (800.0, 450.0)
    assert win.title == "SALT"


def test_rejects_bad_size():
    with pytest.raises(ValueError):
        Window(0, 10, "t")


def test_open_window_size(window):
    assert window.width() == 100.0
    assert window.height() == 80.0
    assert window.should_close() is False


def test_quit_event_requests_close(window):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert window.should_close() is True


def test_close_is_idempotent(window):
    window.close()
    window.close()
    assert window.should_close() is True


def test_operations_need_open_window():
    win = Window(10, 10, "t")
    with pytest.raises(RuntimeError):
        win.clear()


def test_clear_fills_black(window):
    pygame.display.get_surface().fill((10, 20, 30))
    window.clear()
    assert window.should_close() is False
    assert _pixel(50, 40) == (0, 0, 0)


def test_draw_tinted_blank_sprite(window):
    renderer = Renderer()
    window.clear()
    renderer.draw_sprite(0.0, 0.0, 0.5, 1.0, Color(255, 0, 0, 255))
    assert len(renderer.batch) == 1
    window.draw_batch(renderer.batch, renderer.textures)
    assert _pixel(10, 10) == (255, 0, 0)
    assert _pixel(90, 10) == (0, 0, 0)


def test_draw_texture_region(window, tmp_path):
    image = Image.new("RGBA", (2, 1))
    image.putpixel((0, 0), (255, 0, 0, 255))
    image.putpixel((1, 0), (0, 0, 255, 255))
    path = tmp_path / "two.png"
    image.save(path)
    renderer = Renderer()
    renderer.textures.load_texture("two", path)
    assert renderer.textures.bind_index("two") == 1
    window.clear()
    renderer.draw_sprite(0.0, 0.0, 1.0, 1.0, "two")
    assert len(renderer.batch) == 1
    window.draw_batch(renderer.batch, renderer.textures)
    assert _pixel(10, 10) == (255, 0, 0)
    assert _pixel(90, 70) == (0, 0, 255)


def test_empty_batch_draws_nothing(window):
    batch = Batch()
    window.clear()
    window.draw_batch(batch, TextureManager())
    assert len(batch) == 0
    assert window.should_close() is False
    assert _pixel(0, 0) == (0, 0, 0)


def test_context_manager_closes(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with Window(30, 20, "t") as win:
        assert win.should_close() is False
    assert win.should_close() is True