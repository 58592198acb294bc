"""The application frame loop."""

from __future__ import annotations

import abc
import time

from saltengine.ecs import World
from saltengine.input import Input
from saltengine.renderer import Renderer
from saltengine.window import DEFAULT_HEIGHT, DEFAULT_TITLE, DEFAULT_WIDTH, Window

DEFAULT_FPS = 60.0


def _frame_time(fps: float) -> float:
    """Seconds per frame, truncated to whole microseconds."""
    return int(1_000_000.0 / fps) / 1_000_000.0


class Application(abc.ABC):
    """Base of a program: subclasses fill in what happens at init, each frame and exit."""

    def __init__(self) -> None:
        self.max_fps = DEFAULT_FPS
        self.frame_time = _frame_time(self.max_fps)
        self.window = Window(DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_TITLE)
        self.renderer = Renderer()
        self.input = Input(self.window)
        self.world = World()

    @abc.abstractmethod
    def on_init(self) -> None:
        """Set up the program once the window is open."""

    @abc.abstractmethod
    def on_update(self) -> None:
        """Run once per frame after the world and renderer are updated."""

    @abc.abstractmethod
    def on_exit(self) -> None:
        """Run once when the frame loop has ended."""

    def set_fps(self, fps_limit: float) -> None:
        """Limit the frame rate to *fps_limit* frames per second."""
        if not fps_limit > 0:
            raise ValueError(f"frame rate must be positive, got {fps_limit}")
        self.max_fps = float(fps_limit)
        self.frame_time = _frame_time(self.max_fps)

    def default_on_init(self) -> None:
        """Open the window, then run on_init."""
        self.window.open()
        self.on_init()

    def default_run(self) -> None:
        """Run frames at the frame rate limit until the window should close."""
        frame_end = time.monotonic()
        while True:
            frame_end += self.frame_time
            if self.window.should_close():
                break
            self.input.update()
            self.world.update()
            self.renderer.update(self.window)
            self.on_update()
            remaining = frame_end - time.monotonic()
            if remaining > 0:
                time.sleep(remaining)

    def default_on_exit(self) -> None:
        """Run on_exit, then close the window."""
        self.on_exit()
        self.window.close()


def run_application(app: Application) -> None:
    """Initialise, run and shut down *app*; the window is closed even on error."""
    try:
        app.default_on_init()
        app.default_run()
        app.default_on_exit()
    finally:
        app.window.close()