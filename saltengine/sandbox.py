"""Demo program: sprites bouncing around the window."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence
from pathlib import Path

from saltengine.application import Application, run_application
from saltengine.color import Color
from saltengine.component import ComponentType, FieldType
from saltengine.ecs import World
from saltengine.entity import Entity
from saltengine.renderer import Renderer, pix_x, pix_y
from saltengine.system import System
from saltengine.window import Window

DEFAULT_RESOURCES = Path("Salt/res")
BALLS = 10
SPRITE_PIXELS = 100


def make_move_system(world: World, renderer: Renderer, window: Window) -> Callable[[int], None]:
    """Return a system that moves an entity, bounces it off the edges and draws it."""

    def move(entity_id: int) -> None:
        entity = world.entities.entity(entity_id)
        if entity is None:
            raise KeyError(f"no entity {entity_id}")
        position = entity.component("position")
        speed = entity.component("speed")
        if position is None or speed is None:
            raise KeyError(f"entity {entity_id} lacks position or speed")
        x, y = position.get_field("x"), position.get_field("y")
        sx, sy = speed.get_field("x"), speed.get_field("y")

        if x < 0 and sx < 0:
            sx = -sx
        if x > 1 and sx > 0:
            sx = -sx
        if y < 0 and sy < 0:
            sy = -sy
        if y > 1 and sy > 0:
            sy = -sy

        x += sx
        y += sy
        speed.set_field("x", sx)
        speed.set_field("y", sy)
        position.set_field("x", x)
        position.set_field("y", y)

        renderer.draw_sprite(
            x,
            y,
            pix_x(SPRITE_PIXELS, window.width()),
            pix_y(SPRITE_PIXELS, window.height()),
            "smile",
            Color(x * 230, x * 230, y * 200, 255),
        )

    return move


class SandboxApp(Application):
    """Ten smiley sprites drifting and bouncing off the window edges."""

    def __init__(
        self,
        resource_dir: str | Path = DEFAULT_RESOURCES,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self.resource_dir = Path(resource_dir)
        self.rng = rng if rng is not None else random.Random()

    def on_init(self) -> None:
        self.set_fps(60)
        textures = self.renderer.textures
        textures.load_texture("blank", self.resource_dir / "textures" / "blank.png")
        textures.load_texture("smile", self.resource_dir / "textures" / "texture1.png")
        self.renderer.fonts.add_font(self.resource_dir / "fonts" / "gohufont", textures)

        vector = ComponentType()
        vector.add_field(FieldType.FLOAT, "x")
        vector.add_field(FieldType.FLOAT, "y")
        self.world.components.add_component_type(vector, "position")
        self.world.components.add_component_type(vector, "speed")

        mover = System(make_move_system(self.world, self.renderer, self.window))
        self.world.systems.add_system(mover, "move")

        template = Entity(self.world)
        template.add_system("move")
        template.add_component("position")
        template.add_component("speed")
        self.world.entities.add_entity(template)

        for _ in range(BALLS):
            entity_id = self.world.entities.add_entity(template)
            entity = self.world.entities.entity(entity_id)
            position = entity.component("position")
            speed = entity.component("speed")
            position.set_field("x", self.rng.randrange(100) / 100.0)
            position.set_field("y", self.rng.randrange(100) / 100.0)
            speed.set_field("x", self.rng.randrange(100) / 5000.0)
            speed.set_field("y", self.rng.randrange(100) / 5000.0)

    def on_update(self) -> None:
        pass

    def on_exit(self) -> None:
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sandbox demo."""
    parser = argparse.ArgumentParser(description="Bouncing sprites demo.")
    parser.add_argument(
        "--resources",
        type=Path,
        default=DEFAULT_RESOURCES,
        help="folder holding textures/ and fonts/",
    )
    args = parser.parse_args(argv)
    run_application(SandboxApp(args.resources))
    return 0