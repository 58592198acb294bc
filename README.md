# saltengine

A small 2D game engine on pygame and Pillow. It provides:

- an entity-component-system core (`saltengine.ecs.World`,
  `saltengine.entity.Entity`, `saltengine.component.ComponentType`,
  `saltengine.system.System`) kept in fixed-capacity slot containers
  (`saltengine.containers.PackContainer`, `NameIdContainer`);
- a per-frame batch of textured, tinted quads (`saltengine.batch.Batch`,
  `saltengine.quad.Quad`) and a `saltengine.renderer.Renderer` that fills it
  with sprites and text;
- a texture table (`saltengine.textures.TextureManager`) and bitmap fonts
  (`saltengine.fonts.FontManager`, `Font`);
- a pygame window that draws the batch (`saltengine.window.Window`),
  keyboard and mouse state (`saltengine.input.Input`, `Key`, `MouseButton`);
- a frame-rate-limited main loop (`saltengine.application.Application`,
  `run_application`);
- a stopwatch (`saltengine.clock.Clock`) and console logging
  (`saltengine.log.debug`, `saltengine.log.error`).

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Demo

```
saltengine-sandbox --resources path/to/res
```

The demo opens an 800x450 window, registers `position` and `speed`
component types and a `move` system, and spawns sprites that drift and
bounce off the window edges. `--resources` (default `Salt/res`, relative to
the current directory) must hold:

- `textures/blank.png` and `textures/texture1.png`;
- `fonts/gohufont/gohufont.txt` and `fonts/gohufont/gohufont.png`.

The package ships no such image or font files; supply your own.

## Writing an application

Subclass `Application` and fill in its three hooks:

```python
from saltengine.application import Application, run_application


class MyGame(Application):
    def on_init(self):
        self.set_fps(60)

    def on_update(self):
        pass

    def on_exit(self):
        pass


run_application(MyGame())
```

`Application` owns `window`, `renderer`, `input` and `world`.
`run_application` opens the window and calls `on_init`, then loops until
the window is asked to close: each frame it processes input events, runs
`world.update()`, presents the renderer's batch and calls `on_update`,
sleeping to keep to the frame rate. Finally it calls `on_exit` and closes
the window (the window is closed even if an exception escapes).

## Entities, components and systems

```python
from saltengine.component import ComponentType, FieldType
from saltengine.ecs import World
from saltengine.entity import Entity
from saltengine.system import System

world = World()

position = ComponentType()
position.add_field(FieldType.FLOAT, "x")
position.add_field(FieldType.FLOAT, "y")
world.components.add_component_type(position, "position")

def drift(entity_id):
    comp = world.entities.entity(entity_id).component("position")
    comp.set_field("x", comp.get_field("x") + 0.01)

world.systems.add_system(System(drift), "drift")

template = Entity(world)
template.add_component("position")
template.add_system("drift")
entity_id = world.entities.add_entity(template, "player")

world.update()  # runs every attached system on every live entity
```

- `add_component_type` stores a copy of the type; `add_entity` stores a
  copy of the entity and creates one component instance for each marked
  component type. Field values start at `0`, `0.0` or `""`.
- `set_field` converts the value to the field's type (`int`, `float`,
  `str`).
- `World.update` visits entities in id order and, for each, its systems in
  id order.
- Capacities are fixed: 100 entities, 10 component types, 200 component
  instances, 20 fields per type, 20 systems, 200 values of each field type.
  Adding to a full container raises `saltengine.containers.ContainerFullError`.
- Allocating fields and components prints `[DEBUG]` lines to standard
  output through `saltengine.log.debug`.

## Drawing

Screen coordinates run from 0 to 1, left to right and top to bottom.
`pix_x(px, width)` and `pix_y(px, height)` turn pixel counts into them.

```python
from saltengine.color import Color

renderer = app.renderer
renderer.textures.load_texture("smile", "smile.png")   # returns (width, height)
renderer.draw_sprite(0.1, 0.1, 0.2, 0.2, "smile", Color(255, 128, 0))
renderer.draw_sprite(0.5, 0.5, 0.1, 0.1, Color.from_hex("#00ff0080"))
```

- `TextureManager` holds up to 16 images; slot 0 is a white 1x1 `_blank`.
  Loading a name twice raises `ValueError`; an unknown name draws with
  slot 0.
- `Batch` holds up to 1024 quads per frame; further quads are dropped
  (`add_quad` returns `False`).
- `Color` channels are integers 0..255 (clamped), default opaque white.
  `Color.from_hex` takes `RRGGBB` or `RRGGBBAA`, with or without `#`, and
  raises `ValueError` otherwise.

### Bitmap fonts

A font is a folder `<name>/` holding `<name>.txt` and `<name>.png`. The
first text line is `<columns>x<rows>`; each further line lists the
characters of one row of the glyph grid in the image.

```python
renderer.fonts.add_font("fonts/mono", renderer.textures)
renderer.draw_text(0.0, 0.0, 1.0, 0.5, 0.05, "Hello\nworld", "mono")
```

`draw_text` wraps at the right edge of its box and stops at the bottom;
wrapped and new lines restart at the left edge of the screen.

## Input

```python
from saltengine.input import Key, MouseButton

if app.input.is_key_pressed(Key.SPACE):
    ...
if app.input.is_mouse_button_pressed(MouseButton.LEFT):
    x, y = app.input.mouse_x(), app.input.mouse_y()
```

`to_pygame_key` maps a `Key` to pygame's constant; keys without one are
never reported as pressed.

## What it does not do

Drawing is done by pygame surface blits, not shaders: quads are axis-aligned
rectangles, scaled and colour-multiplied. There is no sound, no scene or
asset file format beyond the font folder described above, and no bundled
textures or fonts.