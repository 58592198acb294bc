"""A small 2D game engine on pygame: an entity-component-system world, batched sprite and bitmap-font drawing, input and a frame loop."""

__version__ = "0.1.0"