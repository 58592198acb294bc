"""Entities: sets of component and system flags, and their registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from saltengine.component import ENTITIES_MAX, ComponentInstance
from saltengine.containers import NameIdContainer

if TYPE_CHECKING:
    from saltengine.ecs import World


class Entity:
    """Marks which component types and systems an entity uses."""

    def __init__(self, world: World) -> None:
        self._world = world
        self._components: set[int] = set()
        self._systems: set[int] = set()

    def _copy(self, world: World) -> Entity:
        clone = Entity(world)
        clone._components = set(self._components)
        clone._systems = set(self._systems)
        return clone

    def reset(self) -> None:
        """Clear all component and system flags."""
        self._components.clear()
        self._systems.clear()

    def add_component(self, name: str) -> None:
        """Mark the component type called *name* as used."""
        self._components.add(self._world.components.component_type_id(name))

    def add_system(self, name: str) -> None:
        """Mark the system called *name* as used."""
        self._systems.add(self._world.systems.system_id(name))

    def remove_component(self, name: str) -> None:
        """Unmark the component type called *name*."""
        self._components.discard(self._world.components.component_type_id(name))

    def remove_system(self, name: str) -> None:
        """Unmark the system called *name*."""
        self._systems.discard(self._world.systems.system_id(name))

    def has_component(self, key: str | int) -> bool:
        """Whether the component type with this name or id is marked."""
        if isinstance(key, str):
            key = self._world.components.component_type_id(key)
        return key in self._components

    def has_system(self, key: str | int) -> bool:
        """Whether the system with this name or id is marked."""
        if isinstance(key, str):
            key = self._world.systems.system_id(key)
        return key in self._systems

    def component(self, name: str) -> ComponentInstance | None:
        """Return this stored entity's instance of the component type *name*."""
        entity_id = self._world.entities.entity_id(self)
        return self._world.components.component(name, entity_id)


class EntityPack:
    """Named registry of entities; adding one creates its component instances."""

    def __init__(self, world: World) -> None:
        self._world = world
        self._entities: NameIdContainer[Entity] = NameIdContainer(ENTITIES_MAX)

    def add_entity(self, entity: Entity, name: str = "") -> int:
        """Store a copy of *entity* and create its components; return its id."""
        stored = entity._copy(self._world)
        entity_id = self._entities.add(stored, name)
        for type_id in sorted(stored._components):
            self._world.components.add_component(type_id, entity_id)
        return entity_id

    def entity(self, key: str | int) -> Entity | None:
        """Return the entity with this name or id, or None if removed."""
        return self._entities.get(key)

    def remove_entity(self, key: str | int) -> None:
        """Remove the entity with this name or id."""
        self._entities.remove(key)

    def max_entities(self) -> int:
        """Maximum number of entities."""
        return self._entities.size

    def entity_id(self, key: str | Entity) -> int:
        """Return the id for an entity name or a stored entity object."""
        return self._entities.id_of(key)

    def entity_name(self, entity_id: int) -> str:
        """Return the name of the entity with id *entity_id*."""
        return self._entities.name_of(entity_id)