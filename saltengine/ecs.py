"""The world holding entities, component storage and systems."""

from __future__ import annotations

from saltengine.component import ComponentPack
from saltengine.entity import EntityPack
from saltengine.system import SystemPack


class World:
    """Entities, components and systems, updated together each frame."""

    def __init__(self) -> None:
        self.entities = EntityPack(self)
        self.components = ComponentPack()
        self.systems = SystemPack()

    def update(self) -> None:
        """Run every system on every entity that uses it, entities in id order."""
        for entity_id in range(self.entities.max_entities()):
            for system_id in range(self.systems.max_systems()):
                entity = self.entities.entity(entity_id)
                if entity is None or not entity.has_system(system_id):
                    continue
                system = self.systems.system(system_id)
                if system is not None:
                    system.run(entity_id)