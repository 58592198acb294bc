"""Systems: functions run once per frame for every entity that uses them."""

from __future__ import annotations

from collections.abc import Callable

from saltengine.component import SYSTEMS_MAX
from saltengine.containers import NameIdContainer

SystemFunction = Callable[[int], None]


class System:
    """Wraps a function called with the id of each entity it runs on."""

    def __init__(self, function: SystemFunction | None = None) -> None:
        self.function = function

    def set_function(self, function: SystemFunction) -> None:
        """Replace the function this system runs."""
        self.function = function

    def run(self, entity_id: int) -> None:
        """Run the system on one entity."""
        if self.function is None:
            raise RuntimeError("system has no function")
        self.function(entity_id)


class SystemPack:
    """Named registry of systems."""

    def __init__(self) -> None:
        self._systems: NameIdContainer[System] = NameIdContainer(SYSTEMS_MAX)

    def add_system(self, system: System, name: str = "") -> int:
        """Register *system* under *name*; return its id."""
        return self._systems.add(system, name)

    def system(self, key: str | int) -> System | None:
        """Return the system with this name or id, or None if removed."""
        return self._systems.get(key)

    def remove_system(self, key: str | int) -> None:
        """Remove the system with this name or id."""
        self._systems.remove(key)

    def max_systems(self) -> int:
        """Maximum number of systems."""
        return self._systems.size

    def system_id(self, name: str) -> int:
        """Return the id of the system called *name*."""
        return self._systems.id_of(name)

    def system_name(self, system_id: int) -> str:
        """Return the name of the system with id *system_id*."""
        return self._systems.name_of(system_id)