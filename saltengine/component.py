"""Component types, component instances and the store holding their field values."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass
from typing import Any

from saltengine import log
from saltengine.containers import NameIdContainer, PackContainer

ENTITIES_MAX = 100
COMPONENTS_MAX = 200
COMPONENT_TYPES_MAX = 10
FIELDS_IN_COMPONENT_MAX = 20
SYSTEMS_MAX = 20

INT_FIELDS_MAX = 200
FLOAT_FIELDS_MAX = 200
STRING_FIELDS_MAX = 200


class FieldType(enum.Enum):
    """Kinds of value a component field can hold."""

    INT = 0
    FLOAT = 1
    STRING = 2


_DEFAULTS: dict[FieldType, Any] = {
    FieldType.INT: 0,
    FieldType.FLOAT: 0.0,
    FieldType.STRING: "",
}

_CONVERTERS = {
    FieldType.INT: int,
    FieldType.FLOAT: float,
    FieldType.STRING: str,
}


@dataclass
class _Cell:
    """A mutable slot holding one field value."""

    value: Any


class ComponentType:
    """A named set of typed fields, e.g. ``position`` with ``x`` and ``y``."""

    def __init__(self) -> None:
        self.fields: NameIdContainer[FieldType] = NameIdContainer(FIELDS_IN_COMPONENT_MAX)

    def add_field(self, field_type: FieldType, name: str) -> int:
        """Add a field and return its id."""
        return self.fields.add(FieldType(field_type), name)

    def field(self, key: str | int) -> FieldType | None:
        """Return the type of the field with this name or id, or None if removed."""
        return self.fields.get(key)

    def remove_field(self, key: str | int) -> None:
        """Remove the field with this name or id."""
        self.fields.remove(key)

    def max_fields(self) -> int:
        """Maximum number of fields a component type can hold."""
        return self.fields.size

    def field_id(self, name: str) -> int:
        """Return the id of the field called *name*."""
        return self.fields.id_of(name)

    def field_name(self, field_id: int) -> str:
        """Return the name of the field with id *field_id*."""
        return self.fields.name_of(field_id)


class ComponentInstance:
    """One component attached to an entity, with its own field values."""

    def __init__(self, pack: ComponentPack, component_type: ComponentType) -> None:
        self.component_type = component_type
        self._pack = pack
        self.value_ids: dict[int, int] = {
            field_id: pack.alloc_field(field_type)
            for field_id, field_type in component_type.fields
        }

    def _cell(self, name: str) -> tuple[FieldType, _Cell]:
        field_type = self.component_type.field(name)
        if field_type is None:
            raise KeyError(f"field {name!r} was removed from its component type")
        field_id = self.component_type.field_id(name)
        try:
            slot = self.value_ids[field_id]
        except KeyError:
            raise KeyError(f"field {name!r} has no value in this instance") from None
        cell = self._pack._store(field_type).get(slot)
        if cell is None:
            raise KeyError(f"value of field {name!r} is no longer stored")
        return field_type, cell

    def get_field(self, name: str) -> Any:
        """Return the value of the field called *name*."""
        return self._cell(name)[1].value

    def set_field(self, name: str, value: Any) -> None:
        """Set the field called *name*, converting to the field's type."""
        field_type, cell = self._cell(name)
        cell.value = _CONVERTERS[field_type](value)


class ComponentPack:
    """Registry of component types and storage of all component instances."""

    def __init__(self) -> None:
        self.component_types: NameIdContainer[ComponentType] = NameIdContainer(
            COMPONENT_TYPES_MAX
        )
        self.instances: PackContainer[ComponentInstance] = PackContainer(COMPONENTS_MAX)
        self.int_fields: PackContainer[_Cell] = PackContainer(INT_FIELDS_MAX)
        self.float_fields: PackContainer[_Cell] = PackContainer(FLOAT_FIELDS_MAX)
        self.string_fields: PackContainer[_Cell] = PackContainer(STRING_FIELDS_MAX)
        self._entity_instances: dict[tuple[int, int], int] = {}

    def _store(self, field_type: FieldType) -> PackContainer[_Cell]:
        return {
            FieldType.INT: self.int_fields,
            FieldType.FLOAT: self.float_fields,
            FieldType.STRING: self.string_fields,
        }[FieldType(field_type)]

    def alloc_field(self, field_type: FieldType) -> int:
        """Allocate a default value for a field of *field_type*; return its slot."""
        field_type = FieldType(field_type)
        slot = self._store(field_type).add(_Cell(_DEFAULTS[field_type]))
        log.debug(f"field of type {field_type.value} added to slot {slot}")
        return slot

    def add_component_type(self, component_type: ComponentType, name: str) -> int:
        """Register a copy of *component_type* under *name*; return its id."""
        return self.component_types.add(copy.deepcopy(component_type), name)

    def component_type(self, key: str | int) -> ComponentType | None:
        """Return the component type with this name or id."""
        return self.component_types.get(key)

    def max_component_types(self) -> int:
        """Maximum number of component types."""
        return self.component_types.size

    def component_type_id(self, name: str) -> int:
        """Return the id of the component type called *name*."""
        return self.component_types.id_of(name)

    def component_type_name(self, type_id: int) -> str:
        """Return the name of the component type with id *type_id*."""
        return self.component_types.name_of(type_id)

    def _type_id(self, component_type: str | int) -> int:
        if isinstance(component_type, str):
            return self.component_type_id(component_type)
        return component_type

    def add_component(self, component_type: str | int, entity_id: int) -> int:
        """Create an instance of a component type for an entity; return its slot."""
        type_id = self._type_id(component_type)
        ctype = self.component_types.get(type_id)
        if ctype is None:
            raise KeyError(f"no component type {component_type!r}")
        instance_id = self.instances.add(ComponentInstance(self, ctype))
        log.debug(
            f" component type {component_type} added to {entity_id} slot {instance_id}"
        )
        self._entity_instances[(entity_id, type_id)] = instance_id
        return instance_id

    def component(
        self, component_type: str | int, entity_id: int
    ) -> ComponentInstance | None:
        """Return the entity's instance of a component type, or None."""
        type_id = self._type_id(component_type)
        instance_id = self._entity_instances.get((entity_id, type_id))
        if instance_id is None:
            return None
        return self.instances.get(instance_id)