"""Fixed-capacity slot containers, optionally addressable by name."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

_UNNAMED_PREFIX = "No_Name_"


class ContainerFullError(Exception):
    """Raised when an item is added to a container with no free slot."""


class PackContainer(Generic[T]):
    """A fixed number of slots; new items take the lowest free slot.

    Items never move: an item's id is its slot number and stays valid
    until the slot is freed.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"container size must be positive, got {size}")
        self.size = size
        self._slots: list[T | None] = [None] * size
        self._allocated: list[bool] = [False] * size

    def _check_id(self, item_id: int) -> None:
        if not 0 <= item_id < self.size:
            raise IndexError(f"slot {item_id} is outside 0..{self.size - 1}")

    def add(self, item: T) -> int:
        """Place *item* in the first free slot and return that slot's id."""
        try:
            item_id = self._allocated.index(False)
        except ValueError:
            raise ContainerFullError(
                f"no free slot among {self.size}"
            ) from None
        self._allocated[item_id] = True
        self._slots[item_id] = item
        return item_id

    def get(self, item_id: int) -> T | None:
        """Return the item in slot *item_id*, or None if the slot is free."""
        self._check_id(item_id)
        if self._allocated[item_id]:
            return self._slots[item_id]
        return None

    def remove(self, item_id: int) -> None:
        """Free slot *item_id*."""
        self._check_id(item_id)
        self._allocated[item_id] = False
        self._slots[item_id] = None

    def index_of(self, item: T) -> int:
        """Return the slot id holding this very object."""
        for item_id, stored in self:
            if stored is item:
                return item_id
        raise ValueError("item is not stored in this container")

    def __len__(self) -> int:
        return sum(self._allocated)

    def __iter__(self) -> Iterator[tuple[int, T]]:
        """Yield (id, item) pairs of occupied slots in id order."""
        for item_id, (used, item) in enumerate(zip(self._allocated, self._slots)):
            if used:
                yield item_id, item  # type: ignore[misc]


class NameIdContainer(Generic[T]):
    """A PackContainer whose items also carry a name.

    Items without a name are called ``No_Name_<id>``. A name or id keeps
    the first association it was given.
    """

    def __init__(self, size: int) -> None:
        self._items: PackContainer[T] = PackContainer(size)
        self._name_to_id: dict[str, int] = {}
        self._id_to_name: dict[int, str] = {}

    @property
    def size(self) -> int:
        """Capacity of the container."""
        return self._items.size

    def add(self, item: T, name: str = "") -> int:
        """Add *item* under *name* and return its id."""
        item_id = self._items.add(item)
        if not name:
            name = f"{_UNNAMED_PREFIX}{item_id}"
        self._name_to_id.setdefault(name, item_id)
        self._id_to_name.setdefault(item_id, name)
        return item_id

    def _resolve(self, key: str | int) -> int:
        if isinstance(key, str):
            try:
                return self._name_to_id[key]
            except KeyError:
                raise KeyError(f"no item named {key!r}") from None
        return key

    def get(self, key: str | int) -> T | None:
        """Return the item with this name or id, or None if its slot is free."""
        return self._items.get(self._resolve(key))

    def remove(self, key: str | int) -> None:
        """Free the slot of the item with this name or id."""
        self._items.remove(self._resolve(key))

    def id_of(self, key: str | T) -> int:
        """Return the id for a name, or for a stored item object."""
        if isinstance(key, str):
            return self._resolve(key)
        return self._items.index_of(key)

    def name_of(self, item_id: int) -> str:
        """Return the name given to *item_id*."""
        try:
            return self._id_to_name[item_id]
        except KeyError:
            raise KeyError(f"no name for id {item_id}") from None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[int, T]]:
        """Yield (id, item) pairs of occupied slots in id order."""
        return iter(self._items)