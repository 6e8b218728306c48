"""Views onto a single key of a multimap, for in-place manipulation."""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterable, TypeVar, Union

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

__all__ = ["OccupiedEntry", "VacantEntry", "Entry"]


class OccupiedEntry(Generic[K, V]):
    """A view onto a key that is present in the map."""

    __slots__ = ("_store", "_key")

    def __init__(self, store: dict[K, list[V]], key: K) -> None:
        if key not in store:
            raise KeyError(key)
        self._store = store
        self._key = key

    @property
    def key(self) -> K:
        """The key this entry refers to."""
        return self._key

    def get(self) -> V:
        """Return the first value stored under the key.

        Raises IndexError if the key has no values.
        """
        values = self._store[self._key]
        if not values:
            raise IndexError("no values in entry")
        return values[0]

    def set(self, value: V) -> None:
        """Replace the first value stored under the key.

        Raises IndexError if the key has no values.
        """
        values = self._store[self._key]
        if not values:
            raise IndexError("no values in entry")
        values[0] = value

    def get_vec(self) -> list[V]:
        """Return the live list of values stored under the key."""
        return self._store[self._key]

    def insert(self, value: V) -> None:
        """Append a value to the key's values."""
        self._store[self._key].append(value)

    def insert_vec(self, values: Iterable[V]) -> None:
        """Append several values to the key's values."""
        self._store[self._key].extend(values)

    def remove(self) -> list[V]:
        """Remove the key from the map and return its values."""
        return self._store.pop(self._key)

    def or_insert(self, default: V) -> V:
        """Return the first value; the default is ignored as the key exists."""
        return self.get()

    def or_insert_vec(self, defaults: Iterable[V]) -> list[V]:
        """Return the key's values; the defaults are ignored as the key exists."""
        return self.get_vec()

    def __repr__(self) -> str:
        return f"OccupiedEntry({self._key!r}: {self._store[self._key]!r})"


class VacantEntry(Generic[K, V]):
    """A view onto a key that is absent from the map."""

    __slots__ = ("_store", "_key")

    def __init__(self, store: dict[K, list[V]], key: K) -> None:
        if key in store:
            raise ValueError(f"key already present: {key!r}")
        self._store = store
        self._key = key

    @property
    def key(self) -> K:
        """The key this entry refers to."""
        return self._key

    def insert(self, value: V) -> V:
        """Store the key with a single value and return that value."""
        self._store[self._key] = [value]
        return value

    def insert_vec(self, values: Iterable[V]) -> list[V]:
        """Store the key with the given values and return the live list."""
        stored = list(values)
        self._store[self._key] = stored
        return stored

    def or_insert(self, default: V) -> V:
        """Store the default as the key's only value and return it."""
        return self.insert(default)

    def or_insert_vec(self, defaults: Iterable[V]) -> list[V]:
        """Store the defaults as the key's values and return the live list."""
        return self.insert_vec(defaults)

    def __repr__(self) -> str:
        return f"VacantEntry({self._key!r})"


Entry = Union[OccupiedEntry[Any, Any], VacantEntry[Any, Any]]