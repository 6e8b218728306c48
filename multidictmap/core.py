"""The basic map storing a list of values per key."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Optional, TypeVar

from multidictmap.entry import Entry, OccupiedEntry, VacantEntry

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

__all__ = ["MultiMapCore"]


class MultiMapCore(Generic[K, V]):
    """A mapping from keys to lists of values, kept in insertion order.

    A key may be present with no values, and identical key-value pairs
    may be stored more than once.
    """

    def __init__(self) -> None:
        self._store: dict[K, list[V]] = {}

    def insert(self, key: K, value: V) -> None:
        """Append a value to the key's values, creating the key if needed."""
        self._store.setdefault(key, []).append(value)

    def insert_many(self, key: K, values: Iterable[V]) -> None:
        """Append several values to the key's values, creating the key if needed."""
        self._store.setdefault(key, []).extend(values)

    def contains_key(self, key: K) -> bool:
        """Return True if the key is present."""
        return key in self._store

    def remove(self, key: K) -> Optional[list[V]]:
        """Remove the key and return its values, or None if it was absent."""
        return self._store.pop(key, None)

    def get(self, key: K) -> Optional[V]:
        """Return the key's first value, or None if absent or without values."""
        values = self._store.get(key)
        if not values:
            return None
        return values[0]

    def set_first(self, key: K, value: V) -> bool:
        """Replace the key's first value.

        Returns False, changing nothing, if the key is absent or has no values.
        """
        values = self._store.get(key)
        if not values:
            return False
        values[0] = value
        return True

    def get_vec(self, key: K) -> Optional[list[V]]:
        """Return the live list of the key's values, or None if absent."""
        return self._store.get(key)

    def is_vec(self, key: K) -> bool:
        """Return True if the key holds more than one value."""
        values = self._store.get(key)
        return values is not None and len(values) > 1

    def is_empty(self) -> bool:
        """Return True if the map has no keys."""
        return not self._store

    def clear(self) -> None:
        """Remove every key."""
        self._store.clear()

    def entry(self, key: K) -> Entry:
        """Return a view onto the key for in-place manipulation."""
        if key in self._store:
            return OccupiedEntry(self._store, key)
        return VacantEntry(self._store, key)

    def __getitem__(self, key: K) -> V:
        try:
            values = self._store[key]
        except KeyError:
            raise KeyError("no entry found for key") from None
        if not values:
            raise KeyError("no value found for key")
        return values[0]

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)