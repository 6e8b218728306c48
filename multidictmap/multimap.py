"""The full multimap: iteration, filtering, bulk insertion and comparison."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Hashable, Iterable, Iterator, TypeVar

from multidictmap.core import MultiMapCore

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

__all__ = ["MultiMap"]


class MultiMap(MultiMapCore[K, V]):
    """A map that stores a list of values per key.

    Values keep their insertion order; keys keep the order in which they
    were first inserted. Iterating over the map yields ``(key, values)``
    pairs, where ``values`` is the live list held by the map.
    """

    def keys(self) -> Iterator[K]:
        """Iterate over the keys."""
        return iter(self._store)

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate over each key and its first value.

        Keys that hold no values are skipped.
        """
        for key, values in self._store.items():
            if values:
                yield key, values[0]

    def iter_all(self) -> Iterator[tuple[K, list[V]]]:
        """Iterate over each key and the live list of its values."""
        return iter(self._store.items())

    def flat_items(self) -> Iterator[tuple[K, V]]:
        """Iterate over every key-value pair, one pair per stored value."""
        for key, values in self._store.items():
            for value in values:
                yield key, value

    def retain(self, predicate: Callable[[K, V], bool]) -> None:
        """Keep only the pairs for which ``predicate(key, value)`` is true.

        Keys left without values are removed.
        """
        for key, values in self._store.items():
            values[:] = [value for value in values if predicate(key, value)]
        for key in [key for key, values in self._store.items() if not values]:
            del self._store[key]

    def extend(self, pairs: Iterable[tuple[K, V]] | Mapping[K, V]) -> None:
        """Insert every key-value pair from ``pairs``.

        A mapping contributes its items; another multimap contributes all
        of its values, as with :meth:`extend_vectors`.
        """
        if isinstance(pairs, MultiMapCore):
            self.extend_vectors(pairs)
            return
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        for key, value in list(pairs):
            self.insert(key, value)

    def extend_vectors(
        self,
        iterable: Iterable[tuple[K, Iterable[V]]] | Mapping[K, Iterable[V]] | MultiMapCore[K, V],
    ) -> None:
        """Append each group of values to its key, creating keys as needed.

        Accepts ``(key, values)`` pairs, a mapping of keys to value
        sequences, or another multimap. A key given an empty group is
        still created.
        """
        if isinstance(iterable, MultiMapCore):
            groups: Iterable[tuple[Any, Iterable[Any]]] = iterable._store.items()
        elif isinstance(iterable, Mapping):
            groups = iterable.items()
        else:
            groups = iterable
        for key, values in [(key, list(values)) for key, values in groups]:
            self.insert_many(key, values)

    def copy(self) -> MultiMap[K, V]:
        """Return a copy whose value lists are independent of this map's."""
        duplicate: MultiMap[K, V] = type(self)()
        duplicate._store = {key: list(values) for key, values in self._store.items()}
        return duplicate

    def __iter__(self) -> Iterator[tuple[K, list[V]]]:
        return self.iter_all()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiMapCore):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(
            other.get_vec(key) == values for key, values in self._store.items()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._store!r})"