"""Convenience constructors for building a MultiMap in one call."""

from __future__ import annotations

from typing import Hashable, Iterable, TypeVar

from multidictmap.multimap import MultiMap

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

__all__ = ["multimap", "from_pairs", "from_vectors"]


def multimap(*args: tuple[K, V]) -> MultiMap[K, V]:
    """Build a map from ``(key, value)`` pairs given as arguments.

    Pairs are inserted in order, so repeated keys collect their values.
    """
    return from_pairs(args)


def from_pairs(pairs: Iterable[tuple[K, V]]) -> MultiMap[K, V]:
    """Build a map by inserting every ``(key, value)`` pair in order."""
    result: MultiMap[K, V] = MultiMap()
    for key, value in pairs:
        result.insert(key, value)
    return result


def from_vectors(iterable: Iterable[tuple[K, Iterable[V]]]) -> MultiMap[K, V]:
    """Build a map from ``(key, values)`` groups.

    Groups sharing a key are concatenated in order; the given value
    sequences are copied, never stored as they are.
    """
    result: MultiMap[K, V] = MultiMap()
    for key, values in iterable:
        result.insert_many(key, list(values))
    return result