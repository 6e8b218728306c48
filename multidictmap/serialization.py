"""Conversion of a MultiMap to and from plain mappings and JSON.

A map is represented as a mapping from each key to the list of its values.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, Hashable, TypeVar

from multidictmap.multimap import MultiMap

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

__all__ = ["to_mapping", "from_mapping", "to_json", "from_json"]


def to_mapping(multimap: MultiMap[K, V]) -> dict[K, list[V]]:
    """Return a dict mapping each key to a copy of its list of values."""
    return {key: list(values) for key, values in multimap.iter_all()}


def _as_sequence(key: Any, values: Any) -> list[Any]:
    if isinstance(values, (str, bytes, bytearray, Mapping)) or not isinstance(
        values, Iterable
    ):
        raise TypeError(
            f"expected a sequence of values for key {key!r}, "
            f"got {type(values).__name__}"
        )
    return list(values)


def from_mapping(mapping: Mapping[K, Iterable[V]]) -> MultiMap[K, V]:
    """Build a map from a mapping of keys to sequences of values.

    Raises TypeError if the argument is not a mapping or a value is not
    a sequence.
    """
    if not isinstance(mapping, Mapping):
        raise TypeError("expected a map")
    result: MultiMap[K, V] = MultiMap()
    for key, values in mapping.items():
        result.remove(key)
        result.insert_many(key, _as_sequence(key, values))
    return result


def to_json(multimap: MultiMap[Any, Any]) -> str:
    """Serialise the map as a JSON object of keys to arrays of values."""
    return json.dumps(to_mapping(multimap))


def from_json(text: str) -> MultiMap[str, Any]:
    """Parse a JSON object of keys to arrays of values into a map.

    Raises ValueError if the document is not such an object. A key that
    appears more than once keeps its last array.
    """
    document = json.loads(text)
    if not isinstance(document, dict):
        raise ValueError("expected a map")
    for key, values in document.items():
        if not isinstance(values, list):
            raise ValueError(f"expected an array of values for key {key!r}")
    return from_mapping(document)