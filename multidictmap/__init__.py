"""A map that stores multiple values per key, in insertion order, with entries and JSON conversion."""

__version__ = "0.10.1"

__all__ = ["builders", "core", "entry", "multimap", "serialization"]