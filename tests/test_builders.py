import pytest

from multidictmap.builders import from_pairs, from_vectors, multimap
from multidictmap.multimap import MultiMap


def test_macro_single_pair():
    manual = MultiMap()
    manual.insert("key1", 42)
    assert manual == multimap(("key1", 42))


def test_macro_multiple_pairs():
    manual = MultiMap()
    manual.insert("key1", 42)
    manual.insert("key1", 1337)
    manual.insert("key2", 2332)
    built = multimap(("key1", 42), ("key1", 1337), ("key2", 2332))
    assert built == manual
    assert built.get_vec("key1") == [42, 1337]


def test_macro_empty():
    built = multimap()
    assert built.is_empty()
    assert len(built) == 0


def test_macro_dogs_and_cats():
    built = multimap(
        ("dog", "husky"),
        ("dog", "retreaver"),
        ("dog", "shiba inu"),
        ("cat", "cat"),
    )
    assert built.get_vec("dog") == ["husky", "retreaver", "shiba inu"]
    assert built["cat"] == "cat"


def test_macro_rejects_non_pair():
    with pytest.raises(ValueError):
        multimap(("a", 1, 2))


def test_from_iterator():
    built = from_pairs([("foo", 123), ("bar", 456), ("foo", 789)])
    foo_vals = built.get_vec("foo")
    assert 123 in foo_vals
    assert 789 in foo_vals
    assert built.get_vec("foo") == [123, 789]
    assert built.get_vec("bar") == [456]


def test_from_pairs_accepts_generator():
    built = from_pairs((k, k * 2) for k in range(3))
    assert built.get_vec(2) == [4]
    assert len(built) == 3


def test_from_vec_iterator():
    vals = [
        ("foo", [123, 456]),
        ("bar", [234]),
        ("foobar", [567, 678, 789]),
        ("bar", [12, 23, 34]),
    ]
    built = from_vectors(vals)
    assert built.get_vec("foo") == [123, 456]
    assert built.get_vec("bar") == [234, 12, 23, 34]
    assert built.get_vec("foobar") == [567, 678, 789]


def test_from_vectors_copies_input():
    source = [1, 2]
    built = from_vectors([("k", source)])
    source.append(3)
    assert built.get_vec("k") == [1, 2]


def test_from_vectors_empty_group_creates_key():
    built = from_vectors([("k", [])])
    assert built.contains_key("k")
    assert built.get("k") is None