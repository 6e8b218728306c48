import pytest

from multidictmap.entry import OccupiedEntry, VacantEntry


def test_occupied_requires_present_key():
    with pytest.raises(KeyError):
        OccupiedEntry({}, "a")


def test_vacant_requires_absent_key():
    with pytest.raises(ValueError):
        VacantEntry({"a": [1]}, "a")


def test_occupied_get_returns_first():
    store = {"a": [42, 1337]}
    entry = OccupiedEntry(store, "a")
    assert entry.get() == 42
    assert entry.key == "a"


def test_occupied_get_empty_raises():
    entry = OccupiedEntry({"a": []}, "a")
    with pytest.raises(IndexError, match="no values in entry"):
        entry.get()


def test_occupied_set_changes_first():
    store = {"a": [42, 1337]}
    OccupiedEntry(store, "a").set(99)
    assert store["a"] == [99, 1337]


def test_occupied_set_empty_raises():
    entry = OccupiedEntry({"a": []}, "a")
    with pytest.raises(IndexError):
        entry.set(1)


def test_occupied_get_vec_is_live():
    store = {"a": [42]}
    values = OccupiedEntry(store, "a").get_vec()
    values.append(43)
    assert store["a"] == [42, 43]


def test_occupied_insert_appends():
    store = {"a": [42]}
    entry = OccupiedEntry(store, "a")
    entry.insert(43)
    assert store["a"] == [42, 43]


def test_occupied_insert_vec_extends():
    store = {"a": [42]}
    entry = OccupiedEntry(store, "a")
    entry.insert_vec([43, 44])
    assert entry.get_vec() == [42, 43, 44]


def test_occupied_remove_takes_values():
    store = {"a": [42, 43], "b": [1]}
    removed = OccupiedEntry(store, "a").remove()
    assert removed == [42, 43]
    assert "a" not in store
    assert store == {"b": [1]}


def test_occupied_or_insert_ignores_default():
    store = {1: [42]}
    assert OccupiedEntry(store, 1).or_insert(43) == 42
    assert store[1] == [42]


def test_occupied_or_insert_vec_ignores_defaults():
    store = {1: [42]}
    values = OccupiedEntry(store, 1).or_insert_vec([43])
    assert values == [42]
    assert values is store[1]


def test_vacant_insert_creates_single_value():
    store = {}
    result = VacantEntry(store, 2).insert(666)
    assert result == 666
    assert store == {2: [666]}


def test_vacant_insert_vec_creates_values():
    store = {}
    values = VacantEntry(store, 2).insert_vec(iter([1, 2, 3]))
    assert values == [1, 2, 3]
    assert values is store[2]


def test_vacant_or_insert_uses_default():
    store = {}
    assert VacantEntry(store, 2).or_insert(666) == 666
    assert store[2] == [666]


def test_vacant_or_insert_vec_uses_defaults():
    store = {}
    values = VacantEntry(store, 2).or_insert_vec([667])
    values.append(668)
    assert store[2] == [667, 668]