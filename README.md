# multidictmap

A map that holds several values under each key.

Values under a key keep their insertion order. Keys keep the order in which they were first inserted. The same key–value pair may be stored more than once. A key may also be present with no values at all.

The package has no dependencies outside the standard library.

## Installation

```
pip install multidictmap
```

To run the test suite:

```
pip install "multidictmap[test]"
pytest
```

## Usage

```python
from multidictmap.builders import multimap, from_pairs, from_vectors

queries = from_pairs([
    ("urls", "https://example.com/a"),
    ("urls", "https://example.com/b"),
    ("id", "42"),
])

"urls" in queries               # True (same as queries.contains_key("urls"))
queries.get("urls")             # "https://example.com/a"  (the first value)
queries.get_vec("urls")         # ["https://example.com/a", "https://example.com/b"]
queries["id"]                   # "42"
len(queries)                    # 2  (number of distinct keys)
queries.is_vec("urls")          # True: more than one value
queries.is_empty()              # False
```

`get()` returns `None` for a key that is missing or has no values. `get_vec()` returns the map's own list for the key, so changes to it change the map. It returns `None` for a missing key.

`multimap()` takes `(key, value)` pairs as separate arguments:

```python
m = multimap(("dog", "husky"), ("dog", "shiba inu"), ("cat", "cat"))
m.get_vec("dog")                # ["husky", "shiba inu"]
```

`from_vectors()` takes `(key, values)` pairs. It copies each list and joins the lists of a repeated key:

```python
m = from_vectors([("bar", [234]), ("bar", [12, 23])])
m.get_vec("bar")                # [234, 12, 23]
```

You can also build the map directly with `MultiMap()` from `multidictmap.multimap`.

### Inserting, changing and removing

```python
m.insert("k", 1)
m.insert_many("k", [2, 3])
m.set_first("k", 10)            # True; False if "k" is missing or has no values
m.remove("k")                   # returns [10, 2, 3]; None if the key is absent
m.retain(lambda key, value: value > 10)   # drops values, then keys left empty
m.extend([("a", 1), ("a", 2)])  # (key, value) pairs, a dict, or another MultiMap
m.extend_vectors([("b", [1, 2])])  # (key, values) pairs, a dict of lists, or a MultiMap
m.clear()
```

`insert_many` and `extend_vectors` create the key even when they are given no values.

`copy()` returns a new map whose value lists are separate from the original's.

### Iteration

- `keys()` gives each key once.
- `items()` gives each key with its first value. A key with no values is skipped.
- `iter_all()`, and plain iteration over the map, give each key with its list of values.
- `flat_items()` gives every key–value pair, one per stored value.

### Equality

Two maps are equal if they have the same keys and each key holds an equal list of values in the same order. A key with no values is not equal to a missing key. Maps cannot be hashed.

### Entries

`entry(key)` returns an `OccupiedEntry` or a `VacantEntry` for in-place work:

```python
m.entry("k").or_insert(43)          # the first value, inserting 43 if "k" is absent
m.entry("k").or_insert_vec([1, 2])  # the list of values, inserting [1, 2] if absent
```

An `OccupiedEntry` has these methods:

- `get()` and `set(value)` read and replace the first value. Both raise `IndexError` if the key has no values.
- `get_vec()` returns the list of values.
- `insert(value)` and `insert_vec(values)` append values.
- `remove()` takes the key out of the map and returns its values.

A `VacantEntry` has `insert(value)` and `insert_vec(values)`. Both store the key.

### Serialization

```python
from multidictmap.serialization import to_mapping, from_mapping, to_json, from_json

plain = to_mapping(m)           # a dict of key -> copy of its list of values
back = from_mapping(plain)      # TypeError unless each value is a non-string sequence
text = to_json(m)               # '{"k": [1, 2], ...}'
same = from_json(text)
```

`from_json` raises `ValueError` if the document is not an object whose values are all arrays. The JSON form follows the `json` module's rules, so non-string keys come back as strings.

### Errors

Looking up `m[key]` for a missing key raises `KeyError("no entry found for key")`. The same lookup for a key that is present but has no values raises `KeyError("no value found for key")`.

## What it does not do

The map lives in memory only. Saving it is left to you, for example by writing the output of `to_json`. The map has no locking, so code that shares it between threads must guard it itself.