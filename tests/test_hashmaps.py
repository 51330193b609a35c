import pytest

from algodrills.hashmaps import ArrayHashMap, ChainedHashMap, Pair


def test_array_map_put_get_remove():
    table = ArrayHashMap()
    table.put(1, "one")
    table.put(2, "two")
    table.put(3, "three")
    table.remove(2)
    assert table.value_set() == ["one", "three"]
    assert table.key_set() == [1, 3]
    assert table.get(3) == "three"


def test_array_map_missing_key_raises():
    table = ArrayHashMap()
    with pytest.raises(KeyError):
        table.get(7)


def test_array_map_colliding_key_replaces_bucket():
    table = ArrayHashMap()
    table.put(4, "four")
    table.put(104, "nob")
    assert table.hash_func(104) == table.hash_func(4)
    assert table.pair_set() == [Pair(104, "nob")]
    assert len(table) == 1


def test_array_map_remove_on_empty_bucket_is_harmless():
    table = ArrayHashMap()
    table.put(5, "continent")
    table.remove(6)
    assert table.key_set() == [5]


def test_array_map_pair_set_is_a_copy():
    table = ArrayHashMap()
    table.put(2, "hello")
    pairs = table.pair_set()
    pairs[0].value = "changed"
    assert table.get(2) == "hello"


def test_chained_map_stores_example_entries():
    table = ChainedHashMap()
    entries = {2: "hello", 4: "world", 8: "mortality", 12: "rob"}
    for key, value in entries.items():
        table.put(key, value)
    assert table.get(4) == "world"
    assert sorted(table.key_set()) == sorted(entries)
    assert sorted(table.value_set()) == sorted(entries.values())
    assert len(table) == 4
    assert table.capacity == ChainedHashMap.INITIAL_CAPACITY


def test_chained_map_pair_order_matches_key_and_value_sets():
    table = ChainedHashMap()
    for key in range(10):
        table.put(key, f"v{key}")
    pairs = table.pair_set()
    assert [pair.key for pair in pairs] == table.key_set()
    assert [pair.value for pair in pairs] == table.value_set()


def test_chained_map_grows_past_threshold_and_keeps_entries():
    table = ChainedHashMap()
    for key in range(20):
        table.put(key, str(key))
    assert table.capacity > ChainedHashMap.INITIAL_CAPACITY
    assert all(table.get(key) == str(key) for key in range(20))
    assert len(table) == 20


def test_chained_map_load_factor_is_size_over_capacity():
    table = ChainedHashMap()
    for key in (1, 2, 3):
        table.put(key, "x")
    assert table.load_factor() == pytest.approx(ChainedHashMap.LOAD_THRESHOLD)
    assert table.load_factor() == len(table) / table.capacity


def test_chained_map_update_keeps_size():
    table = ChainedHashMap()
    table.put(6, "first")
    table.put(6, "second")
    assert table.get(6) == "second"
    assert len(table) == 1


def test_chained_map_remove():
    table = ChainedHashMap()
    table.put(4, "a")
    table.put(8, "b")
    table.remove(4)
    table.remove(99)
    assert table.key_set() == [8]
    with pytest.raises(KeyError):
        table.get(4)