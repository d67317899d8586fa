import pytest

from berlint.hashmap import HashMap, fnv1a_hash, grow_capacity


def _int_value(raw):
    return str(int.from_bytes(raw, "little"))


def test_fnv1a_empty_is_offset_basis():
    assert fnv1a_hash(b"") == 2166136261


def test_fnv1a_fits_32_bits_and_is_deterministic():
    data = b"some longer key material"
    assert fnv1a_hash(data) == fnv1a_hash(bytes(data))
    assert 0 <= fnv1a_hash(data) < 2**32


def test_fnv1a_differs_for_different_input():
    assert fnv1a_hash(b"ab") != fnv1a_hash(b"ba")


def test_grow_capacity_start_and_doubling():
    assert grow_capacity(0) == 8
    assert grow_capacity(8) == 2 * 8
    assert grow_capacity(64) == 2 * 64


def test_grow_capacity_is_capped():
    assert grow_capacity(2**30) == 2147483647


def test_insert_and_get():
    table = HashMap(8, 4)
    assert table.insert(b"apple", b"\x01\x00\x00\x00") is True
    assert table.get(b"apple") == b"\x01\x00\x00\x00"


def test_values_and_keys_are_padded():
    table = HashMap(8, 4)
    table.insert("k", b"\x07")
    assert table.get(b"k\0\0\0\0\0\0\0") == b"\x07\x00\x00\x00"


def test_insert_existing_key_overwrites():
    table = HashMap(8, 4)
    table.insert(b"key", b"\x01")
    assert table.insert(b"key", b"\x02") is False
    assert table.get(b"key") == b"\x02\x00\x00\x00"
    assert len(table) == 1


def test_missing_key_returns_none():
    table = HashMap(8, 4)
    assert table.get(b"nothing") is None
    table.insert(b"a", b"\x01")
    assert table.get(b"b") is None


def test_many_inserts_survive_growth():
    table = HashMap(8, 4)
    for n in range(100):
        table.insert(f"k{n}", n.to_bytes(4, "little"))
    assert len(table) == 100
    assert table.capacity >= 100
    for n in range(100):
        assert table.get(f"k{n}") == n.to_bytes(4, "little")


def test_remove_hides_entry():
    table = HashMap(8, 4)
    table.insert(b"a", b"\x01")
    table.insert(b"b", b"\x02")
    table.remove(b"a")
    assert table.get(b"a") is None
    assert table.get(b"b") == b"\x02\x00\x00\x00"


def test_reinsert_after_remove_is_new():
    table = HashMap(8, 4)
    table.insert(b"a", b"\x01")
    table.remove(b"a")
    assert table.insert(b"a", b"\x03") is True
    assert table.get(b"a") == b"\x03\x00\x00\x00"


def test_remove_on_empty_map_is_harmless():
    table = HashMap(8, 4)
    table.remove(b"a")
    assert len(table) == 0
    assert table.get(b"a") is None


def test_clear_empties_map():
    table = HashMap(8, 4)
    for n in range(10):
        table.insert(f"x{n}", b"\x01")
    capacity = table.capacity
    table.clear()
    assert len(table) == 0
    assert table.capacity == capacity
    assert all(table.get(f"x{n}") is None for n in range(10))


def test_zero_key_rejected():
    table = HashMap(4, 4)
    with pytest.raises(ValueError):
        table.insert(b"\0\0\0\0", b"\x01")


def test_oversized_key_and_value_rejected():
    table = HashMap(2, 2)
    with pytest.raises(ValueError):
        table.insert(b"abc", b"\x01")
    with pytest.raises(ValueError):
        table.insert(b"ab", b"\x01\x02\x03")


def test_bad_sizes_rejected():
    with pytest.raises(ValueError):
        HashMap(0, 4)


def test_render_empty():
    table = HashMap(8, 4)
    assert table.render(_int_value) == "{}\n"


def test_render_single_entry():
    table = HashMap(8, 4)
    table.insert("one", (1).to_bytes(4, "little"))
    assert table.render(_int_value) == "{one: 1}\n"


def test_render_lists_every_live_entry():
    table = HashMap(8, 4)
    for n in range(5):
        table.insert(f"k{n}", n.to_bytes(4, "little"))
    table.remove("k2")
    text = table.render(_int_value)
    assert text.startswith("{") and text.endswith("}\n")
    parts = sorted(text[1:-2].split(", "))
    assert parts == sorted(f"k{n}: {n}" for n in (0, 1, 3, 4))