import pytest

from lager.serialization import (
    Monostate,
    from_json,
    load_array,
    load_set,
    load_variant,
    save_array,
    save_set,
    save_variant,
    to_json,
)


def test_array_round_trip():
    x = (1, 2, 3, 5, 6)
    y = load_array(from_json(to_json(save_array(x))))
    assert x == y


def test_flex_vector_round_trip():
    x = [1, 2, 3, 5, 6]
    y = load_array(from_json(to_json(save_array(x))))
    assert tuple(x) == y


def test_empty_array_round_trip():
    assert load_array(from_json(to_json(save_array([])))) == ()


def test_set_round_trip():
    x = frozenset({1, 2, 3, 5, 6})
    y = load_set(from_json(to_json(save_set(x))))
    assert x == y


def test_set_duplicates_rejected():
    with pytest.raises(ValueError, match="duplicate"):
        load_set([1, 2, 1])


def test_variant_monostate_round_trip():
    x = Monostate()
    y = load_variant(from_json(to_json(save_variant(x))), [int, Monostate, float])
    assert x == y
    assert isinstance(y, Monostate)


def test_variant_int_round_trip():
    y = load_variant(from_json(to_json(save_variant(42))), [int, Monostate, float])
    assert y == 42
    assert isinstance(y, int)


def test_variant_float_round_trip():
    y = load_variant(from_json(to_json(save_variant(12.0))), [int, Monostate, float])
    assert y == 12.0
    assert isinstance(y, float)


def test_variant_saved_form():
    assert save_variant(42) == {"type": "int", "data": 42}


def test_variant_unknown_type_name():
    with pytest.raises(ValueError, match="Invalid variant type name"):
        load_variant({"type": "str", "data": "x"}, [int, float])


def test_variant_without_type():
    with pytest.raises(ValueError):
        load_variant({"data": 1}, [int])