import pytest
from querystring_next import ArrayFormat, StringifyOptions
from querystring_next.codec.formats import (
    BracketFormatter,
    IndexedValues,
    IndexFormatter,
    RepeatFormatter,
    formatter_for,
)
from querystring_next.codec.sorter import sort_keys


def test_formatter_for():
    assert isinstance(formatter_for(ArrayFormat.NONE), RepeatFormatter)
    assert isinstance(formatter_for("bracket"), BracketFormatter)
    assert isinstance(formatter_for("index"), IndexFormatter)
    assert isinstance(formatter_for(None), RepeatFormatter)
    assert isinstance(formatter_for("nope"), RepeatFormatter)
    assert formatter_for("index") is formatter_for(ArrayFormat.INDEX)
    assert repr(formatter_for("bracket")) == "BracketFormatter('bracket')"


@pytest.mark.parametrize(
    "array_format, value, expected",
    [
        ("none", "a b", "k%20k=a%20b"),
        ("none", None, "k%20k"),
        ("bracket", "a b", "k%20k[]=a%20b"),
        ("bracket", None, "k%20k"),
        ("index", "a b", "k%20k[7]=a%20b"),
        ("index", None, "k%20k[7]"),
    ],
)
def test_encode_entry(array_format, value, expected):
    formatter = formatter_for(array_format)
    assert formatter.encode_entry("k k", value, 7, StringifyOptions()) == expected


def test_repeat_decode_entry():
    accumulator = {}
    decode = RepeatFormatter().decode_entry
    decode("a", "1", accumulator)
    assert accumulator == {"a": "1"}
    decode("a", None, accumulator)
    assert accumulator == {"a": ["1", None]}
    decode("a", "3", accumulator)
    assert accumulator == {"a": ["1", None, "3"]}


def test_bracket_decode_entry():
    accumulator = {}
    decode = BracketFormatter().decode_entry
    decode("a[]", "1", accumulator)
    decode("a[]", "2", accumulator)
    decode("b", "x", accumulator)
    decode("b", "y", accumulator)
    assert accumulator == {"a": ["1", "2"], "b": "y"}


def test_index_decode_entry():
    accumulator = {}
    decode = IndexFormatter().decode_entry
    decode("a[1]", "y", accumulator)
    decode("a[0]", "x", accumulator)
    decode("a[]", "z", accumulator)
    decode("b[x]", "1", accumulator)
    assert accumulator == {"a": {"0": "x", "1": "y", "": "z"}, "b[x]": "1"}
    assert isinstance(accumulator["a"], IndexedValues)


def test_sort_keys_sequence():
    assert sort_keys(["b", "c", "a"]) == ["a", "b", "c"]
    assert sort_keys(("b", None, "a")) == [None, "a", "b"]
    values = ["b", "a"]
    sort_keys(values)
    assert values == ["b", "a"]


def test_sort_keys_indexed():
    values = IndexedValues({"2": "c", "10": "e", "0": "a", "1": "b", "3": "d"})
    assert sort_keys(values) == ["a", "b", "c", "d", "e"]


def test_sort_keys_indexed_empty_index_counts_as_zero():
    values = IndexedValues({"1": "b", "": "a"})
    assert sort_keys(values) == ["a", "b"]


def test_sort_keys_scalar():
    assert sort_keys("x") == "x"
    assert sort_keys(None) is None
    assert sort_keys({"b": 1}) == {"b": 1}


def test_sort_keys_none_first():
    assert sort_keys(["null", None, "a"]) == [None, "a", "null"]
