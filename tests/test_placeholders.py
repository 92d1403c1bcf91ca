"""Tests for placeholder factories."""

from __future__ import annotations

import pytest

from typed_template import (
    MISSING,
    Computed,
    FactoryError,
    Primitive,
    computed,
    conditional,
    enumerated,
    joined,
    mapped,
    num,
    primitive,
    str_,
)


def test_str_and_num_defaults() -> None:
    assert str_() == Primitive(default=MISSING, value_type=str)
    assert str_("foo").default == "foo"
    assert num().has_default is False
    assert num(42).default == 42


def test_falsy_default_is_kept() -> None:
    assert primitive(0).has_default
    assert primitive("").default == ""
    assert not primitive().has_default
    assert primitive().kind == "primitive"


def test_conditional_picks_branch() -> None:
    placeholder = conditional("foo", "bar")

    assert placeholder.kind == "computed"
    assert placeholder(True) == "foo"
    assert placeholder(False) == "bar"


def test_enumerated_fixed_length() -> None:
    placeholder = enumerated(("foo", "bar", "baz"))

    assert [placeholder(index) for index in range(3)] == ["foo", "bar", "baz"]


def test_enumerated_variable_length_uses_fallback() -> None:
    values = ["hoge", "huga", "piyo"]
    placeholder = enumerated(values, "fallback")
    values.append("late")

    assert placeholder(0) == "hoge"
    assert placeholder(2) == "piyo"
    assert placeholder(3) == "fallback"
    assert placeholder(100) == "fallback"
    assert placeholder(-1) == "fallback"


def test_enumerated_variable_length_requires_fallback() -> None:
    with pytest.raises(FactoryError):
        enumerated(["a", "b"])


def test_mapped_looks_up_key() -> None:
    placeholder = mapped({"sunny": "S", "rainy": "R"})

    assert placeholder("sunny") == "S"
    assert placeholder("rainy") == "R"
    assert placeholder("snowy") is None


def test_joined_uses_newlines() -> None:
    placeholder = joined()

    assert placeholder(["a", "b", "c"]) == "a\nb\nc"
    assert placeholder([]) == ""
    assert joined(", ")(["a", "b"]) == "a, b"


def test_computed_wraps_callable() -> None:
    placeholder = computed(lambda high: "hot" if high > 30 else "mild")

    assert isinstance(placeholder, Computed)
    assert placeholder(31) == "hot"
    assert placeholder(20) == "mild"

    with pytest.raises(FactoryError):
        computed("not callable")  # type: ignore[arg-type]


def test_enumerated_tuple_rejects_fallback() -> None:
    with pytest.raises(FactoryError):
        enumerated(("a",), "fb")


def test_enumerated_tuple_covers_every_index() -> None:
    options = ("north", "east", "south", "west")
    placeholder = enumerated(options)

    for index, expected in enumerate(options):
        assert placeholder(index) == expected
