"""Factory functions for every placeholder shape."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any

from typed_template.errors import FactoryError
from typed_template.placeholders.placeholder import MISSING, Computed, Primitive


def primitive(default: Any = MISSING, value_type: Any = Any) -> Primitive:
    """Create a placeholder that accepts any string-like value.

    Args:
        default: Used when the slot is left empty at compile time. Falsy
            defaults such as ``0`` or ``""`` are kept.
        value_type: Optional type the supplied value is validated against.
    """
    return Primitive(default=default, value_type=value_type)


def str_(default: Any = MISSING) -> Primitive:
    """Create a placeholder that accepts a string.

    Example:
        >>> Template.new("Hello, ", str_(), "!").compile("Taro")
        'Hello, Taro!'
    """
    return primitive(default, value_type=str)


def num(default: Any = MISSING) -> Primitive:
    """Create a placeholder that accepts a number.

    Example:
        >>> Template.new("Score: ", num(), " pts").compile(100)
        'Score: 100 pts'
    """
    return primitive(default, value_type=int | float)


def computed(fn: Callable[[Any], Any]) -> Computed:
    """Wrap an arbitrary function; it receives the slot's value at compile time."""
    if not callable(fn):
        raise FactoryError(f"computed() expects a callable, got {type(fn).__name__}")
    return Computed(resolve=fn)


def conditional(when_true: str, when_false: str) -> Computed:
    """Create a placeholder that picks one of two strings from a boolean."""

    def resolve(flag: Any) -> str:
        return when_true if flag else when_false

    return Computed(resolve=resolve)


def enumerated(values: Sequence[str], fallback: Any = MISSING) -> Computed:
    """Create a placeholder that takes an index into ``values``.

    A ``tuple`` is treated as fixed-length and indexed directly. Any other
    sequence may be shorter than the caller expects, so ``fallback`` is
    required and returned for out-of-range indices.
    """
    if isinstance(values, tuple):
        if fallback is not MISSING:
            raise FactoryError("enumerated() takes no fallback for a fixed-length tuple")
        options = values

        def resolve(index: int) -> str:
            return options[index]

        return Computed(resolve=resolve)

    if fallback is MISSING:
        raise FactoryError("enumerated() over a variable-length sequence requires a fallback")
    options = tuple(values)

    def resolve_with_fallback(index: int) -> str:
        if 0 <= index < len(options):
            return options[index]
        return fallback

    return Computed(resolve=resolve_with_fallback)


def mapped(table: Mapping[Hashable, str]) -> Computed:
    """Create a placeholder that looks its key up in ``table``.

    The table should cover every key the caller passes; an unknown key
    resolves to nothing and compile reports the slot as missing.
    """
    entries = dict(table)

    def resolve(key: Hashable) -> str | None:
        return entries.get(key)

    return Computed(resolve=resolve)


def joined(separator: str = "\n") -> Computed:
    """Create a placeholder that joins a list of strings, one per line by default."""

    def resolve(items: Iterable[str]) -> str:
        return separator.join(items)

    return Computed(resolve=resolve)


cond = conditional
tuple_ = enumerated
record = mapped
lines = joined
callback = computed
