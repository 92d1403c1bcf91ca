"""Placeholder variants that describe how a template slot becomes text."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Final, Literal


class _MissingType:
    """Marker for "no value" that no caller-supplied value can collide with."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _MissingType()


@dataclass(frozen=True, slots=True)
class Primitive:
    """Slot filled with the caller's value as-is, or with ``default``."""

    default: Any = MISSING
    value_type: Any = Any
    kind: Literal["primitive"] = field(default="primitive", init=False)

    @property
    def has_default(self) -> bool:
        """Whether the slot may be left empty at compile time."""
        return self.default is not MISSING


@dataclass(frozen=True, slots=True)
class Computed:
    """Slot whose text is produced by ``resolve`` from the caller's value."""

    resolve: Callable[[Any], Any]
    kind: Literal["computed"] = field(default="computed", init=False)

    def __call__(self, value: Any) -> Any:
        return self.resolve(value)


Placeholder = Primitive | Computed


def is_placeholder(value: object) -> bool:
    """Return True for placeholder values, False for literals and inline values."""
    return isinstance(value, (Primitive, Computed))


def is_missing(value: object) -> bool:
    """``None`` and ``MISSING`` both mean the caller left the slot empty."""
    return value is None or value is MISSING
