"""Placeholder data model and factories."""

from .factory import (
    callback,
    computed,
    cond,
    conditional,
    enumerated,
    joined,
    lines,
    mapped,
    num,
    primitive,
    record,
    str_,
    tuple_,
)
from .placeholder import MISSING, Computed, Placeholder, Primitive, is_missing, is_placeholder

__all__ = [
    "MISSING",
    "Placeholder",
    "Primitive",
    "Computed",
    "is_placeholder",
    "is_missing",
    "primitive",
    "str_",
    "num",
    "computed",
    "conditional",
    "enumerated",
    "mapped",
    "joined",
    "callback",
    "cond",
    "tuple_",
    "record",
    "lines",
]
