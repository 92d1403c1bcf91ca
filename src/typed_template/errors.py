"""Exceptions raised while building or compiling templates."""

from __future__ import annotations


class TemplateError(Exception):
    """Base class for every error raised by typed_template."""


class MissingValue(TemplateError):
    """A slot ended up without a usable value and had no default."""

    def __init__(self, index: int, reason: str = "no value supplied and no default") -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Placeholder #{index}: {reason}")


class ArityError(TemplateError):
    """Wrong number of positional values or slot names."""

    def __init__(self, expected: int, received: int, what: str = "values") -> None:
        self.expected = expected
        self.received = received
        super().__init__(f"Template expects {expected} {what}, got {received}")


class PlaceholderTypeError(TemplateError):
    """A supplied value does not match the placeholder's value type."""

    def __init__(self, index: int, expected: object, value: object) -> None:
        self.index = index
        self.expected = expected
        self.value = value
        super().__init__(
            f"Placeholder #{index} expects {expected!r}, got {type(value).__name__}: {value!r}"
        )


class FactoryError(TemplateError, ValueError):
    """Placeholder factory called with arguments it cannot work with."""
