"""Template definition and the substitution engine."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from typed_template.config import Settings, get_settings
from typed_template.errors import (
    ArityError,
    MissingValue,
    PlaceholderTypeError,
    TemplateError,
)
from typed_template.placeholders.placeholder import (
    MISSING,
    Computed,
    Placeholder,
    Primitive,
    is_missing,
    is_placeholder,
)


@lru_cache(maxsize=None)
def _type_adapter(value_type: Any) -> TypeAdapter:
    return TypeAdapter(value_type)


@dataclass(frozen=True, slots=True)
class Template:
    """Literal segments interleaved with placeholder slots.

    ``placeholders[i]`` sits between ``segments[i]`` and ``segments[i + 1]``,
    so there is always exactly one more segment than there are placeholders.

    Example:
        >>> profile = Template.new(
        ...     "Name: ", str_(), "\\n",
        ...     "Age: ", num(), "\\n",
        ...     "Rank: ", cond("premium", "regular"),
        ... )
        >>> profile.compile("Alice", 18, True)
        'Name: Alice\\nAge: 18\\nRank: premium'
        >>> render = profile.prepare("name", "age", "is_premium")
        >>> render({"name": "Alice", "age": 18, "is_premium": False})
        'Name: Alice\\nAge: 18\\nRank: regular'
    """

    segments: tuple[str, ...]
    placeholders: tuple[Placeholder, ...] = ()
    settings: Settings | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        # Accept lists from callers but keep the stored value immutable.
        object.__setattr__(self, "segments", tuple(self.segments))
        object.__setattr__(self, "placeholders", tuple(self.placeholders))

        if len(self.segments) != len(self.placeholders) + 1:
            msg = (
                f"Template needs {len(self.placeholders) + 1} segments for "
                f"{len(self.placeholders)} placeholders, got {len(self.segments)}"
            )
            raise TemplateError(msg)
        for segment in self.segments:
            if not isinstance(segment, str):
                raise TemplateError(f"Template segments must be str, got {type(segment).__name__}")
        for placeholder in self.placeholders:
            if not is_placeholder(placeholder):
                raise TemplateError(f"Not a placeholder: {placeholder!r}")

    @classmethod
    def new(cls, *parts: Any, settings: Settings | None = None) -> Template:
        """Build a template from literals, placeholders and inline values.

        Placeholders open a new slot. Anything else is converted with ``str()``
        and merged into the surrounding literal text.
        """
        return cls._assemble(parts, settings=settings)

    @classmethod
    def from_interpolation(cls, source: Any, settings: Settings | None = None) -> Template:
        """Build a template from a t-string (``string.templatelib.Template``).

        Any object with ``strings`` and ``interpolations`` attributes works.
        """
        strings = list(source.strings)
        values = [interpolation.value for interpolation in source.interpolations]
        if len(strings) != len(values) + 1:
            raise TemplateError(
                f"Interpolation source has {len(strings)} strings for {len(values)} values"
            )

        parts: list[Any] = []
        for text, value in zip(strings, values):
            parts.append(text)
            parts.append(value)
        parts.append(strings[-1])
        return cls._assemble(parts, settings=settings)

    @classmethod
    def _assemble(cls, parts: Iterable[Any], settings: Settings | None) -> Template:
        segments: list[str] = []
        placeholders: list[Placeholder] = []
        current = ""
        for part in parts:
            if is_placeholder(part):
                segments.append(current)
                placeholders.append(part)
                current = ""
            else:
                current += str(part)
        segments.append(current)

        logger.debug(
            "Built template with {} placeholders and {} segments",
            len(placeholders),
            len(segments),
        )
        return cls(tuple(segments), tuple(placeholders), settings=settings)

    @property
    def placeholder_count(self) -> int:
        """Number of slots ``compile`` expects values for."""
        return len(self.placeholders)

    def __len__(self) -> int:
        return len(self.placeholders)

    def compile(self, *values: Any) -> str:
        """Fill every slot and return the final string.

        Args:
            *values: One value per placeholder, in slot order. ``None`` (or
                leaving trailing values out) selects the slot's default.

        Raises:
            ArityError: More values than placeholders.
            MissingValue: A slot has no usable value and no default.
            PlaceholderTypeError: A value does not match its slot's type.
        """
        if len(values) > len(self.placeholders):
            raise ArityError(len(self.placeholders), len(values))

        settings = self.settings or get_settings()
        parts: list[str] = []
        for index, segment in enumerate(self.segments[:-1]):
            parts.append(segment)
            value = values[index] if index < len(values) else MISSING
            resolved = self._resolve(index, self.placeholders[index], value, settings)
            parts.append(str(resolved))
        parts.append(self.segments[-1])
        return "".join(parts)

    def _resolve(self, index: int, placeholder: Placeholder, value: Any, settings: Settings) -> Any:
        match placeholder:
            case Computed(resolve=resolve):
                if value is MISSING:
                    raise MissingValue(index)
                resolved = resolve(value)
            case Primitive(default=default, value_type=value_type):
                if is_missing(value):
                    resolved = default
                else:
                    if settings.validate_types and value_type is not Any:
                        self._validate(index, value_type, value)
                    resolved = value
            case _:
                raise TemplateError(f"Unknown placeholder at #{index}: {placeholder!r}")

        if is_missing(resolved):
            raise MissingValue(index)
        if settings.falsy_is_missing and not resolved:
            raise MissingValue(index, reason=f"resolved to falsy value {resolved!r}")
        return resolved

    @staticmethod
    def _validate(index: int, value_type: Any, value: Any) -> None:
        try:
            _type_adapter(value_type).validate_python(value, strict=True)
        except ValidationError as exc:
            raise PlaceholderTypeError(index, value_type, value) from exc

    def prepare(self, *names: str) -> PreparedTemplate:
        """Name the slots so the template can be filled from a mapping.

        Names may repeat; every slot sharing a name receives the same value.
        """
        if len(names) != len(self.placeholders):
            raise ArityError(len(self.placeholders), len(names), what="slot names")
        for name in names:
            if not isinstance(name, str):
                raise TemplateError(f"Slot names must be str, got {type(name).__name__}")

        logger.debug("Prepared template with slot names {}", names)
        return PreparedTemplate(template=self, names=tuple(names))


@dataclass(frozen=True, slots=True)
class PreparedTemplate:
    """A template whose slots are addressed by name."""

    template: Template
    names: tuple[str, ...]

    @property
    def keys(self) -> tuple[str, ...]:
        """Distinct slot names in first-occurrence order."""
        return tuple(dict.fromkeys(self.names))

    def __call__(self, mapping: Mapping[str, Any] | None = None, /, **values: Any) -> str:
        """Compile the template from ``mapping`` (keyword values take precedence)."""
        lookup = {**(mapping or {}), **values}
        return self.template.compile(*(lookup.get(name, MISSING) for name in self.names))
