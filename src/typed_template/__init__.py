"""Typed string templates with positional and named substitution.

A template is literal text interleaved with placeholders. Each placeholder
decides how the value supplied for its slot turns into text.

Example:
    >>> from typed_template import Template, cond, mapped, num, str_
    >>>
    >>> hello = Template.new("Hello ", str_("World"), "!")
    >>> hello.compile()
    'Hello World!'
    >>>
    >>> forecast = Template.new(
    ...     "Today is ", mapped({"sunny": "sunny", "rainy": "rainy"}),
    ...     " with a high of ", num(), " degrees",
    ... )
    >>> forecast.compile("sunny", 31)
    'Today is sunny with a high of 31 degrees'
    >>> forecast.prepare("weather", "high")({"weather": "rainy", "high": 18})
    'Today is rainy with a high of 18 degrees'
"""

__version__ = "0.1.0"

from loguru import logger

# Public API exports
from typed_template.batch import TemplateBatchRenderer
from typed_template.config import Settings, get_settings
from typed_template.errors import (
    ArityError,
    FactoryError,
    MissingValue,
    PlaceholderTypeError,
    TemplateError,
)
from typed_template.placeholders import (
    MISSING,
    Computed,
    Placeholder,
    Primitive,
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
from typed_template.template import PreparedTemplate, Template
from typed_template.utils.logger import setup_logger

__all__ = [
    # Main API
    "Template",
    "PreparedTemplate",
    "TemplateBatchRenderer",
    # Placeholders
    "MISSING",
    "Placeholder",
    "Primitive",
    "Computed",
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
    # Errors
    "TemplateError",
    "MissingValue",
    "ArityError",
    "PlaceholderTypeError",
    "FactoryError",
    # Configuration
    "Settings",
    "get_settings",
    "setup_logger",
]

# Silent until the application opts in via setup_logger().
logger.disable("typed_template")
