"""Type coercion — normalize arbitrary values into numbers, mappings and lists.

Two numeric rules live side by side:
- is_numeric() validates the whole value ("123.5" yes, "123.5 yahoo" no).
- to_number() parses the leading numeric prefix like a lenient float parser
  ("12px" -> 12.0) and falls back to a default when nothing parses.

content_type() is the semantic type tag shared with the argument matcher.
"""

from __future__ import annotations

import inspect
import math
import numbers
import re
from collections.abc import Mapping
from typing import Any, Callable

from khoai.errors import UnsupportedCastType

_MISSING = object()

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def content_type(value: Any) -> str:
    """Semantic type tag of a value.

    content_type(123)       # "number"
    content_type("123")     # "string"
    content_type(True)      # "boolean"
    content_type([1, 2])    # "list"
    content_type(ABC())     # "ABC"
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if inspect.isroutine(value):
        return "function"
    return type(value).__name__


def class_name(obj: Any, constructor_only: bool = False) -> str:
    """Class name of obj, module-qualified unless constructor_only."""
    cls = type(obj)
    if constructor_only:
        return cls.__name__
    return f"{cls.__module__}.{cls.__qualname__}"


def is_instance_of(obj: Any, name: str) -> bool:
    """Compare obj's class name (not its class) against name."""
    return class_name(obj, True) == name


def is_primitive_type(value: Any = None) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def is_numeric(value: Any) -> bool:
    """True for finite real numbers and strings that are entirely a finite number."""
    if isinstance(value, bool) or value is None:
        return False
    if isinstance(value, numbers.Real):
        return math.isfinite(value)
    if isinstance(value, str):
        if "_" in value:
            return False
        try:
            number = float(value)
        except ValueError:
            return False
        return math.isfinite(number)
    return False


def _parse_float(value: Any) -> Any:
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, numbers.Real):
        return value
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match:
            return float(match.group(1))
    return math.nan


def to_number(value: Any, default: Any = None) -> Any:
    """Parse value as a number, falling back to default (itself coerced), then 0.

    to_number("123")        # 123.0
    to_number(True, 567)    # 567
    to_number([], "8")      # 8.0
    to_number("abc", "x")   # 0
    """
    parsed = _parse_float(value)
    if is_numeric(parsed):
        return parsed
    if default is None:
        return 0
    return to_number(default, 0)


def to_object(name: Any = _MISSING, value: Any = _MISSING) -> Any:
    """Make sure the result is a mapping, or pass an existing container through.

    to_object()                  # {}
    to_object("yahoo")           # {0: "yahoo"}
    to_object(["foo", "bar"])    # {0: "foo", 1: "bar"}
    to_object({"a": 1})          # {"a": 1} (same object)
    to_object("yahoo", 123)      # {"yahoo": 123}
    to_object(["a"], 123)        # ["a"] (same object)
    """
    if name is _MISSING:
        return {}
    if isinstance(name, Mapping):
        return name
    if value is _MISSING:
        if isinstance(name, (list, tuple)):
            return dict(enumerate(name))
        return {0: name}
    if isinstance(name, (list, tuple)):
        return name
    return {name: value}


def to_list(value: Any) -> list:
    """Wrap value in a list unless it already is one."""
    if isinstance(value, list):
        return value
    return [value]


def _to_integer(value: Any) -> int:
    return math.floor(to_number(value))


CAST_TYPES: dict[str, Callable[[Any], Any]] = {
    "string": str,
    "boolean": bool,
    "number": to_number,
    "integer": _to_integer,
    "array": to_list,
    "object": to_object,
}


def cast_items_type(collection: Any, type_name: str) -> Any:
    """Cast every item of a list (or every value of a mapping) to type_name.

    Returns a new list or dict; the input is left untouched.
    Raises UnsupportedCastType for names outside CAST_TYPES.
    """
    if type_name not in CAST_TYPES:
        raise UnsupportedCastType(type_name, CAST_TYPES)
    cast = CAST_TYPES[type_name]
    if isinstance(collection, Mapping):
        return {key: cast(item) for key, item in collection.items()}
    return [cast(item) for item in collection]


def one_of(value: Any, values, default: Any = _MISSING) -> Any:
    """value if it is in values, else default, else the first of values."""
    if value in values:
        return value
    if default is not _MISSING:
        return default
    return next(iter(values), None)
