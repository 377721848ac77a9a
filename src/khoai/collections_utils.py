"""Helpers over lists and mappings.

Lists may hold unhashable items, so set-like helpers (toggle, unique) work
on equality and keep the original order.
"""

from __future__ import annotations

import math
import random
import string
from collections.abc import Mapping, MutableMapping
from types import MappingProxyType
from typing import Any, Callable

from khoai.coercion import is_numeric, to_number

DEFAULT_BREAK = "break"
DEFAULT_CHARS = string.digits + string.ascii_lowercase + string.ascii_uppercase


def _as_items(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _unique(items) -> list:
    result = []
    for item in items:
        if item not in result:
            result.append(item)
    return result


def _difference(items, excluded) -> list:
    return [item for item in items if item not in excluded]


def loop(obj, callback: Callable, break_on: Any = DEFAULT_BREAK):
    """Like a for loop over obj, stopped when callback returns break_on.

    callback(value, index_or_key, obj). Returns obj.

    Usage:
        loop([1, 2, 3, 4, 5], lambda item, *_: "break" if item > 3 else seen.append(item))
        # seen == [1, 2, 3]
    """
    if isinstance(obj, Mapping):
        for key in list(obj):
            if callback(obj[key], key, obj) == break_on:
                break
    else:
        for index, item in enumerate(obj):
            if callback(item, index, obj) == break_on:
                break
    return obj


def merge_object(*objects):
    """Merge every argument into the first one.

    Lists and scalars become mappings keyed by consecutive integers, counted
    across all such arguments. Only the first argument is mutated (and only
    when it is already a mutable mapping).

        merge_object({"a": 1}, ["D", "E"], "foo")   # {"a": 1, 0: "D", 1: "E", 2: "foo"}
    """
    next_index = 0
    converted = []
    for obj in objects:
        if not isinstance(obj, Mapping):
            items = _as_items(obj)
            obj = dict(zip(range(next_index, next_index + len(items)), items))
            next_index += len(items)
        converted.append(obj)

    if not converted:
        return {}
    target = converted[0]
    if not isinstance(target, MutableMapping):
        target = dict(target)
    for other in converted[1:]:
        target.update(other)
    return target


def _is_diff_strict(value_1, value_2) -> bool:
    return type(value_1) is not type(value_2) or value_1 != value_2


def _loose_key(value):
    if isinstance(value, bool) or is_numeric(value):
        return float(value)
    return value


def _is_diff_loose(value_1, value_2) -> bool:
    return value_1 != value_2 and _loose_key(value_1) != _loose_key(value_2)


def diff_object_with(callback: Callable[[Any, Any], bool], obj: Mapping, *others) -> dict:
    """Items of obj whose key is missing from others or whose value differs.

    callback(base_value, other_value) returns True when the two differ.
    others are merged (see merge_object) into a fresh mapping first.
    """
    merged = merge_object({}, *others)
    return {
        key: value
        for key, value in obj.items()
        if key not in merged or callback(value, merged[key])
    }


def diff_object(obj: Mapping, *others) -> dict:
    """diff_object({"a": 0, "b": 1}, {"a": "0", "b": 1})  # {"a": 0}"""
    return diff_object_with(_is_diff_strict, obj, *others)


def diff_object_loose(obj: Mapping, *others) -> dict:
    """diff_object_loose({"a": 0, "b": 1}, {"a": "0", "b": 2})  # {"b": 1}"""
    return diff_object_with(_is_diff_loose, obj, *others)


def random_string(length: Any = 10, chars: str | None = None) -> str:
    if not chars:
        chars = DEFAULT_CHARS
    length = int(to_number(length, 10))
    return "".join(random.choice(chars) for _ in range(length))


def _set_path(obj: MutableMapping, path, value) -> None:
    keys = path.split(".") if isinstance(path, str) else [path]
    for key in keys[:-1]:
        child = obj.get(key)
        if not isinstance(child, MutableMapping):
            child = obj[key] = {}
        obj = child
    obj[keys[-1]] = value


def setup(obj, option, value: Any = None):
    """Set one field (dotted paths allowed) or every field of a mapping.

        obj = {"a": "A", "b": "B"}
        setup(obj, "a", "123")                 # {"a": "123", "b": "B"}
        setup(obj, {"b": "Yahoo", "c": "ASD"}) # {"a": "123", "b": "Yahoo", "c": "ASD"}
    """
    if not isinstance(obj, MutableMapping):
        obj = {}
    if isinstance(option, Mapping):
        for path, val in option.items():
            _set_path(obj, path, val)
    else:
        _set_path(obj, option, value)
    return obj


def valid_keys(obj: Mapping, keys) -> list:
    """The keys that exist in obj, in the given order."""
    return [key for key in _as_items(keys) if key in obj]


def pairs_as_object(obj, key: str = "key", value: str = "value") -> list[dict]:
    """pairs_as_object({"one": 1})  # [{"key": "one", "value": 1}]"""
    field_key = key or "key"
    field_value = value or "value"
    pairs = obj.items() if isinstance(obj, Mapping) else enumerate(obj)
    return [{field_key: k, field_value: v} for k, v in pairs]


def pluck_by(collection, key_field, value_field) -> dict:
    """Map key_field to value_field across a list of mappings.

    Items without key_field are skipped; a missing value_field gives None.
    """
    return {
        item[key_field]: item.get(value_field)
        for item in collection
        if key_field in item
    }


def chunks(items, count: int) -> list:
    """Split items into count chunks of equal size (the last may be shorter).

    A count of 0 keeps everything in one chunk; a negative count gives [].
    """
    items = list(items)
    if not items or count < 0:
        return []
    if count == 0:
        return [items]
    size = math.ceil(len(items) / count)
    return [items[index:index + size] for index in range(0, len(items), size)]


def toggle(items, elements, status: bool | None = None) -> list:
    """Add or remove elements. Returns a new list.

    status None toggles each element, True adds, False removes.

        toggle(["A", "B", "C", "D"], ["A", "V"])          # ["B", "C", "D", "V"]
        toggle(["A", "B", "C", "D"], ["A", "V"], True)    # ["A", "B", "C", "D", "V"]
        toggle(["A", "B", "C", "D"], ["A", "V"], False)   # ["B", "C", "D"]
    """
    elements = _unique(_as_items(elements))
    if status is None:
        exclude = [item for item in items if item in elements]
        include = _difference(elements, items)
        return _unique(_difference(items, exclude) + include)
    if status:
        return _unique(list(items) + elements)
    return _difference(items, elements)


def define_object(properties: Mapping) -> Mapping:
    """Read-only mapping of properties, keys stripped, first key wins."""
    obj: dict = {}
    for key, value in properties.items():
        obj.setdefault(key.strip(), value)
    return MappingProxyType(obj)


def define_constant(target, name, value: Any = None) -> None:
    """Define upper-cased constants on target (attributes, or keys of a dict).

    Existing constants are never overwritten.

        define_constant(config, "timeout", 30)     # config.TIMEOUT == 30
        define_constant(config, {"x": 1, "y": 2})  # config.X, config.Y
    """
    values = name if isinstance(name, Mapping) else {name: value}
    for key, val in values.items():
        key = key.strip().upper()
        if isinstance(target, MutableMapping):
            target.setdefault(key, val)
        elif not hasattr(target, key):
            setattr(target, key, val)
