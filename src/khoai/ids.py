"""Sequential IDs per namespace.

Counters live in _anchor.id_counters. A namespace is created on its first
next_id() call and starts at 1.

    next_id()                   # "unique_id_1"
    next_id()                   # "unique_id_2"
    next_id(None, False)        # 3
    next_id("superman")         # "superman_1"
    current_id("superman")      # "superman_1"
    current_id("batman")        # False
"""

from __future__ import annotations

import math

from khoai import _anchor
from khoai.coercion import to_number

DEFAULT_NAMESPACE = "unique_id"


def _namespace(namespace) -> str:
    """Counters are keyed by text: next_id(5) and next_id("5") share one."""
    return str(namespace or DEFAULT_NAMESPACE)


def _format(namespace: str, counter: int, prefixed: bool) -> str | int:
    if prefixed:
        return f"{namespace}_{counter}"
    return counter


def next_id(namespace: str | None = DEFAULT_NAMESPACE, prefixed: bool = True) -> str | int:
    """Increment the namespace counter and return the new ID."""
    namespace = _namespace(namespace)
    _anchor.id_counters[namespace] = _anchor.id_counters.get(namespace, 0) + 1
    return _format(namespace, _anchor.id_counters[namespace], prefixed)


def current_id(namespace: str | None = DEFAULT_NAMESPACE, prefixed: bool = True) -> str | int | bool:
    """The last ID handed out for namespace, or False if there is none."""
    namespace = _namespace(namespace)
    if namespace not in _anchor.id_counters:
        return False
    return _format(namespace, _anchor.id_counters[namespace], prefixed)


def reset_id(namespace: str | None = DEFAULT_NAMESPACE, value=None) -> int | None:
    """Forget a namespace, or set its counter to max(0, floor(value)).

    The next next_id() after reset_id("x", 5) returns "x_6".
    """
    namespace = _namespace(namespace)
    if value is None:
        _anchor.id_counters.pop(namespace, None)
        return None
    counter = max(0, math.floor(to_number(value)))
    _anchor.id_counters[namespace] = counter
    return counter
