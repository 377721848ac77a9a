"""BaseClass — memoized bound methods with stable identity.

self.proxy(fn) returns the same bound callable every time it is called with
the same fn on the same instance, so a listener registered with it can later
be removed by equality/identity:

    class Widget(BaseClass):
        def attach(self, emitter):
            emitter.on("click", self.proxy(Widget.on_click))

        def detach(self, emitter):
            emitter.off("click", self.proxy(Widget.on_click))

Each function gets a process-wide sequence number the first time it is
proxied (kept in _anchor.method_ids). Each instance maps those numbers to
its own bound callables.
"""

from __future__ import annotations

import types
from typing import Callable

from khoai import _anchor


def get_proxy_counter() -> int:
    """The last method identity handed out."""
    return _anchor.last_method_id


def _method_id(func: Callable) -> int:
    method_id = _anchor.method_ids.get(func)
    if method_id is None:
        method_id = _anchor.new_method_id()
        _anchor.method_ids[func] = method_id
    return method_id


class BaseClass:
    """Base class offering proxy() and dispose()."""

    def __init__(self) -> None:
        self._proxied_methods: dict[int, Callable | None] = {}

    def proxy(self, method: Callable) -> Callable:
        """Bound version of method for this instance, created once and cached.

        method may be a plain function or an already-bound method; bound
        methods are re-bound to this instance through their __func__.
        """
        func = getattr(method, "__func__", method)
        method_id = _method_id(func)
        # Instances that skipped BaseClass.__init__ still get a table.
        cache = self.__dict__.setdefault("_proxied_methods", {})
        bound = cache.get(method_id)
        if bound is None:
            bound = cache[method_id] = types.MethodType(func, self)
        return bound

    def dispose(self) -> None:
        """Drop every cached bound callable. proxy() keeps working afterwards."""
        cache = self.__dict__.get("_proxied_methods", {})
        for method_id in cache:
            cache[method_id] = None
        self._proxied_methods = {}
