"""Callback invocation — call functions given as objects, names or lists.

A callback may be:
- a callable
- a name, resolved in a lookup scope (default: the __main__ namespace)
- a list/tuple of callbacks, each called with the same arguments

Anything else (None, numbers, ...) is ignored and yields None.

defer() runs call_func() later on a daemon threading.Timer. It is
fire-and-forget: there is no handle to cancel it.
"""

from __future__ import annotations

import logging
import sys
import threading
import types
from collections.abc import Mapping
from typing import Any

from khoai.coercion import to_list
from khoai.errors import InvalidCallback

logger = logging.getLogger("khoai.callbacks")

_MISSING = object()


def _default_scope() -> Mapping:
    main = sys.modules.get("__main__")
    return vars(main) if main is not None else {}


def _resolve(name: str, scope: Mapping | None) -> Any:
    if scope is None:
        scope = _default_scope()
    func = scope.get(name)
    if not callable(func):
        raise InvalidCallback(name)
    return func


def call_func(callback, args: Any = _MISSING, context: Any = None, scope: Mapping | None = None) -> Any:
    """Call callback with args and return its result.

    A non-list args value is passed as the single argument. To pass a single
    list, wrap it: call_func(fn, [[1, 2, 3]]).

    When context is given the callable is bound to it, so it receives the
    context as its first (self) argument.

    Usage:
        call_func(print, "hello")
        call_func(lambda name, age: f"{name} {age}", ["Manh", 10])
        call_func("on_ready", scope={"on_ready": handler})
        call_func([first, second], 1)   # [first(1), second(1)]
    """
    args = [] if args is _MISSING else to_list(args)

    if isinstance(callback, (list, tuple)):
        return [call_func(item, args, context, scope) for item in callback]
    if not callback:
        return None
    if isinstance(callback, str):
        callback = _resolve(callback, scope)
    if not callable(callback):
        return None
    if context is not None:
        callback = types.MethodType(callback, context)
    return callback(*args)


def defer(callback, args: Any = _MISSING, delay: Any = 1, context: Any = None, scope: Mapping | None = None) -> None:
    """Call callback after at least delay milliseconds (minimum 1).

    Errors raised by the deferred call are logged, not propagated.
    """
    try:
        delay = int(delay)
    except (TypeError, ValueError):
        delay = 1

    def _run() -> None:
        try:
            call_func(callback, args, context, scope)
        except Exception:
            logger.exception("Deferred callback %r failed", callback)

    timer = threading.Timer(max(1, delay) / 1000.0, _run)
    timer.daemon = True
    timer.start()
