"""Debug channel — named on/off flags gating diagnostic callbacks.

Flags live in _anchor. The global switch (debugging() with no name) turns
every named flag on, whatever its own state.

    debugging("net")
    on_debugging("net", lambda: print("request sent"))
    debug_complete("net")
"""

from __future__ import annotations

import json
import logging
from typing import Any

from khoai import _anchor
from khoai.callbacks import call_func
from khoai.coercion import to_list

logger = logging.getLogger("khoai.debug")


def is_debugging(name: str | None = None) -> bool:
    if _anchor.debug_all or not name:
        return _anchor.debug_all
    return _anchor.debug_flags.get(name, False)


def debugging(name: str | None = None) -> None:
    """Turn a named flag on, or every flag when name is empty."""
    if not name:
        _anchor.debug_all = True
        logger.debug("Debugging everything")
        return
    _anchor.debug_flags[name] = True
    logger.debug("Debugging %s", name)


def debug_complete(name: str | None = None) -> None:
    """Turn a named flag off, or clear the global switch and all flags."""
    if not name:
        _anchor.debug_all = False
        _anchor.debug_flags.clear()
        logger.debug("Debugging complete")
        return
    _anchor.debug_flags.pop(name, None)
    logger.debug("Debugging %s complete", name)


def on_debugging(name: str | None, callback) -> None:
    """Call callback (no arguments) only while name is being debugged."""
    if is_debugging(name):
        call_func(callback)


def get_debug_string(details: Any, glue: str = "\n") -> str:
    """JSON-encode each item of details and join them with glue."""
    return glue.join(json.dumps(item, default=repr) for item in to_list(details))
