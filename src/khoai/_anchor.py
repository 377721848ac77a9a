"""Shared tables behind the ID registry, the debug channel and BaseClass.

The helper modules read and write these structures directly and keep no
state of their own; clear() wipes the counters and flags between tests.
"""

import weakref

# ID registry: namespace -> current counter
id_counters: dict[str, int] = {}

# Debug channel: flag name -> active, plus the "debug everything" switch
debug_flags: dict[str, bool] = {}
debug_all: bool = False

# Method proxy identities: function -> sequence number, shared by all instances.
# Weak keys so tagging a function never keeps it alive.
method_ids: "weakref.WeakKeyDictionary[object, int]" = weakref.WeakKeyDictionary()

# Last identity handed out; only new_method_id() moves it.
last_method_id: int = 0


def new_method_id() -> int:
    global last_method_id
    last_method_id += 1
    return last_method_id


def clear() -> None:
    """Forget every counter and flag. Method identities are never reused."""
    global debug_all
    id_counters.clear()
    debug_flags.clear()
    debug_all = False
