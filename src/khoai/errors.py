"""Exception hierarchy for khoai.

KhoaiError
├── UnsupportedCastType
└── InvalidCallback

Errors are raised synchronously to the direct caller and never caught
inside the library.
"""

from __future__ import annotations


class KhoaiError(Exception):
    """Base exception for all khoai errors."""


class UnsupportedCastType(KhoaiError, ValueError):
    """Raised by cast_items_type() for a cast name outside the supported set."""

    def __init__(self, type_name: str, supported) -> None:
        super().__init__(
            f"Invalid cast type {type_name!r}. Available types are: {', '.join(supported)}"
        )
        self.type_name = type_name


class InvalidCallback(KhoaiError, LookupError):
    """Raised when a callback name does not resolve to a callable."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid callback: {name!r} is not a callable in scope")
        self.name = name
