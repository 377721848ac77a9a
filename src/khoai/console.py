"""Logging shortcuts over the "khoai.console" logger.

Three channels: info (log_*), warning (warn_*) and error (error_*).
The *_args functions emit their arguments joined by spaces; the *_cb
factories return a callback that prefixes a fixed description.

    cb = log_cb("Test 1")
    cb(1, 2, 3)   # INFO khoai.console: Test 1 1 2 3
"""

import logging

logger = logging.getLogger("khoai.console")


def _emit(level: int, items) -> None:
    if logger.isEnabledFor(level):
        logger.log(level, " ".join(str(item) for item in items))


def _make_cb(level: int, description):
    def _cb(*args):
        _emit(level, (*description, *args))

    return _cb


def log_args(*args) -> None:
    _emit(logging.INFO, args)


def warn_args(*args) -> None:
    _emit(logging.WARNING, args)


def error_args(*args) -> None:
    _emit(logging.ERROR, args)


def log_cb(*description):
    return _make_cb(logging.INFO, description)


def warn_cb(*description):
    return _make_cb(logging.WARNING, description)


def error_cb(*description):
    return _make_cb(logging.ERROR, description)
