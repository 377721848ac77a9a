"""Textual integration for khoai. Opt-in — requires textual.

Routes the console channels (khoai.console and any other khoai logger) to
toast notifications of a running Textual app:

    with khoai.textual.attach(app):
        khoai.warn_args("disk almost full")   # app.notify(..., severity="warning")

Records are dropped while the app is not running, and calls from background
threads are marshaled with call_from_thread.
"""

import logging
import threading
from contextlib import contextmanager

from textual.app import App

_SEVERITIES = (
    (logging.ERROR, "error"),
    (logging.WARNING, "warning"),
)


def severity_for(levelno: int) -> str:
    """Textual notification severity for a logging level."""
    for threshold, severity in _SEVERITIES:
        if levelno >= threshold:
            return severity
    return "information"


class NotifyHandler(logging.Handler):
    """logging.Handler that shows each record with app.notify()."""

    def __init__(self, app: App, level: int = logging.INFO) -> None:
        super().__init__(level)
        self.app = app
        self._main = threading.get_ident()

    def emit(self, record: logging.LogRecord) -> None:
        if not self.app.is_running:
            return
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return
        severity = severity_for(record.levelno)
        if threading.get_ident() != self._main:
            self.app.call_from_thread(self.app.notify, message, severity=severity)
        else:
            self.app.notify(message, severity=severity)


@contextmanager
def attach(app: App, logger: str = "khoai", level: int = logging.INFO):
    """Install a NotifyHandler on logger for the duration of the block."""
    target = logging.getLogger(logger)
    handler = NotifyHandler(app, level)
    previous_level = target.level
    target.addHandler(handler)
    if target.getEffectiveLevel() > level:
        target.setLevel(level)
    try:
        yield handler
    finally:
        target.removeHandler(handler)
        target.setLevel(previous_level)
