"""Khoai: a grab-bag of small helpers for everyday Python."""

from importlib.metadata import version as _version

__version__ = _version("khoai")

from khoai.errors import KhoaiError, UnsupportedCastType, InvalidCallback
from khoai.coercion import (
    content_type,
    class_name,
    is_instance_of,
    is_primitive_type,
    is_numeric,
    to_number,
    to_object,
    to_list,
    cast_items_type,
    one_of,
)
from khoai.ids import next_id, current_id, reset_id
from khoai.args import optional_args
from khoai.callbacks import call_func, defer
from khoai.debug import debugging, debug_complete, is_debugging, on_debugging, get_debug_string
from khoai.console import log_args, warn_args, error_args, log_cb, warn_cb, error_cb
from khoai.collections_utils import (
    loop,
    merge_object,
    diff_object,
    diff_object_loose,
    diff_object_with,
    random_string,
    setup,
    valid_keys,
    pairs_as_object,
    pluck_by,
    chunks,
    toggle,
    define_object,
    define_constant,
)
from khoai.urls import escape_url, unescape_url
from khoai.base import BaseClass, get_proxy_counter
# textual NOT auto-imported — opt-in only

__all__ = [
    "KhoaiError",
    "UnsupportedCastType",
    "InvalidCallback",
    "content_type",
    "class_name",
    "is_instance_of",
    "is_primitive_type",
    "is_numeric",
    "to_number",
    "to_object",
    "to_list",
    "cast_items_type",
    "one_of",
    "next_id",
    "current_id",
    "reset_id",
    "optional_args",
    "call_func",
    "defer",
    "debugging",
    "debug_complete",
    "is_debugging",
    "on_debugging",
    "get_debug_string",
    "log_args",
    "warn_args",
    "error_args",
    "log_cb",
    "warn_cb",
    "error_cb",
    "loop",
    "merge_object",
    "diff_object",
    "diff_object_loose",
    "diff_object_with",
    "random_string",
    "setup",
    "valid_keys",
    "pairs_as_object",
    "pluck_by",
    "chunks",
    "toggle",
    "define_object",
    "define_constant",
    "escape_url",
    "unescape_url",
    "BaseClass",
    "get_proxy_counter",
]
