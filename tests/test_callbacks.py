"""Tests for call_func and defer."""

import logging
import threading
import time

import pytest

from khoai import InvalidCallback, call_func, defer


class TestCallFunc:
    def test_function(self):
        assert call_func(lambda old: old + 1, 10) == 11

    def test_no_args(self):
        assert call_func(lambda: "done") == "done"

    def test_argument_list(self):
        assert call_func(lambda name, age: f"{name} {age}", ["Manh", 10]) == "Manh 10"

    def test_single_list_argument_must_be_wrapped(self):
        def push(items):
            items.append(4)
            return items

        assert call_func(push, [[1, 2, 3]]) == [1, 2, 3, 4]

    def test_context(self):
        class Person:
            name = "Manh"

        def say_hi(self):
            return "Hi, " + self.name

        assert call_func(say_hi, [], Person()) == "Hi, Manh"

    def test_name_in_scope(self):
        scope = {"func_as_string": lambda old: old + 1}
        assert call_func("func_as_string", 10, scope=scope) == 11

    def test_unknown_name(self):
        with pytest.raises(InvalidCallback, match="missing"):
            call_func("missing", scope={})

    def test_name_of_non_callable(self):
        with pytest.raises(InvalidCallback):
            call_func("value", scope={"value": 5})

    def test_unknown_name_is_lookup_error(self):
        with pytest.raises(LookupError):
            call_func("khoai_surely_not_defined_in_main")

    def test_list_of_callbacks(self):
        assert call_func([lambda x: x + 1, lambda x: x * 2], 5) == [6, 10]

    def test_empty_callback(self):
        assert call_func(None, 1) is None
        assert call_func(5) is None


class TestDefer:
    def test_runs_later(self):
        done = threading.Event()
        result = []

        def _cb(value):
            result.append(value)
            done.set()

        assert defer(_cb, 42) is None
        assert done.wait(2)
        assert result == [42]

    def test_bad_delay_defaults(self):
        done = threading.Event()
        defer(done.set, delay="soon")
        assert done.wait(2)

    def test_errors_are_logged(self, caplog):
        done = threading.Event()

        def _boom():
            try:
                raise RuntimeError("boom")
            finally:
                done.set()

        with caplog.at_level(logging.ERROR, logger="khoai.callbacks"):
            defer(_boom)
            assert done.wait(2)
            # The failure is logged right after the callback returns.
            for _ in range(100):
                if "Deferred callback" in caplog.text:
                    break
                time.sleep(0.01)
        assert "Deferred callback" in caplog.text
