"""Tests for the debug channel."""

import logging

from khoai import debugging, debug_complete, is_debugging, on_debugging, get_debug_string


class TestDebugFlags:
    def test_debugging_and_complete(self):
        debugging("test")
        assert is_debugging("test") is True
        debug_complete("test")
        assert is_debugging("test") is False

    def test_never_set(self):
        assert is_debugging("nothing") is False
        assert is_debugging() is False

    def test_global_flag_covers_every_name(self):
        debugging()
        assert is_debugging() is True
        assert is_debugging("anything") is True

    def test_complete_all_clears_named_flags(self):
        debugging("a")
        debugging()
        debug_complete()
        assert is_debugging() is False
        assert is_debugging("a") is False

    def test_named_complete_keeps_global(self):
        debugging()
        debug_complete("a")
        assert is_debugging("a") is True

    def test_logs_flag_changes(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="khoai.debug"):
            debugging("net")
            debug_complete("net")
        assert "Debugging net" in caplog.text
        assert "Debugging net complete" in caplog.text


class TestOnDebugging:
    def test_runs_when_debugging(self):
        calls = []
        debugging("test")
        on_debugging("test", lambda: calls.append(1))
        assert calls == [1]

    def test_skipped_when_not_debugging(self):
        calls = []
        on_debugging("test", lambda: calls.append(1))
        assert calls == []

    def test_global_flag(self):
        calls = []
        debugging()
        on_debugging("whatever", lambda: calls.append(1))
        on_debugging(None, lambda: calls.append(2))
        assert calls == [1, 2]


class TestGetDebugString:
    def test_list(self):
        assert get_debug_string([1, "a", {"b": 2}]) == '1\n"a"\n{"b": 2}'

    def test_scalar_and_glue(self):
        assert get_debug_string("x") == '"x"'
        assert get_debug_string([1, 2], ", ") == "1, 2"
