"""Shared fixtures: every test starts with empty ID counters and debug flags."""

import pytest

from khoai import _anchor


@pytest.fixture(autouse=True)
def _clean_anchor():
    _anchor.clear()
    yield
    _anchor.clear()
