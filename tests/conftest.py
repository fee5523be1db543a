from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest


# Ensure the project root is importable when running `pytest` via its entrypoint
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class FakeClipboard:
    """Scripted clipboard: each read returns the next value, then repeats the last.

    Exception instances in the script are raised instead of returned.
    """

    def __init__(self, *values):
        self._values = list(values)
        self._lock = threading.Lock()
        self.reads = 0

    def set(self, value):
        with self._lock:
            self._values = [value]

    def __call__(self):
        with self._lock:
            self.reads += 1
            if len(self._values) > 1:
                value = self._values.pop(0)
            else:
                value = self._values[0]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def make_clipboard():
    return FakeClipboard


ARENA_ENV_VARS = (
    "ARENA_PERSONAL_ACCESS_TOKEN",
    "ARENA_CHANNEL_SLUG",
    "ARENA_BLOCK_TITLE",
    "ARENA_CHECK_INTERVAL_MS",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Are.na variables for the test and restore them afterwards"""
    for name in ARENA_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
