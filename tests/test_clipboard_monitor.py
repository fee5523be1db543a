# tests/test_clipboard_monitor.py
"""
Tests for the clipboard change detector.
"""

import time
from unittest.mock import Mock

import pytest

from clip2arena.clipboard_monitor import (
    ClipboardMonitor,
    MonitorSession,
    MonitoringActiveError,
)
from clip2arena.config import ConfigError


def wait_until(condition, timeout=2.0, interval=0.01):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(interval)
    return False


@pytest.fixture
def session():
    return MonitorSession.create("token", "my-channel")


class TestMonitorSession:

    def test_create_strips_fields(self):
        session = MonitorSession.create("  tok ", " chan ", " title ")
        assert session.token == "tok"
        assert session.channel_slug == "chan"
        assert session.block_title == "title"
        assert session.last_seen == ""
        assert session.running is False

    def test_create_without_title(self):
        assert MonitorSession.create("tok", "chan").block_title == ""

    @pytest.mark.parametrize("token,slug", [("", "chan"), ("tok", ""), ("   ", "chan")])
    def test_create_rejects_missing_settings(self, token, slug):
        with pytest.raises(ConfigError):
            MonitorSession.create(token, slug)


class TestChangeDetection:
    """Ticks are driven with poll_once so no thread is involved"""

    def test_fires_only_on_new_non_empty_content(self, session, make_clipboard):
        clipboard = make_clipboard("x", "x", "hello", "", "hello", "world", "world")
        on_change = Mock()
        monitor = ClipboardMonitor(session, on_change, read_clipboard=clipboard)
        session.last_seen = "x"

        for _ in range(7):
            monitor.poll_once()

        assert [c.args[0] for c in on_change.call_args_list] == ["hello", "world"]
        assert session.last_seen == "world"

    def test_empty_content_is_suppressed(self, session, make_clipboard):
        on_change = Mock()
        monitor = ClipboardMonitor(session, on_change, read_clipboard=make_clipboard(""))
        session.last_seen = "hello"

        assert monitor.poll_once() is None
        on_change.assert_not_called()
        assert session.last_seen == "hello"

    def test_read_failure_skips_tick(self, session, make_clipboard):
        clipboard = make_clipboard(RuntimeError("clipboard locked"), "a")
        on_change = Mock()
        monitor = ClipboardMonitor(session, on_change, read_clipboard=clipboard)

        assert monitor.poll_once() is None
        assert monitor.poll_once() == "a"
        on_change.assert_called_once_with("a")

    def test_failing_callback_does_not_retrigger(self, session, make_clipboard):
        on_change = Mock(side_effect=ValueError("boom"))
        log = Mock()
        monitor = ClipboardMonitor(session, on_change, read_clipboard=make_clipboard("a"), on_log=log)

        monitor.poll_once()
        monitor.poll_once()

        on_change.assert_called_once_with("a")
        assert session.last_seen == "a"
        assert any("boom" in c.args[0] for c in log.call_args_list)

    def test_last_seen_updated_before_callback(self, session, make_clipboard):
        seen = []
        monitor = ClipboardMonitor(
            session, lambda content: seen.append(session.last_seen),
            read_clipboard=make_clipboard("new")
        )
        monitor.poll_once()
        assert seen == ["new"]


class TestLifecycle:

    def test_start_does_not_send_existing_content(self, session, make_clipboard):
        on_change = Mock()
        monitor = ClipboardMonitor(session, on_change, read_clipboard=make_clipboard("x"), interval_ms=60000)

        monitor.start()
        try:
            assert session.running is True
            assert session.last_seen == "x"
        finally:
            monitor.stop()
            monitor.join(timeout=2)

        on_change.assert_not_called()
        assert session.running is False

    def test_initial_read_failure_starts_empty(self, session, make_clipboard):
        log = Mock()
        clipboard = make_clipboard(RuntimeError("no clipboard"), "later")
        monitor = ClipboardMonitor(session, Mock(), read_clipboard=clipboard, interval_ms=60000, on_log=log)

        monitor.start()
        monitor.stop()
        monitor.join(timeout=2)

        assert session.last_seen == ""
        assert any("Warning" in c.args[0] for c in log.call_args_list)

    def test_second_start_is_rejected(self, session, make_clipboard):
        monitor = ClipboardMonitor(session, Mock(), read_clipboard=make_clipboard("x"), interval_ms=60000)
        monitor.start()
        try:
            with pytest.raises(MonitoringActiveError):
                monitor.start()
            other = ClipboardMonitor(session, Mock(), read_clipboard=make_clipboard("x"))
            with pytest.raises(MonitoringActiveError):
                other.start()
        finally:
            monitor.stop()
            monitor.join(timeout=2)

    def test_detects_changes_while_running(self, session, make_clipboard):
        clipboard = make_clipboard("x")
        on_change = Mock()
        monitor = ClipboardMonitor(session, on_change, read_clipboard=clipboard, interval_ms=10)

        monitor.start()
        try:
            clipboard.set("copied")
            assert wait_until(lambda: on_change.call_count == 1)
        finally:
            monitor.stop()
            monitor.join(timeout=2)

        on_change.assert_called_once_with("copied")

    def test_no_triggers_after_stop(self, session):
        counter = iter(range(1, 1000000))
        on_change = Mock()
        monitor = ClipboardMonitor(
            session, on_change, read_clipboard=lambda: str(next(counter)), interval_ms=10
        )

        monitor.start()
        assert wait_until(lambda: on_change.call_count >= 2)
        monitor.stop()
        monitor.join(timeout=1)

        assert session.running is False
        calls = on_change.call_count
        time.sleep(0.1)
        assert on_change.call_count == calls

    def test_stop_is_observed_within_one_period(self, session, make_clipboard):
        monitor = ClipboardMonitor(session, Mock(), read_clipboard=make_clipboard("x"), interval_ms=500)
        monitor.start()

        started = time.monotonic()
        monitor.stop()
        monitor.join(timeout=2)

        assert time.monotonic() - started < 0.5
        assert session.running is False

    def test_repeated_stop_is_a_no_op(self, session, make_clipboard):
        log = Mock()
        monitor = ClipboardMonitor(
            session, Mock(), read_clipboard=make_clipboard("x"), interval_ms=60000, on_log=log
        )
        monitor.start()

        monitor.stop()
        monitor.stop()
        monitor.join(timeout=2)

        stops = [c for c in log.call_args_list if "Stopping" in c.args[0]]
        assert len(stops) == 1

    def test_can_restart_after_stop(self, session, make_clipboard):
        monitor = ClipboardMonitor(session, Mock(), read_clipboard=make_clipboard("x"), interval_ms=60000)
        monitor.start()
        monitor.stop()
        monitor.join(timeout=2)

        monitor.start()
        try:
            assert session.running is True
        finally:
            monitor.stop()
            monitor.join(timeout=2)
