# -*- coding: utf-8 -*-
"""
clipboard_monitor.py - Clipboard monitoring module
Polls the clipboard on a fixed interval and triggers a callback on new text
"""

import threading
from typing import Callable, Optional
from dataclasses import dataclass
import pyperclip

from .config import DEFAULT_CHECK_INTERVAL_MS, require_credentials


class MonitoringActiveError(RuntimeError):
    """Raised when a session already has a running poller"""


@dataclass
class MonitorSession:
    """State of one monitoring run"""
    token: str
    channel_slug: str
    block_title: str = ""
    last_seen: str = ""
    running: bool = False

    @classmethod
    def create(cls, token: str, channel_slug: str, block_title: str = "") -> 'MonitorSession':
        """Validate the connection settings and build a fresh session"""
        require_credentials(token, channel_slug)
        return cls(
            token=token.strip(),
            channel_slug=channel_slug.strip(),
            block_title=(block_title or "").strip()
        )


def read_clipboard_text() -> str:
    """Read current clipboard text; raises if the clipboard is unavailable"""
    content = pyperclip.paste()
    if not isinstance(content, str):
        raise pyperclip.PyperclipException("Clipboard does not contain text")
    return content


class ClipboardMonitor:
    """
    Monitors clipboard for changes in a background thread.
    Triggers callback when clipboard content changes to a non-empty value.
    """

    def __init__(
        self,
        session: MonitorSession,
        on_change: Callable[[str], None],
        read_clipboard: Optional[Callable[[], str]] = None,
        interval_ms: int = DEFAULT_CHECK_INTERVAL_MS,
        on_log: Optional[Callable[[str], None]] = None
    ):
        self.session = session
        self.on_change = on_change
        self.read_clipboard = read_clipboard or read_clipboard_text
        self.interval = interval_ms / 1000.0
        self.on_log = on_log or (lambda x: None)
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()

    def _log(self, message: str):
        self.on_log(f"[MONITOR] {message}")

    @property
    def is_running(self) -> bool:
        return self.session.running

    def start(self):
        """Record the current clipboard as seen and start polling"""
        if self.session.running:
            raise MonitoringActiveError(
                f"Already monitoring channel '{self.session.channel_slug}'"
            )

        # Pre-existing clipboard content is never sent
        try:
            self.session.last_seen = self.read_clipboard()
        except Exception as e:
            self.session.last_seen = ""
            self._log(f"Warning: could not read the initial clipboard content: {e}")

        self._stop_event.clear()
        self.session.running = True
        self._thread = threading.Thread(target=self._monitor_loop, daemon=True)
        self._thread.start()
        self._log(f"Monitoring clipboard every {self.interval:g}s")

    def stop(self):
        """Request the polling loop to stop; repeated calls are no-ops"""
        if self._stop_event.is_set():
            return
        self._stop_event.set()
        self._log("Stopping the monitor...")

    def join(self, timeout: Optional[float] = None):
        """Wait for the polling thread to exit"""
        if self._thread:
            self._thread.join(timeout=timeout)
            if not self._thread.is_alive():
                self._thread = None

    def poll_once(self) -> Optional[str]:
        """
        Run a single tick. Returns the content that triggered on_change,
        or None when nothing new was seen.
        """
        try:
            content = self.read_clipboard()
        except Exception:
            return None  # Read failures count as "no change"

        if not content or content == self.session.last_seen:
            return None

        self.session.last_seen = content
        try:
            self.on_change(content)
        except Exception as e:
            self._log(f"Change handler error: {e}")
        return content

    def _monitor_loop(self):
        """Main monitoring loop"""
        try:
            while not self._stop_event.wait(self.interval):
                self.poll_once()
        finally:
            self.session.running = False
            self._log("Monitor stopped")
