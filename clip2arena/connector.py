# -*- coding: utf-8 -*-
"""
connector.py - Monitoring session controller
Owns the current session and wires clipboard monitor -> dispatcher -> outcome queue
"""

from typing import Callable, Optional

from .arena_client import ArenaClient, SendOutcome, preview
from .clipboard_monitor import ClipboardMonitor, MonitorSession, MonitoringActiveError
from .config import DEFAULT_CHECK_INTERVAL_MS, ConfigError
from .dispatcher import Dispatcher


class ArenaConnector:
    """
    Starts and stops clipboard monitoring for one Are.na channel at a time.
    Starting while a session is active is rejected with MonitoringActiveError.
    """

    def __init__(
        self,
        client: Optional[ArenaClient] = None,
        read_clipboard: Optional[Callable[[], str]] = None,
        interval_ms: int = DEFAULT_CHECK_INTERVAL_MS,
        on_log: Optional[Callable[[str], None]] = None,
        on_copied: Optional[Callable[[str], None]] = None
    ):
        self.on_log = on_log or (lambda x: None)
        self.on_copied = on_copied or (lambda x: None)
        self.client = client or ArenaClient(on_log=self.on_log)
        self.dispatcher = Dispatcher(self.client, on_log=self.on_log)
        self.read_clipboard = read_clipboard
        self.interval_ms = interval_ms

        self._session: Optional[MonitorSession] = None
        self._monitor: Optional[ClipboardMonitor] = None

    def _log(self, message: str):
        self.on_log(f"[APP] {message}")

    @property
    def is_monitoring(self) -> bool:
        return self._monitor is not None and self._monitor.is_running

    @property
    def session(self) -> Optional[MonitorSession]:
        return self._session

    def start(self, token: str, channel_slug: str, block_title: str = "") -> MonitorSession:
        """
        Validate settings and begin monitoring.

        Raises ConfigError for a blank token or slug or a bad interval, before anything starts,
        and MonitoringActiveError if a session is already running.
        """
        if self.is_monitoring:
            raise MonitoringActiveError(
                f"Already monitoring channel '{self._session.channel_slug}'; stop it first"
            )

        if self.interval_ms <= 0:
            raise ConfigError("check_interval_ms must be positive")

        session = MonitorSession.create(token, channel_slug, block_title)
        monitor = ClipboardMonitor(
            session,
            on_change=lambda content: self._on_clipboard_change(session, content),
            read_clipboard=self.read_clipboard,
            interval_ms=self.interval_ms,
            on_log=self.on_log
        )
        self._session = session
        self._monitor = monitor
        monitor.start()
        self._log(f"Sending to channel: {session.channel_slug}")
        return session

    def stop(self, wait: bool = False) -> bool:
        """Stop the active session. Returns False if nothing was running."""
        monitor = self._monitor
        if monitor is None or not monitor.is_running:
            return False
        monitor.stop()
        if wait:
            monitor.join(timeout=monitor.interval + 1)
        return True

    def _on_clipboard_change(self, session: MonitorSession, content: str):
        """Runs on the monitor thread; hands off to the dispatcher before anything else"""
        self.dispatcher.dispatch(session, content)
        self._log(f"✨ New content detected: \"{preview(content)}\"")
        self.on_copied(content)

    def next_outcome(self, timeout: Optional[float] = None) -> Optional[SendOutcome]:
        return self.dispatcher.next_outcome(timeout)

    def drain_outcomes(self, handler: Callable[[SendOutcome], None]) -> int:
        return self.dispatcher.drain(handler)

    def wait_for_pending(self, timeout: Optional[float] = None) -> bool:
        return self.dispatcher.join_pending(timeout)
