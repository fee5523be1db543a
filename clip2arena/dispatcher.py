# -*- coding: utf-8 -*-
"""
dispatcher.py - Fire-and-forget sending of detected clipboard changes
Runs each send on its own worker thread and queues the outcomes for a single consumer
"""

import queue
import threading
import time
from typing import Callable, List, Optional

from .arena_client import ArenaClient, SendOutcome
from .clipboard_monitor import MonitorSession

OUTCOME_QUEUE_SIZE = 100


class Dispatcher:
    """
    Sends blocks without blocking the caller.
    Outcomes go into a bounded queue; only one consumer should read it.
    """

    def __init__(
        self,
        client: ArenaClient,
        outcomes: Optional["queue.Queue[SendOutcome]"] = None,
        on_log: Optional[Callable[[str], None]] = None
    ):
        self.client = client
        self.outcomes = outcomes if outcomes is not None else queue.Queue(maxsize=OUTCOME_QUEUE_SIZE)
        self.on_log = on_log or (lambda x: None)
        self._workers: List[threading.Thread] = []
        self._lock = threading.Lock()

    def dispatch(self, session: MonitorSession, content: str) -> threading.Thread:
        """Start sending content for the session and return immediately"""
        # Snapshot the session fields; the worker never touches the session
        worker = threading.Thread(
            target=self._send,
            args=(session.token, session.channel_slug, session.block_title, content),
            daemon=True
        )
        with self._lock:
            self._workers = [w for w in self._workers if w.is_alive()]
            self._workers.append(worker)
        worker.start()
        return worker

    def _send(self, token: str, channel_slug: str, title: str, content: str):
        try:
            outcome = self.client.send_block(token, channel_slug, content, title)
        except Exception as e:
            outcome = SendOutcome(False, f"❌ Unexpected error sending to Are.na: {e}")
        self.outcomes.put(outcome)

    @property
    def pending(self) -> int:
        """Number of sends still in flight"""
        with self._lock:
            return sum(1 for w in self._workers if w.is_alive())

    def join_pending(self, timeout: Optional[float] = None) -> bool:
        """Wait for in-flight sends; returns True if all finished"""
        with self._lock:
            workers = list(self._workers)
        deadline = None if timeout is None else time.monotonic() + timeout
        for worker in workers:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            worker.join(timeout=remaining)
        finished = not any(w.is_alive() for w in workers)
        if not finished:
            self.on_log("[DISPATCH] Some sends are still in flight")
        return finished

    def next_outcome(self, timeout: Optional[float] = None) -> Optional[SendOutcome]:
        """Block up to timeout for the next outcome"""
        try:
            return self.outcomes.get(timeout=timeout)
        except queue.Empty:
            return None

    def drain(self, handler: Callable[[SendOutcome], None]) -> int:
        """Hand every queued outcome to handler without blocking"""
        count = 0
        while True:
            try:
                outcome = self.outcomes.get_nowait()
            except queue.Empty:
                return count
            handler(outcome)
            count += 1
