# -*- coding: utf-8 -*-
"""
cli.py - Headless console runner
Reads settings from the environment / .env file and monitors until Ctrl+C
"""

import signal
import threading
from typing import Optional

from .arena_client import ArenaClient, SendOutcome
from .config import Config, ConfigError, ENV_TOKEN, ENV_CHANNEL
from .connector import ArenaConnector

OUTCOME_POLL_SECONDS = 0.5


def _print_outcome(outcome: SendOutcome):
    print(outcome.message)


def run_headless(env_file: Optional[str] = None, interval_ms: Optional[int] = None) -> int:
    """Run the monitor in the terminal. Returns a process exit code."""
    try:
        settings = Config.from_env(env_file)
        if interval_ms is not None:
            settings.check_interval_ms = interval_ms
        settings.validate()
    except ConfigError as e:
        print(f"Error: {e}. Set {ENV_TOKEN} and {ENV_CHANNEL} (or put them in a .env file).")
        return 1

    connector = ArenaConnector(
        client=ArenaClient(timeout=settings.request_timeout, on_log=print),
        interval_ms=settings.check_interval_ms,
        on_log=print
    )

    stop_requested = threading.Event()

    def _handle_signal(signum, frame):
        stop_requested.set()

    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)

    print("🚀 Starting clipboard monitor for Are.na...")
    print(f"➡️  Sending to channel: {settings.channel_slug}")
    print("📋 Copy some text (Ctrl+C) and it will be sent to Are.na.")
    print("ℹ️  Press Ctrl+C in this terminal to stop.")

    connector.start(settings.arena_token, settings.channel_slug, settings.block_title)

    # This thread is the only consumer of send outcomes
    while not stop_requested.is_set():
        outcome = connector.next_outcome(timeout=OUTCOME_POLL_SECONDS)
        if outcome:
            _print_outcome(outcome)

    print("\n🛑 Stopping the monitor...")
    connector.stop(wait=True)
    connector.wait_for_pending(timeout=settings.request_timeout)
    connector.drain_outcomes(_print_outcome)
    return 0
