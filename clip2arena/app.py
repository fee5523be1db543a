# -*- coding: utf-8 -*-
"""
app.py - Main application controller for Clip2Arena
Connects the window to the monitoring connector and relays status back to it
"""

import argparse
from tkinter import TclError
from typing import Optional

from .arena_client import ArenaClient, SendOutcome, preview
from .clipboard_monitor import MonitoringActiveError
from .config import config, ConfigError
from .connector import ArenaConnector

STATUS_POLL_MS = 200
STOP_POLL_MS = 50
CLOSE_GRACE_MS = 3000


class Clip2ArenaApp:
    """
    GUI application controller.
    The Tk event loop is the single consumer of send outcomes.
    """

    def __init__(self):
        # Imported here so the headless runner never needs a display
        from .ui.main_window import MainWindow

        self._closing = False
        self._stopping = False
        self._window = MainWindow(
            settings=config,
            on_start=self._start_monitoring,
            on_stop=self._stop_monitoring
        )
        self._window.protocol("WM_DELETE_WINDOW", self._on_close)
        self._connector = ArenaConnector(
            client=ArenaClient(timeout=config.request_timeout, on_log=self._log),
            interval_ms=config.check_interval_ms,
            on_log=self._log,
            on_copied=self._on_copied
        )
        self._window.after(STATUS_POLL_MS, self._poll_outcomes)

    def _post(self, callback):
        """Schedule callback on the Tk thread; dropped once the window is closing"""
        if self._closing:
            return
        try:
            self._window.after(0, callback)
        except (RuntimeError, TclError):
            pass  # Window torn down between the check and the call

    def _log(self, message: str):
        """Thread-safe logging to UI"""
        self._post(lambda: self._window.log(message))

    def _on_copied(self, content: str):
        self._post(lambda: self._window.set_last_copied(preview(content, 80)))

    def _start_monitoring(self, token: str, slug: str, title: str, remember: bool):
        if self._stopping:
            self._window.show_error("Still stopping the previous session, try again in a moment")
            return
        try:
            config.check_monitoring()
            self._connector.interval_ms = config.check_interval_ms
            self._connector.start(token, slug, title)
        except (ConfigError, MonitoringActiveError) as e:
            self._window.show_error(str(e))
            return

        config.arena_token = token.strip()
        config.channel_slug = slug.strip()
        config.block_title = title.strip()
        config.remember_settings = remember
        try:
            config.save()
        except OSError as e:
            self._window.show_error(f"Could not save settings: {e}")

        self._window.set_monitoring(True)
        self._window.log("The software is now monitoring your clipboard.", "monitoring")

    def _stop_monitoring(self):
        """Request a stop and let the Tk loop notice when the monitor has exited"""
        if self._stopping:
            return
        self._stopping = True
        self._connector.stop()
        self._window.after(STOP_POLL_MS, self._await_stopped)

    def _await_stopped(self):
        if self._connector.is_monitoring:
            self._window.after(STOP_POLL_MS, self._await_stopped)
            return
        self._stopping = False
        self._window.set_monitoring(False)
        self._window.log("Monitoring stopped.")

    def _on_close(self):
        """Stop monitoring before the window goes away"""
        self._closing = True
        self._connector.stop()
        self._close_when_stopped(CLOSE_GRACE_MS // STOP_POLL_MS)

    def _close_when_stopped(self, polls_left: int):
        if self._connector.is_monitoring and polls_left > 0:
            self._window.after(STOP_POLL_MS, lambda: self._close_when_stopped(polls_left - 1))
            return
        # In-flight sends are left to finish on their own daemon threads
        self._window.destroy()

    def _show_outcome(self, outcome: SendOutcome):
        kind = "sent" if outcome.success else "error"
        label = f" \"{outcome.content}\"" if outcome.content else ""
        self._window.log(f"{outcome.message}{label}", kind)

    def _poll_outcomes(self):
        if self._closing:
            return
        self._connector.drain_outcomes(self._show_outcome)
        self._window.after(STATUS_POLL_MS, self._poll_outcomes)

    def run(self):
        """Run the application"""
        self._window.mainloop()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Send whatever text you copy to an Are.na channel"
    )
    parser.add_argument("--headless", action="store_true",
                        help="Run in the terminal using environment variables / .env")
    parser.add_argument("--env-file", default=None, help="Path to a .env file (headless mode)")
    parser.add_argument("--interval", type=int, default=None,
                        help="Clipboard check interval in milliseconds (headless mode)")
    return parser


def main(argv: Optional[list] = None) -> int:
    """Application entry point"""
    args = build_parser().parse_args(argv)

    if args.headless:
        from .cli import run_headless
        return run_headless(env_file=args.env_file, interval_ms=args.interval)

    app = Clip2ArenaApp()
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
