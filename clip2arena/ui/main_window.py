# -*- coding: utf-8 -*-
"""
main_window.py - Main application window
Connection form, start/stop control, last copied preview and status log
"""

import webbrowser
import customtkinter as ctk
from typing import Callable, Optional

from ..config import Config
from .theme import theme
from .components import StatusLog, StatusIndicator, FormField, ArenaButton

TOKEN_HELP_URL = "https://dev.are.na/"


class MainWindow(ctk.CTk):
    """Single-page window for configuring and controlling monitoring"""

    def __init__(
        self,
        settings: Optional[Config] = None,
        on_start: Callable[[str, str, str, bool], None] = None,
        on_stop: Callable[[], None] = None
    ):
        super().__init__()

        self._on_start = on_start or (lambda *args: None)
        self._on_stop = on_stop or (lambda: None)
        self._monitoring = False

        # Window setup
        self.title("CTRL+C to Are.na")
        self.geometry("600x560")
        self.minsize(520, 480)

        ctk.set_appearance_mode("dark")
        self.configure(fg_color=theme.bg_dark)

        self._create_header()
        self._create_form()
        self._create_status()
        self._create_log()

        if settings:
            self._load_settings(settings)

    def _create_header(self):
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.pack(fill="x", padx=theme.padding * 3, pady=(15, 5))

        ctk.CTkLabel(
            header,
            text="Ctrl+C to Are.na",
            font=(theme.font_family, theme.font_size_title, "bold"),
            text_color=theme.text_primary
        ).pack(anchor="w")

        ctk.CTkLabel(
            header,
            text="Monitors and sends whatever TEXT you copy (Ctrl+C) into a channel of your Are.na account.",
            font=(theme.font_family, theme.font_size_small),
            text_color=theme.text_secondary,
            wraplength=540,
            justify="left"
        ).pack(anchor="w", pady=(5, 0))

        link = ctk.CTkLabel(
            header,
            text="Click here to get your Are.na API token.",
            font=(theme.font_family, theme.font_size_small, "underline"),
            text_color=theme.accent_blue,
            cursor="hand2"
        )
        link.pack(anchor="w", pady=(5, 0))
        link.bind("<Button-1>", lambda e: webbrowser.open(TOKEN_HELP_URL))

    def _create_form(self):
        form = ctk.CTkFrame(self, fg_color=theme.bg_medium, corner_radius=theme.corner_radius)
        form.pack(fill="x", padx=theme.padding * 3, pady=10)

        self._token_field = FormField(form, "Are.na token:", secret=True)
        self._token_field.pack(fill="x", padx=12, pady=(12, 2))

        self._slug_field = FormField(form, "Channel slug:", placeholder="my-channel")
        self._slug_field.pack(fill="x", padx=12, pady=2)

        self._title_field = FormField(form, "Block title:", placeholder="optional")
        self._title_field.pack(fill="x", padx=12, pady=2)

        self._remember_var = ctk.BooleanVar(value=False)
        self._remember_box = ctk.CTkCheckBox(
            form,
            text="Remember settings (token is stored unencrypted)",
            variable=self._remember_var,
            font=(theme.font_family, theme.font_size_small),
            text_color=theme.text_secondary
        )
        self._remember_box.pack(anchor="w", padx=12, pady=(2, 8))

        self._toggle_btn = ArenaButton(
            form, text="▶ Connect", width=160, height=36,
            command=self._toggle_monitoring
        )
        self._toggle_btn.pack(anchor="w", padx=12, pady=(0, 12))

    def _create_status(self):
        status = ctk.CTkFrame(self, fg_color="transparent")
        status.pack(fill="x", padx=theme.padding * 3, pady=(0, 5))

        self._status_indicator = StatusIndicator(status, "Not monitoring")
        self._status_indicator.set_status("stopped")
        self._status_indicator.pack(anchor="w")

        self._last_copied = ctk.CTkLabel(
            status,
            text="The text that will be sent.",
            font=(theme.font_family, theme.font_size_small),
            text_color=theme.text_primary,
            anchor="w",
            justify="left",
            wraplength=540
        )
        self._last_copied.pack(anchor="w", pady=(5, 0))

    def _create_log(self):
        self._log_display = StatusLog(self, height=160)
        self._log_display.pack(fill="both", expand=True, padx=theme.padding * 3, pady=(5, 15))

    def _load_settings(self, settings: Config):
        self._token_field.value = settings.arena_token
        self._slug_field.value = settings.channel_slug
        self._title_field.value = settings.block_title
        self._remember_var.set(settings.remember_settings)

    def _toggle_monitoring(self):
        if self._monitoring:
            self._on_stop()
            return

        token = self._token_field.value
        slug = self._slug_field.value
        self._token_field.set_error("" if token.strip() else "token is required")
        self._slug_field.set_error("" if slug.strip() else "channel slug is required")
        self._on_start(token, slug, self._title_field.value, self._remember_var.get())

    # Public methods for updating UI state
    def log(self, message: str, kind: str = "info"):
        """Add message to the status log"""
        self._log_display.append(message, kind)

    def show_error(self, message: str):
        self.log(message, "error")

    def set_monitoring(self, monitoring: bool):
        """Switch between the editable form and the monitoring state"""
        self._monitoring = monitoring
        for field in (self._token_field, self._slug_field, self._title_field):
            field.set_enabled(not monitoring)
        self._remember_box.configure(state="disabled" if monitoring else "normal")

        if monitoring:
            self._status_indicator.set_status(
                "monitoring", "Monitoring your clipboard - be careful..."
            )
            self._toggle_btn.configure(text="■ Stop monitoring")
            self._toggle_btn.set_accent(theme.accent_red)
        else:
            self._status_indicator.set_status("stopped", "Not monitoring")
            self._toggle_btn.configure(text="▶ Connect")
            self._toggle_btn.set_accent(theme.accent_white)

    def set_last_copied(self, content: str):
        self._last_copied.configure(text="Last copied: " + content)
