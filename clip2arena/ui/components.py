# -*- coding: utf-8 -*-
"""
components.py - Reusable widgets for the Clip2Arena window
"""

import customtkinter as ctk
from typing import Optional
from .theme import theme, get_status_color


class StatusLog(ctk.CTkTextbox):
    """Read-only log of status lines, colored by kind"""

    def __init__(self, master, max_lines: int = 300, **kwargs):
        super().__init__(
            master,
            fg_color=theme.bg_light,
            text_color=theme.text_secondary,
            font=(theme.font_mono, theme.font_size_small),
            border_width=1,
            border_color=theme.border_default,
            corner_radius=theme.corner_radius,
            **kwargs
        )
        for kind in ("sent", "error", "monitoring", "info"):
            self.tag_config(kind, foreground=get_status_color(kind))
        self.configure(state="disabled")
        self._line_count = 0
        self._max_lines = max_lines

    def append(self, text: str, kind: str = "info"):
        """Append one line to the log"""
        self.configure(state="normal")
        if self._line_count > 0:
            self.insert("end", "\n")
        self.insert("end", text, kind)
        self._line_count += 1

        if self._line_count > self._max_lines:
            self.delete("1.0", "2.0")
            self._line_count -= 1

        self.configure(state="disabled")
        self.see("end")


class StatusIndicator(ctk.CTkFrame):
    """Colored dot with a label"""

    def __init__(self, master, label: str = "Status", **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)

        self._dot = ctk.CTkLabel(
            self,
            text="●",
            font=(theme.font_family, 14),
            text_color=theme.text_muted,
            width=20
        )
        self._dot.pack(side="left", padx=(0, 5))

        self._label = ctk.CTkLabel(
            self,
            text=label,
            font=(theme.font_family, theme.font_size_normal),
            text_color=theme.text_primary
        )
        self._label.pack(side="left")

    def set_status(self, status: str, label: Optional[str] = None):
        """Update dot color and optionally the label"""
        color = get_status_color(status)
        self._dot.configure(text_color=color)
        if label:
            self._label.configure(text=label, text_color=color if status != "stopped" else theme.text_primary)


class FormField(ctk.CTkFrame):
    """Label + entry row with an inline error message"""

    def __init__(self, master, label: str, secret: bool = False, placeholder: str = "", **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            self,
            text=label,
            width=120,
            anchor="w",
            font=(theme.font_family, theme.font_size_normal),
            text_color=theme.text_secondary
        ).grid(row=0, column=0, sticky="w")

        self.var = ctk.StringVar()
        self.entry = ctk.CTkEntry(
            self,
            textvariable=self.var,
            show="•" if secret else "",
            placeholder_text=placeholder,
            font=(theme.font_family, theme.font_size_normal),
            fg_color=theme.bg_light,
            border_color=theme.border_default,
            text_color=theme.text_primary
        )
        self.entry.grid(row=0, column=1, sticky="ew")

        self._error = ctk.CTkLabel(
            self,
            text="",
            font=(theme.font_family, theme.font_size_small),
            text_color=theme.accent_red
        )
        self._error.grid(row=1, column=1, sticky="w")

    @property
    def value(self) -> str:
        return self.var.get()

    @value.setter
    def value(self, text: str):
        self.var.set(text or "")

    def set_error(self, message: str = ""):
        self._error.configure(text=message)
        self.entry.configure(border_color=theme.accent_red if message else theme.border_default)

    def set_enabled(self, enabled: bool):
        self.entry.configure(state="normal" if enabled else "disabled")


class ArenaButton(ctk.CTkButton):
    """Outlined button in the theme's colors"""

    def __init__(self, master, text: str, accent: Optional[str] = None, **kwargs):
        accent = accent or theme.accent_white
        super().__init__(
            master,
            text=text,
            font=(theme.font_family, theme.font_size_normal, "bold"),
            fg_color="transparent",
            hover_color=theme.bg_hover,
            border_width=1,
            border_color=accent,
            text_color=accent,
            corner_radius=theme.corner_radius,
            **kwargs
        )

    def set_accent(self, accent: str):
        self.configure(border_color=accent, text_color=accent)
