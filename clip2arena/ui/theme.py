# -*- coding: utf-8 -*-
"""
theme.py - Are.na style theme configuration
Black background, white/gray text, small accent palette for status
"""

from dataclasses import dataclass


@dataclass
class ArenaTheme:
    """Monochrome Are.na-inspired theme"""

    # Backgrounds
    bg_dark: str = "#000000"           # Window background
    bg_medium: str = "#0f0f0f"         # Header / footer
    bg_light: str = "#1a1a1a"          # Panels
    bg_hover: str = "#262626"          # Hover state

    # Accents
    accent_white: str = "#ffffff"
    accent_green: str = "#17ac10"      # Sent
    accent_orange: str = "#ffb300"     # Monitoring warning
    accent_red: str = "#ff3b30"        # Error
    accent_blue: str = "#3d7cff"       # Links

    # Text colors
    text_primary: str = "#ffffff"
    text_secondary: str = "#b2b2b2"
    text_muted: str = "#5c5c5c"

    # Border colors
    border_default: str = "#333333"

    # Fonts
    font_family: str = "Arial"
    font_mono: str = "Consolas"
    font_size_small: int = 11
    font_size_normal: int = 13
    font_size_large: int = 15
    font_size_title: int = 32

    # Dimensions
    corner_radius: int = 6
    padding: int = 6


# Global theme instance
theme = ArenaTheme()


def get_status_color(status: str) -> str:
    """Get color for a status indicator or log line"""
    status_colors = {
        "monitoring": theme.accent_orange,
        "stopped": theme.text_muted,
        "sent": theme.accent_green,
        "error": theme.accent_red,
        "info": theme.text_secondary
    }
    return status_colors.get(status, theme.text_muted)
