# -*- coding: utf-8 -*-
"""
ui - User Interface module for Clip2Arena
Provides the customtkinter window and its widgets
"""

from .theme import theme, ArenaTheme, get_status_color
from .main_window import MainWindow

__all__ = ['theme', 'ArenaTheme', 'get_status_color', 'MainWindow']
