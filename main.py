# -*- coding: utf-8 -*-
"""
Clip2Arena - Clipboard to Are.na Connector
==========================================

Watches the clipboard and posts every newly copied piece of text as a
block to one of your Are.na channels.

Usage:
    python main.py                      # graphical form
    python main.py --headless           # terminal, settings from env / .env

Headless mode reads ARENA_PERSONAL_ACCESS_TOKEN, ARENA_CHANNEL_SLUG and,
optionally, ARENA_BLOCK_TITLE and ARENA_CHECK_INTERVAL_MS.

Version: 1.0.0
"""

import sys
import os

# Allow running from a source checkout without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from clip2arena.app import main

if __name__ == "__main__":
    sys.exit(main())
