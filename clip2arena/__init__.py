# -*- coding: utf-8 -*-
"""
Clip2Arena - send copied text to an Are.na channel
"""

__version__ = "1.0.0"
