# -*- coding: utf-8 -*-
"""
Input mapping from keyboard, touch and button events to move directions.
"""

from .inputs import KEY_BINDINGS, SWIPE_THRESHOLD, direction_from_key, direction_from_swipe

__all__ = ["KEY_BINDINGS", "SWIPE_THRESHOLD", "direction_from_key", "direction_from_swipe"]
