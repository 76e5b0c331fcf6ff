"""
Core

- signal: per-emitter handler lists and the view signal names
"""

from termview.core.signal import (
    SignalBridge, SignalEmitter, Connection,
    SIGNAL_TEXT_CHANGED, SIGNAL_FOCUS_ENTER, SIGNAL_FOCUS_LEAVE,
    SIGNAL_RESIZE_NEEDED, SIGNAL_NEEDS_DISPLAY,
    SIGNAL_SUBVIEW_ADDED, SIGNAL_SUBVIEW_REMOVED, SIGNAL_TOP_CHANGED,
    VIEW_SIGNALS,
)

__all__ = [
    "SignalBridge", "SignalEmitter", "Connection",
    "SIGNAL_TEXT_CHANGED", "SIGNAL_FOCUS_ENTER", "SIGNAL_FOCUS_LEAVE",
    "SIGNAL_RESIZE_NEEDED", "SIGNAL_NEEDS_DISPLAY",
    "SIGNAL_SUBVIEW_ADDED", "SIGNAL_SUBVIEW_REMOVED", "SIGNAL_TOP_CHANGED",
    "VIEW_SIGNALS",
]
