# termview/core/signal.py
"""
Signals - Per-view notification lists.

Views and the overlapped window stack announce changes on a fixed set of
named signals. Each emitter keeps one handler list per signal name; a
handler is called with the positional arguments noted next to the name.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# Signal Names
# =============================================================================

SIGNAL_TEXT_CHANGED = 'text_changed'        # (view, old_text, new_text)
SIGNAL_FOCUS_ENTER = 'focus_enter'          # (view, other)
SIGNAL_FOCUS_LEAVE = 'focus_leave'          # (view, other)
SIGNAL_RESIZE_NEEDED = 'resize_needed'      # (view,)
SIGNAL_NEEDS_DISPLAY = 'needs_display'      # (view, region)
SIGNAL_SUBVIEW_ADDED = 'subview_added'      # (view, subview)
SIGNAL_SUBVIEW_REMOVED = 'subview_removed'  # (view, subview)
SIGNAL_TOP_CHANGED = 'top_changed'          # (old_front, new_front)

VIEW_SIGNALS = frozenset({
    SIGNAL_TEXT_CHANGED, SIGNAL_FOCUS_ENTER, SIGNAL_FOCUS_LEAVE,
    SIGNAL_RESIZE_NEEDED, SIGNAL_NEEDS_DISPLAY,
    SIGNAL_SUBVIEW_ADDED, SIGNAL_SUBVIEW_REMOVED, SIGNAL_TOP_CHANGED,
})


# =============================================================================
# Connection
# =============================================================================

@dataclass(eq=False)
class Connection:
    """One handler registered on one signal. disconnect() is idempotent."""
    signal: str
    handler: Callable[..., None]
    bridge: Optional[SignalBridge] = None

    @property
    def connected(self) -> bool:
        return self.bridge is not None

    def disconnect(self):
        if self.bridge is not None:
            self.bridge._drop(self)
            self.bridge = None


# =============================================================================
# Bridge
# =============================================================================

class SignalBridge:
    """Handler lists of one emitter, keyed by signal name."""

    def __init__(self):
        self._handlers: Dict[str, List[Connection]] = {}

    def connect(self, signal: str, handler: Callable[..., None]) -> Connection:
        if signal not in VIEW_SIGNALS:
            raise ValueError(f"Unknown signal: {signal!r}")
        connection = Connection(signal, handler, self)
        self._handlers.setdefault(signal, []).append(connection)
        return connection

    def handlers(self, signal: str) -> List[Callable[..., None]]:
        """Handlers currently connected to `signal`, in connection order."""
        return [c.handler for c in self._handlers.get(signal, ())]

    def emit(self, signal: str, *args):
        # Iterate a snapshot: handlers may disconnect themselves or others
        for connection in list(self._handlers.get(signal, ())):
            if connection.bridge is not self:
                continue
            try:
                connection.handler(*args)
            except Exception as e:
                logger.error(f"Signal handler error [{signal}]: {e}")
                raise

    def _drop(self, connection: Connection):
        connections = self._handlers.get(connection.signal)
        if connections and connection in connections:
            connections.remove(connection)


# =============================================================================
# Emitter Mixin
# =============================================================================

class SignalEmitter:
    """Mixin for objects that emit view signals. The bridge is created on first connect."""

    _bridge: Optional[SignalBridge] = None

    @property
    def signals(self) -> SignalBridge:
        if self._bridge is None:
            self._bridge = SignalBridge()
        return self._bridge

    def emit(self, signal: str, *args):
        if self._bridge is not None:
            self._bridge.emit(signal, *args)

    def connect(self, signal: str, handler: Callable[..., None]) -> Connection:
        return self.signals.connect(signal, handler)
