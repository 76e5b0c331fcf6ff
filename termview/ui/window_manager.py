"""
Window Manager

Z-ordered stack of overlapped top-level windows.

Features:
- Push/remove/bring to front/send to back
- Rotation of the front window (next / previous top)
- Front window owns keyboard focus
"""

from __future__ import annotations
import logging
from typing import List, Optional

from termview.core.signal import SignalEmitter, SIGNAL_TOP_CHANGED
from termview.ui.view import View

logger = logging.getLogger(__name__)


class OverlappedStack(SignalEmitter):
    """
    Overlapped windows, back to front. The last window is the front one.

    Hidden or disabled windows stay in the stack but are skipped when
    rotating.
    """

    def __init__(self, views: List[View] = None, enabled: bool = True):
        self._views: List[View] = []
        self.enabled = enabled
        for view in views or []:
            self.push(view)

    @property
    def views(self) -> List[View]:
        """Windows back to front."""
        return list(self._views)

    @property
    def front(self) -> Optional[View]:
        return self._views[-1] if self._views else None

    @property
    def active(self) -> bool:
        """Overlapped mode is in effect."""
        return self.enabled and bool(self._views)

    def __len__(self) -> int:
        return len(self._views)

    def __contains__(self, view: View) -> bool:
        return view in self._views

    # -------------------------------------------------------------------------
    # Stack Management
    # -------------------------------------------------------------------------

    def push(self, view: View):
        """Add a window (or move an existing one) to the front."""
        if view in self._views:
            self._views.remove(view)
        self._views.append(view)

    def remove(self, view: View):
        if view in self._views:
            self._views.remove(view)

    def bring_to_front(self, view: View):
        """Bring a window to the front."""
        if view in self._views:
            self._views.remove(view)
            self._views.append(view)

    def send_to_back(self, view: View):
        if view in self._views:
            self._views.remove(view)
            self._views.insert(0, view)

    # -------------------------------------------------------------------------
    # Rotation
    # -------------------------------------------------------------------------

    @staticmethod
    def _eligible(view: View) -> bool:
        return view.visible and view.enabled

    def rotate_next(self) -> Optional[View]:
        """Send the front window to the back and activate the new front."""
        candidates = [v for v in self._views if self._eligible(v)]
        if not candidates:
            return None
        old = self.front
        if len(candidates) > 1:
            self.send_to_back(candidates[-1])
        new = [v for v in self._views if self._eligible(v)][-1]
        self.bring_to_front(new)
        return self._activate(old, new)

    def rotate_previous(self) -> Optional[View]:
        """Bring the back-most window to the front and activate it."""
        candidates = [v for v in self._views if self._eligible(v)]
        if not candidates:
            return None
        old = self.front
        new = candidates[0] if len(candidates) > 1 else candidates[-1]
        self.bring_to_front(new)
        return self._activate(old, new)

    def _activate(self, old: Optional[View], new: View) -> View:
        if old is not None and old is not new:
            old.clear_focus()
            old.set_needs_display()
        new.set_focus()
        new.set_needs_display()
        if old is not new:
            logger.debug(f"Front window changed: {old!r} -> {new!r}")
            self.emit(SIGNAL_TOP_CHANGED, old, new)
        return new
