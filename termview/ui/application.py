"""
Application

Owns the screen surface and the navigation state, maps key names to
navigation commands and drives the redraw pass.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional

from termview.config import ToolkitConfig
from termview.ui.draw import CellSurface, Surface
from termview.ui.navigation import FocusNavigator, NavigationContext
from termview.ui.view import View
from termview.ui.window_manager import OverlappedStack

logger = logging.getLogger(__name__)


class Application:
    """
    Runs top-level views on one surface.

    The first view passed to begin() becomes the top. Later views marked
    `modal` run on top of it until end() is called for them; others
    replace the current top-level.
    """

    def __init__(self, config: ToolkitConfig = None, surface: Surface = None):
        self.config = config or ToolkitConfig()
        self.surface = surface or CellSurface(self.config.screen_width, self.config.screen_height)
        self.overlapped: Optional[OverlappedStack] = OverlappedStack() if self.config.overlapped else None
        self.context: Optional[NavigationContext] = None
        self.navigator: Optional[FocusNavigator] = None

    @property
    def top(self) -> Optional[View]:
        return self.context.top if self.context else None

    @property
    def current(self) -> Optional[View]:
        return self.context.current if self.context else None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def begin(self, view: View) -> View:
        """Start running a top-level view and give it focus."""
        view.screen_size = self.surface.size

        if self.context is None:
            self.context = NavigationContext(top=view, overlapped=self.overlapped)
            self.navigator = FocusNavigator(self.context)
        elif view.modal:
            self.context.begin_modal(view)
        else:
            replaced = self.context.current
            if self.overlapped is None and replaced is not view:
                replaced.clear_focus()
            self.context.current = view

        if self.overlapped is not None and not view.modal:
            front = self.overlapped.front
            if front is not None and front is not view:
                front.clear_focus()
            self.overlapped.push(view)

        view.set_focus()
        view.set_needs_display()
        logger.debug(f"Running {view!r}")
        return view

    def end(self, view: View):
        """Stop running a top-level view."""
        if self.context is None:
            return
        view.clear_focus()

        if view.modal:
            self.context.end_modal(view)
        if self.overlapped is not None and view in self.overlapped:
            self.overlapped.remove(view)
            self.context.current = self.context.modal or self.overlapped.front or self.context.top
        elif not view.modal and view is self.context.current and view is not self.context.top:
            self.context.current = self.context.modal or self.context.top

        if self.context.current is not view:
            self.context.current.set_focus()
        for root in self._roots():
            root.set_needs_display()
        logger.debug(f"Ended {view!r}")

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def _commands(self) -> Dict[str, Callable[[], bool]]:
        keys = self.config.keys
        return {
            keys.next_view: self.navigator.move_next,
            keys.previous_view: self.navigator.move_previous,
            keys.next_top: self.navigator.move_next_or_top,
            keys.previous_top: self.navigator.move_previous_or_top,
        }

    def process_key(self, key: str) -> bool:
        """Run the navigation command bound to `key`. Returns True if handled."""
        if self.navigator is None:
            return False
        command = self._commands().get(key)
        if command is None:
            return False
        command()
        return True

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def _roots(self) -> List[View]:
        """Top-level views, back to front."""
        if self.context is None:
            return []
        top, current = self.context.top, self.context.current
        if self.overlapped is not None and top in self.overlapped:
            roots = self.overlapped.views
        elif self.overlapped is not None:
            roots = [top] + self.overlapped.views
        else:
            roots = [top]
            if current is not top and current not in self.context.modal_stack:
                roots.append(current)
        roots.extend(v for v in self.context.modal_stack if v not in roots)
        return roots

    def refresh(self):
        """Redraw what needs it. Once a root redraws, every root in front of it does too."""
        force = False
        for root in self._roots():
            if not root.visible:
                continue
            if force or root.needs_display or root.subview_needs_display:
                root.draw(self.surface, force=force)
                force = True
