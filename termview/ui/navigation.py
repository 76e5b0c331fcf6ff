"""
Focus Navigation

Keyboard focus movement across the view tree.

- deepest_focused: leaf at the end of a focused chain
- advance_with_wrap: sibling-level move that wraps to the first element
- NavigationContext: top-level / modal / overlapped state for one application
- FocusNavigator: next/previous view and next/previous top commands
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from termview.ui.view import NavigationDirection, View
from termview.ui.window_manager import OverlappedStack

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def deepest_focused(view: Optional[View]) -> Optional[View]:
    """
    Follow focused subviews down from `view`.

    Returns None when `view` is None or not focused, otherwise the deepest
    focused descendant (or `view` itself when no subview is focused).
    """
    if view is None or not view.has_focus:
        return None
    while True:
        child = next((v for v in view.subviews if v.has_focus), None)
        if child is None:
            return view
        view = child


def advance_with_wrap(
    ordered_views: Optional[Sequence[View]],
    direction: NavigationDirection,
    current: View,
):
    """
    Move focus from `current` to the view after it in `ordered_views`,
    wrapping to the first eligible view past the end.

    `ordered_views` is a snapshot of the siblings in travel order (reversed
    by the caller for backward moves). A snapshot that no longer contains
    `current` does nothing.
    """
    if not ordered_views or current is None:
        return

    views = list(ordered_views)
    last = len(views) - 1
    found = False
    attempted = False

    for index, view in enumerate(views):
        if view is current:
            found = True
        elif found and not attempted:
            attempted = True
            superview = current.superview
            if superview is not None:
                superview.advance_focus(direction)
                # Cleared focus means nothing past current accepted it
                if superview.focused is not None and superview.focused is not current:
                    return

        if found and index == last:
            target = next((v for v in views if v.can_be_focused()), None)
            if target is not None:
                logger.debug(f"Focus wrapped to {target!r}")
                target.set_focus()
            return

    if not found:
        logger.debug(f"{current!r} is not among the views to advance over")


# =============================================================================
# Context
# =============================================================================

@dataclass
class NavigationContext:
    """
    Roots navigation commands run against.

    top: the application's top-level view
    current: the top-level view currently running
    overlapped: window stack when running in overlapped mode
    """
    top: View
    current: Optional[View] = None
    overlapped: Optional[OverlappedStack] = None
    _modal_stack: List[View] = field(default_factory=list)

    def __post_init__(self):
        if self.current is None:
            self.current = self.top

    @property
    def modal(self) -> Optional[View]:
        """Innermost running modal view."""
        return self._modal_stack[-1] if self._modal_stack else None

    @property
    def modal_stack(self) -> List[View]:
        return list(self._modal_stack)

    @property
    def overlapped_active(self) -> bool:
        return self.overlapped is not None and self.overlapped.active

    def begin_modal(self, view: View):
        if view in self._modal_stack:
            self._modal_stack.remove(view)
        self._modal_stack.append(view)
        self.current = view

    def end_modal(self, view: View):
        if view in self._modal_stack:
            self._modal_stack.remove(view)
        self.current = self.modal or self.top


# =============================================================================
# Navigator
# =============================================================================

class FocusNavigator:
    """
    Runs the focus movement commands.

    Each command returns True when the deepest focused view changed. A
    command issued for a root that is already being navigated (for example
    from a focus signal handler) is ignored.
    """

    def __init__(self, context: NavigationContext):
        self.context = context
        self._in_progress: List[View] = []

    def move_next(self) -> bool:
        """Next view in the current top-level."""
        return self._move(self.context.current, NavigationDirection.FORWARD)

    def move_previous(self) -> bool:
        return self._move(self.context.current, NavigationDirection.BACKWARD)

    def move_next_or_top(self) -> bool:
        """Next overlapped window when overlapped, else next view in the modal/top view."""
        context = self.context
        if context.overlapped_active:
            return self._rotate(context.overlapped.rotate_next)
        return self._move(context.modal or context.top, NavigationDirection.FORWARD)

    def move_previous_or_top(self) -> bool:
        context = self.context
        if context.overlapped_active:
            return self._rotate(context.overlapped.rotate_previous)
        return self._move(context.modal or context.top, NavigationDirection.BACKWARD)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _rotate(self, rotate) -> bool:
        old = self.context.overlapped.front
        new = rotate()
        if new is None:
            return False
        self.context.current = new
        return new is not old

    def _move(self, root: Optional[View], direction: NavigationDirection) -> bool:
        if root is None:
            return False
        if any(r is root for r in self._in_progress):
            logger.warning(f"Ignoring re-entrant focus move on {root!r}")
            return False

        self._in_progress.append(root)
        try:
            return self._advance_root(root, direction)
        finally:
            self._in_progress.pop()

    def _advance_root(self, root: View, direction: NavigationDirection) -> bool:
        old = deepest_focused(root.focused)

        if not root.advance_focus(direction):
            root.advance_focus(direction)

        new = deepest_focused(root.focused)
        if new is not None and new is not old:
            self._mark_changed(old, new)
            return True

        # Nothing left inside root: move on among root's own siblings
        superview = root.superview
        if superview is None:
            return False

        before = deepest_focused(root.get_root())
        siblings = superview.tab_indexes
        if direction == NavigationDirection.BACKWARD:
            siblings.reverse()
        advance_with_wrap(siblings, direction, root)

        after = deepest_focused(root.get_root())
        if after is before:
            return False
        self._mark_changed(before, after)
        return True

    @staticmethod
    def _mark_changed(old: Optional[View], new: Optional[View]):
        if old is not None:
            old.set_needs_display()
        if new is not None:
            new.set_needs_display()
        logger.debug(f"Focus moved: {old!r} -> {new!r}")
