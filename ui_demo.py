"""
UI System Demo

Builds a small form in a bordered window, tabs through it and prints the
rendered screen after each step.

Shows:
- Window with border and title
- Labels sized to their text, buttons with focus colors
- Keyboard focus navigation (Tab / Shift+Tab)
- A modal dialog capturing navigation
"""

from __future__ import annotations
import logging

from termview.config import ToolkitConfig
from termview.ui import (
    Application, Button, Label, Rect, Window, BorderStyle, deepest_focused,
)

logger = logging.getLogger("ui_demo")


def build_form() -> Window:
    win = Window(title="Settings", frame=Rect(0, 0, 40, 10))
    win.add(
        Label("Name:", x=1, y=1),
        Button("Edit", x=10, y=1),
        Label("Theme:", x=1, y=3),
        Button("Dark", x=10, y=3),
        Button("Light", x=19, y=3),
        Button("Save", x=1, y=6, is_default=True),
        Button("Cancel", x=12, y=6),
    )
    return win


def build_dialog() -> Window:
    dialog = Window(title="Confirm", frame=Rect(8, 3, 24, 5), border_style=BorderStyle.DOUBLE, modal=True)
    dialog.add(
        Label("Discard changes?", x=1, y=0),
        Button("Yes", x=1, y=2),
        Button("No", x=10, y=2),
    )
    return dialog


def show(app: Application, caption: str):
    app.refresh()
    focused = deepest_focused(app.current)
    print(f"--- {caption} (focus: {focused.text if focused else None})")
    print(app.surface)


def main():
    config = ToolkitConfig(screen_width=42, screen_height=12, log_level="INFO")
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    app = Application(config)
    app.begin(build_form())
    show(app, "start")

    for key in ("Tab", "Tab", "Tab", "Shift+Tab"):
        app.process_key(key)
        show(app, key)

    dialog = app.begin(build_dialog())
    show(app, "dialog")
    app.process_key("Tab")
    show(app, "dialog Tab")

    app.end(dialog)
    app.surface.clear()
    app.top.set_needs_display()
    show(app, "dialog closed")
    logger.info("Demo finished")


if __name__ == "__main__":
    main()
