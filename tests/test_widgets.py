from termview.ui.geometry import Rect, Size
from termview.ui.style import BorderStyle
from termview.ui.view import SizePolicy
from termview.ui.widgets import Button, Label, Window


def test_label_sizes_to_text():
    label = Label("Name:", x=2, y=1)

    assert label.frame == Rect(2, 1, 5, 1)
    assert not label.can_focus
    assert label.width_policy == SizePolicy.TEXT


def test_label_fixed_width_wraps():
    label = Label("hello world", width=5)

    assert label.frame.size == Size(5, 2)


def test_label_text_change_resizes():
    label = Label("ab")
    label.text = "abcd"

    assert label.frame.size == Size(4, 1)


def test_button_decorates_text():
    button = Button("OK")

    assert button.text == "OK"
    assert button.text_formatter.text == "[ OK ]"
    assert button.frame.size == Size(6, 1)
    assert button.can_focus


def test_default_button_marker():
    button = Button("OK", is_default=True)
    assert button.text_formatter.text == "[< OK >]"

    button.is_default = False
    assert button.frame.size == Size(6, 1)


def test_button_press():
    pressed = []
    button = Button("Go", on_click=pressed.append)

    assert button.press()
    assert pressed == [button]

    button.enabled = False
    assert not button.press()
    assert Button("Idle").press() is False


def test_window_has_border_and_title():
    win = Window(title="T", frame=Rect(0, 0, 10, 5))

    assert win.border_style == BorderStyle.SINGLE
    assert win.bounds == Rect(0, 0, 8, 3)
    assert win.can_focus
    assert not win.modal


def test_window_padding_and_no_border():
    assert Window(frame=Rect(0, 0, 10, 5), padding=1).bounds == Rect(0, 0, 6, 1)
    assert Window(frame=Rect(0, 0, 10, 5), border_style=BorderStyle.NONE).bounds == Rect(0, 0, 10, 5)
