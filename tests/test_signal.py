import pytest

from termview.core.signal import (
    SignalBridge, SignalEmitter,
    SIGNAL_FOCUS_ENTER, SIGNAL_TEXT_CHANGED,
)


def test_emit_calls_handlers_in_connection_order():
    bridge = SignalBridge()
    calls = []
    first = lambda view, old, new: calls.append(("a", new))
    second = lambda view, old, new: calls.append(("b", new))
    bridge.connect(SIGNAL_TEXT_CHANGED, first)
    bridge.connect(SIGNAL_TEXT_CHANGED, second)
    bridge.emit(SIGNAL_TEXT_CHANGED, None, "", "x")

    assert calls == [("a", "x"), ("b", "x")]
    assert bridge.handlers(SIGNAL_TEXT_CHANGED) == [first, second]
    assert bridge.handlers(SIGNAL_FOCUS_ENTER) == []


def test_unknown_signal_is_rejected():
    with pytest.raises(ValueError):
        SignalBridge().connect("changed", print)


def test_disconnect_is_idempotent():
    bridge = SignalBridge()
    calls = []
    conn = bridge.connect(SIGNAL_FOCUS_ENTER, lambda view, other: calls.append(view))
    conn.disconnect()
    conn.disconnect()
    bridge.emit(SIGNAL_FOCUS_ENTER, 1, None)

    assert calls == []
    assert not conn.connected


def test_disconnect_during_emit_skips_later_handler():
    bridge = SignalBridge()
    calls = []

    def first(view, other):
        calls.append("first")
        later.disconnect()

    bridge.connect(SIGNAL_FOCUS_ENTER, first)
    later = bridge.connect(SIGNAL_FOCUS_ENTER, lambda view, other: calls.append("later"))
    bridge.emit(SIGNAL_FOCUS_ENTER, 1, None)
    bridge.emit(SIGNAL_FOCUS_ENTER, 1, None)

    assert calls == ["first", "first"]


def test_same_handler_connected_twice_disconnects_once():
    bridge = SignalBridge()
    calls = []
    handler = lambda view, other: calls.append(view)
    conn = bridge.connect(SIGNAL_FOCUS_ENTER, handler)
    bridge.connect(SIGNAL_FOCUS_ENTER, handler)
    conn.disconnect()
    bridge.emit(SIGNAL_FOCUS_ENTER, 1, None)

    assert calls == [1]


def test_handler_error_is_logged_and_raised(caplog):
    bridge = SignalBridge()

    def broken(*args):
        raise ValueError("boom")

    bridge.connect(SIGNAL_FOCUS_ENTER, broken)
    with pytest.raises(ValueError):
        bridge.emit(SIGNAL_FOCUS_ENTER, None, None)

    assert "Signal handler error [focus_enter]" in caplog.text


def test_emitter_without_listeners_is_noop():
    emitter = SignalEmitter()
    emitter.emit(SIGNAL_FOCUS_ENTER, 1, None)

    assert emitter._bridge is None
    calls = []
    emitter.connect(SIGNAL_FOCUS_ENTER, lambda view, other: calls.append(view))
    emitter.emit(SIGNAL_FOCUS_ENTER, 2, None)
    assert calls == [2]
