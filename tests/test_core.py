"""Tests for microemit module-level functionality."""

import pytest

from microemit import (
    EventEmitter,
    InvalidEventError,
    emit,
    get_default_emitter,
    listeners,
    on,
    once,
    receiver,
    remove_all_listeners,
    remove_listener,
)


def test_on_and_emit():
    """Test on() and emit() on the default emitter."""
    remove_all_listeners()
    out = []

    def a(x):
        out.append(("a", x))

    def b(x):
        out.append(("b", x))

    on("evt", a)
    on("evt", b)

    emit("evt", 1)
    assert out == [("a", 1), ("b", 1)]


def test_on_returns_default_emitter():
    """Test on() and once() return the default emitter for chaining."""
    remove_all_listeners()
    out = []

    on("evt", lambda: out.append(1)).once("evt", lambda: out.append(2))
    assert once("other", lambda: None) is get_default_emitter()

    emit("evt")
    emit("evt")
    assert out == [1, 2, 1]


def test_once():
    """Test once() listeners run only on the next emit."""
    remove_all_listeners()
    out = []

    on("p", lambda x: out.append(("on", x)))
    once("p", lambda x: out.append(("once", x)))

    emit("p", 42)
    emit("p", 43)
    assert out == [("on", 42), ("once", 42), ("on", 43)]


def test_receiver_decorator_basic():
    """Test receiver decorator basic functionality."""
    remove_all_listeners()
    out = []

    @receiver("evt")
    def handler(x):
        out.append(x)

    emit("evt", 100)
    assert out == [100]
    assert listeners("evt") == [handler]


def test_receiver_decorator_with_once():
    """Test receiver decorator with once parameter."""
    remove_all_listeners()
    out = []

    @receiver("evt", once=True)
    def handler():
        out.append("called")

    emit("evt")
    emit("evt")

    assert out == ["called"]
    assert handler not in listeners("evt")


def test_receiver_decorator_with_emitter():
    """Test receiver decorator with emitter parameter."""
    remove_all_listeners()
    another_emitter = EventEmitter()
    out = []

    @receiver("evt")  # Registered on default emitter
    def handle_default(x):
        out.append("default")
        out.append(x)

    @receiver("evt", emitter=another_emitter)  # Registered on another emitter
    def handle_another(x):
        out.append("another")
        out.append(x)

    emit("evt", 1)  # Should only be called on default emitter
    assert out == ["default", 1]
    out.clear()
    another_emitter.emit("evt", 2)  # Should only be called on another emitter
    assert out == ["another", 2]


def test_remove_listener_and_list():
    """Test remove_listener() and listeners()."""
    remove_all_listeners()

    def h(): ...

    on("x", h)
    on("x", h)
    assert listeners("x") == [h, h]
    remove_listener("x", h)
    assert listeners("x") == []
    assert "x" not in listeners()


def test_remove_listener_removes_specific_listener():
    """Test remove_listener() removes only the specified listener."""
    remove_all_listeners()
    out = []

    def h1():
        out.append(1)

    def h2():
        out.append(2)

    on("evt", h1)
    on("evt", h2)

    remove_listener("evt", h1)

    emit("evt")
    assert out == [2]


def test_remove_all_listeners_for_event():
    """Test remove_all_listeners(event) removes only that event."""
    remove_all_listeners()
    out = []

    on("evt1", lambda: out.append(1))
    on("evt2", lambda: out.append(2))

    remove_all_listeners("evt1")

    emit("evt1")
    emit("evt2")
    assert out == [2]


def test_remove_all_listeners():
    """Test remove_all_listeners() removes listeners from all events."""
    remove_all_listeners()
    out = []

    on("evt1", lambda: out.append(1))
    on("evt2", lambda: out.append(2))

    remove_all_listeners()

    emit("evt1")
    emit("evt2")

    assert not out
    assert listeners() == {}


def test_listeners_mapping():
    """Test listeners() without an event lists every event."""
    remove_all_listeners()

    def h1(): ...

    def h2(): ...

    on("a", h1)
    once("b", h2)

    assert listeners() == {"a": [h1], "b": [h2]}
    assert listeners() == get_default_emitter().listeners()


def test_emit_with_kwargs():
    """Test emit() with keyword arguments."""
    remove_all_listeners()
    result = {}

    def handler(a, x=None, y=None):
        result["a"] = a
        result["x"] = x
        result["y"] = y

    on("evt", handler)
    emit("evt", 1, x=10, y=20)

    assert result == {"a": 1, "x": 10, "y": 20}


def test_empty_event_rejected():
    """Test module-level functions reject empty event names."""
    remove_all_listeners()

    with pytest.raises(InvalidEventError):
        on("", lambda: None)
    with pytest.raises(InvalidEventError):
        emit("")
    assert listeners() == {}


def test_default_emitter_is_shared():
    """Test get_default_emitter() returns the emitter behind the functions."""
    remove_all_listeners()
    out = []

    get_default_emitter().on("evt", out.append)
    emit("evt", "shared")

    assert get_default_emitter() is get_default_emitter()
    assert out == ["shared"]
