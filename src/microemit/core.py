"""
microemit.core
--------------

Module-level functions bound to a process-wide default emitter.
"""

from typing import Any, Callable, List, Optional, Union

from .emitter import EventEmitter, HandlerFunc, ListenerMap

# -------------------- module-level default emitter --------------------

_default_emitter = EventEmitter()


def get_default_emitter() -> EventEmitter:
    """Return the emitter used by the module-level functions."""
    return _default_emitter


def _get_emitter(emitter: Optional[EventEmitter] = None) -> EventEmitter:
    return emitter or _default_emitter


# Registration
def on(event: str, listener: HandlerFunc) -> EventEmitter:
    """
    Register a listener on the default emitter.
    Listeners run in registration order.

    Args:
        event (str): The event to register the listener for.
        listener (HandlerFunc): The listener to register.

    Returns:
        EventEmitter: The default emitter, for chaining.
    """
    return _default_emitter.on(event, listener)


def once(event: str, listener: HandlerFunc) -> EventEmitter:
    """
    Register a listener on the default emitter that runs on the next emit only.

    Args:
        event (str): The event to register the listener for.
        listener (HandlerFunc): The listener to register.

    Returns:
        EventEmitter: The default emitter, for chaining.
    """
    return _default_emitter.once(event, listener)


def remove_listener(event: str, listener: HandlerFunc) -> None:
    """
    Unregister every registration of `listener` for `event` on the default emitter.

    Args:
        event (str): The event to unregister the listener from.
        listener (HandlerFunc): The listener to unregister.
    """
    _default_emitter.remove_listener(event, listener)


def remove_all_listeners(event: Optional[str] = None) -> None:
    """
    Remove all listeners for `event` from the default emitter.
    If `event` is None, every event is cleared.
    """
    _default_emitter.remove_all_listeners(event)


def listeners(event: Optional[str] = None) -> Union[List[HandlerFunc], ListenerMap]:
    """
    Return the listeners registered on the default emitter.

    Args:
        event (str, optional): The event to list listeners for.
                               Defaults to None, which lists every event.

    Returns:
        A list of listeners for `event`, or a mapping of event name to listeners.
    """
    return _default_emitter.listeners(event)


# Decorator
def receiver(
    event: str,
    *,
    once: bool = False,
    emitter: Optional[EventEmitter] = None,
) -> Callable[[HandlerFunc], HandlerFunc]:
    """
    Decorator to register a function as a listener for `event`.

    Args:
        event (str): The event to register the listener for.
        once (bool, optional): Whether the listener should be called only once. Defaults to False.
        emitter (EventEmitter, optional): The emitter to register the listener on.
                                          Defaults to None. If None, the default emitter is used.

    Returns:
        Callable[[HandlerFunc], HandlerFunc]: The decorator function.

    Example:
    @receiver("user_created", once=True)
    def welcome(user):
        print("welcome", user)
    """
    return _get_emitter(emitter).receiver(event, once=once)


# Dispatch
def emit(event: str, *args: Any, **kwargs: Any) -> None:
    """
    Dispatch `event` on the default emitter.
    Exceptions raised by listeners will propagate.

    Args:
        event (str): The event to dispatch.
        *args: Positional arguments to pass to the listeners.
        **kwargs: Keyword arguments to pass to the listeners.

    Example:
    emit("user_created", user)
    """
    _default_emitter.emit(event, *args, **kwargs)
