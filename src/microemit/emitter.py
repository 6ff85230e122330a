"""
Listener registry and dispatcher.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Protocol,
    TypeVar,
    Union,
)

from .exceptions import InvalidEventError

logger = logging.getLogger(__name__)

HandlerFunc = Callable[..., Any]
ListenerMap = Dict[str, List[HandlerFunc]]

_E = TypeVar("_E", bound="EventEmitterMixin")


class SupportsEvents(Protocol):
    """
    Protocol for event sources.
    """

    def on(self, event: str, listener: HandlerFunc) -> Any: ...

    def once(self, event: str, listener: HandlerFunc) -> Any: ...

    def remove_listener(self, event: str, listener: HandlerFunc) -> None: ...

    def remove_all_listeners(self, event: Optional[str] = None) -> None: ...

    def listeners(
        self, event: Optional[str] = None
    ) -> Union[List[HandlerFunc], ListenerMap]: ...

    def emit(self, event: str, *args: Any, **kwargs: Any) -> None: ...


@dataclass(eq=False)
class _Listener:
    # Compared by identity: registering the same callback twice yields two entries.
    func: HandlerFunc
    once: bool = False

    def call(self, *args: Any, **kwargs: Any) -> Any:
        """
        Call the listener with the given arguments.
        """
        return self.func(*args, **kwargs)


def _check_event(event: str) -> None:
    if not isinstance(event, str):
        raise TypeError("event must be a string")
    if event == "":
        raise InvalidEventError()


class EventEmitterMixin:
    """
    Turns any class into an event source.

    The registry and its lock are created on first use, so subclasses do not
    need to call an initializer. Listeners run synchronously on the caller's
    thread, in registration order.
    """

    @property
    def _event_lock(self) -> threading.RLock:
        lock = self.__dict__.get("_microemit_lock")
        if lock is None:
            lock = self.__dict__.setdefault("_microemit_lock", threading.RLock())
        return lock

    @property
    def _event_listeners(self) -> Dict[str, List[_Listener]]:
        registry = self.__dict__.get("_microemit_listeners")
        if registry is None:
            registry = self.__dict__.setdefault("_microemit_listeners", {})
        return registry

    # -------------------- registration API --------------------
    def on(self: _E, event: str, listener: HandlerFunc) -> _E:
        """
        Register a listener called every time `event` is emitted.
        The same callable may be registered several times; it then runs once per registration.

        Args:
            event (str): The event to register the listener for. Must not be empty.
            listener (HandlerFunc): The callable to register.

        Returns:
            The emitter itself, so registrations can be chained.

        Raises:
            InvalidEventError: If `event` is an empty string.
            TypeError: If `event` is not a string or `listener` is not callable.
        """
        self._add(event, listener, once=False)
        return self

    def once(self: _E, event: str, listener: HandlerFunc) -> _E:
        """
        Register a listener called only on the next emit of `event`.

        Args:
            event (str): The event to register the listener for. Must not be empty.
            listener (HandlerFunc): The callable to register.

        Returns:
            The emitter itself, so registrations can be chained.
        """
        self._add(event, listener, once=True)
        return self

    def _add(self, event: str, listener: HandlerFunc, once: bool) -> None:
        _check_event(event)
        if not callable(listener):
            raise TypeError("listener must be callable")

        with self._event_lock:
            self._event_listeners.setdefault(event, []).append(
                _Listener(func=listener, once=once)
            )
        logger.debug(
            "Registered %s listener %r for event '%s'",
            "once" if once else "persistent",
            listener,
            event,
        )

    def remove_listener(self, event: str, listener: HandlerFunc) -> None:
        """
        Unregister every registration of `listener` for `event`.
        Listeners are matched by identity. Unknown events or listeners are ignored.

        Args:
            event (str): The event to unregister the listener from. Must not be empty.
            listener (HandlerFunc): The callable to unregister.
        """
        _check_event(event)

        with self._event_lock:
            current = self._event_listeners.get(event)
            if not current:
                return
            remaining = [entry for entry in current if entry.func is not listener]
            removed = len(current) - len(remaining)
            if not removed:
                return
            self._replace(event, remaining)
        logger.debug(
            "Removed %d registration(s) of %r from event '%s'", removed, listener, event
        )

    def remove_all_listeners(self, event: Optional[str] = None) -> None:
        """Remove all listeners for `event`, or for every event when `event` is None."""
        with self._event_lock:
            if event is None:
                self._event_listeners.clear()
            else:
                self._event_listeners.pop(event, None)
        logger.debug("Removed all listeners for %s", "all events" if event is None else repr(event))

    def listeners(
        self, event: Optional[str] = None
    ) -> Union[List[HandlerFunc], ListenerMap]:
        """
        Return the callables registered for `event`, in registration order.

        Without `event`, return a mapping of every registered event to its callables.
        The result is a copy; changing it does not touch the registry.
        """
        with self._event_lock:
            if event is not None:
                return [entry.func for entry in self._event_listeners.get(event, [])]
            return {
                name: [entry.func for entry in entries]
                for name, entries in self._event_listeners.items()
            }

    # -------------------- decorator --------------------
    def receiver(self, event: str, *, once: bool = False):
        """
        Decorator to register a function as a listener for `event`.

        Args:
            event (str): The event to register the listener for.
            once (bool, optional): Whether the listener should be called only once.
                                   Defaults to False.

        Returns:
            Callable[[HandlerFunc], HandlerFunc]: The decorator function.
        """

        def wrapper(func: HandlerFunc) -> HandlerFunc:
            if once:
                self.once(event, func)
            else:
                self.on(event, func)
            return func

        return wrapper

    # -------------------- dispatch --------------------
    def emit(self, event: str, *args: Any, **kwargs: Any) -> None:
        """
        Dispatch `event` to its listeners in registration order.

        The listener list is snapshotted first: listeners added while dispatching
        wait for the next emit, and listeners removed while dispatching are skipped
        if they have not run yet. Exceptions raised by listeners propagate and stop
        the remaining dispatch.

        Args:
            event (str): The event to dispatch. Must not be empty.
            *args: Positional arguments to pass to the listeners.
            **kwargs: Keyword arguments to pass to the listeners.

        Raises:
            InvalidEventError: If `event` is an empty string.
        """
        _check_event(event)

        # snapshot to avoid holding the lock during callbacks
        with self._event_lock:
            snapshot = list(self._event_listeners.get(event, []))

        if not snapshot:
            logger.debug("Emitting '%s' with no listeners", event)
            return
        logger.debug("Emitting '%s' to %d listeners", event, len(snapshot))

        for entry in snapshot:
            with self._event_lock:
                live = self._event_listeners.get(event)
                if live is None or entry not in live:
                    continue
                if entry.once:
                    # Detach before the call so a re-entrant emit cannot run it again
                    self._replace(event, [x for x in live if x is not entry])
            entry.call(*args, **kwargs)

    def _replace(self, event: str, entries: List[_Listener]) -> None:
        # Caller holds the lock. Empty lists are never stored.
        if entries:
            self._event_listeners[event] = entries
        else:
            del self._event_listeners[event]


class EventEmitter(EventEmitterMixin):
    """
    A standalone event emitter, for code that delegates to an emitter
    rather than inheriting from the mixin.
    """

    def __init__(self) -> None:
        """
        Initialize a new EventEmitter instance.
        """
        self._microemit_lock = threading.RLock()
        self._microemit_listeners: Dict[str, List[_Listener]] = {}
