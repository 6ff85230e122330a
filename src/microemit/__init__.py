"""
Microemit
---------

Tiny synchronous event emitter for Python.

Features:

- `EventEmitterMixin` turns any class into an event source; `EventEmitter` is a standalone one.
- `on()` / `once()` register listeners and return the emitter, so calls chain.
- `emit(event, *args, **kwargs)` calls listeners synchronously, in registration order.
- Listeners may add or remove listeners, or emit again, while being dispatched.
- `remove_listener()`, `remove_all_listeners()` and `listeners()` manage subscriptions.
- Decorator-based API with `@receiver(event)`, and module-level functions on a default emitter.
- MIT licensed. No dependencies.
"""

import logging

from .core import (
    emit,
    get_default_emitter,
    listeners,
    on,
    once,
    receiver,
    remove_all_listeners,
    remove_listener,
)
from .emitter import EventEmitter, EventEmitterMixin, SupportsEvents
from .exceptions import InvalidEventError, MicroemitError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "receiver",
    "emit",
    "on",
    "once",
    "remove_listener",
    "remove_all_listeners",
    "listeners",
    "get_default_emitter",
    "EventEmitter",
    "EventEmitterMixin",
    "SupportsEvents",
    "InvalidEventError",
    "MicroemitError",
]
