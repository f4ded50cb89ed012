"""Callbacks and a publish/subscribe event handler."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from arscrew.errors import assert_that

__all__ = [
    "Callback",
    "make_callback_function",
    "make_callback_object",
    "make_callback_lambda",
    "make_callback_object_with_params",
    "Descriptor",
    "Handler",
]

E = TypeVar("E")


class Callback(Generic[E]):
    """A callable invoked with an event.

    The call is ``func(*leading, event, *trailing)``: ``leading`` holds a bound
    object (kept by reference) and ``trailing`` holds extra parameters (copied
    along with the callback).
    """

    __slots__ = ("_func", "_leading", "_trailing")

    def __init__(
        self,
        func: Callable[..., Any],
        leading: tuple = (),
        trailing: tuple = (),
    ) -> None:
        if not callable(func):
            raise TypeError(f"callback target is not callable: {func!r}")
        self._func = func
        self._leading = tuple(leading)
        self._trailing = tuple(trailing)

    def __call__(self, event: E) -> None:
        self._func(*self._leading, event, *self._trailing)

    def copy(self) -> "Callback[E]":
        """Return a copy; the bound object is shared, parameters are copied."""
        return Callback(
            self._func,
            self._leading,
            tuple(_copy.copy(p) for p in self._trailing),
        )

    def __repr__(self) -> str:
        return f"Callback({self._func!r})"


def make_callback_function(func: Callable[[E], Any]) -> Callback[E]:
    """Callback calling ``func(event)``."""
    return Callback(func)


def make_callback_object(obj: Any, method: Callable[..., Any]) -> Callback[E]:
    """Callback calling ``method(obj, event)``; ``obj`` is held by reference."""
    return Callback(method, leading=(obj,))


def make_callback_lambda(func: Callable[[E], Any]) -> Callback[E]:
    """Callback calling a lambda or other callable with the event."""
    return Callback(func)


def make_callback_object_with_params(
    obj: Any, method: Callable[..., Any], first_param: Any, *args: Any
) -> Callback[E]:
    """Callback calling ``method(obj, event, first_param, *args)``."""
    return Callback(method, leading=(obj,), trailing=(first_param, *args))


@dataclass(eq=False)
class _SubscriptionState:
    subscriber: Optional["_Subscriber"] = None


@dataclass(eq=False)
class _Subscriber:
    callback: Callback
    state: _SubscriptionState


@dataclass(eq=False)
class Descriptor:
    """Handle to a subscription; copies share the subscription state."""

    _state: Optional[_SubscriptionState] = None

    def is_valid(self) -> bool:
        """True while the subscription it refers to is still registered."""
        return self._state is not None and self._state.subscriber is not None


class Handler(Generic[E]):
    """Delivers published events to every subscribed callback in order."""

    __slots__ = ("_subscribers",)

    def __init__(self) -> None:
        self._subscribers: list[_Subscriber] = []

    def __len__(self) -> int:
        return len(self._subscribers)

    def publish(self, event: E) -> None:
        """Call every subscriber with ``event``; callbacks may mutate it."""
        for subscriber in list(self._subscribers):
            subscriber.callback(event)

    def subscribe(self, callback: Callback[E]) -> Descriptor:
        """Register a copy of ``callback`` and return its descriptor."""
        state = _SubscriptionState()
        subscriber = _Subscriber(callback.copy(), state)
        state.subscriber = subscriber
        self._subscribers.append(subscriber)
        return Descriptor(state)

    def unsubscribe(self, descriptor: Descriptor) -> None:
        """Remove the subscription; raise MylibError if it is not registered."""
        state = descriptor._state
        remaining = [s for s in self._subscribers if state is None or s.state is not state]
        found = state is not None and len(remaining) != len(self._subscribers)
        assert_that(found, "subscriber not found")
        self._subscribers = remaining
        state.subscriber = None  # type: ignore[union-attr]
        descriptor._state = None