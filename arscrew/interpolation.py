"""Interpolation of values over an x-axis (usually time), with completion callbacks
and coroutine support."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from arscrew.coroutine import Coroutine
from arscrew.errors import assert_that
from arscrew.event import Callback

__all__ = [
    "Interpolator",
    "LinearInterpolator",
    "InterpolationEvent",
    "InterpolationDescriptor",
    "CoroutineAwaiter",
    "InterpolationManager",
]


class Interpolator(ABC):
    """Advances an x value from 0 up to ``max_x`` and writes results to ``target``.

    ``target`` is a callable that receives each interpolated value.
    """

    def __init__(self, max_x: Any, target: Callable[[Any], Any]) -> None:
        if not callable(target):
            raise TypeError(f"interpolation target is not callable: {target!r}")
        self.x: Any = 0
        self.max_x = max_x
        self.target = target

    def __call__(self, delta_x: Any) -> bool:
        """Advance by ``delta_x``; return True while the interpolation is unfinished."""
        self.x += delta_x
        if self.x > self.max_x:
            self.x = self.max_x
        self.interpolate(self.x)
        return self.x < self.max_x

    @abstractmethod
    def interpolate(self, x: Any) -> None:
        """Write the value for position ``x`` to the target."""


class LinearInterpolator(Interpolator):
    """Moves the target linearly from ``start_y`` to ``end_y``.

    The target receives ``start_y`` as soon as the interpolator is created.
    """

    def __init__(
        self,
        max_x: Any,
        target: Callable[[Any], Any],
        start_y: Any,
        end_y: Any,
    ) -> None:
        super().__init__(max_x, target)
        self.target(start_y)
        self.start_y = start_y
        self.rate = (end_y - start_y) / max_x

    def interpolate(self, x: Any) -> None:
        self.target(self.start_y + x * self.rate)


@dataclass(eq=False)
class InterpolationEvent:
    """Passed to completion callbacks; names the interpolator that finished."""

    interpolator: Interpolator


@dataclass(eq=False)
class _DescriptorState:
    entry: Optional["_Entry"] = None


@dataclass(eq=False)
class _Entry(InterpolationEvent):
    vector_pos: int = 0
    callback: Optional[Callable[[InterpolationEvent], Any]] = None
    coroutine: Optional[Coroutine] = None
    state: Optional[_DescriptorState] = None


@dataclass(eq=False)
class InterpolationDescriptor:
    """Handle to a running interpolation; copies share the same state."""

    _state: Optional[_DescriptorState] = None

    def is_valid(self) -> bool:
        """True while the interpolation it refers to is still running."""
        return self._state is not None and self._state.entry is not None


@dataclass(eq=False)
class CoroutineAwaiter:
    """Yielded from a coroutine to suspend it until an interpolation finishes."""

    manager: "InterpolationManager"
    interpolator: Interpolator
    coroutine: Optional[Coroutine] = field(default=None, init=False)

    def await_ready(self) -> bool:
        return False

    def await_suspend(self, coroutine: Coroutine) -> None:
        self.coroutine = coroutine
        entry = _Entry(self.interpolator, coroutine=coroutine)
        coroutine.awaiter_owner = self.manager
        coroutine.awaiter_data = entry
        self.manager._push(entry)

    def await_resume(self) -> None:
        if self.coroutine is not None:
            self.coroutine.awaiter_owner = None
            self.coroutine.awaiter_data = None


class InterpolationManager:
    """Runs a set of interpolations, advancing all of them on each step."""

    def __init__(self) -> None:
        self._entries: list[_Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def process_interpolation(self, delta_x: Any) -> None:
        """Advance every interpolation; finished ones fire their callback or
        resume their coroutine and are removed.

        A finished interpolation is replaced in place by the last one, which
        is then not advanced until the next step.
        """
        i = 0
        while i < len(self._entries):
            entry = self._entries[i]
            if not entry.interpolator(delta_x):
                if entry.coroutine is not None:
                    entry.coroutine.resume()
                elif entry.callback is not None:
                    entry.callback(entry)
                self._pop(entry)
                self._destroy(entry)
            i += 1

    def interpolate_linear(
        self,
        max_x: Any,
        target: Callable[[Any], Any],
        start_y: Any,
        end_y: Any,
        callback: Optional[Callable[[InterpolationEvent], Any]] = None,
    ) -> InterpolationDescriptor:
        """Start a linear interpolation; ``callback`` (copied) fires when it ends."""
        if isinstance(callback, Callback):
            callback = callback.copy()
        interpolator = LinearInterpolator(max_x, target, start_y, end_y)
        state = _DescriptorState()
        entry = _Entry(interpolator, callback=callback, state=state)
        state.entry = entry
        self._push(entry)
        return InterpolationDescriptor(state)

    def coroutine_wait_interpolate_linear(
        self,
        max_x: Any,
        target: Callable[[Any], Any],
        start_y: Any,
        end_y: Any,
    ) -> CoroutineAwaiter:
        """Return an awaiter that a coroutine yields to wait for the interpolation."""
        return CoroutineAwaiter(self, LinearInterpolator(max_x, target, start_y, end_y))

    def remove_interpolator(self, descriptor: InterpolationDescriptor) -> None:
        """Stop the interpolation without firing its callback."""
        assert_that(descriptor.is_valid(), "interpolation descriptor is not valid")
        entry = descriptor._state.entry  # type: ignore[union-attr]
        self._pop(entry)  # type: ignore[arg-type]
        self._destroy(entry)  # type: ignore[arg-type]
        descriptor._state = None

    def force_resume_coroutine(self, coro: Coroutine) -> None:
        """Resume a coroutine waiting here at once and drop its interpolation."""
        if coro.awaiter_owner is self:
            entry = coro.awaiter_data
            coro.resume()
            self._pop(entry)
            self._destroy(entry)

    def unregister_coroutine(self, coro: Coroutine) -> None:
        """Drop the interpolation a coroutine is waiting on, leaving it suspended."""
        if coro.awaiter_owner is self:
            entry = coro.awaiter_data
            self._pop(entry)
            self._destroy(entry)
            coro.awaiter_owner = None
            coro.awaiter_data = None

    # ------------------------------------------------------------ internals

    def _push(self, entry: _Entry) -> None:
        entry.vector_pos = len(self._entries)
        self._entries.append(entry)

    def _pop(self, entry: _Entry) -> None:
        i = entry.vector_pos
        if len(self._entries) > 1:
            last = self._entries[-1]
            self._entries[i] = last
            last.vector_pos = i
        self._entries.pop()

    @staticmethod
    def _destroy(entry: _Entry) -> None:
        if entry.state is not None:
            entry.state.entry = None