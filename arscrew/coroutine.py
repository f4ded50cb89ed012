"""Generator-based coroutines that suspend on awaiter objects."""

from __future__ import annotations

from typing import Any, Generator, Optional

from arscrew.errors import MylibError

__all__ = ["Coroutine", "initialize_coroutine"]


class Coroutine:
    """Drives a generator that yields awaiters.

    An awaiter may define ``await_ready()``, ``await_suspend(coroutine)`` and
    ``await_resume()``. When yielded, a ready awaiter resumes at once;
    otherwise ``await_suspend`` is called and the coroutine stays suspended
    until ``resume`` is called. The value returned by ``await_resume`` is sent
    back into the generator. The coroutine does not start running until it
    is first resumed.
    """

    __slots__ = ("_generator", "_started", "_done", "_awaiting", "awaiter_owner", "awaiter_data")

    def __init__(self, generator: Generator[Any, Any, Any]) -> None:
        if not (hasattr(generator, "send") and hasattr(generator, "throw")):
            raise TypeError(f"expected a generator, got {type(generator).__name__}")
        self._generator = generator
        self._started = False
        self._done = False
        self._awaiting: Optional[Any] = None
        self.awaiter_owner: Optional[Any] = None
        self.awaiter_data: Optional[Any] = None

    def done(self) -> bool:
        """True once the generator has run to completion."""
        return self._done

    def resume(self, value: Any = None) -> None:
        """Run the coroutine until its next suspension or its end."""
        if self._done:
            raise MylibError("cannot resume a finished coroutine")

        send_value = value
        awaiter, self._awaiting = self._awaiting, None
        if awaiter is not None:
            self.awaiter_owner = None
            self.awaiter_data = None
            result = _await_resume(awaiter)
            if send_value is None:
                send_value = result
        if not self._started:
            self._started = True
            send_value = None

        while True:
            try:
                yielded = self._generator.send(send_value)
            except StopIteration:
                self._finish()
                return
            except BaseException:
                self._finish()
                raise

            ready = getattr(yielded, "await_ready", None)
            if ready is not None and ready():
                send_value = _await_resume(yielded)
                continue

            if yielded is not None:
                self._awaiting = yielded
                suspend = getattr(yielded, "await_suspend", None)
                if suspend is not None:
                    suspend(self)
            return

    def _finish(self) -> None:
        self._done = True
        self._awaiting = None
        self.awaiter_owner = None
        self.awaiter_data = None

    def __repr__(self) -> str:
        state = "done" if self._done else ("suspended" if self._started else "created")
        return f"Coroutine({state})"


def _await_resume(awaiter: Any) -> Any:
    resume = getattr(awaiter, "await_resume", None)
    return resume() if resume is not None else None


def initialize_coroutine(coro: Coroutine) -> Coroutine:
    """Clear the awaiter bookkeeping and start the coroutine."""
    coro.awaiter_owner = None
    coro.awaiter_data = None
    coro.resume()
    return coro