import pytest

from arscrew.coroutine import Coroutine, initialize_coroutine
from arscrew.errors import MylibError


class Awaiter:
    def __init__(self, ready=False, result=None):
        self.ready = ready
        self.result = result
        self.suspended_with = []
        self.resumed = 0

    def await_ready(self):
        return self.ready

    def await_suspend(self, coro):
        self.suspended_with.append(coro)
        coro.awaiter_owner = self
        coro.awaiter_data = "event"

    def await_resume(self):
        self.resumed += 1
        return self.result


def _start_then_wait(log):
    log.append("start")
    yield


def _two_steps(log):
    log.append("a")
    yield
    log.append("b")


def _empty():
    return
    yield


def _receive(awaiter, received):
    received.append((yield awaiter))


def _loop(awaiter, count, limit):
    while len(count) < limit:
        yield awaiter
        count.append(1)


def _raise_after_wait():
    yield
    raise RuntimeError("boom")


def test_not_started_until_initialized():
    log = []
    coro = Coroutine(_start_then_wait(log))
    assert log == []
    assert not coro.done()
    initialize_coroutine(coro)
    assert log == ["start"]
    assert not coro.done()


def test_runs_to_completion():
    log = []
    coro = initialize_coroutine(Coroutine(_two_steps(log)))
    coro.resume()
    assert log == ["a", "b"]
    assert coro.done()


def test_resume_after_done_raises():
    coro = initialize_coroutine(Coroutine(_empty()))
    assert coro.done()
    with pytest.raises(MylibError):
        coro.resume()


def test_awaiter_suspend_and_resume_value():
    awaiter = Awaiter(result="payload")
    received = []
    coro = initialize_coroutine(Coroutine(_receive(awaiter, received)))
    assert awaiter.suspended_with == [coro]
    assert coro.awaiter_owner is awaiter
    assert coro.awaiter_data == "event"
    coro.resume()
    assert received == ["payload"]
    assert awaiter.resumed == 1
    assert coro.awaiter_owner is None
    assert coro.awaiter_data is None
    assert coro.done()


def test_ready_awaiter_does_not_suspend():
    awaiter = Awaiter(ready=True, result=5)
    received = []
    coro = initialize_coroutine(Coroutine(_receive(awaiter, received)))
    assert coro.done()
    assert received == [5]
    assert awaiter.suspended_with == []


def test_explicit_resume_value_overrides():
    awaiter = Awaiter(result="from-awaiter")
    received = []
    coro = initialize_coroutine(Coroutine(_receive(awaiter, received)))
    assert not coro.done()
    coro.resume("explicit")
    assert coro.done()
    assert received == ["explicit"]


def test_loop_suspends_each_iteration():
    awaiter = Awaiter()
    count = []
    coro = initialize_coroutine(Coroutine(_loop(awaiter, count, 3)))
    resumes = 0
    while not coro.done():
        coro.resume()
        resumes += 1
    assert coro.done()
    assert resumes == 3
    assert len(count) == 3
    assert len(awaiter.suspended_with) == 3


def test_exception_propagates_and_finishes():
    coro = initialize_coroutine(Coroutine(_raise_after_wait()))
    with pytest.raises(RuntimeError):
        coro.resume()
    assert coro.done()


def test_requires_generator():
    with pytest.raises(TypeError):
        Coroutine([1, 2, 3])