import pytest

from lager.future import Future, Promise


class QueueLoop:
    def __init__(self):
        self.queue = []

    def post(self, fn):
        self.queue.append(fn)

    def step(self):
        while self.queue:
            self.queue.pop(0)()


def _reduction(loop, state, promise, amount):
    def task():
        state["value"] += amount
        promise()

    loop.post(task)


def test_then_called_after_reducer():
    loop = QueueLoop()
    state = {"value": 0}
    promise, future = Promise.with_loop(loop)
    _reduction(loop, state, promise, 1)
    seen = []
    result = future.then(lambda: seen.append(state["value"]))
    assert bool(result)
    assert seen == []
    loop.step()
    assert seen == [1]


def test_combining_futures():
    loop = QueueLoop()
    state = {"value": 0}
    first_promise, first = Promise.with_loop(loop)
    _reduction(loop, state, first_promise, 1)
    second_promise, second = Promise.with_loop(loop)
    _reduction(loop, state, second_promise, 1)
    seen = []
    combined = first.also(second)
    assert bool(combined)
    combined.then(lambda: seen.append(state["value"]))
    assert seen == []
    loop.step()
    assert seen == [2]


def test_then_chains_returned_future():
    loop = QueueLoop()
    state = {"value": 0}
    promise, future = Promise.with_loop(loop)
    _reduction(loop, state, promise, 1)

    def second_dispatch():
        inner_promise, inner_future = Promise.with_loop(loop)
        _reduction(loop, state, inner_promise, 2)
        return inner_future

    seen = []
    chained = future.then(second_dispatch)
    assert bool(chained)
    chained.then(lambda: seen.append(state["value"]))
    loop.step()
    assert seen == [3]


def test_promise_called_before_then_posts_callback():
    loop = QueueLoop()
    promise, future = Promise.with_loop(loop)
    promise()
    calls = []
    future.then(lambda: calls.append("done"))
    assert calls == []
    loop.step()
    assert calls == ["done"]


def test_then_consumes_future():
    loop = QueueLoop()
    promise, future = Promise.with_loop(loop)
    assert bool(future)
    calls = []
    next_future = future.then(lambda: calls.append("first"))
    assert not bool(future)
    assert bool(next_future)
    next_future.then(lambda: calls.append("second"))
    promise()
    loop.step()
    assert calls == ["first", "second"]


def test_dropped_promise_posts_callback():
    posted = []
    promise, future = Promise.with_post(posted.append)
    calls = []
    future.then(lambda: calls.append(1))
    del promise
    assert len(posted) == 1
    posted[0]()
    assert calls == [1]


def test_invalid_runs_immediately():
    promise, future = Promise.invalid()
    assert not future
    calls = []
    result = future.then(lambda: calls.append(1))
    assert calls == [1]
    assert not result
    with pytest.raises(RuntimeError):
        promise()


def test_empty_future_returns_inner_future():
    loop = QueueLoop()
    _promise, inner = Promise.with_loop(loop)
    result = Future().then(lambda: inner)
    assert result is inner


def test_promise_cannot_be_fulfilled_twice():
    loop = QueueLoop()
    promise, _future = Promise.with_loop(loop)
    promise()
    with pytest.raises(RuntimeError, match="already satisfied"):
        promise()