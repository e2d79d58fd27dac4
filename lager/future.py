"""Chainable delayed computations tied to an event loop."""

from __future__ import annotations

import threading
from typing import Any, Callable

__all__ = ["Future", "Promise"]

Post = Callable[[Callable[[], None]], None]


class _PromiseState:
    """Shared state of a promise/future pair."""

    __slots__ = ("lock", "post", "callback")

    def __init__(self, post: Post) -> None:
        self.lock = threading.RLock()
        self.post = post
        self.callback: Callable[[], None] | None = None

    def __del__(self) -> None:
        callback = self.callback
        if callback is not None:
            self.callback = None
            self.post(callback)


class Future:
    """Eventual completion of a computation; continuations are added with ``then``.

    An empty future runs its continuations immediately. ``then`` consumes the
    future, leaving it empty, so each future has at most one continuation.
    """

    def __init__(self, _state: _PromiseState | None = None) -> None:
        self._state = _state

    def __bool__(self) -> bool:
        return self._state is not None

    def then(self, fn: Callable[[], Any]) -> Future:
        """Call ``fn`` when this completes; ``fn`` may return a Future to wait on."""
        state, self._state = self._state, None
        if state is None:
            result = fn()
            return result if isinstance(result, Future) else Future()

        promise, future = Promise.with_post(state.post)

        def continuation() -> None:
            result = fn()
            if isinstance(result, Future):
                result.then(promise)
            else:
                promise()

        with state.lock:
            if state.callback is not None:
                raise RuntimeError("future already has a continuation")
            state.callback = continuation
        del state
        return future

    def also(self, other: Future) -> Future:
        """Return a future that completes when both this and ``other`` complete."""
        taken = Future(other._state)
        other._state = None
        return self.then(lambda: taken)


class Promise:
    """The fulfilling side of a Future."""

    def __init__(self, _state: _PromiseState | None = None) -> None:
        self._state = _state

    @staticmethod
    def with_post(post: Post) -> tuple[Promise, Future]:
        """Create a promise and future whose callbacks are queued with ``post``."""
        state = _PromiseState(post)
        return Promise(state), Future(state)

    @staticmethod
    def with_loop(loop: Any) -> tuple[Promise, Future]:
        """Create a promise and future bound to an event loop with a ``post`` method."""
        return Promise.with_post(loop.post)

    @staticmethod
    def invalid() -> tuple[Promise, Future]:
        """Create a pair with no execution context; continuations run immediately."""
        return Promise(None), Future(None)

    def __call__(self) -> None:
        """Fulfil the promise. Must be called at most once, in the loop's thread."""
        state = self._state
        if state is None:
            raise RuntimeError("promise already satisfied!")
        with state.lock:
            callback = state.callback
            if callback is not None:
                callback()
                state.callback = None
        self._state = None