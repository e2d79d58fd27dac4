"""Nodes of the value graph: values flow down to children and up to parents.

Changes flow downwards in two phases. ``send_down`` recomputes values and
propagates them to children. ``notify`` then calls the observers, so the
outside world only ever sees a consistent state. Values written through a
cursor flow upwards at once.
"""

from __future__ import annotations

import abc
import weakref
from typing import Any, Callable, Iterable

__all__ = [
    "has_changed",
    "current_from",
    "link_to_parents",
    "ReaderNode",
    "CursorNode",
    "InnerNode",
    "RootNode",
]


def has_changed(a: Any, b: Any) -> bool:
    """Return whether ``a`` differs from ``b``; values that cannot be compared count as changed."""
    try:
        return not (a == b)
    except Exception:
        return True


class ReaderNode(abc.ABC):
    """A node holding a value, its children and its observers."""

    def __init__(self, value: Any) -> None:
        self._current = value
        self._last = value
        self._children: list[weakref.ref[ReaderNode]] = []
        self._observers: list[Callable[[Any], Any]] = []
        self._needs_send_down = False
        self._needs_notify = False
        self._notifying = False

    @property
    def current(self) -> Any:
        """The most recently computed value."""
        return self._current

    @property
    def last(self) -> Any:
        """The value last propagated to the children."""
        return self._last

    @abc.abstractmethod
    def recompute(self) -> None:
        """Recompute the current value from this node's sources."""

    @abc.abstractmethod
    def refresh(self) -> None:
        """Bring the current value up to date with the parents'."""

    def link(self, child: ReaderNode) -> None:
        """Register ``child`` to receive values; it is held weakly."""
        if any(ref() is child for ref in self._children):
            raise ValueError("Child node must not be linked twice")
        self._children.append(weakref.ref(child))

    def push_down(self, value: Any) -> None:
        """Set the current value, marking it for propagation if it changed."""
        if has_changed(value, self._current):
            self._current = value
            self._needs_send_down = True

    def send_down(self) -> None:
        """Recompute and pass a changed value on to the children."""
        self.recompute()
        if self._needs_send_down:
            self._last = self._current
            self._needs_send_down = False
            self._needs_notify = True
            for ref in self._children:
                child = ref()
                if child is not None:
                    child.send_down()

    def notify(self) -> None:
        """Call the observers and the children's observers for a propagated change."""
        if not self._needs_notify or self._needs_send_down:
            return
        self._needs_notify = False
        was_notifying = self._notifying
        self._notifying = True
        garbage = False
        try:
            for observer in list(self._observers):
                observer(self._last)
            for ref in self._children[: len(self._children)]:
                child = ref()
                if child is not None:
                    child.notify()
                else:
                    garbage = True
        finally:
            self._notifying = was_notifying
        if garbage and not was_notifying:
            self._collect()

    def connect(self, callback: Callable[[Any], Any]) -> Callable[[], None]:
        """Observe propagated values; returns a function that disconnects ``callback``."""
        self._observers.append(callback)

        def disconnect() -> None:
            try:
                self._observers.remove(callback)
            except ValueError:
                pass

        return disconnect

    def _collect(self) -> None:
        self._children = [ref for ref in self._children if ref() is not None]


class CursorNode(ReaderNode):
    """A node that can also send values back towards its parents."""

    @abc.abstractmethod
    def send_up(self, value: Any) -> None:
        """Write ``value`` back through this node."""


class InnerNode(ReaderNode):
    """A node derived from one or more parent nodes."""

    def __init__(self, value: Any, parents: Iterable[ReaderNode]) -> None:
        super().__init__(value)
        self._parents = tuple(parents)

    @property
    def parents(self) -> tuple[ReaderNode, ...]:
        """The parent nodes, in order."""
        return self._parents

    def refresh(self) -> None:
        for parent in self._parents:
            parent.refresh()
        self.recompute()

    def push_up(self, value: Any) -> None:
        """Send a value to the parents: whole to a single parent, element-wise to several."""
        if len(self._parents) == 1:
            self._parents[0].send_up(value)
            return
        for parent, part in zip(self._parents, value):
            parent.send_up(part)


class RootNode(ReaderNode):
    """A node without parents."""

    def refresh(self) -> None:
        return None


def current_from(parents: Iterable[ReaderNode]) -> Any:
    """Current value of the parents: the value itself for one, a tuple otherwise."""
    values = tuple(parent.current for parent in parents)
    return values[0] if len(values) == 1 else values


def link_to_parents(node: InnerNode) -> InnerNode:
    """Link ``node`` as a child of each of its parents and return it."""
    for parent in node.parents:
        parent.link(node)
    return node