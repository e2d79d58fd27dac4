"""Root cursors holding mutable application state."""

from __future__ import annotations

import enum
from typing import Any, Callable

from lager.nodes import CursorNode, RootNode

__all__ = ["Tag", "StateNode", "State", "make_state_node", "make_state"]


class Tag(enum.Enum):
    """How changes written to a state are propagated."""

    TRANSACTIONAL = "transactional"
    AUTOMATIC = "automatic"
    ENABLE_FUTURES = "enable_futures"


class StateNode(RootNode, CursorNode):
    """Root node whose value is set from outside."""

    def __init__(self, value: Any, tag: Tag = Tag.TRANSACTIONAL) -> None:
        super().__init__(value)
        self.tag = tag

    def recompute(self) -> None:
        return None

    def send_up(self, value: Any) -> None:
        self.push_down(value)
        if self.tag is Tag.AUTOMATIC:
            self.send_down()
            self.notify()


def make_state_node(value: Any, tag: Tag = Tag.TRANSACTIONAL) -> StateNode:
    """Create a state node holding ``value``."""
    return StateNode(value, tag)


class State:
    """A readable and writable cursor over a state node.

    With ``Tag.TRANSACTIONAL`` written values become visible once the node is
    committed with ``send_down`` and ``notify``; with ``Tag.AUTOMATIC`` at once.
    """

    def __init__(self, value: Any = None, tag: Tag = Tag.TRANSACTIONAL) -> None:
        self.node = make_state_node(value, tag)

    def get(self) -> Any:
        """Return the last propagated value."""
        return self.node.last

    def set(self, value: Any) -> None:
        """Write a new value."""
        self.node.send_up(value)

    def update(self, fn: Callable[[Any], Any]) -> None:
        """Write the result of ``fn`` applied to the current value."""
        self.node.send_up(fn(self.node.current))


def make_state(value: Any, tag: Tag = Tag.TRANSACTIONAL) -> State:
    """Create a state holding ``value``."""
    return State(value, tag)