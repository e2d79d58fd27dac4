"""Write-only cursors over nodes that accept values sent upwards."""

from __future__ import annotations

from typing import Any, Callable

from lager.nodes import CursorNode

__all__ = ["Writer"]


class Writer:
    """Gives write access to a cursor node.

    It may be built from a cursor node or from any object that holds one in a
    ``node`` attribute, such as a ``State``.
    """

    def __init__(self, node: Any) -> None:
        target = node if isinstance(node, CursorNode) else getattr(node, "node", None)
        if not isinstance(target, CursorNode):
            raise TypeError(f"cannot write through {type(node).__name__}")
        self._node = target

    @property
    def node(self) -> CursorNode:
        """The node that written values are sent to."""
        return self._node

    def set(self, value: Any) -> None:
        """Send ``value`` up through the node."""
        self._node.send_up(value)

    def update(self, fn: Callable[[Any], Any]) -> None:
        """Send up the result of ``fn`` applied to the node's current value."""
        self._node.send_up(fn(self._node.current))