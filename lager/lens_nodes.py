"""Nodes that focus on a part of their parents' value through a lens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from lager.nodes import CursorNode, InnerNode, ReaderNode, current_from, link_to_parents

__all__ = [
    "Lens",
    "LensReaderNode",
    "LensCursorNode",
    "make_lens_reader_node",
    "make_lens_cursor_node",
]


@dataclass(frozen=True)
class Lens:
    """A pair of functions to read a part of a value and to replace it.

    Without functions the lens is the identity: it views the whole value and
    setting replaces the whole value.
    """

    getter: Optional[Callable[[Any], Any]] = None
    setter: Optional[Callable[[Any, Any], Any]] = None

    def view(self, whole: Any) -> Any:
        """Return the focused part of ``whole``."""
        if self.getter is None:
            return whole
        return self.getter(whole)

    def set(self, whole: Any, part: Any) -> Any:
        """Return ``whole`` with the focused part replaced by ``part``."""
        if self.setter is None:
            return part
        return self.setter(whole, part)

    def __or__(self, inner: Lens) -> Lens:
        return Lens(
            lambda whole: inner.view(self.view(whole)),
            lambda whole, part: self.set(whole, inner.set(self.view(whole), part)),
        )


class LensReaderNode(InnerNode):
    """Views the parents' value through a lens."""

    def __init__(self, lens: Lens, parents: Iterable[ReaderNode]) -> None:
        parents = tuple(parents)
        super().__init__(lens.view(current_from(parents)), parents)
        self.lens = lens

    def recompute(self) -> None:
        self.push_down(self.lens.view(current_from(self.parents)))


class LensCursorNode(LensReaderNode, CursorNode):
    """A lens node that writes back into its parents."""

    def send_up(self, value: Any) -> None:
        self.refresh()
        self.push_up(self.lens.set(current_from(self.parents), value))


def make_lens_reader_node(lens: Lens, parents: Iterable[ReaderNode]) -> LensReaderNode:
    """Create a lens reader node linked to its parents."""
    return link_to_parents(LensReaderNode(lens, parents))


def make_lens_cursor_node(lens: Lens, parents: Iterable[ReaderNode]) -> LensCursorNode:
    """Create a lens cursor node linked to its parents."""
    return link_to_parents(LensCursorNode(lens, parents))