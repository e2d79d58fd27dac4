"""Nodes that combine the values of several parents into a tuple."""

from __future__ import annotations

from typing import Any, Iterable

from lager.nodes import CursorNode, InnerNode, ReaderNode, current_from, link_to_parents

__all__ = [
    "MergeReaderNode",
    "MergeCursorNode",
    "make_merge_reader_node",
    "make_merge_cursor_node",
]


class MergeReaderNode(InnerNode):
    """Holds the parents' values together."""

    def __init__(self, parents: Iterable[ReaderNode]) -> None:
        parents = tuple(parents)
        super().__init__(current_from(parents), parents)

    def recompute(self) -> None:
        self.push_down(current_from(self.parents))


class MergeCursorNode(MergeReaderNode, CursorNode):
    """A merge node that splits written values back to its parents."""

    def send_up(self, value: Any) -> None:
        self.push_up(value)


def make_merge_reader_node(parents: Iterable[ReaderNode]) -> MergeReaderNode:
    """Create a merge reader node linked to its parents."""
    return link_to_parents(MergeReaderNode(parents))


def make_merge_cursor_node(parents: Iterable[ReaderNode]) -> MergeCursorNode:
    """Create a merge cursor node linked to its parents."""
    return link_to_parents(MergeCursorNode(parents))