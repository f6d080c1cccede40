"""Immutable ancestry chain used to address nodes during matching."""

from collections.abc import Iterator
from dataclasses import dataclass

from astokens.nodes import NodePath


@dataclass(frozen=True, slots=True)
class TreePath:
    node: object
    parent: "TreePath | None" = None
    # Structural path from the parent's node to this one.
    key: NodePath = ()

    def child(self, node: object, key: NodePath = ()) -> "TreePath":
        return TreePath(node=node, parent=self, key=key)

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.ancestors())

    @property
    def root(self) -> "TreePath":
        current = self
        while current.parent is not None:
            current = current.parent
        return current

    def ancestors(self) -> Iterator["TreePath"]:
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def __repr__(self) -> str:
        return f"TreePath(key={self.key!r}, depth={self.depth})"
