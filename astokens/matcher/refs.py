"""Resolve reference tokens to the structural path of the child they denote."""

from collections.abc import Sequence

from astokens.diagnostics import UnresolvableReference
from astokens.nodes import NodePath, get_path, has_field, node_type
from astokens.tokens import Token


class RefResolver:
    """Tracks how many times each list-valued reference has been resolved.

    The n-th `ref("arguments")` of a node resolves to `("arguments", n)`.
    Forks copy the counters, so a speculative branch can be dropped without
    touching the resolver it came from.
    """

    def __init__(self, node: object, counters: dict[str, int] | None = None) -> None:
        self._node = node
        self._counters: dict[str, int] = dict(counters) if counters else {}

    @property
    def node(self) -> object:
        return self._node

    def fork(self) -> "RefResolver":
        return RefResolver(self._node, self._counters)

    def can_resolve(self, token: Token) -> bool:
        """Whether `resolve` would find a child, without counting it."""
        name = token.value
        if not has_field(self._node, name):
            return False

        value = get_path(self._node, (name,))
        if value is None:
            return False
        if isinstance(value, Sequence) and not isinstance(value, str):
            return self._counters.get(name, 0) < len(value)
        return True

    def resolve(self, token: Token) -> NodePath:
        name = token.value
        if not has_field(self._node, name):
            raise UnresolvableReference(name, node_type(self._node))

        value = get_path(self._node, (name,))
        if isinstance(value, Sequence) and not isinstance(value, str):
            index = self._counters.get(name, 0)
            if index >= len(value):
                raise UnresolvableReference(f"{name}[{index}]", node_type(self._node))
            self._counters[name] = index + 1
            return (name, index)

        return (name,)
