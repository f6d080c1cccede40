"""Accessors over AST nodes.

Nodes are either mappings in the ESTree style (`{"type": "Identifier", ...}`)
or plain objects exposing the same names as attributes.
"""

from collections.abc import Mapping, Sequence
from typing import TypeAlias

from astokens.diagnostics import UnknownNodeType
from astokens.tokens import Token

NodePath: TypeAlias = tuple[str | int, ...]

_MISSING = object()


def _field(node: object, name: str, default: object = _MISSING) -> object:
    if isinstance(node, Mapping):
        return node.get(name, default) if default is not _MISSING else node[name]
    if default is _MISSING:
        return getattr(node, name)
    return getattr(node, name, default)


def node_type(node: object) -> str:
    value = _field(node, "type", None)
    if value is None:
        raise UnknownNodeType(None)
    return str(value)


def has_field(node: object, name: str) -> bool:
    if isinstance(node, Mapping):
        return name in node
    return hasattr(node, name)


def get_path(node: object, path: NodePath) -> object:
    current = node
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, Sequence):
                raise KeyError(f"Cannot index non-sequence with {key!r}")
            current = current[key]
        else:
            current = _field(current, key)
    return current


def node_cst_tokens(node: object) -> list[Token] | None:
    for name in ("cstTokens", "cst_tokens"):
        tokens = _field(node, name, None)
        if tokens is not None:
            return list(tokens)
    return None


def node_range(node: object) -> tuple[int, int] | None:
    rng = _field(node, "range", None)
    if rng is not None:
        start, end = rng
        return (int(start), int(end))

    start = _field(node, "start", None)
    end = _field(node, "end", None)
    if isinstance(start, int) and isinstance(end, int):
        return (start, end)
    return None
