"""Source over pre-built CST tokens attached to AST nodes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from astokens.diagnostics import FallbackUnavailable
from astokens.nodes import node_cst_tokens, node_range
from astokens.sources.base import SourceKind
from astokens.sources.text_source import TextSource

if TYPE_CHECKING:
    from astokens.descriptors import Descriptor
    from astokens.matcher.result import ResolvedChildren
    from astokens.tokens import Token


class TokenSource:
    """Token cursor over one node's `cstTokens`.

    Each node owns its own token list, with `Reference` tokens standing in for
    its children. Forking onto a child therefore switches to the child's list,
    and positions are indexes into whichever list is current.
    """

    def __init__(
        self,
        tokens: Sequence[Token],
        index: int = 0,
        *,
        node: object | None = None,
        source_text: str | None = None,
    ) -> None:
        if not 0 <= index <= len(tokens):
            raise ValueError(f"Invalid token source index: {index} of {len(tokens)}")
        self._tokens = tokens
        self._index = index
        self._node = node
        self._source_text = source_text

    @staticmethod
    def for_node(node: object, source_text: str | None = None) -> TokenSource:
        tokens = node_cst_tokens(node)
        return TokenSource(tokens or [], node=node, source_text=source_text)

    @property
    def kind(self) -> SourceKind:
        return SourceKind.TOKENS

    @property
    def position(self) -> int:
        return self._index

    @property
    def done(self) -> bool:
        return self._index >= len(self._tokens)

    @property
    def value(self) -> Token | None:
        return self.peek(0)

    def peek(self, n: int) -> Token | None:
        idx = self._index + n
        if idx < len(self._tokens):
            return self._tokens[idx]
        return None

    def match(self, descriptor: Descriptor) -> list[Token] | None:
        return descriptor.match_tokens(self)

    def advance(
        self,
        tokens: list[Token],
        resolved_children: ResolvedChildren | None = None,
    ) -> None:
        index = self._index + len(tokens)
        if index > len(self._tokens):
            raise RuntimeError(f"Advanced past end of token source ({index} > {len(self._tokens)})")
        self._index = index

    def fork(self, child: object | None = None) -> TokenSource:
        if child is None:
            return TokenSource(
                self._tokens,
                self._index,
                node=self._node,
                source_text=self._source_text,
            )
        # A child without tokens gets an empty source; its first `take` then
        # falls back to the child's text.
        return TokenSource.for_node(child, self._source_text)

    def fallback(self) -> TextSource:
        if self._source_text is None:
            raise FallbackUnavailable("(token source has no source text)")
        if self._node is None:
            raise FallbackUnavailable("(token source is not bound to a node)")

        rng = node_range(self._node)
        if rng is None:
            raise FallbackUnavailable("(node has no source range)")
        start, end = rng
        return TextSource(self._source_text, start, end)

    def __repr__(self) -> str:
        return f"TokenSource({self._index}/{len(self._tokens)})"
