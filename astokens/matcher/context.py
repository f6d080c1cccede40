"""State shared by every executor frame of one top-level match."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from astokens.descriptors import Descriptor
from astokens.matcher.coroutine import GrammarGenerator
from astokens.matcher.options import MatchOptions
from astokens.matcher.result import ResolvedChildren
from astokens.tokens import Token

GrammarProcedure: TypeAlias = Callable[[Any, ResolvedChildren], GrammarGenerator]
GrammarTable: TypeAlias = Mapping[str, GrammarProcedure]


@dataclass(slots=True)
class MatchingContext:
    """Grammar table, resolved children and the pending-separator slot.

    The slot holds at most one deferred separator: it is filled when a
    `Separator` descriptor matches and emptied by the first descriptor
    processed after it, which may belong to a parent node.
    """

    grammar_table: GrammarTable
    options: MatchOptions = field(default_factory=MatchOptions)
    resolved_children: ResolvedChildren = field(default_factory=ResolvedChildren)
    separator_tokens: list[Token] | None = None
    separator_descriptor: Descriptor | None = None

    @property
    def has_pending_separator(self) -> bool:
        return self.separator_tokens is not None

    def defer_separator(self, tokens: list[Token], descriptor: Descriptor) -> None:
        if self.separator_tokens is not None:
            raise RuntimeError("A separator is already pending")
        self.separator_tokens = tokens
        self.separator_descriptor = descriptor

    def claim_separator(self) -> list[Token]:
        tokens = self.separator_tokens or []
        self.separator_tokens = None
        self.separator_descriptor = None
        return tokens

    def restore_separator(self, tokens: list[Token], descriptor: Descriptor | None) -> None:
        """Give back separators claimed by an attempt that did not match.

        They precede anything deferred since the claim, so they go first.
        """
        if self.separator_tokens is None:
            self.separator_tokens = tokens
            self.separator_descriptor = descriptor
            return
        self.separator_tokens = [*tokens, *self.separator_tokens]
        self.separator_descriptor = self.separator_descriptor or descriptor


def build_context(
    grammar_table: GrammarTable,
    options: MatchOptions | None = None,
) -> MatchingContext:
    return MatchingContext(
        grammar_table=grammar_table,
        options=options or MatchOptions(),
    )
