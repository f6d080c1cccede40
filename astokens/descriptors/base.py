"""Descriptor capability: terminal grammar elements."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from astokens.sources import Source, TextSource, TokenSource
    from astokens.tokens import Token


class DescriptorKind(StrEnum):
    WHITESPACE = "Whitespace"
    PUNCTUATOR = "Punctuator"
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    TEXT = "Text"
    STRING = "String"
    REFERENCE = "Reference"  # recurse into the named child
    SEPARATOR = "Separator"  # deferred whitespace, see MatchingContext


class Descriptor(Protocol):
    """Knows how to match itself against characters or tokens.

    Both match methods return the matched tokens (possibly none) on success
    and `None` on failure, and leave the cursor they are given untouched.
    `build` synthesizes tokens without any input.
    """

    @property
    def kind(self) -> DescriptorKind: ...

    @property
    def value(self) -> str | None: ...

    def match_text(self, chars: TextSource) -> list[Token] | None: ...

    def match_tokens(self, tokens: TokenSource) -> list[Token] | None: ...

    def build(self, value: str | None = None) -> list[Token]: ...


def match_sequence(descriptors: tuple[Descriptor, ...], source: Source) -> list[Token] | None:
    """Match `descriptors` back to back on a fork of `source`."""
    match_source = source.fork()
    matches: list[Token] = []
    for descriptor in descriptors:
        if match_source.done:
            return None
        match = match_source.match(descriptor)
        if match is None:
            return None
        matches.extend(match)
        match_source.advance(match)
    return matches


def match_repeated(descriptor: Descriptor, source: Source) -> list[Token]:
    """Match `descriptor` as many times as it applies; never fails."""
    match_source = source.fork()
    matches: list[Token] = []
    while not match_source.done:
        match = match_source.match(descriptor)
        if not match:
            break
        matches.extend(match)
        match_source.advance(match)
    return matches
