"""Descriptors for ESTree-style grammars.

Text matching of words stops at a break character so that `Keyword("in")`
does not match the start of `instanceof`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from astokens.descriptors.base import (
    Descriptor,
    DescriptorKind,
    match_repeated,
    match_sequence,
)
from astokens.tokens import Token, TokenType

if TYPE_CHECKING:
    from astokens.sources import TextSource, TokenSource

_BREAK_PATTERN: Final[str] = r"""(?=[(){}\s/\\&#@!`+^%?<>,.;:'"|~-]|$)"""
_WHITESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s+")


def _word_pattern(value: str) -> re.Pattern[str]:
    return re.compile(re.escape(value) + _BREAK_PATTERN)


def _match_single(tokens: TokenSource, token_type: TokenType, value: str) -> list[Token] | None:
    token = tokens.value
    if token is not None and token.type == token_type and token.value == value:
        return [token]
    return None


@dataclass(frozen=True, slots=True)
class Whitespace:
    value: str = " "

    @property
    def kind(self) -> DescriptorKind:
        return DescriptorKind.WHITESPACE

    def build(self, value: str | None = None) -> list[Token]:
        return [Token(TokenType.WHITESPACE, value or self.value)]

    def match_tokens(self, tokens: TokenSource) -> list[Token] | None:
        match: list[Token] = []
        offset = 0
        while (token := tokens.peek(offset)) is not None and token.type == TokenType.WHITESPACE:
            match.append(token)
            offset += 1
        return match or None

    def match_text(self, chars: TextSource) -> list[Token] | None:
        found = chars.match_pattern(_WHITESPACE_PATTERN)
        return self.build(found.group()) if found else None


@dataclass(frozen=True, slots=True)
class Punctuator:
    value: str

    @property
    def kind(self) -> DescriptorKind:
        return DescriptorKind.PUNCTUATOR

    def build(self, value: str | None = None) -> list[Token]:
        return [Token(TokenType.PUNCTUATOR, self.value)]

    def match_tokens(self, tokens: TokenSource) -> list[Token] | None:
        return _match_single(tokens, TokenType.PUNCTUATOR, self.value)

    def match_text(self, chars: TextSource) -> list[Token] | None:
        return self.build() if chars.startswith(self.value) else None


@dataclass(frozen=True, slots=True)
class Keyword:
    value: str
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_pattern", _word_pattern(self.value))

    @property
    def kind(self) -> DescriptorKind:
        return DescriptorKind.KEYWORD

    def build(self, value: str | None = None) -> list[Token]:
        return [Token(TokenType.KEYWORD, self.value)]

    def match_tokens(self, tokens: TokenSource) -> list[Token] | None:
        return _match_single(tokens, TokenType.KEYWORD, self.value)

    def match_text(self, chars: TextSource) -> list[Token] | None:
        return self.build() if chars.match_pattern(self._pattern) else None


@dataclass(frozen=True, slots=True)
class Identifier:
    value: str
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_pattern", _word_pattern(self.value))

    @property
    def kind(self) -> DescriptorKind:
        return DescriptorKind.IDENTIFIER

    def build(self, value: str | None = None) -> list[Token]:
        return [Token(TokenType.IDENTIFIER, value or self.value)]

    def match_tokens(self, tokens: TokenSource) -> list[Token] | None:
        return _match_single(tokens, TokenType.IDENTIFIER, self.value)

    def match_text(self, chars: TextSource) -> list[Token] | None:
        return self.build() if chars.match_pattern(self._pattern) else None


@dataclass(frozen=True, slots=True)
class Reference:
    """The child named `value`; the executor recurses instead of matching it."""

    value: str

    @property
    def kind(self) -> DescriptorKind:
        return DescriptorKind.REFERENCE

    def build(self, value: str | None = None) -> list[Token]:
        # Always a fresh token: reference tokens are keyed by identity.
        return [Token(TokenType.REFERENCE, self.value)]

    def match_tokens(self, tokens: TokenSource) -> list[Token] | None:
        return _match_single(tokens, TokenType.REFERENCE, self.value)

    def match_text(self, chars: TextSource) -> list[Token] | None:
        raise NotImplementedError("References are matched by evaluating the referenced node")


@dataclass(frozen=True, slots=True)
class _StringBody:
    value: str

    @property
    def kind(self) -> DescriptorKind:
        return DescriptorKind.TEXT

    def build(self, value: str | None = None) -> list[Token]:
        return [Token(TokenType.TEXT, value or self.value)]

    def match_tokens(self, tokens: TokenSource) -> list[Token] | None:
        match: list[Token] = []
        offset = 0
        while (token := tokens.peek(offset)) is not None and token.type == TokenType.TEXT:
            match.append(token)
            offset += 1
        if "".join(token.value for token in match) != self.value:
            return None
        return match

    def match_text(self, chars: TextSource) -> list[Token] | None:
        # TODO: match escaped bodies: needed (`\'`), unneeded (`\d`) and unicode
        # (`\u0064`) escapes should all compare against the unescaped value.
        return self.build() if chars.startswith(self.value) else None


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """A quoted string whose unquoted body is `value`."""

    value: str

    @property
    def kind(self) -> DescriptorKind:
        return DescriptorKind.STRING

    def _variants(self) -> tuple[tuple[Descriptor, ...], ...]:
        body = _StringBody(self.value)
        return ((S_QUOTE, body, S_QUOTE), (D_QUOTE, body, D_QUOTE))

    def build(self, value: str | None = None) -> list[Token]:
        body = _StringBody(self.value).build()
        if not value or (value.startswith("'") and value.endswith("'")):
            return [*S_QUOTE.build(), *body, *S_QUOTE.build()]
        if value.startswith('"') and value.endswith('"'):
            return [*D_QUOTE.build(), *body, *D_QUOTE.build()]
        raise ValueError(f"String value was not a valid string: {value!r}")

    def match_tokens(self, tokens: TokenSource) -> list[Token] | None:
        for variant in self._variants():
            match = match_sequence(variant, tokens)
            if match is not None:
                return match
        return None

    def match_text(self, chars: TextSource) -> list[Token] | None:
        for variant in self._variants():
            match = match_sequence(variant, chars)
            if match is not None:
                return match
        return None


@dataclass(frozen=True, slots=True)
class Separator:
    """Any run of whitespace, including none.

    The executor does not attach separator tokens where they are matched; it
    hands them to whichever node claims them next.
    """

    @property
    def kind(self) -> DescriptorKind:
        return DescriptorKind.SEPARATOR

    @property
    def value(self) -> str | None:
        return None

    def build(self, value: str | None = None) -> list[Token]:
        return WHITESPACE.build(value)

    def match_tokens(self, tokens: TokenSource) -> list[Token] | None:
        return match_repeated(WHITESPACE, tokens)

    def match_text(self, chars: TextSource) -> list[Token] | None:
        return match_repeated(WHITESPACE, chars)


@dataclass(frozen=True, slots=True)
class Optional:
    """Matches `descriptor` or nothing. Keeps the wrapped descriptor's kind."""

    descriptor: Descriptor

    @property
    def kind(self) -> DescriptorKind:
        return self.descriptor.kind

    @property
    def value(self) -> str | None:
        return self.descriptor.value

    def build(self, value: str | None = None) -> list[Token]:
        return []

    def match_tokens(self, tokens: TokenSource) -> list[Token] | None:
        match = self.descriptor.match_tokens(tokens)
        return [] if match is None else match

    def match_text(self, chars: TextSource) -> list[Token] | None:
        match = self.descriptor.match_text(chars)
        return [] if match is None else match


WHITESPACE: Final[Whitespace] = Whitespace()
S_QUOTE: Final[Punctuator] = Punctuator("'")
D_QUOTE: Final[Punctuator] = Punctuator('"')
SEPARATOR: Final[Separator] = Separator()


# Shorthands for grammar definitions.
def OPT(descriptor: Descriptor) -> Optional:
    return Optional(descriptor)


def WS(value: str = " ") -> Whitespace:
    return Whitespace(value)


def PN(value: str) -> Punctuator:
    return Punctuator(value)


def KW(value: str) -> Keyword:
    return Keyword(value)


def ID(value: str) -> Identifier:
    return Identifier(value)


def STR(value: str) -> StringLiteral:
    return StringLiteral(value)


def ref(value: str) -> Reference:
    return Reference(value)


_: Final[Optional] = Optional(SEPARATOR)
__: Final[Separator] = SEPARATOR
