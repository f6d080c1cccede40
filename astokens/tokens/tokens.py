"""CST tokens."""

from dataclasses import dataclass
from enum import StrEnum


class TokenType(StrEnum):
    WHITESPACE = "Whitespace"
    PUNCTUATOR = "Punctuator"
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    TEXT = "Text"  # string literal bodies
    REFERENCE = "Reference"  # stands in for a child node's tokens


@dataclass(frozen=True, slots=True)
class Token:
    """A single CST token.

    Tokens compare by value, but the match tree keys reference tokens by
    identity: two `Reference` tokens for the same child name are distinct
    entries in `ResolvedChildren`.
    """

    type: TokenType
    value: str

    @property
    def is_reference(self) -> bool:
        return self.type == TokenType.REFERENCE


def token_text(token: Token) -> str:
    """Text a non-reference token contributes to the source.

    Raises if called with a reference token, whose text lives in the child it
    points at.
    """
    if token.is_reference:
        raise ValueError(f"Reference token has no text of its own: {token!r}")
    return token.value
