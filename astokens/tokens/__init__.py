"""Tokens."""

from astokens.tokens.tokens import Token, TokenType, token_text

__all__ = [
    "Token",
    "TokenType",
    "token_text",
]
