"""Match ASTs against source text or CST tokens, keeping every token."""

from astokens.diagnostics import (
    FallbackUnavailable,
    MatchError,
    ParsingFailure,
    UnknownCommandType,
    UnknownNodeType,
    UnresolvableReference,
)
from astokens.matcher import (
    MatchingContext,
    MatchMode,
    MatchNode,
    MatchOptions,
    MatchResult,
    ResolvedChildren,
    SourceSpan,
    TreePath,
    build_context,
    match,
    match_result,
)
from astokens.render import flatten_tokens, render_match, render_tokens
from astokens.sources import Source, SourceKind, TextSource, TokenSource, from_node
from astokens.tokens import Token, TokenType

__all__ = [
    "FallbackUnavailable",
    "MatchError",
    "MatchMode",
    "MatchNode",
    "MatchOptions",
    "MatchResult",
    "MatchingContext",
    "ParsingFailure",
    "ResolvedChildren",
    "Source",
    "SourceKind",
    "SourceSpan",
    "TextSource",
    "Token",
    "TokenSource",
    "TokenType",
    "TreePath",
    "UnknownCommandType",
    "UnknownNodeType",
    "UnresolvableReference",
    "build_context",
    "flatten_tokens",
    "from_node",
    "match",
    "match_result",
    "render_match",
    "render_tokens",
]
