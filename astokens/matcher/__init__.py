"""Matcher infrastructure (grammar dispatch + executor + entrypoints)."""

from astokens.matcher.commands import Command, CommandType, emit, take
from astokens.matcher.context import (
    GrammarProcedure,
    GrammarTable,
    MatchingContext,
    build_context,
)
from astokens.matcher.coroutine import GrammarCoroutine
from astokens.matcher.entry import MatchResult, match, match_result
from astokens.matcher.executor import match_node
from astokens.matcher.grammar import build_grammar
from astokens.matcher.options import MatchMode, MatchOptions
from astokens.matcher.path import TreePath
from astokens.matcher.refs import RefResolver
from astokens.matcher.result import MatchNode, ResolvedChildren, SourceSpan

__all__ = [
    "Command",
    "CommandType",
    "GrammarCoroutine",
    "GrammarProcedure",
    "GrammarTable",
    "MatchMode",
    "MatchNode",
    "MatchOptions",
    "MatchResult",
    "MatchingContext",
    "RefResolver",
    "ResolvedChildren",
    "SourceSpan",
    "TreePath",
    "build_context",
    "build_grammar",
    "emit",
    "match",
    "match_node",
    "match_result",
    "take",
]
