"""Diagnostics."""

from astokens.diagnostics.codes import (
    MATCH_FALLBACK_UNAVAILABLE,
    MATCH_PARSING_FAILED,
    MATCH_UNKNOWN_COMMAND_TYPE,
    MATCH_UNKNOWN_NODE_TYPE,
    MATCH_UNRESOLVABLE_REFERENCE,
    DiagnosticSpec,
    Severity,
)
from astokens.diagnostics.errors import (
    FallbackUnavailable,
    MatchError,
    ParsingFailure,
    UnknownCommandType,
    UnknownNodeType,
    UnresolvableReference,
)

__all__ = [
    "MATCH_FALLBACK_UNAVAILABLE",
    "MATCH_PARSING_FAILED",
    "MATCH_UNKNOWN_COMMAND_TYPE",
    "MATCH_UNKNOWN_NODE_TYPE",
    "MATCH_UNRESOLVABLE_REFERENCE",
    "DiagnosticSpec",
    "FallbackUnavailable",
    "MatchError",
    "ParsingFailure",
    "Severity",
    "UnknownCommandType",
    "UnknownNodeType",
    "UnresolvableReference",
]
