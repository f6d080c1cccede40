"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


MATCH_UNKNOWN_NODE_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MATCH_UNKNOWN_NODE_TYPE",
    message="No grammar is registered for this node type.",
    hint="Add a grammar procedure for the node type to the grammar table.",
    category="grammar",
)

MATCH_UNKNOWN_COMMAND_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MATCH_UNKNOWN_COMMAND_TYPE",
    message="Grammar yielded something other than an emit, match or take command.",
    hint="Yield commands built with `emit(...)`, `match(...)` or `take(...)`.",
    category="grammar",
)

MATCH_UNRESOLVABLE_REFERENCE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MATCH_UNRESOLVABLE_REFERENCE",
    message="Reference does not name a child of the node.",
    hint="Check the reference name against the node's properties.",
    category="grammar",
)

MATCH_FALLBACK_UNAVAILABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MATCH_FALLBACK_UNAVAILABLE",
    message="Source has no alternate representation to fall back to.",
    hint="Provide the original source text so token sources can fall back to it.",
    category="source",
)

MATCH_PARSING_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MATCH_PARSING_FAILED",
    message="Parsing failed: required tokens were not found in the source.",
    category="match",
)
