"""Exceptions raised while matching a tree against a source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from astokens.diagnostics.codes import (
    MATCH_FALLBACK_UNAVAILABLE,
    MATCH_PARSING_FAILED,
    MATCH_UNKNOWN_COMMAND_TYPE,
    MATCH_UNKNOWN_NODE_TYPE,
    MATCH_UNRESOLVABLE_REFERENCE,
    DiagnosticSpec,
)

if TYPE_CHECKING:
    from astokens.sources import SourceKind


class MatchError(Exception):
    """Base class for every error surfaced by the matcher."""

    spec: DiagnosticSpec = MATCH_PARSING_FAILED

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = self.spec.message if detail is None else f"{self.spec.message} {detail}"
        super().__init__(message)

    @property
    def code(self) -> str:
        return self.spec.code


class UnknownNodeType(MatchError):
    spec = MATCH_UNKNOWN_NODE_TYPE

    def __init__(self, node_type: object) -> None:
        self.node_type = node_type
        super().__init__(f"(type: {node_type!r})")


class UnknownCommandType(MatchError):
    spec = MATCH_UNKNOWN_COMMAND_TYPE

    def __init__(self, command: object) -> None:
        self.command = command
        super().__init__(f"(got: {command!r})")


class UnresolvableReference(MatchError):
    spec = MATCH_UNRESOLVABLE_REFERENCE

    def __init__(self, name: str, node_type: object) -> None:
        self.name = name
        self.node_type = node_type
        super().__init__(f"(reference: {name!r}, node type: {node_type!r})")


class FallbackUnavailable(MatchError):
    spec = MATCH_FALLBACK_UNAVAILABLE


class ParsingFailure(MatchError):
    """A `take` failed and no fallback source could be obtained.

    The fallback failure is chained as `__cause__`, so the original mismatch
    stays inspectable from the top-level error.
    """

    spec = MATCH_PARSING_FAILED

    def __init__(
        self,
        node_type: object,
        source_kind: SourceKind,
        position: int,
        reason: str | None = None,
    ) -> None:
        self.node_type = node_type
        self.source_kind = source_kind
        self.position = position
        self.reason = reason
        detail = f"(node type: {node_type!r}, {source_kind} source at {position})"
        if reason is not None:
            detail = f"{detail}: {reason}"
        super().__init__(detail)
