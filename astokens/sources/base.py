"""Source capability shared by text and token sources."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from astokens.descriptors import Descriptor
    from astokens.matcher.result import ResolvedChildren
    from astokens.tokens import Token


class SourceKind(StrEnum):
    TEXT = "Text"
    TOKENS = "Tokens"


class Source(Protocol):
    """Forkable input cursor.

    `match` only probes; `advance` commits. `fork()` returns an independent
    cursor at the same position and `fork(child)` one scoped to the child's
    own input. `fallback()` returns an alternate representation of the same
    input or raises `FallbackUnavailable`.
    """

    @property
    def kind(self) -> SourceKind: ...

    @property
    def position(self) -> int: ...

    @property
    def done(self) -> bool: ...

    def match(self, descriptor: Descriptor) -> list[Token] | None: ...

    def advance(
        self,
        tokens: list[Token],
        resolved_children: ResolvedChildren | None = None,
    ) -> None: ...

    def fork(self, child: object | None = None) -> Source: ...

    def fallback(self) -> Source: ...
