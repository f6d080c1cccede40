"""Match tree types."""

from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass, field

from astokens.sources import SourceKind
from astokens.tokens import Token


@dataclass(slots=True)
class SourceSpan:
    """Where a node's tokens lie in the source it was matched against.

    Positions are in the coordinates of `kind`: character offsets for text,
    token indexes for token sources.
    """

    kind: SourceKind
    start: int
    end: int | None = None


@dataclass(slots=True)
class MatchNode:
    node: object
    cst_tokens: list[Token]
    source: SourceSpan
    # Number of fallback sources this node was restarted on.
    fallbacks: int = field(default=0, compare=False)


class ResolvedChildren(MutableMapping[Token, MatchNode]):
    """Reference token -> the match tree of the child it stands for.

    Keyed by token identity: equal-looking reference tokens for different
    children are separate entries. The mapping holds its tokens, so ids stay
    unique for its whole lifetime.
    """

    def __init__(self) -> None:
        self._entries: dict[int, tuple[Token, MatchNode]] = {}

    def __getitem__(self, token: Token) -> MatchNode:
        return self._entries[id(token)][1]

    def __setitem__(self, token: Token, tree: MatchNode) -> None:
        self._entries[id(token)] = (token, tree)

    def __delitem__(self, token: Token) -> None:
        del self._entries[id(token)]

    def __contains__(self, token: object) -> bool:
        entry = self._entries.get(id(token))
        return entry is not None and entry[0] is token

    def __iter__(self) -> Iterator[Token]:
        return (token for token, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResolvedChildren({len(self._entries)} entries)"
