"""Rebuild source text from a match tree."""

from collections.abc import Iterable, Iterator, Mapping

from astokens.matcher.result import MatchNode
from astokens.tokens import Token, token_text


def flatten_tokens(
    tokens: Iterable[Token],
    resolved_children: Mapping[Token, MatchNode],
) -> Iterator[Token]:
    """Yield `tokens`, replacing each reference with its child's tokens."""
    for token in tokens:
        if not token.is_reference:
            yield token
            continue
        if token not in resolved_children:
            raise KeyError(f"Reference {token.value!r} was never resolved")
        yield from flatten_tokens(resolved_children[token].cst_tokens, resolved_children)


def render_tokens(
    tokens: Iterable[Token],
    resolved_children: Mapping[Token, MatchNode],
) -> str:
    return "".join(token_text(token) for token in flatten_tokens(tokens, resolved_children))


def render_match(match_node: MatchNode, resolved_children: Mapping[Token, MatchNode]) -> str:
    return render_tokens(match_node.cst_tokens, resolved_children)
