"""Input sources: raw text and pre-built token streams."""

from astokens.nodes import node_cst_tokens, node_range
from astokens.sources.base import Source, SourceKind
from astokens.sources.text_source import TextSource
from astokens.sources.token_source import TokenSource


def from_node(node: object, source_text: str | None = None) -> Source:
    """Pick a token source when `node` carries tokens, otherwise its text."""
    if node_cst_tokens(node) is not None:
        return TokenSource.for_node(node, source_text)
    if source_text is None:
        raise ValueError("Node has no tokens and no source text was given")

    rng = node_range(node)
    if rng is None:
        return TextSource(source_text)
    start, end = rng
    return TextSource(source_text, start, end)


__all__ = [
    "Source",
    "SourceKind",
    "TextSource",
    "TokenSource",
    "from_node",
]
