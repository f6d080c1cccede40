"""Top-level entrypoints for matching a tree against a source."""

from __future__ import annotations

from dataclasses import dataclass, field

from astokens.matcher.context import GrammarTable, MatchingContext, build_context
from astokens.matcher.executor import match_node
from astokens.matcher.options import MatchMode, MatchOptions, resolve_options
from astokens.matcher.path import TreePath
from astokens.matcher.result import MatchNode, ResolvedChildren
from astokens.sources import Source
from astokens.tokens import Token


def _resolve_context(
    grammar_table: GrammarTable | None,
    context: MatchingContext | None,
    options: MatchOptions | None,
    mode: MatchMode | None,
) -> MatchingContext:
    if context is not None:
        if grammar_table is not None or options is not None or mode is not None:
            raise ValueError("Pass either a context or a grammar table with options, not both")
        return context

    if grammar_table is None:
        raise ValueError("A grammar table is required when no context is given")
    return build_context(grammar_table, resolve_options(options=options, mode=mode))


def match(
    root: object,
    source: Source,
    grammar_table: GrammarTable | None = None,
    *,
    context: MatchingContext | None = None,
    options: MatchOptions | None = None,
    mode: MatchMode | None = None,
) -> MatchNode:
    context = _resolve_context(grammar_table, context, options, mode)

    result = match_node(TreePath(root), source, context)

    # Separators left over by the outermost node would otherwise be lost.
    if context.has_pending_separator and context.options.flush_trailing_separator:
        result.cst_tokens.extend(context.claim_separator())

    return result


@dataclass(slots=True)
class MatchResult:
    """Match tree plus the reference mapping needed to walk it."""

    root: MatchNode
    resolved_children: ResolvedChildren
    options: MatchOptions
    _text: str | None = field(default=None, init=False, repr=False)

    def child(self, reference: Token) -> MatchNode:
        return self.resolved_children[reference]

    def tokens(self) -> list[Token]:
        from astokens.render import flatten_tokens

        return list(flatten_tokens(self.root.cst_tokens, self.resolved_children))

    def text(self) -> str:
        if self._text is None:
            from astokens.render import render_match

            self._text = render_match(self.root, self.resolved_children)
        return self._text


def match_result(
    root: object,
    source: Source,
    grammar_table: GrammarTable | None = None,
    *,
    context: MatchingContext | None = None,
    options: MatchOptions | None = None,
    mode: MatchMode | None = None,
) -> MatchResult:
    context = _resolve_context(grammar_table, context, options, mode)
    tree = match(root, source, context=context)
    return MatchResult(
        root=tree,
        resolved_children=context.resolved_children,
        options=context.options,
    )
