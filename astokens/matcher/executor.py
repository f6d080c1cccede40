"""Match executor: drives one grammar procedure against one source.

The executor is the coroutine partner of grammar procedures. It takes tokens
from `source` and puts them in the `cst_tokens` of the node being matched.
The node acts as the pattern, its grammar decides which tokens belong to it,
and the source can be flat text or pre-built CST tokens.
"""

import logging
from collections.abc import Sequence

from astokens.descriptors import Descriptor, DescriptorKind, Optional
from astokens.diagnostics import FallbackUnavailable, ParsingFailure, UnknownCommandType
from astokens.matcher.commands import Command, CommandType
from astokens.matcher.context import MatchingContext
from astokens.matcher.grammar import build_grammar
from astokens.matcher.path import TreePath
from astokens.matcher.refs import RefResolver
from astokens.matcher.result import MatchNode, SourceSpan
from astokens.nodes import get_path, node_type
from astokens.sources import Source
from astokens.tokens import Token

logger = logging.getLogger(__name__)


def match_node(
    path: TreePath,
    source: Source,
    context: MatchingContext,
    *,
    fallbacks: int = 0,
) -> MatchNode:
    cst_tokens: list[Token] = []
    result = MatchNode(
        node=path.node,
        cst_tokens=cst_tokens,
        source=SourceSpan(kind=source.kind, start=source.position),
        fallbacks=fallbacks,
    )
    grammar = build_grammar(path, context)
    resolver = RefResolver(path.node)

    logger.debug(
        "Matching %s against %s source at %d",
        node_type(path.node),
        source.kind,
        source.position,
    )

    while not grammar.done:
        command = grammar.value
        if not isinstance(command, Command):
            raise UnknownCommandType(command)

        if command.type == CommandType.EMIT:
            cst_tokens.extend(command.value)
            grammar.advance()
            continue

        if command.type not in (CommandType.MATCH, CommandType.TAKE):
            raise UnknownCommandType(command)

        speculative = resolver.fork()
        matched = _match_descriptors(path, command.value, source, speculative, context)
        if matched is not None:
            resolver = speculative

        if command.type == CommandType.MATCH:
            # In the grammar: `tokens = yield match(...)`. None means no match.
            grammar.advance(matched)
            continue

        if matched is None:
            grammar.close()
            return _recover(path, source, context, command, fallbacks)

        cst_tokens.extend(matched)
        grammar.advance()

    result.source.end = source.position
    return result


def _match_descriptors(
    path: TreePath,
    descriptors: Sequence[Descriptor],
    source: Source,
    resolver: RefResolver,
    context: MatchingContext,
) -> list[Token] | None:
    """Match `descriptors` left to right, returning None at the first miss.

    Source advances made before a miss are kept; only the resolver is
    speculative. Separators claimed before the miss go back to the context
    for the next claimant.
    """
    matched: list[Token] = []
    claimed: list[Token] = []
    claimed_descriptor: Descriptor | None = None

    for descriptor in descriptors:
        # Separators that bubbled up from a finished child, or were deferred by
        # an earlier descriptor, belong to whoever matches next.
        if context.has_pending_separator:
            claimed_descriptor = context.separator_descriptor
            separator = context.claim_separator()
            claimed.extend(separator)
            matched.extend(separator)

        tokens = source.match(descriptor)
        if tokens is None:
            if claimed:
                context.restore_separator(claimed, claimed_descriptor)
            return None

        if descriptor.kind == DescriptorKind.REFERENCE:
            if not tokens:
                # Optional reference with nothing to recurse into.
                continue

            ref_token = tokens[0]
            if isinstance(descriptor, Optional) and not resolver.can_resolve(ref_token):
                # Optional child that the node does not have.
                continue

            key = resolver.resolve(ref_token)
            child = get_path(path.node, key)
            child_source = source.fork(child)

            logger.debug("Descending into %s via %r", node_type(child), key)
            tree = match_node(path.child(child, key), child_source, context)

            # Separators at the end of the child are now pending in the context
            # and will be claimed by the next descriptor of an unfinished parent.
            matched.append(ref_token)
            context.resolved_children[ref_token] = tree
        elif descriptor.kind == DescriptorKind.SEPARATOR:
            # Not yet known whether these sit between siblings or end a node.
            context.defer_separator(tokens, descriptor)
        else:
            matched.extend(tokens)

        source.advance(tokens, context.resolved_children)

    return matched


def _recover(
    path: TreePath,
    source: Source,
    context: MatchingContext,
    command: Command,
    fallbacks: int,
) -> MatchNode:
    kind = node_type(path.node)
    if fallbacks >= context.options.max_fallback_depth:
        raise ParsingFailure(
            kind,
            source.kind,
            source.position,
            f"gave up after {fallbacks} fallback sources",
        )

    try:
        fallback_source = source.fallback()
    except FallbackUnavailable as exc:
        raise ParsingFailure(kind, source.kind, source.position, command.error) from exc

    # The restart rereads this node from its start, separators included.
    context.claim_separator()

    logger.debug(
        "Take failed for %s on %s source at %d; restarting on %s source",
        kind,
        source.kind,
        source.position,
        fallback_source.kind,
    )
    return match_node(path, fallback_source, context, fallbacks=fallbacks + 1)
