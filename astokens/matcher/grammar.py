"""Grammar dispatch: pick the procedure for a node and start it."""

from astokens.diagnostics import UnknownNodeType
from astokens.matcher.context import MatchingContext
from astokens.matcher.coroutine import GrammarCoroutine
from astokens.matcher.path import TreePath
from astokens.nodes import node_type


def build_grammar(path: TreePath, context: MatchingContext) -> GrammarCoroutine:
    kind = node_type(path.node)
    procedure = context.grammar_table.get(kind)
    if procedure is None:
        raise UnknownNodeType(kind)
    return GrammarCoroutine.from_procedure(procedure(path.node, context.resolved_children))
