import pytest

from astokens import (
    FallbackUnavailable,
    MatchOptions,
    ParsingFailure,
    SourceKind,
    Token,
    TokenSource,
    TokenType,
    build_context,
    from_node,
    match,
    match_result,
)
from astokens.descriptors import ID, KW, OPT, PN, _, ref
from astokens.matcher.commands import take
from tests._shared_cases import GRAMMAR, id_token, pn, reference, shape, ws


def _cst_binary(*, right: dict | None = None) -> dict:
    left = {"type": "Identifier", "name": "a", "range": (0, 1), "cstTokens": [id_token("a")]}
    if right is None:
        right = {"type": "Identifier", "name": "b", "range": (4, 5), "cstTokens": [id_token("b")]}
    return {
        "type": "BinaryExpression",
        "operator": "+",
        "left": left,
        "right": right,
        "range": (0, 5),
        "cstTokens": [reference("left"), ws(), pn("+"), ws(), reference("right")],
    }


def test_token_source_reuses_existing_tokens() -> None:
    node = _cst_binary()
    context = build_context(GRAMMAR)
    tree = match(node, TokenSource.for_node(node), context=context)

    assert all(ours is theirs for ours, theirs in zip(tree.cst_tokens, node["cstTokens"], strict=True))
    assert (tree.source.kind, tree.source.start, tree.source.end) == (SourceKind.TOKENS, 0, 5)

    left = context.resolved_children[node["cstTokens"][0]]
    assert left.node is node["left"]
    assert left.cst_tokens[0] is node["left"]["cstTokens"][0]
    assert (left.source.kind, left.source.start, left.source.end) == (SourceKind.TOKENS, 0, 1)


def test_child_without_tokens_falls_back_to_text() -> None:
    right = {"type": "Identifier", "name": "b", "range": (4, 5)}
    node = _cst_binary(right=right)
    result = match_result(node, from_node(node, "a + b"), GRAMMAR)

    right_match = result.resolved_children[node["cstTokens"][4]]
    assert right_match.node is right
    assert right_match.fallbacks == 1
    assert (right_match.source.kind, right_match.source.start, right_match.source.end) == (SourceKind.TEXT, 4, 5)
    assert shape(right_match.cst_tokens) == [("Identifier", "b")]
    assert result.text() == "a + b"


def test_stale_tokens_fall_back_to_text() -> None:
    # Tokens say `c` but the tree says `b`: the child is rematched from text.
    right = {"type": "Identifier", "name": "b", "range": (4, 5), "cstTokens": [id_token("c")]}
    node = _cst_binary(right=right)
    result = match_result(node, TokenSource.for_node(node, "a + b"), GRAMMAR)

    assert result.resolved_children[node["cstTokens"][4]].source.kind == SourceKind.TEXT
    assert result.text() == "a + b"


def test_fallback_failure_is_chained_into_parsing_failure() -> None:
    right = {"type": "Identifier", "name": "b", "range": (4, 5)}
    node = _cst_binary(right=right)

    with pytest.raises(ParsingFailure) as excinfo:
        match(node, TokenSource.for_node(node), GRAMMAR)

    assert excinfo.value.source_kind == SourceKind.TOKENS
    assert isinstance(excinfo.value.__cause__, FallbackUnavailable)


def test_fallback_depth_limit_stops_recovery() -> None:
    right = {"type": "Identifier", "name": "b", "range": (4, 5)}
    node = _cst_binary(right=right)

    with pytest.raises(ParsingFailure) as excinfo:
        match(
            node,
            TokenSource.for_node(node, "a + b"),
            GRAMMAR,
            options=MatchOptions(max_fallback_depth=0),
        )

    assert excinfo.value.__cause__ is None
    assert excinfo.value.reason == "gave up after 0 fallback sources"


def test_root_fallback_when_root_tokens_do_not_match() -> None:
    node = _cst_binary()
    node["operator"] = "-"
    node["left"].pop("cstTokens")
    node["right"].pop("cstTokens")
    result = match_result(node, TokenSource.for_node(node, "a - b"), GRAMMAR)

    assert result.root.source.kind == SourceKind.TEXT
    assert result.root.fallbacks == 1
    assert result.text() == "a - b"


def optional_return(node, resolved_children):
    yield take(KW("return"), _, OPT(ref("argument")))


def test_optional_reference_recurses_on_tokens() -> None:
    argument = {"type": "Identifier", "name": "x", "range": (7, 8), "cstTokens": [id_token("x")]}
    node = {
        "type": "ReturnStatement",
        "argument": argument,
        "range": (0, 8),
        "cstTokens": [Token(TokenType.KEYWORD, "return"), ws(), reference("argument")],
    }
    result = match_result(node, TokenSource.for_node(node), {**GRAMMAR, "ReturnStatement": optional_return})

    assert result.root.cst_tokens[2] is node["cstTokens"][2]
    assert result.child(node["cstTokens"][2]).node is argument
    assert result.text() == "return x"


def test_fallback_restart_drops_separator_left_by_failed_take() -> None:
    def statement(node, resolved_children):
        yield take(ID(node["name"]), _)
        yield take(PN(";"))

    # The tokens lack the `;`, so the second take fails with a space pending.
    node = {"type": "Statement", "name": "a", "range": (0, 3), "cstTokens": [id_token("a"), ws()]}
    result = match_result(node, TokenSource.for_node(node, "a ;"), {"Statement": statement})

    assert result.root.source.kind == SourceKind.TEXT
    assert shape(result.root.cst_tokens) == [("Identifier", "a"), ("Whitespace", " "), ("Punctuator", ";")]
    assert result.text() == "a ;"
