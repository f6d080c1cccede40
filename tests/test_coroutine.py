import pytest

from astokens import Token, TokenType, UnknownNodeType
from astokens.descriptors import ID
from astokens.matcher import GrammarCoroutine, TreePath, build_context, build_grammar
from astokens.matcher.commands import CommandType, emit, take
from tests._shared_cases import GRAMMAR, ident


def _echo():
    received = yield "first"
    yield ("second", received)


def test_value_can_be_peeked_repeatedly() -> None:
    coroutine = GrammarCoroutine(_echo())

    assert coroutine.value == "first"
    assert coroutine.value == "first"
    assert not coroutine.done


def test_advance_sends_value_into_generator() -> None:
    coroutine = GrammarCoroutine(_echo())
    coroutine.advance(["token"])

    assert coroutine.value == ("second", ["token"])
    coroutine.advance()
    assert coroutine.done


def test_finished_coroutine_cannot_advance() -> None:
    coroutine = GrammarCoroutine(iter_nothing())
    assert coroutine.done
    with pytest.raises(RuntimeError):
        coroutine.advance()
    with pytest.raises(RuntimeError):
        _ = coroutine.value


def iter_nothing():
    return
    yield


def test_close_finishes_coroutine() -> None:
    coroutine = GrammarCoroutine(_echo())
    coroutine.close()
    assert coroutine.done


def test_build_grammar_dispatches_on_node_type() -> None:
    context = build_context(GRAMMAR)
    coroutine = build_grammar(TreePath(ident("a")), context)

    command = coroutine.value
    assert command.type == CommandType.TAKE
    assert command.value == (ID("a"),)


def test_build_grammar_rejects_unregistered_type() -> None:
    with pytest.raises(UnknownNodeType):
        build_grammar(TreePath({"type": "Nope"}), build_context(GRAMMAR))


def test_build_grammar_passes_resolved_children() -> None:
    seen = []

    def grammar(node, resolved_children):
        seen.append(resolved_children)
        yield emit(Token(TokenType.TEXT, ""))

    context = build_context({"X": grammar})
    build_grammar(TreePath({"type": "X"}), context)
    assert len(seen) == 1
    assert seen[0] is context.resolved_children


def test_command_constructors() -> None:
    token = Token(TokenType.KEYWORD, "if")
    assert emit(token).value == (token,)
    assert take(ID("a"), error="boom").error == "boom"
