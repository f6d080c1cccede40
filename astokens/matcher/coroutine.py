"""Peekable, two-way wrapper around grammar procedures."""

from collections.abc import Generator
from typing import Any, TypeAlias

from astokens.tokens import Token

GrammarGenerator: TypeAlias = Generator[Any, list[Token] | None, None]


class GrammarCoroutine:
    """State machine over a grammar generator.

    `value` is the most recently yielded command, readable any number of
    times. `advance(result)` resumes the grammar, delivering `result` as the
    value of its pending `yield`, and moves on to the next command or to
    `done`.
    """

    def __init__(self, generator: GrammarGenerator) -> None:
        self._generator = generator
        self._done = False
        self._value: Any = None
        self._step(None)

    @staticmethod
    def from_procedure(generator: GrammarGenerator) -> "GrammarCoroutine":
        return GrammarCoroutine(generator)

    @property
    def done(self) -> bool:
        return self._done

    @property
    def value(self) -> Any:
        if self._done:
            raise RuntimeError("Grammar coroutine has no value once done")
        return self._value

    def advance(self, value: list[Token] | None = None) -> None:
        if self._done:
            raise RuntimeError("Cannot advance a finished grammar coroutine")
        self._step(value)

    def close(self) -> None:
        self._generator.close()
        self._done = True
        self._value = None

    def _step(self, value: list[Token] | None) -> None:
        try:
            self._value = self._generator.send(value)
        except StopIteration:
            self._done = True
            self._value = None
