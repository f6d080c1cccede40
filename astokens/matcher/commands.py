"""Commands yielded by grammar procedures."""

from dataclasses import dataclass
from enum import StrEnum

from astokens.descriptors import Descriptor
from astokens.tokens import Token


class CommandType(StrEnum):
    EMIT = "emit"  # append ready-made tokens, consume nothing
    MATCH = "match"  # try descriptors, send the result back to the grammar
    TAKE = "take"  # descriptors must match, or the source falls back


@dataclass(frozen=True, slots=True)
class Command:
    type: CommandType
    value: tuple[Token, ...] | tuple[Descriptor, ...]
    # Reported as the reason of the ParsingFailure if a `take` cannot recover.
    error: str | None = None


def emit(*tokens: Token) -> Command:
    return Command(CommandType.EMIT, tokens)


def match(*descriptors: Descriptor) -> Command:
    return Command(CommandType.MATCH, descriptors)


def take(*descriptors: Descriptor, error: str | None = None) -> Command:
    return Command(CommandType.TAKE, descriptors, error)
