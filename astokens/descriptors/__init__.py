"""Descriptors: terminal grammar elements."""

from astokens.descriptors.base import (
    Descriptor,
    DescriptorKind,
    match_repeated,
    match_sequence,
)
from astokens.descriptors.common import (
    ID,
    KW,
    OPT,
    PN,
    STR,
    WS,
    Identifier,
    Keyword,
    Optional,
    Punctuator,
    Reference,
    Separator,
    StringLiteral,
    Whitespace,
    _,
    __,
    ref,
)

__all__ = [
    "ID",
    "KW",
    "OPT",
    "PN",
    "STR",
    "WS",
    "Descriptor",
    "DescriptorKind",
    "Identifier",
    "Keyword",
    "Optional",
    "Punctuator",
    "Reference",
    "Separator",
    "StringLiteral",
    "Whitespace",
    "_",
    "__",
    "match_repeated",
    "match_sequence",
    "ref",
]
