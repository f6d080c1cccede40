"""Source over raw, unlexed text."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from astokens.descriptors.base import DescriptorKind
from astokens.descriptors.common import Reference
from astokens.diagnostics import FallbackUnavailable
from astokens.sources.base import SourceKind

if TYPE_CHECKING:
    from astokens.descriptors import Descriptor
    from astokens.matcher.result import ResolvedChildren
    from astokens.tokens import Token


class TextSource:
    """Character cursor over `text[index:end]`.

    Positions are absolute character offsets into `text`, so a source built
    over a slice of a larger document reports spans in document coordinates.
    """

    def __init__(self, text: str, index: int = 0, end: int | None = None) -> None:
        end = len(text) if end is None else end
        if not 0 <= index <= end <= len(text):
            raise ValueError(f"Invalid text source bounds: {index}..{end} of {len(text)}")
        self._text = text
        self._index = index
        self._end = end

    @property
    def kind(self) -> SourceKind:
        return SourceKind.TEXT

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        return self._index

    @property
    def end(self) -> int:
        return self._end

    @property
    def done(self) -> bool:
        return self._index >= self._end

    @property
    def remaining(self) -> str:
        return self._text[self._index : self._end]

    def startswith(self, value: str) -> bool:
        return self._text.startswith(value, self._index, self._end)

    def match_pattern(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        return pattern.match(self._text, self._index, self._end)

    def match(self, descriptor: Descriptor) -> list[Token] | None:
        if descriptor.kind == DescriptorKind.REFERENCE:
            # Zero-width until the child is matched; see `advance`. Built from
            # the name so that optional references recurse like plain ones.
            return Reference(descriptor.value).build()
        return descriptor.match_text(self)

    def advance(
        self,
        tokens: list[Token],
        resolved_children: ResolvedChildren | None = None,
    ) -> None:
        index = self._index
        for token in tokens:
            if token.is_reference:
                if resolved_children is None or token not in resolved_children:
                    raise RuntimeError(f"Cannot advance past unresolved reference {token.value!r}")
                span = resolved_children[token].source
                index += span.end - span.start
            else:
                index += len(token.value)

        if index > self._end:
            raise RuntimeError(f"Advanced past end of text source ({index} > {self._end})")
        self._index = index

    def fork(self, child: object | None = None) -> TextSource:
        return TextSource(self._text, self._index, self._end)

    def fallback(self) -> TextSource:
        raise FallbackUnavailable("(raw text is the last representation)")

    def __repr__(self) -> str:
        return f"TextSource({self._index}..{self._end})"
