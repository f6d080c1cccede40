"""Matcher modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class MatchMode(StrEnum):
    """Top-level matcher behavior profile."""

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """Limits and flags controlling recovery and separator handling."""

    mode: MatchMode = MatchMode.STRICT
    # How many times one node may be restarted against a fallback source.
    max_fallback_depth: int = 4
    # Append separators nobody claimed to the root's tokens.
    flush_trailing_separator: bool = True

    @staticmethod
    def for_mode(mode: MatchMode) -> "MatchOptions":
        if mode == MatchMode.LENIENT:
            return MatchOptions(
                mode=mode,
                max_fallback_depth=16,
                flush_trailing_separator=True,
            )

        return MatchOptions(
            mode=mode,
            max_fallback_depth=4,
            flush_trailing_separator=True,
        )


def resolve_options(
    options: MatchOptions | None,
    mode: MatchMode | None,
) -> MatchOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return MatchOptions.for_mode(mode)

    return MatchOptions()
