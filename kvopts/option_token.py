# Kvopts Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionKind` and `OptionToken`, the classification of a single raw
command-line token into a short option, a long option, or an invalid token.

`OptionToken.classify()` is the single source of truth for what a valid option
string looks like. It is used both when options are declared and when runtime
arguments are matched against them.

Rules:
- `-x` (one leading dash) → `OptionKind.SHORT`, text `x`
- `--xyz` (two leading dashes) → `OptionKind.LONG`, text `xyz`
- Anything else → `OptionKind.INVALID`, text kept verbatim:
    - empty strings, strings made only of dashes, strings with no leading dash
    - three or more leading dashes
    - any non-alphanumeric character after the leading dashes

Example:
    OptionToken.classify("--logfile") → OptionToken(kind=LONG, text="logfile")
    OptionToken.classify("-l-")       → OptionToken(kind=INVALID, text="-l-")
"""
from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum

ALNUM_CHARS = frozenset(string.ascii_letters + string.digits)


class OptionKind(Enum):
    """
    Kind of a classified option token.

    Members:
        SHORT: Single dash option (e.g. `-l`).
        LONG: Double dash option (e.g. `--logfile`).
        INVALID: Anything that is not a well formed short or long option.
    """

    SHORT = "short"
    LONG = "long"
    INVALID = "invalid"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionToken:
    """
    Result of classifying one raw token.

    Attributes:
        kind (OptionKind): The classification tag.
        text (str): The token with leading dashes stripped, or the raw token if invalid.
    """

    kind: OptionKind
    text: str

    @property
    def is_short(self) -> bool:
        return self.kind is OptionKind.SHORT

    @property
    def is_long(self) -> bool:
        return self.kind is OptionKind.LONG

    @property
    def is_valid(self) -> bool:
        return self.kind is not OptionKind.INVALID

    @classmethod
    def classify(cls, raw: str) -> OptionToken:
        """
        Classify a raw token as a short option, long option, or invalid token.

        Args:
            raw (str): The raw token, including its leading dashes.

        Returns:
            OptionToken: The classified token.
        """
        dashes = len(raw) - len(raw.lstrip("-"))
        if dashes == 0 or dashes == len(raw):
            return cls(OptionKind.INVALID, raw)

        remainder = raw[dashes:]
        if not all(char in ALNUM_CHARS for char in remainder):
            return cls(OptionKind.INVALID, raw)

        if dashes == 1:
            return cls(OptionKind.SHORT, remainder)
        if dashes == 2:
            return cls(OptionKind.LONG, remainder)
        return cls(OptionKind.INVALID, raw)
