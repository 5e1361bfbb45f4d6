# Kvopts Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass used by `OptionParser` to represent one declared
command-line option.

An `Option` always has both a short key (`l` for `-l`) and a long key
(`logfile` for `--logfile`). The short key must be strictly shorter than the
long key. Keys are stored without their leading dashes.

Options should be created using `OptionParser.add_argument()`, which validates
the raw flags through `Option.from_flags()` and checks for key collisions.

Key Attributes:
- `short`: Cleaned short key
- `long`: Cleaned long key
- `help`: Description shown in help output
- `default`: Stored string form of the default value, or None
- `mandatory`: Whether the option must be supplied on the command line

Two options are equal when their short and long keys are equal, so an
`Option` can be used as the key of the parsed value map.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kvopts.conversion import format_default
from kvopts.exceptions import InvalidOptionError
from kvopts.option_token import OptionToken


@dataclass(frozen=True)
class Option:
    """
    Represents a declared command-line option.

    Attributes:
        short (str): Short key without the leading dash.
        long (str): Long key without the leading dashes.
        help (str): Help text for the option.
        default (str | None): Default value as a string, or None if there is none.
        mandatory (bool): True if the option must be supplied, False otherwise.
    """

    short: str
    long: str
    help: str = field(default="", compare=False)
    default: str | None = field(default=None, compare=False)
    mandatory: bool = field(default=False, compare=False)

    @classmethod
    def from_flags(
        cls,
        short_flag: str,
        long_flag: str,
        help: str = "",
        default: Any = None,
        mandatory: bool = False,
    ) -> Option:
        """
        Build an option from its raw flags.

        Args:
            short_flag (str): Raw short flag (e.g. "-l").
            long_flag (str): Raw long flag (e.g. "--logfile").
            help (str): Help text for the option.
            default (Any): Default value, stored as a string. None means no default.
            mandatory (bool): Whether the option must be supplied.

        Returns:
            Option: The validated option.

        Raises:
            InvalidOptionError: If a flag is malformed, the short key is not shorter
                than the long key, or the option is both mandatory and defaulted.
        """
        short_token = OptionToken.classify(short_flag)
        long_token = OptionToken.classify(long_flag)

        if not short_token.is_short:
            raise InvalidOptionError(f"Invalid short option: {short_flag}")
        if not long_token.is_long:
            raise InvalidOptionError(f"Invalid long option: {long_flag}")
        if len(short_token.text) >= len(long_token.text):
            raise InvalidOptionError(
                f"Short option [{short_flag}] must be shorter than Long option [{long_flag}]"
            )
        if mandatory and default is not None:
            raise InvalidOptionError(
                f"Option [{short_flag}, {long_flag}] cannot be mandatory and have a default value"
            )

        return cls(
            short=short_token.text,
            long=long_token.text,
            help=help,
            default=None if default is None else format_default(default),
            mandatory=mandatory,
        )

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def keys(self) -> tuple[str, str]:
        return (self.short, self.long)

    def matches(self, key: str) -> bool:
        """Return True if the bare key equals the short or long key."""
        return key == self.short or key == self.long

    def to_verbose_string(self) -> str:
        """Return the option and its description as shown in help text."""
        description = f"{self}\n\tdescription: {self.help}"
        if self.has_default:
            return f"{description}, default: {self.default}"
        if self.mandatory:
            return f"{description}, mandatory: true"
        return description

    def __str__(self) -> str:
        return f"-{self.short}, --{self.long}"
