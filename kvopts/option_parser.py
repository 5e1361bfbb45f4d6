# Kvopts Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionParser`, a small declare → parse → retrieve
argument parser for `key=value` style command lines.

Each declared option has a short form (`-l`) and a long form (`--logfile`), a
help message, and either a default value or a mandatory flag. Runtime
arguments must be written as `-l=value` or `--logfile=value`. Values are
stored as strings and converted on retrieval.

Key Features:
- Chainable declaration via `add_argument()`
- Collision detection across all short and long keys, including `-h/--help`
- Defaults applied after parsing, mandatory options enforced after defaults
- Typed retrieval with a `(value, ok)` result via `retrieve()`
- Fail-fast typed retrieval via `retrieve_or_fail()`
- Plain text help via `help_msg()`, Rich output via `render_help()`

Public Interface:
- `add_argument(...)`: Declare a new option.
- `parse(app_path, args)`: Parse an argument list.
- `parse_argv(argv)`: Parse a full `sys.argv` style vector.
- `retrieve(key, type)`: Return `(value, ok)` for a parsed option.
- `retrieve_or_fail(key, type)`: Return the value or raise `ConversionFailedError`.
- `contains(key)`: Check whether an option holds a value.
- `need_help()` / `help_msg()`: Help handshake for the host application.

Example Usage:
    parser = OptionParser()
    parser.add_argument("-c", "--count", "to get the count", mandatory=True)
    parser.add_argument("-l", "--logfile", "log file path", "/home/")

    parser.parse("app", ["--count=10"])

    parser.retrieve("c", int)         # (10, True)
    parser.retrieve_or_fail("logfile") # "/home/"

Passing exactly `-h` or `--help` stops parsing. The host is expected to check
`need_help()`, print `help_msg()`, and stop.
"""
from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape

from kvopts.console import console as default_console
from kvopts.conversion import convert
from kvopts.exceptions import (
    ConversionFailedError,
    DuplicateOptionError,
    DuplicateValueError,
    HelpRequestedError,
    InvalidInvocationError,
    MalformedArgumentError,
    MissingMandatoryArgumentError,
    NotYetParsedError,
    UnknownArgumentError,
)
from kvopts.logger import logger
from kvopts.option import Option
from kvopts.option_token import OptionToken

SEPARATOR = "="
HELP_FLAGS = ("-h", "--help")
HELP_HEADER = "Following is a list of configured arguments:"


class OptionParser:
    """
    Registry of declared options for one command invocation.

    Options are declared first, then `parse()` is called once with the
    command-line arguments, then values are retrieved by short or long key.

    Features:
    - Short and long option keys, validated on declaration.
    - Default values and mandatory options.
    - Strict typed conversion on retrieval.
    - Help handshake through `need_help()` and `help_msg()`.
    """

    def __init__(self, description: str = "") -> None:
        """Initialize the OptionParser."""
        self.description: str = description
        self._options: list[Option] = []
        self._keys: set[str] = set()
        self._parsed: dict[Option, str] = {}
        self._app_path: str = ""
        self._is_parsed: bool = False
        self._help_requested: bool = False
        self._help_option: Option = Option.from_flags(
            *HELP_FLAGS, help="Show this help message."
        )
        self._keys.update(self._help_option.keys)

    @property
    def app_path(self) -> str:
        """The application path recorded by the last `parse()` call."""
        return self._app_path

    @property
    def options(self) -> tuple[Option, ...]:
        """All declared options in declaration order, starting with help."""
        return (self._help_option, *self._options)

    def add_argument(
        self,
        short: str,
        long: str,
        help: str = "",
        default: Any = None,
        *,
        mandatory: bool = False,
    ) -> OptionParser:
        """
        Declare a new option.

        Args:
            short (str): Short flag, e.g. "-l".
            long (str): Long flag, e.g. "--logfile". Must be longer than the short key.
            help (str): Help text shown by `help_msg()`.
            default (Any): Default value, stored as a string. Booleans become
                "true" / "false".
            mandatory (bool): Whether the option must be supplied. Cannot be
                combined with a default.

        Returns:
            OptionParser: This parser, for call chaining.

        Raises:
            InvalidOptionError: If a flag is malformed.
            DuplicateOptionError: If a key is already used, including `h` and `help`.
        """
        option = Option.from_flags(
            short, long, help=help, default=default, mandatory=mandatory
        )
        if option.short in self._keys:
            raise DuplicateOptionError(f"Duplicate option: {short}")
        if option.long in self._keys:
            raise DuplicateOptionError(f"Duplicate option: {long}")

        self._keys.update(option.keys)
        self._options.append(option)
        logger.debug("Declared option %s", option)
        return self

    def get_option(self, key: str) -> Option | None:
        """
        Return the declared option for a bare short or long key.

        Args:
            key (str): Key without leading dashes.

        Returns:
            Option or None: Matching option, if declared.
        """
        return next((option for option in self.options if option.matches(key)), None)

    def _split_argument(self, argument: str) -> tuple[str, str]:
        position = argument.find(SEPARATOR)
        if position <= 0:
            raise MalformedArgumentError(
                f"Separator [{SEPARATOR}] is supposed to separate arg and value in: {argument}"
            )
        return argument[:position], argument[position + 1 :]

    def _find_option(self, flag: str) -> Option:
        """Match a raw flag: short tokens against short keys, long against long."""
        token = OptionToken.classify(flag)
        for option in self._options:
            if token.is_short and token.text == option.short:
                return option
            if token.is_long and token.text == option.long:
                return option
        raise UnknownArgumentError(f"{flag} is not a known argument")

    def parse(self, app_path: str, args: Sequence[str] | None) -> None:
        """
        Parse command-line arguments against the declared options.

        Args:
            app_path (str): Path of the running application (argv[0]).
            args (Sequence[str]): The remaining arguments, each `-k=value` or
                `--key=value`, or a single `-h` / `--help`.

        Raises:
            InvalidInvocationError: If `app_path` is empty or `args` is None.
            MalformedArgumentError: If an argument has no `=` or starts with it.
            UnknownArgumentError: If an argument matches no declared option.
            DuplicateValueError: If an option is given more than once.
            MissingMandatoryArgumentError: If a mandatory option is missing.
        """
        if not isinstance(app_path, str) or not app_path:
            raise InvalidInvocationError(
                f"Application path must be a non-empty string, got {app_path!r}"
            )
        if args is None:
            raise InvalidInvocationError("Argument list must not be None")

        self._app_path = app_path
        self._parsed = {}
        self._help_requested = False
        self._is_parsed = False

        if len(args) == 1 and args[0] in HELP_FLAGS:
            logger.debug("Help requested for %s", app_path)
            self._help_requested = True
            self._is_parsed = True
            return

        parsed: dict[Option, str] = {}
        for argument in args:
            flag, value = self._split_argument(argument)
            option = self._find_option(flag)
            if option in parsed:
                raise DuplicateValueError(f"Received multiple values for {option}")
            parsed[option] = value

        for option in self._options:
            if option.has_default and option not in parsed:
                parsed[option] = option.default

        for option in self._options:
            if option.mandatory and option not in parsed:
                logger.debug("Mandatory option %s was not supplied", option)
                raise MissingMandatoryArgumentError(
                    f"Missing mandatory argument: {option}"
                )

        self._parsed = parsed
        self._is_parsed = True
        logger.debug("Parsed %d option value(s) for %s", len(self._parsed), app_path)

    def parse_argv(self, argv: Sequence[str] | None) -> None:
        """
        Parse a full argument vector whose first element is the application path.

        Args:
            argv (Sequence[str]): The vector, e.g. `sys.argv`.
        """
        if not argv:
            raise InvalidInvocationError(
                "Argument vector must contain the application path"
            )
        self.parse(argv[0], list(argv[1:]))

    def _find_value(self, key: str) -> tuple[Option, str]:
        if not self._is_parsed:
            raise NotYetParsedError(
                f"Couldn't retrieve [{key}], arguments have not been parsed yet"
            )
        if self._help_requested:
            raise HelpRequestedError(
                f"Couldn't retrieve [{key}], help was requested instead of parsing"
            )
        for option, value in self._parsed.items():
            if option.matches(key):
                return option, value
        raise UnknownArgumentError(f"Couldn't find [{key}] in parsed arguments")

    def retrieve(self, key: str, type: Any = str) -> tuple[Any, bool]:
        """
        Retrieve a parsed value converted to the requested type.

        Args:
            key (str): Short or long key, without dashes.
            type (Any): Target type, `str` by default.

        Returns:
            tuple[Any, bool]: The value and whether conversion succeeded.

        Raises:
            NotYetParsedError: If `parse()` has not been called.
            HelpRequestedError: If parsing stopped because help was requested.
            UnknownArgumentError: If no value is stored for the key.
        """
        _, raw = self._find_value(key)
        return convert(raw, type)

    def retrieve_or_fail(self, key: str, type: Any = str) -> Any:
        """
        Retrieve a parsed value, raising if it cannot be converted.

        Raises:
            ConversionFailedError: If the stored string does not convert to `type`.
        """
        expected_type = type
        option, raw = self._find_value(key)
        value, ok = convert(raw, expected_type)
        if not ok:
            type_name = getattr(expected_type, "__name__", str(expected_type))
            raise ConversionFailedError(
                f"Couldn't convert [{raw}] of {option} to {type_name}"
            )
        return value

    def contains(self, key: str) -> bool:
        """Return True if a value (explicit or default) is stored for the key."""
        return any(option.matches(key) for option in self._parsed)

    def need_help(self) -> bool:
        """Return True if the last `parse()` call received only `-h` or `--help`."""
        return self._help_requested

    def help_msg(self) -> str:
        """
        Render every declared option as plain help text.

        Returns:
            str: Description line (if any), a header, and one block per option.
        """
        lines = []
        if self.description:
            lines.append(self.description)
        lines.append(HELP_HEADER)
        lines.extend(option.to_verbose_string() for option in self.options)
        return "\n".join(lines) + "\n"

    def render_help(self, console: Console | None = None) -> None:
        """Print the help text using Rich output."""
        console = console or default_console
        if self.description:
            console.print(escape(self.description))
        console.print(HELP_HEADER, style="bold")
        for option in self.options:
            console.print(escape(option.to_verbose_string()), highlight=False)

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        mandatory = sum(option.mandatory for option in self._options)
        return (
            f"OptionParser(options={len(self.options)}, keys={len(self._keys)}, "
            f"mandatory={mandatory}, parsed={self._is_parsed})"
        )

    def __repr__(self) -> str:
        return str(self)
