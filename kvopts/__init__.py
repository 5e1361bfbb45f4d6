"""
Kvopts Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    ConversionFailedError,
    DuplicateOptionError,
    DuplicateValueError,
    HelpRequestedError,
    InvalidInvocationError,
    InvalidOptionError,
    KvOptsError,
    MalformedArgumentError,
    MissingMandatoryArgumentError,
    NotYetParsedError,
    UnknownArgumentError,
)
from .logger import logger
from .option import Option
from .option_parser import OptionParser
from .option_token import OptionKind, OptionToken

__all__ = [
    "OptionParser",
    "Option",
    "OptionKind",
    "OptionToken",
    "KvOptsError",
    "InvalidOptionError",
    "DuplicateOptionError",
    "InvalidInvocationError",
    "MalformedArgumentError",
    "UnknownArgumentError",
    "DuplicateValueError",
    "MissingMandatoryArgumentError",
    "NotYetParsedError",
    "HelpRequestedError",
    "ConversionFailedError",
    "logger",
]
