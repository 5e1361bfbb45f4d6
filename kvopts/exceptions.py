# Kvopts Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by kvopts.

Each exception maps to one failure case of declaring options, parsing an
argument vector, or retrieving parsed values. Messages always echo the raw
input that caused the failure so callers can report it as-is.

All exceptions inherit from `KvOptsError`, the base exception for the package.

Exception Hierarchy:
- KvOptsError
    ├── InvalidOptionError
    ├── DuplicateOptionError
    ├── InvalidInvocationError
    ├── MalformedArgumentError
    ├── UnknownArgumentError
    ├── DuplicateValueError
    ├── MissingMandatoryArgumentError
    ├── NotYetParsedError
    ├── HelpRequestedError
    └── ConversionFailedError
"""


class KvOptsError(Exception):
    """Base exception for kvopts."""


class InvalidOptionError(KvOptsError):
    """Exception raised when a short or long option is declared with bad syntax."""


class DuplicateOptionError(KvOptsError):
    """Exception raised when an option key is already in use."""


class InvalidInvocationError(KvOptsError):
    """Exception raised when parse is called without an application path or arguments."""


class MalformedArgumentError(KvOptsError):
    """Exception raised when an argument is not of the form key=value."""


class UnknownArgumentError(KvOptsError):
    """Exception raised when an argument or key matches no declared option."""


class DuplicateValueError(KvOptsError):
    """Exception raised when an option receives more than one value."""


class MissingMandatoryArgumentError(KvOptsError):
    """Exception raised when a mandatory option was not supplied."""


class NotYetParsedError(KvOptsError):
    """Exception raised when values are retrieved before parsing."""


class HelpRequestedError(KvOptsError):
    """Exception raised when values are retrieved after help was requested."""


class ConversionFailedError(KvOptsError):
    """Exception raised when a value cannot be converted to the requested type."""
