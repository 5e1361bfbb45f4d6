# Kvopts Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value formatting and conversion utilities for kvopts.

Every parsed value is stored as the raw string the user typed (or the string
form of a declared default). These helpers turn declared defaults into strings
and turn stored strings back into typed values.

Conversion is strict: a value only converts if the whole string is consumed.
`"15abc"` is not an `int`, and `" 10"` is not either.

Functions:
- format_default: Convert a declared default value to its stored string form.
- convert: Convert a stored string to a target type, returning `(value, ok)`.
"""
import re
from typing import Any

from kvopts.logger import logger

INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def format_default(value: Any) -> str:
    """
    Convert a default value to the string stored for it.

    Booleans are written as `true` / `false`, everything else uses `str()`.

    Args:
        value (Any): The declared default.

    Returns:
        str: The stored string form.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def convert_bool(raw: str) -> tuple[bool, bool]:
    lowered = raw.lower()
    if lowered == "true":
        return True, True
    if lowered == "false":
        return False, True
    return False, False


def convert_int(raw: str) -> tuple[int, bool]:
    if not INT_PATTERN.fullmatch(raw):
        return 0, False
    return int(raw), True


def convert_float(raw: str) -> tuple[float, bool]:
    if raw != raw.strip() or "_" in raw:
        return 0.0, False
    try:
        return float(raw), True
    except ValueError:
        return 0.0, False


def convert(raw: str, target_type: Any = str) -> tuple[Any, bool]:
    """
    Convert a stored string to the given target type.

    Args:
        raw (str): The stored string value.
        target_type (Any): The desired type. `str`, `bool`, `int` and `float` are
            handled strictly, any other callable is called with the raw string.

    Returns:
        tuple[Any, bool]: The converted value and whether conversion succeeded.
            When conversion fails the value is meaningless.
    """
    if target_type is str:
        return raw, True
    if target_type is bool:
        return convert_bool(raw)
    if target_type is int:
        return convert_int(raw)
    if target_type is float:
        return convert_float(raw)

    try:
        return target_type(raw), True
    except (ValueError, TypeError, ArithmeticError) as error:
        logger.debug("Could not convert '%s' with %s: %s", raw, target_type, error)
        return None, False
