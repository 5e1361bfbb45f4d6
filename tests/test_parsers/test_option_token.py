import pytest

from kvopts.option_token import OptionKind, OptionToken


def test_short_token():
    token = OptionToken.classify("-l")
    assert token.kind == OptionKind.SHORT
    assert token.text == "l"
    assert token.is_short
    assert not token.is_long


def test_long_token():
    token = OptionToken.classify("--logfilePath")
    assert token.kind == OptionKind.LONG
    assert token.text == "logfilePath"
    assert token.is_long
    assert token.is_valid


def test_digits_are_alphanumeric():
    assert OptionToken.classify("-1").kind == OptionKind.SHORT
    assert OptionToken.classify("--v2").text == "v2"


@pytest.mark.parametrize(
    "raw",
    [
        "l",
        "---l",
        "-l-",
        "--l-",
        "-l-l",
        "-l--",
        "l--",
        "- l",
        "-- l",
        "-- ",
        "- ",
        " ",
        "",
        "-",
        "--",
        "---",
        "--log_file",
        "-l=",
        "--é",
    ],
)
def test_invalid_tokens(raw):
    token = OptionToken.classify(raw)
    assert token.kind == OptionKind.INVALID
    assert token.text == raw
    assert not token.is_valid


def test_option_kind_str():
    assert str(OptionKind.SHORT) == "short"
    assert str(OptionKind.INVALID) == "invalid"
