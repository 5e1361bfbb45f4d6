import pytest

from kvopts.exceptions import InvalidOptionError
from kvopts.option import Option


def test_construction():
    option = Option.from_flags("-l", "--logfile", "logfile path")
    assert option.short == "l"
    assert option.long == "logfile"
    assert str(option) == "-l, --logfile"
    assert option.to_verbose_string() == "-l, --logfile\n\tdescription: logfile path"
    assert not option.has_default
    assert not option.mandatory


def test_default_value():
    option = Option.from_flags("-c", "--count", "To get the counter", "58")
    assert option.keys == ("c", "count")
    assert (
        option.to_verbose_string()
        == "-c, --count\n\tdescription: To get the counter, default: 58"
    )
    assert option.has_default
    assert option.default == "58"


@pytest.mark.parametrize(
    "default,expected",
    [(58, "58"), (1.5, "1.5"), (True, "true"), (False, "false"), ("", "")],
)
def test_default_value_is_stringified(default, expected):
    option = Option.from_flags("-c", "--count", "", default)
    assert option.default == expected
    assert option.has_default


def test_mandatory():
    option = Option.from_flags("-c", "--count", "counter", mandatory=True)
    assert option.mandatory
    assert (
        option.to_verbose_string()
        == "-c, --count\n\tdescription: counter, mandatory: true"
    )


def test_mandatory_with_default_is_rejected():
    with pytest.raises(InvalidOptionError, match="cannot be mandatory"):
        Option.from_flags("-c", "--count", "counter", "1", mandatory=True)


@pytest.mark.parametrize(
    "short,long,message",
    [
        ("-c", "-c", "Invalid long option: -c"),
        ("--count", "--count", "Invalid short option: --count"),
        ("-c", "--c", "Short option [-c] must be shorter than Long option [--c]"),
        ("", "", "Invalid short option: "),
        ("", "--c", "Invalid short option: "),
        ("-c", "", "Invalid long option: "),
        ("-c", "---c", "Invalid long option: ---c"),
        ("---c", "cc", "Invalid short option: ---c"),
        ("---c", "---cc", "Invalid short option: ---c"),
        ("--counter", "-c", "Invalid short option: --counter"),
        ("-counter", "-c", "Invalid long option: -c"),
        (
            "-counter",
            "--c",
            "Short option [-counter] must be shorter than Long option [--c]",
        ),
    ],
)
def test_bad_flags(short, long, message):
    with pytest.raises(InvalidOptionError) as excinfo:
        Option.from_flags(short, long, "Counter")
    assert str(excinfo.value) == message


def test_equality_uses_keys_only():
    first = Option.from_flags("-l", "--logfile", "one")
    second = Option.from_flags("-l", "--logfile", "two", "/tmp")
    third = Option.from_flags("-l", "--logdir", "one")

    assert first == second
    assert hash(first) == hash(second)
    assert first != third


def test_matches():
    option = Option.from_flags("-l", "--logfile")
    assert option.matches("l")
    assert option.matches("logfile")
    assert not option.matches("-l")
    assert not option.matches("--logfile")
    assert not option.matches("")
