"""Tests for confdir exception classes."""

from confdir.exceptions import (
    ConfdirError,
    ConfigParseError,
    UnknownFormatError,
)


def test_base_error_message_without_target():
    error = ConfdirError("something broke")

    assert str(error) == "Operation failed: something broke"
    assert error.target is None


def test_base_error_message_with_target():
    error = ConfdirError("something broke", "config.json")

    assert str(error) == "Operation failed for 'config.json': something broke"


def test_parse_error_is_value_error():
    error = ConfigParseError("bad content", "config.json")

    assert isinstance(error, ConfdirError)
    assert isinstance(error, ValueError)
    assert str(error) == "Parse failed for 'config.json': bad content"


def test_unknown_format_error_str_is_not_quoted():
    error = UnknownFormatError("expected one of JSON", "toml")

    assert isinstance(error, KeyError)
    assert str(error) == "Unknown format for 'toml': expected one of JSON"
