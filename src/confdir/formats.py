"""Format registry: named parse/stringify pairs for config files.

Each Format turns on-disk content into a Python value and back. The
registry is a read-only mapping built once at import time:

    ======== ============================ ==========================
    id       parse                        stringify
    ======== ============================ ==========================
    PRETTY_JSON  JSON decode              JSON, 2-space indent
    JSON     JSON decode                  compact JSON
    YAML     YAML safe_load               YAML safe_dump (block style)
    INI      INI decode to nested dict    INI encode
    BIN      str/bytes -> bytes           value -> bytes
    ID       identity                     identity
    LINES    split on "\\n"                join with "\\n"
    ======== ============================ ==========================

``YML`` is an alias for ``YAML``.

Requirements:
    - orjson: JSON encoding/decoding
    - PyYAML: YAML encoding/decoding
"""

import configparser
import io
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

import orjson
import yaml

from confdir.constants import (
    EXTENSION_FORMATS,
    FORMAT_BIN,
    FORMAT_ID,
    FORMAT_INI,
    FORMAT_JSON,
    FORMAT_LINES,
    FORMAT_PRETTY_JSON,
    FORMAT_YAML,
    FORMAT_YML,
)
from confdir.exceptions import ConfigParseError, UnknownFormatError


@dataclass(frozen=True)
class Format:
    """A named parse/stringify pair.

    Attributes:
        name: Registry id, e.g. "PRETTY_JSON"
        parse: Turns file content into a value
        stringify: Turns a value into file content
        raw: Underlying codec module, if any
        binary: Content is bytes on disk rather than text
        errors: Codec exceptions reported as ConfigParseError

    """

    name: str
    parse: Callable[[Any], Any]
    stringify: Callable[[Any], Any]
    raw: Any = None
    binary: bool = False
    errors: tuple[type[Exception], ...] = ()

    def load(self, contents: Any, target: str | None = None) -> Any:  # noqa: ANN401
        """Parse contents, reporting codec failures as ConfigParseError.

        Args:
            contents: Text (or bytes for binary formats) read from disk
            target: File name used in the error message

        Returns:
            Parsed value

        Raises:
            ConfigParseError: If the codec rejects the contents

        """
        try:
            return self.parse(contents)
        except self.errors as e:
            msg = f"invalid {self.name} content: {e}"
            raise ConfigParseError(msg, target) from e


# =============================================================================
# JSON
# =============================================================================


def _json_parse(contents: str | bytes) -> Any:  # noqa: ANN401
    return orjson.loads(contents)


def _pretty_json_stringify(value: Any) -> str:  # noqa: ANN401
    return orjson.dumps(
        value, option=orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS
    ).decode("utf-8")


def _json_stringify(value: Any) -> str:  # noqa: ANN401
    return orjson.dumps(value, option=orjson.OPT_NON_STR_KEYS).decode("utf-8")


# =============================================================================
# YAML
# =============================================================================


def _yaml_parse(contents: str) -> Any:  # noqa: ANN401
    return yaml.safe_load(contents)


def _yaml_stringify(value: Any) -> str:  # noqa: ANN401
    return yaml.safe_dump(
        value,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


# =============================================================================
# INI
# =============================================================================

# Keys before the first [section] header are read into this section
_TOP_SECTION = "confdir:top"
# Never written; keeps configparser from merging [DEFAULT] into sections
_DEFAULTS_SECTION = "confdir:defaults"
# Literal values read back as Python values, as npm ini does
_INI_LITERALS: Mapping[str, Any] = MappingProxyType(
    {"true": True, "false": False, "null": None}
)


class IniParser(configparser.ConfigParser):
    """ConfigParser reading INI files the way config files are written.

    - key case is preserved
    - no %-interpolation
    - ``#`` and ``;`` start comments, also after whitespace inline
    - [DEFAULT] is an ordinary section
    - a bare key without ``=`` is allowed
    """

    def __init__(self) -> None:
        """Initialize parser with confdir INI conventions."""
        super().__init__(
            interpolation=None,
            strict=False,
            allow_no_value=True,
            default_section=_DEFAULTS_SECTION,
            inline_comment_prefixes=("#", ";"),
        )

    def optionxform(self, optionstr: str) -> str:
        """Keep option names as written."""
        return optionstr


def _ini_value(value: Any) -> str:  # noqa: ANN401
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (Mapping, list, tuple)):
        msg = f"INI cannot store nested value {value!r}"
        raise TypeError(msg)
    return str(value)


def _ini_item(value: str | None) -> Any:  # noqa: ANN401
    # A bare key is a flag
    if value is None:
        return True
    return _INI_LITERALS.get(value, value)


def _ini_section(parser: IniParser, section: str) -> dict[str, Any]:
    return {
        key: _ini_item(value)
        for key, value in parser.items(section, raw=True)
    }


def _ini_parse(contents: str) -> dict[str, Any]:
    parser = IniParser()
    parser.read_string(f"[{_TOP_SECTION}]\n{contents}")

    result = _ini_section(parser, _TOP_SECTION)
    for section in parser.sections():
        if section != _TOP_SECTION:
            result[section] = _ini_section(parser, section)
    return result


def _ini_write(parser: IniParser) -> str:
    buffer = io.StringIO()
    parser.write(buffer)
    return buffer.getvalue()


def _ini_stringify(value: Mapping[str, Any]) -> str:
    top = {
        str(key): _ini_value(item)
        for key, item in value.items()
        if not isinstance(item, Mapping)
    }
    top_text = ""
    if top:
        # configparser indents continuation lines of multi-line values
        top_parser = IniParser()
        top_parser[_TOP_SECTION] = top
        top_text = _ini_write(top_parser).removeprefix(f"[{_TOP_SECTION}]\n")

    parser = IniParser()
    for section, items in value.items():
        if isinstance(items, Mapping):
            parser[section] = {
                str(key): _ini_value(item) for key, item in items.items()
            }
    sections = _ini_write(parser)

    if sections:
        return top_text + sections
    return top_text.removesuffix("\n")


# =============================================================================
# BIN / ID / LINES
# =============================================================================


def _to_bytes(value: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _identity(value: Any) -> Any:  # noqa: ANN401
    return value


def _lines_parse(contents: str) -> list[str]:
    return contents.split("\n")


def _lines_stringify(lines: list[str]) -> str:
    return "\n".join(lines)


# =============================================================================
# Registry
# =============================================================================

PRETTY_JSON = Format(
    FORMAT_PRETTY_JSON,
    _json_parse,
    _pretty_json_stringify,
    raw=orjson,
    errors=(orjson.JSONDecodeError,),
)
JSON = Format(
    FORMAT_JSON,
    _json_parse,
    _json_stringify,
    raw=orjson,
    errors=(orjson.JSONDecodeError,),
)
YAML = Format(
    FORMAT_YAML,
    _yaml_parse,
    _yaml_stringify,
    raw=yaml,
    errors=(yaml.YAMLError,),
)
INI = Format(
    FORMAT_INI,
    _ini_parse,
    _ini_stringify,
    raw=configparser,
    errors=(configparser.Error,),
)
BIN = Format(FORMAT_BIN, _to_bytes, _to_bytes, binary=True)
ID = Format(FORMAT_ID, _identity, _identity)
LINES = Format(FORMAT_LINES, _lines_parse, _lines_stringify)

FORMATS: Mapping[str, Format] = MappingProxyType(
    {
        FORMAT_PRETTY_JSON: PRETTY_JSON,
        FORMAT_JSON: JSON,
        FORMAT_YAML: YAML,
        FORMAT_YML: YAML,
        FORMAT_INI: INI,
        FORMAT_BIN: BIN,
        FORMAT_ID: ID,
        FORMAT_LINES: LINES,
    }
)


def get_format(name: str) -> Format:
    """Look up a format by id, case-insensitively.

    Args:
        name: Format id such as "yaml" or "PRETTY_JSON"

    Returns:
        Registered Format

    Raises:
        UnknownFormatError: If no format has that id

    """
    try:
        return FORMATS[name.upper()]
    except KeyError:
        known = ", ".join(FORMATS)
        msg = f"expected one of {known}"
        raise UnknownFormatError(msg, name) from None


def format_for_file(file: str) -> Format:
    """Pick the default format for a file name by its extension.

    ``.json`` → PRETTY_JSON, ``.yaml``/``.yml`` → YAML, ``.ini`` → INI,
    ``.bin`` → BIN, anything else → ID.
    """
    for extension, name in EXTENSION_FORMATS.items():
        if file.endswith(extension):
            return FORMATS[name]
    return ID
