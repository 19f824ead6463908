"""Tests for the format registry."""

import configparser
import dataclasses

import orjson
import pytest
import yaml

from confdir.exceptions import ConfigParseError, UnknownFormatError
from confdir.formats import (
    BIN,
    FORMATS,
    ID,
    INI,
    JSON,
    LINES,
    PRETTY_JSON,
    YAML,
    format_for_file,
    get_format,
)

SAMPLE = {"name": "myapp", "size": 3, "tags": ["a", "b"], "nested": {"x": 1}}


class TestRegistry:
    """Registry contents and immutability."""

    def test_all_format_ids_registered(self):
        assert set(FORMATS) == {
            "PRETTY_JSON",
            "JSON",
            "YAML",
            "YML",
            "INI",
            "BIN",
            "ID",
            "LINES",
        }

    def test_yml_is_alias_of_yaml(self):
        assert FORMATS["YML"] is FORMATS["YAML"] is YAML

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            FORMATS["TOML"] = ID  # type: ignore[index]

    def test_format_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ID.name = "OTHER"  # type: ignore[misc]

    def test_raw_exposes_codec(self):
        assert PRETTY_JSON.raw is orjson
        assert YAML.raw is yaml
        assert INI.raw is configparser

    def test_only_bin_is_binary(self):
        assert [f.name for f in FORMATS.values() if f.binary] == ["BIN"]

    def test_get_format_is_case_insensitive(self):
        assert get_format("yaml") is YAML
        assert get_format("Pretty_Json") is PRETTY_JSON

    def test_get_format_unknown(self):
        with pytest.raises(UnknownFormatError) as exc_info:
            get_format("toml")

        assert isinstance(exc_info.value, KeyError)
        assert "toml" in str(exc_info.value)
        assert "PRETTY_JSON" in str(exc_info.value)


@pytest.mark.parametrize(
    ("file", "expected"),
    [
        ("config.json", PRETTY_JSON),
        ("settings.yaml", YAML),
        ("settings.yml", YAML),
        ("app.ini", INI),
        ("blob.bin", BIN),
        ("notes.txt", ID),
        ("Makefile", ID),
        ("config.JSON", ID),
        ("nested/dir/config.json", PRETTY_JSON),
    ],
)
def test_format_for_file(file, expected):
    assert format_for_file(file) is expected


class TestJson:
    def test_pretty_json_uses_two_space_indent(self):
        assert PRETTY_JSON.stringify({"a": 1}) == '{\n  "a": 1\n}'

    def test_compact_json(self):
        assert JSON.stringify({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'

    @pytest.mark.parametrize("fmt", [PRETTY_JSON, JSON])
    def test_round_trip(self, fmt):
        assert fmt.parse(fmt.stringify(SAMPLE)) == SAMPLE

    @pytest.mark.parametrize("fmt", [PRETTY_JSON, JSON])
    def test_non_string_keys_become_strings(self, fmt):
        assert fmt.parse(fmt.stringify({1: "a", 2: "b"})) == {
            "1": "a",
            "2": "b",
        }

    def test_parse_accepts_bytes(self):
        assert JSON.parse(b'{"a": 1}') == {"a": 1}

    def test_malformed_json_raises_parse_error(self):
        with pytest.raises(ConfigParseError) as exc_info:
            PRETTY_JSON.load('{"a": ', "config.json")

        assert exc_info.value.target == "config.json"
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value.__cause__, orjson.JSONDecodeError)


class TestYaml:
    def test_stringify_block_style_keeps_key_order(self):
        assert YAML.stringify({"b": 1, "a": [1, 2]}) == "b: 1\na:\n- 1\n- 2\n"

    def test_round_trip(self):
        assert YAML.parse(YAML.stringify(SAMPLE)) == SAMPLE

    def test_malformed_yaml_raises_parse_error(self):
        with pytest.raises(ConfigParseError):
            YAML.load("a: [1, 2", "settings.yaml")

    def test_safe_load_rejects_python_tags(self):
        with pytest.raises(ConfigParseError):
            YAML.load("!!python/object/apply:os.system ['true']")


class TestIni:
    def test_parse_sections_and_top_level_keys(self):
        text = "top = 1\n\n[server]\nhost = example.com\nport = 8080\n"

        assert INI.parse(text) == {
            "top": "1",
            "server": {"host": "example.com", "port": "8080"},
        }

    def test_parse_preserves_key_case(self):
        assert INI.parse("[Main]\nLogLevel = debug\n") == {
            "Main": {"LogLevel": "debug"}
        }

    def test_default_section_is_ordinary(self):
        parsed = INI.parse("[DEFAULT]\na = 1\n\n[other]\nb = 2\n")

        assert parsed == {"DEFAULT": {"a": "1"}, "other": {"b": "2"}}

    def test_comments_are_ignored(self):
        text = "; header\n# another\n[s]\nkey = value ; trailing\n"

        assert INI.parse(text) == {"s": {"key": "value"}}

    def test_no_interpolation(self):
        assert INI.parse("[s]\npath = %(home)s/x\n") == {
            "s": {"path": "%(home)s/x"}
        }

    def test_stringify(self):
        value = {"top": "1", "server": {"host": "example.com", "tls": True}}

        assert INI.stringify(value) == (
            "top = 1\n\n[server]\nhost = example.com\ntls = true\n\n"
        )

    def test_stringify_sections_only(self):
        assert INI.stringify({"s": {"a": "1"}}) == "[s]\na = 1\n\n"

    def test_round_trip(self):
        value = {"name": "myapp", "db": {"user": "root", "port": "5432"}}

        assert INI.parse(INI.stringify(value)) == value

    def test_literals_round_trip(self):
        value = {"flag": True, "unset": None, "sec": {"on": False}}

        assert INI.stringify(value) == (
            "flag = true\nunset = null\n\n[sec]\non = false\n\n"
        )
        assert INI.parse(INI.stringify(value)) == value

    def test_bare_key_is_true(self):
        assert INI.load("flag\n[s]\nverbose\n", "app.ini") == {
            "flag": True,
            "s": {"verbose": True},
        }

    def test_multiline_top_level_value_stays_one_key(self):
        value = {"note": "x\ny = 2", "s": {"a": "1"}}

        text = INI.stringify(value)

        assert "\ny = 2" not in text
        assert INI.parse(text) == value

    @pytest.mark.parametrize(
        "value",
        [
            {"a": {"b": {"c": 1}}},
            {"a": {"b": [1, 2]}},
            {"tags": ["x", "y"]},
        ],
    )
    def test_nested_values_are_rejected(self, value):
        with pytest.raises(TypeError, match="nested"):
            INI.stringify(value)

    def test_malformed_ini_raises_parse_error(self):
        with pytest.raises(ConfigParseError):
            INI.load("[s]\n= orphan value\n", "app.ini")


class TestBinIdLines:
    def test_bin_wraps_text_as_bytes(self):
        assert BIN.parse("abc") == b"abc"

    def test_bin_round_trips_bytes(self):
        data = bytes(range(256))

        assert BIN.parse(BIN.stringify(data)) == data

    def test_id_is_identity(self):
        assert ID.parse("a\r\nb") == "a\r\nb"
        assert ID.stringify("x") == "x"

    def test_lines_split_and_join(self):
        assert LINES.parse("a\nb\n") == ["a", "b", ""]
        assert LINES.stringify(["a", "b", ""]) == "a\nb\n"

    def test_lines_round_trip(self):
        lines = ["first", "", "third"]

        assert LINES.parse(LINES.stringify(lines)) == lines

    def test_formats_without_codec_never_wrap_errors(self):
        with pytest.raises(AttributeError):
            LINES.load(None)
