"""Tests for format dispatch and the built-in loaders."""

from __future__ import annotations

import textwrap

import pytest

from configaccess.errors import InvalidInputError, ParseError, UnsupportedFormatError
from configaccess.formats import FormatRegistry, default_formats, load_ini, load_json, load_yaml
from configaccess.tree import ConfigTree


def _dummy(text: str, source: str) -> ConfigTree:
    return {"loaded": {"by": "dummy"}}


# === FormatRegistry ===


class TestFormatRegistry:
    def test_default_trial_order(self) -> None:
        assert default_formats().suffixes == [".ini", ".cfg", ".yaml", ".yml", ".json"]

    @pytest.mark.parametrize(
        ("path", "suffix"),
        [
            ("/etc/app/example.cfg", ".cfg"),
            ("a.ini", ".ini"),
            ("deploy.yml", ".yml"),
            ("x.json", ".json"),
        ],
    )
    def test_select_by_suffix(self, path: str, suffix: str) -> None:
        assert default_formats().select(path)[0] == suffix

    def test_unknown_suffix(self) -> None:
        with pytest.raises(UnsupportedFormatError) as exc_info:
            default_formats().select("settings.txt")
        assert exc_info.value.details["supported"] == [".ini", ".cfg", ".yaml", ".yml", ".json"]

    def test_match_is_case_sensitive(self) -> None:
        with pytest.raises(UnsupportedFormatError):
            default_formats().select("SETTINGS.INI")

    def test_first_match_wins(self) -> None:
        formats = FormatRegistry([(".local.ini", _dummy), (".ini", load_ini)])
        suffix, loader = formats.select("app.local.ini")
        assert suffix == ".local.ini"
        assert loader is _dummy

    def test_registration_order_decides(self) -> None:
        formats = FormatRegistry([(".ini", load_ini), (".local.ini", _dummy)])
        assert formats.select("app.local.ini")[0] == ".ini"

    def test_register_custom_loader(self) -> None:
        formats = default_formats()
        formats.register(".conf", _dummy)
        assert ".conf" in formats
        assert len(formats) == 6
        assert formats.select("x.conf")[1] is _dummy

    def test_duplicate_suffix_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="already registered"):
            default_formats().register(".ini", _dummy)

    def test_empty_suffix_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            FormatRegistry().register("", _dummy)

    def test_default_formats_are_independent(self) -> None:
        first = default_formats()
        first.register(".conf", _dummy)
        assert ".conf" not in default_formats()


# === INI ===


class TestLoadIni:
    def test_sections_become_subtrees(self) -> None:
        text = textwrap.dedent(
            """\
            [sec]
            key=value1
            other = spaced value

            [second]
            x = 1
            """
        )
        assert load_ini(text, "a.ini") == {
            "sec": {"key": "value1", "other": "spaced value"},
            "second": {"x": "1"},
        }

    def test_preserves_order_and_case(self) -> None:
        tree = load_ini("[S]\nZeta=1\nalpha=2\n", "a.ini")
        assert list(tree) == ["S"]
        assert list(tree["S"]) == ["Zeta", "alpha"]

    def test_no_interpolation(self) -> None:
        tree = load_ini("[s]\npercent = 100%\nref = %(other)s\n", "a.ini")
        assert tree["s"] == {"percent": "100%", "ref": "%(other)s"}

    def test_empty_value(self) -> None:
        assert load_ini("[s]\nk =\n", "a.ini") == {"s": {"k": ""}}

    def test_empty_text(self) -> None:
        assert load_ini("", "a.ini") == {}

    def test_default_section_is_not_inherited(self) -> None:
        tree = load_ini("[DEFAULT]\nlevel = info\n[app]\nname = x\n", "a.ini")
        assert tree == {"DEFAULT": {"level": "info"}, "app": {"name": "x"}}

    def test_keys_before_first_section_are_root_values(self) -> None:
        tree = load_ini("top=1\nother = 2\n[sec]\nkey=v\n", "a.ini")
        assert tree == {"top": "1", "other": "2", "sec": {"key": "v"}}
        assert list(tree) == ["top", "other", "sec"]

    def test_only_root_keys(self) -> None:
        assert load_ini("key=value\n", "a.ini") == {"key": "value"}

    def test_indented_lines_are_separate_keys(self) -> None:
        tree = load_ini("[sec]\nkey=a\n  b=c\n\t[other]\n    x = 1\n", "a.ini")
        assert tree == {"sec": {"key": "a", "b": "c"}, "other": {"x": "1"}}

    def test_indented_line_without_separator_is_invalid(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            load_ini("[sec]\nkey=a\n  continued\n", "bad.ini")
        assert exc_info.value.line == 3

    def test_root_key_and_section_with_same_name(self) -> None:
        with pytest.raises(ParseError, match="duplicate section name 'sec'") as exc_info:
            load_ini("sec=1\n[sec]\nkey=v\n", "dup.ini")
        assert exc_info.value.line == 2

    def test_line_without_separator_before_any_section(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            load_ini("key=value\nnot a key\n", "/etc/bad.ini")
        err = exc_info.value
        assert err.source == "/etc/bad.ini"
        assert err.line == 2
        assert "line 2" in err.message

    def test_invalid_line(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            load_ini("[s]\nok = 1\nthis line has no separator\n", "bad.ini")
        assert exc_info.value.line == 3

    def test_duplicate_section(self) -> None:
        with pytest.raises(ParseError, match="duplicate section name 's'") as exc_info:
            load_ini("[s]\na=1\n[s]\nb=2\n", "dup.ini")
        assert exc_info.value.line == 3

    def test_duplicate_key(self) -> None:
        with pytest.raises(ParseError, match="duplicate key name 'a'") as exc_info:
            load_ini("[s]\na=1\na=2\n", "dup.ini")
        assert exc_info.value.line == 3

    def test_cause_is_chained(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            load_ini("nope\n", "x.ini")
        assert exc_info.value.__cause__ is not None
        assert exc_info.value.cause is exc_info.value.__cause__


# === YAML / JSON ===


class TestLoadYaml:
    def test_nested_mapping(self) -> None:
        text = "server:\n  host: localhost\n  port: 8080\n  tls:\n    enabled: true\n"
        assert load_yaml(text, "a.yaml") == {
            "server": {"host": "localhost", "port": "8080", "tls": {"enabled": "true"}}
        }

    def test_lists_are_indexed(self) -> None:
        tree = load_yaml("hosts:\n  - a\n  - b\n", "a.yaml")
        assert tree == {"hosts": {"0": "a", "1": "b"}}

    def test_null_is_empty_string(self) -> None:
        assert load_yaml("key:\n", "a.yaml") == {"key": ""}

    def test_empty_document(self) -> None:
        assert load_yaml("", "a.yaml") == {}

    def test_non_mapping_root(self) -> None:
        with pytest.raises(ParseError, match="root must be a mapping"):
            load_yaml("- a\n- b\n", "a.yaml")

    def test_syntax_error_has_line(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            load_yaml("ok: 1\nbad: [unclosed\n", "bad.yaml")
        assert exc_info.value.source == "bad.yaml"
        assert exc_info.value.line is not None


class TestLoadJson:
    def test_nested_object(self) -> None:
        text = '{"db": {"port": 5432, "ssl": false, "replicas": ["r1", "r2"], "note": null}}'
        assert load_json(text, "a.json") == {
            "db": {"port": "5432", "ssl": "false", "replicas": {"0": "r1", "1": "r2"}, "note": ""}
        }

    def test_empty_text(self) -> None:
        assert load_json("  \n", "a.json") == {}

    def test_syntax_error_has_line(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            load_json('{\n  "a": 1,\n  oops\n}', "bad.json")
        assert exc_info.value.line == 3

    def test_non_object_root(self) -> None:
        with pytest.raises(ParseError, match="root must be a mapping"):
            load_json("[1, 2]", "a.json")
