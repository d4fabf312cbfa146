"""Tests for the configaccess error hierarchy."""

from __future__ import annotations

import pytest

from configaccess.errors import (
    ConfigAccessError,
    ConfigError,
    ErrorCodes,
    InvalidInputError,
    InvalidLocatorError,
    ParseError,
    PathConflictError,
    SourceError,
    SourceNotFoundError,
    UnsupportedFormatError,
    UnsupportedOperationError,
)


class TestConfigAccessError:
    def test_str_includes_code(self) -> None:
        err = ConfigAccessError(code="SOME_CODE", message="went wrong")
        assert str(err) == "[SOME_CODE] went wrong"
        assert err.details == {}
        assert err.cause is None

    def test_cause_is_kept(self) -> None:
        original = ValueError("boom")
        err = InvalidInputError(message="bad", cause=original)
        assert err.cause is original
        assert err.code == ErrorCodes.GENERAL_INVALID_INPUT


class TestSourceErrors:
    @pytest.mark.parametrize(
        "err",
        [
            InvalidLocatorError(""),
            UnsupportedFormatError("x.txt"),
            ParseError("x.ini", "invalid line", line=3),
            SourceNotFoundError("x.ini"),
        ],
    )
    def test_load_failures_share_base(self, err: ConfigAccessError) -> None:
        assert isinstance(err, SourceError)

    def test_unsupported_operation_is_not_a_source_error(self) -> None:
        assert not isinstance(UnsupportedOperationError("FileBackend"), SourceError)

    def test_invalid_locator_and_unsupported_format_are_distinct(self) -> None:
        assert not issubclass(InvalidLocatorError, UnsupportedFormatError)
        assert not issubclass(UnsupportedFormatError, InvalidLocatorError)
        assert InvalidLocatorError("").code != UnsupportedFormatError("a.txt").code

    def test_unsupported_format_lists_supported(self) -> None:
        err = UnsupportedFormatError("a.txt", supported=[".ini", ".cfg"])
        assert err.locator == "a.txt"
        assert ".ini, .cfg" in err.message


class TestParseError:
    def test_message_with_line(self) -> None:
        err = ParseError("/etc/app.ini", "invalid line", line=7)
        assert err.message == "invalid line in /etc/app.ini line 7"
        assert err.source == "/etc/app.ini"
        assert err.line == 7
        assert err.reason == "invalid line"

    def test_message_without_line(self) -> None:
        err = ParseError("/etc/app.ini", "cannot decode as utf-8")
        assert err.message == "cannot decode as utf-8 /etc/app.ini"
        assert err.line is None

    def test_line_zero_means_unknown(self) -> None:
        err = ParseError("a.ini", "oops", line=0)
        assert err.line is None
        assert "line" not in err.message


class TestOtherErrors:
    def test_path_conflict(self) -> None:
        err = PathConflictError("a.b", reason="path names a section")
        assert err.path == "a.b"
        assert err.code == ErrorCodes.PATH_CONFLICT

    def test_config_error(self) -> None:
        err = ConfigError("server.port", expected="int", value="abc")
        assert err.key == "server.port"
        assert "'abc'" in err.message


class TestErrorCodes:
    def test_codes_match_error_instances(self) -> None:
        assert InvalidLocatorError("").code == ErrorCodes.INVALID_LOCATOR
        assert UnsupportedFormatError("a").code == ErrorCodes.UNSUPPORTED_FORMAT
        assert ParseError("a", "b").code == ErrorCodes.PARSE_ERROR
        assert SourceNotFoundError("a").code == ErrorCodes.SOURCE_NOT_FOUND
        assert UnsupportedOperationError("a").code == ErrorCodes.UNSUPPORTED_OPERATION

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().PARSE_ERROR = "other"
