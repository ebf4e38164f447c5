"""Tests for error types and codes."""

import pytest

from hiegraph.core.errors import (
    ConfigError,
    ErrorCode,
    HieGraphError,
    ModuleParseError,
    TypeTableError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.PARSE_MODULE_NO_MATCH, 3000),
            (ErrorCode.PARSE_TYPE_INDEX_OUT_OF_RANGE, 3000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestHieGraphError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        # Given
        error = HieGraphError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        error = HieGraphError(code=ErrorCode.PARSE_MODULE_NO_MATCH, message="Something broke")

        assert str(error) == "[3001] PARSE_MODULE_NO_MATCH: Something broke"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        with pytest.raises(HieGraphError):
            raise ModuleParseError.no_match("Main", "Main.hs")


class TestFactories:
    @pytest.mark.parametrize(
        ("error", "expected_code"),
        [
            (ConfigError.parse_error("/foo", "bad yaml"), ErrorCode.CONFIG_PARSE_ERROR),
            (ConfigError.invalid_value("parse.strict", "x", "not a bool"), ErrorCode.CONFIG_INVALID_VALUE),
            (ConfigError.file_not_found("/missing"), ErrorCode.CONFIG_FILE_NOT_FOUND),
            (ModuleParseError.no_match("Main", "Main.hs"), ErrorCode.PARSE_MODULE_NO_MATCH),
            (TypeTableError.index_out_of_range(4, 2), ErrorCode.PARSE_TYPE_INDEX_OUT_OF_RANGE),
        ],
    )
    def test_given_factory_when_called_then_correct_code(
        self, error: HieGraphError, expected_code: ErrorCode
    ) -> None:
        assert error.code == expected_code

    def test_module_parse_error_details(self) -> None:
        error = ModuleParseError.no_match("Data.Tree", "src/Data/Tree.hs")

        assert error.details == {"module": "Data.Tree", "path": "src/Data/Tree.hs"}
        assert "Data.Tree" in error.message

    def test_invalid_value_stringifies_value(self) -> None:
        error = ConfigError.invalid_value("logging.level", 5, "bad level")

        assert error.details["value"] == "5"


class TestExports:
    def test_only_raised_error_types_are_exported(self) -> None:
        import hiegraph.core as core

        assert not hasattr(core, "InternalError")
        assert {"ConfigError", "ModuleParseError", "TypeTableError"} <= set(core.__all__)
