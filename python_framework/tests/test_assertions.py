"""Tests for ResultAssertions test helper."""

import pytest

from railway import ErrorCode, Result, ResultAssertions


class TestAssertSuccess:
    def test_passes_on_success(self):
        value = ResultAssertions.assert_success(Result.success(42))
        assert value == 42

    def test_fails_on_failure_with_clear_message(self):
        result = Result.failure(ErrorCode.UNKNOWN_FIELD, "unexpected field 'foo'")
        with pytest.raises(AssertionError, match="Expected Success but got Failure"):
            ResultAssertions.assert_success(result)

    def test_custom_message(self):
        result = Result.failure(ErrorCode.FETCH_ERROR, "x")
        with pytest.raises(AssertionError, match="custom context"):
            ResultAssertions.assert_success(result, "custom context")


class TestAssertFailure:
    def test_passes_on_failure(self):
        error = ResultAssertions.assert_failure(
            Result.failure(ErrorCode.CACHE_ERROR, "missing")
        )
        assert error.code == ErrorCode.CACHE_ERROR

    def test_checks_error_code(self):
        error = ResultAssertions.assert_failure(
            Result.failure(ErrorCode.MALFORMED_DATE, "bad"),
            ErrorCode.MALFORMED_DATE,
        )
        assert error.message == "bad"

    def test_fails_on_wrong_error_code(self):
        result = Result.failure(ErrorCode.FETCH_ERROR, "x")
        with pytest.raises(AssertionError, match="Expected error code UNKNOWN_FIELD"):
            ResultAssertions.assert_failure(result, ErrorCode.UNKNOWN_FIELD)

    def test_fails_on_success(self):
        with pytest.raises(AssertionError, match="Expected Failure but got Success"):
            ResultAssertions.assert_failure(Result.success(42))


class TestAssertFailureMessage:
    def test_contains_substring_case_insensitive(self):
        result = Result.failure(ErrorCode.UNKNOWN_FIELD, "unexpected field 'Colour'")
        ResultAssertions.assert_failure_message_contains(result, "colour")

    def test_fails_when_not_contained(self):
        result = Result.failure(ErrorCode.UNKNOWN_FIELD, "unexpected field 'size'")
        with pytest.raises(AssertionError, match="Expected failure message to contain"):
            ResultAssertions.assert_failure_message_contains(result, "colour")


class TestAssertSuccessValue:
    def test_exact_value_match(self):
        ResultAssertions.assert_success_value(Result.success(42), 42)

    def test_fails_on_wrong_value(self):
        with pytest.raises(AssertionError, match="Expected success value"):
            ResultAssertions.assert_success_value(Result.success(42), 99)
