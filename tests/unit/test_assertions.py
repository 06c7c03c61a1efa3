"""Tests for ResultAssertions test helper."""

from __future__ import annotations

import pytest

from result_monad import ResultAssertions, ResultErrorCode, ResultFailure, ResultSuccess


class TestAssertSuccess:
    def test_passes_on_success(self) -> None:
        assert ResultAssertions.assert_success(ResultSuccess(42)) == 42

    def test_fails_on_failure_with_clear_message(self) -> None:
        result = ResultFailure("Name is required", ResultErrorCode.VALIDATION_FAILED)
        with pytest.raises(AssertionError, match="Expected ResultSuccess but got ResultFailure"):
            ResultAssertions.assert_success(result)

    def test_custom_message(self) -> None:
        result = ResultFailure("x", ResultErrorCode.NOT_FOUND)
        with pytest.raises(AssertionError, match="custom context"):
            ResultAssertions.assert_success(result, "custom context")


class TestAssertFailure:
    def test_returns_failure(self) -> None:
        original = ResultFailure("missing", ResultErrorCode.NOT_FOUND)
        assert ResultAssertions.assert_failure(original) is original

    def test_checks_error_code(self) -> None:
        failure = ResultAssertions.assert_failure(
            ResultFailure("bad", ResultErrorCode.VALIDATION_FAILED),
            ResultErrorCode.VALIDATION_FAILED,
        )
        assert failure.message == "bad"

    def test_fails_on_wrong_error_code(self) -> None:
        result = ResultFailure("x", ResultErrorCode.NOT_FOUND)
        with pytest.raises(AssertionError, match="Expected error code ValidationFailed"):
            ResultAssertions.assert_failure(result, ResultErrorCode.VALIDATION_FAILED)

    def test_fails_on_success(self) -> None:
        with pytest.raises(AssertionError, match="Expected ResultFailure but got ResultSuccess"):
            ResultAssertions.assert_failure(ResultSuccess(42))


class TestAssertFailureMessage:
    def test_contains_substring_case_insensitive(self) -> None:
        result = ResultFailure("NAME IS REQUIRED", ResultErrorCode.VALIDATION_FAILED)
        ResultAssertions.assert_failure_message_contains(result, "name")

    def test_fails_when_not_contained(self) -> None:
        result = ResultFailure("Age is required", ResultErrorCode.VALIDATION_FAILED)
        with pytest.raises(AssertionError, match="Expected failure message to contain"):
            ResultAssertions.assert_failure_message_contains(result, "name")

    def test_exact_match(self) -> None:
        result = ResultFailure("exact message", ResultErrorCode.VALIDATION_FAILED)
        ResultAssertions.assert_failure_message_equals(result, "exact message")

    def test_exact_match_fails(self) -> None:
        result = ResultFailure("actual", ResultErrorCode.VALIDATION_FAILED)
        with pytest.raises(AssertionError, match="Expected failure message"):
            ResultAssertions.assert_failure_message_equals(result, "expected")


class TestAssertSuccessValue:
    def test_exact_value_match(self) -> None:
        ResultAssertions.assert_success_value(ResultSuccess(42), 42)

    def test_fails_on_wrong_value(self) -> None:
        with pytest.raises(AssertionError, match="Expected success data"):
            ResultAssertions.assert_success_value(ResultSuccess(42), 99)


class TestAssertCaptured:
    def test_passes_for_same_exception(self) -> None:
        ex = RuntimeError("boom")

        def step(i: int):
            raise ex

        failure = ResultAssertions.assert_captured(ResultSuccess(1).then(step), ex)
        assert failure.exception is ex

    def test_fails_for_different_exception(self) -> None:
        result = ResultFailure(
            "x", ResultErrorCode.UNCAUGHT_EXCEPTION_IN_THEN_FUNC, RuntimeError("a")
        )
        with pytest.raises(AssertionError, match="Expected captured exception"):
            ResultAssertions.assert_captured(result, RuntimeError("a"))
