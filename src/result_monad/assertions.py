"""
Test assertions for Result values.

Expressive assert helpers that produce clear failure messages.

Usage in tests:
    from result_monad import ResultAssertions, ResultErrorCode

    def test_register_user():
        result = register("alice", "password123")
        user = ResultAssertions.assert_success(result)
        assert user.username == "alice"

    def test_duplicate_user():
        result = register("bob", "password123")
        ResultAssertions.assert_failure(result, ResultErrorCode.VALIDATION_FAILED)
        ResultAssertions.assert_failure_message_contains(result, "already exists")
"""

from __future__ import annotations

from typing import Any, TypeVar

from result_monad.error_code import ResultErrorCode
from result_monad.result import Result, ResultFailure, ResultSuccess

T = TypeVar("T")


def _describe(result: Any) -> str:
    match result:
        case ResultSuccess(data, message):
            return f"ResultSuccess({data!r}, {message!r})"
        case ResultFailure(message, error_code):
            return f"ResultFailure({error_code.code}: {message!r})"
    return repr(result)


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T], message: str = "") -> T:
        """
        Assert the Result is a ResultSuccess and return its data.

            data = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert isinstance(result, ResultSuccess), (
            f"Expected ResultSuccess but got {_describe(result)}{context}"
        )
        return result.data

    @staticmethod
    def assert_failure(
        result: Result[T],
        expected_code: ResultErrorCode | None = None,
        message: str = "",
    ) -> ResultFailure[T]:
        """
        Assert the Result is a ResultFailure, optionally checking the error code.

            failure = ResultAssertions.assert_failure(result, ResultErrorCode.NOT_FOUND)
        """
        context = f" — {message}" if message else ""
        assert isinstance(result, ResultFailure), (
            f"Expected ResultFailure but got {_describe(result)}{context}"
        )
        if expected_code is not None:
            assert result.error_code == expected_code, (
                f"Expected error code {expected_code.code} "
                f"but got {result.error_code.code}: {result.message!r}{context}"
            )
        return result

    @staticmethod
    def assert_failure_message_contains(result: Result[T], substring: str) -> None:
        """Assert that the failure message contains the given substring (case-insensitive)."""
        failure = ResultAssertions.assert_failure(result)
        assert substring.lower() in failure.message.lower(), (
            f"Expected failure message to contain {substring!r} "
            f"but message was: {failure.message!r}"
        )

    @staticmethod
    def assert_failure_message_equals(result: Result[T], expected_message: str) -> None:
        """Assert that the failure message exactly equals the expected message."""
        failure = ResultAssertions.assert_failure(result)
        assert failure.message == expected_message, (
            f"Expected failure message {expected_message!r} "
            f"but got {failure.message!r}"
        )

    @staticmethod
    def assert_success_value(result: Result[T], expected_value: Any) -> None:
        """Assert the Result is a ResultSuccess with the specific data."""
        data = ResultAssertions.assert_success(result)
        assert data == expected_value, (
            f"Expected success data {expected_value!r} but got {data!r}"
        )

    @staticmethod
    def assert_captured(result: Result[T], exception: BaseException) -> ResultFailure[T]:
        """Assert a chained step raised `exception` and the chain captured that exact object."""
        failure = ResultAssertions.assert_failure(
            result, ResultErrorCode.UNCAUGHT_EXCEPTION_IN_THEN_FUNC
        )
        assert failure.exception is exception, (
            f"Expected captured exception {exception!r} but got {failure.exception!r}"
        )
        return failure
