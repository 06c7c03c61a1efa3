"""
Convenience factory methods for common Result failures.

Eliminates boilerplate for the predefined error codes.

Usage:
    from result_monad import ResultFailures

    # Instead of:
    ResultFailure("Name is required", ResultErrorCode.VALIDATION_FAILED)

    # Write:
    ResultFailures.validation_failed("Name is required")
"""

from __future__ import annotations

from result_monad.error_code import ResultErrorCode
from result_monad.result import ResultFailure


class ResultFailures:
    """Factory methods for the predefined failure codes, plus exception mapping."""

    @staticmethod
    def not_found(resource_type: str, identifier: str) -> ResultFailure:
        """Resource doesn't exist."""
        return ResultFailure(
            f"{resource_type} not found with identifier: {identifier}",
            ResultErrorCode.NOT_FOUND,
        )

    @staticmethod
    def unauthorized(message: str | None = None) -> ResultFailure:
        """Caller is known but lacks permission."""
        return ResultFailure(message, ResultErrorCode.UNAUTHORIZED)

    @staticmethod
    def unauthenticated(message: str | None = None) -> ResultFailure:
        """Caller identity could not be established."""
        return ResultFailure(message, ResultErrorCode.UNAUTHENTICATED)

    @staticmethod
    def validation_failed(message: str | None = None) -> ResultFailure:
        """Invalid input: missing fields, wrong format, type mismatch."""
        return ResultFailure(message, ResultErrorCode.VALIDATION_FAILED)

    @staticmethod
    def from_exception(message: str | None, exception: BaseException) -> ResultFailure:
        """
        Map a Python exception to the closest predefined error code.

        Mapping:
          - ValueError, TypeError, KeyError → VALIDATION_FAILED
          - LookupError, FileNotFoundError → NOT_FOUND
          - PermissionError → UNAUTHORIZED
          - Everything else → UNEXPECTED_RESULT_FAILURE
        """
        return ResultFailure(message, _map_exception_to_code(exception), exception)

    @staticmethod
    def from_exception_auto(exception: BaseException) -> ResultFailure:
        """Map exception using its own message."""
        return ResultFailures.from_exception(str(exception), exception)


def _map_exception_to_code(exception: BaseException) -> ResultErrorCode:
    """Map a Python exception type to the most appropriate ResultErrorCode."""
    match exception:
        case ValueError() | TypeError() | KeyError():
            return ResultErrorCode.VALIDATION_FAILED
        case LookupError() | FileNotFoundError():
            return ResultErrorCode.NOT_FOUND
        case PermissionError():
            return ResultErrorCode.UNAUTHORIZED
        case _:
            return ResultErrorCode.UNEXPECTED_RESULT_FAILURE
