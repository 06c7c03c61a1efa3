"""
Error codes — open, value-compared tags for the failure track.

Unlike a closed Enum, a ResultErrorCode is a small immutable value wrapping a
string. Library-defined and caller-defined codes are the same type and compare
by their code string, so dispatch on error kind works across module boundaries:

    PAYMENT_DECLINED = ResultErrorCode("PaymentDeclined")

    match result:
        case ResultFailure(error_code=ResultErrorCode.VALIDATION_FAILED):
            ...
        case ResultFailure(error_code=code) if code == PAYMENT_DECLINED:
            ...

The predefined codes are class attributes, created once at import.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class ResultErrorCode:
    """
    Identity-bearing error tag. Two tags are equal iff their codes are equal.

    >>> ResultErrorCode("NotFound") == ResultErrorCode.NOT_FOUND
    True
    >>> ResultErrorCode("MyCustomError").code
    'MyCustomError'
    """

    code: str

    NOT_FOUND: ClassVar[ResultErrorCode]
    UNAUTHORIZED: ClassVar[ResultErrorCode]
    UNAUTHENTICATED: ClassVar[ResultErrorCode]
    VALIDATION_FAILED: ClassVar[ResultErrorCode]
    UNEXPECTED_RESULT_FAILURE: ClassVar[ResultErrorCode]
    UNCAUGHT_EXCEPTION_IN_THEN_FUNC: ClassVar[ResultErrorCode]

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise TypeError(f"Error code must be a string, got {type(self.code).__name__}")
        if not self.code.strip():
            raise ValueError("Error code must not be empty")

    def __str__(self) -> str:
        return self.code


ResultErrorCode.NOT_FOUND = ResultErrorCode("NotFound")
ResultErrorCode.UNAUTHORIZED = ResultErrorCode("Unauthorized")
ResultErrorCode.UNAUTHENTICATED = ResultErrorCode("Unauthenticated")
ResultErrorCode.VALIDATION_FAILED = ResultErrorCode("ValidationFailed")
ResultErrorCode.UNEXPECTED_RESULT_FAILURE = ResultErrorCode("UnexpectedResultFailure")
ResultErrorCode.UNCAUGHT_EXCEPTION_IN_THEN_FUNC = ResultErrorCode("UncaughtExceptionInThenFunc")
