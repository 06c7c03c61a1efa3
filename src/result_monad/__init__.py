"""
result_monad — a Result monad with a `then` chain operator for sync and async steps.

Failures short-circuit the rest of a chain, and exceptions raised inside a
step become ResultFailure values instead of escaping.

    from result_monad import ResultErrorCode, ResultFailure, ResultSuccess

    def check_user_does_not_exist(user: User) -> Result[User]:
        if user.username == "bob":
            return ResultFailure("User already exists", ResultErrorCode.VALIDATION_FAILED)
        return ResultSuccess(user, "user does not exist")

    result = (
        validate_input("alice", "password123")
        .then(check_user_does_not_exist)
        .then(save_user)
        .then(lambda user: ResultSuccess(f"User {user.username} registered successfully!", "done"))
    )
"""

from result_monad.error_code import ResultErrorCode
from result_monad.result import (
    NO_MESSAGE_PROVIDED,
    NULL_FUNC_MESSAGE,
    NULL_RESULT_MESSAGE,
    UNCAUGHT_EXCEPTION_PREFIX,
    UNRESOLVED_RESULT_MESSAGE,
    PendingResult,
    Result,
    ResultFailure,
    ResultSuccess,
    then,
    to_async,
)
from result_monad.result_failures import ResultFailures
from result_monad.assertions import ResultAssertions
from result_monad.config import ResultMonadSettings, get_settings
from result_monad.logging_config import configure_structlog

__all__ = [
    "Result",
    "ResultSuccess",
    "ResultFailure",
    "ResultErrorCode",
    "PendingResult",
    "then",
    "to_async",
    "ResultFailures",
    "ResultAssertions",
    "ResultMonadSettings",
    "get_settings",
    "configure_structlog",
    "NO_MESSAGE_PROVIDED",
    "NULL_FUNC_MESSAGE",
    "NULL_RESULT_MESSAGE",
    "UNCAUGHT_EXCEPTION_PREFIX",
    "UNRESOLVED_RESULT_MESSAGE",
]

__version__ = "1.0.0"
