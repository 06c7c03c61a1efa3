"""
Result monad — success/failure carriers and the `then` chain operator.

A Result[T] is either ResultSuccess(data: T, message) or
ResultFailure(message, error_code, exception). Steps are chained with .then():
a failure short-circuits every later step, and an exception raised inside a
step is caught and turned into a ResultFailure instead of escaping the chain.

    ┌───────────┐     then      ┌───────────┐     then      ┌──────────┐
    │ validate  │──Success──────│  hash     │──Success──────│  save    │──→ Result[T]
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure / raise           │ Failure / raise           │ Failure / raise
          └───────────────────────────┴───────────────────────────┴──→ ResultFailure[T]

The same rules apply across the async boundary. A step that returns an
awaitable moves the chain onto a PendingResult, which is itself awaitable and
chainable with sync or async steps:

    result = await (
        validate_input("alice", "password123")
        .to_async()
        .then(check_user_does_not_exist)   # async def
        .then(hash_password)               # plain def
    )

All four call shapes (sync→sync, sync→async, pending→sync, pending→async) go
through one resolution routine, _bind(); the pending entry points only differ
in awaiting their input first.
"""

from __future__ import annotations

import asyncio
import inspect
import traceback
from dataclasses import dataclass, field
from typing import (
    Any,
    Awaitable,
    Callable,
    Generator,
    Generic,
    Optional,
    TypeVar,
    Union,
    overload,
)

import structlog
from pydantic import ValidationError

from result_monad.config import get_settings
from result_monad.error_code import ResultErrorCode

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

log = structlog.get_logger()

NO_MESSAGE_PROVIDED = "No message provided."
NULL_FUNC_MESSAGE = "The function passed to Then was null."
NULL_RESULT_MESSAGE = "The function passed to Then returned null."
UNCAUGHT_EXCEPTION_PREFIX = "Unexpected unhandled exception caught in func used in Result.Then(<func>). "
UNRESOLVED_RESULT_MESSAGE = "Unexpected failure resolving Result."

Step = Callable[[T], Union["Result[U]", Awaitable["Result[U]"]]]


class Result(Generic[T]):
    """
    Base of the two outcome variants.

    Only ResultSuccess and ResultFailure are meaningful. Any other subclass
    reaching .then() resolves to ResultFailure(UNRESOLVED_RESULT_MESSAGE).

        >>> ResultSuccess(10, "ok").then(lambda i: ResultSuccess(f"Value: {i}", "done"))
        ResultSuccess(data='Value: 10', message='done')
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a ResultSuccess."""
        return isinstance(self, ResultSuccess)

    def is_failure(self) -> bool:
        """Check if this Result is a ResultFailure."""
        return isinstance(self, ResultFailure)

    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[ResultFailure[T]], R],
    ) -> R:
        """
        Apply one of two functions depending on the variant.

            result.either(
                on_success=lambda user: f"Hello {user.name}",
                on_failure=lambda failure: f"Error: {failure.message}",
            )
        """
        match self:
            case ResultSuccess(data):
                return on_success(data)
            case ResultFailure():
                return on_failure(self)
        raise TypeError(f"Unknown Result variant: {type(self).__name__}")

    def get_or_else(self, default: T) -> T:
        """Extract the data or return a default on failure."""
        match self:
            case ResultSuccess(data):
                return data
            case _:
                return default

    # ──────────────────────── Chaining ────────────────────────

    @overload
    def then(self, func: Callable[[T], Awaitable[Result[U]]]) -> PendingResult[U]: ...

    @overload
    def then(self, func: Optional[Callable[[T], Result[U]]]) -> Result[U]: ...

    def then(self, func: Optional[Step]) -> Union[Result[U], PendingResult[U]]:
        """
        Chain the next step. Short-circuits on failure, never raises.

        A plain step gives back a Result; a step returning an awaitable gives
        back a PendingResult to be awaited (or chained further).

            ResultSuccess(2).then(lambda i: ResultSuccess(i * 2, "doubled"))
        """
        return _bind(self, func)

    def to_async(self) -> PendingResult[T]:
        """
        Lift this Result into an already-resolved PendingResult.

        Use it to start an async chain from a synchronous result.
        """
        return PendingResult.resolved(self)

    def __await__(self) -> Generator[Any, None, Result[T]]:
        # `await r.then(step)` must work whether the link settled or went pending.
        return PendingResult.resolved(self).__await__()


@dataclass(frozen=True, slots=True)
class ResultSuccess(Result[T]):
    """The success track: carries data and a message."""

    data: T
    message: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", _message_or_default(self.message))


@dataclass(frozen=True, slots=True)
class ResultFailure(Result[T]):
    """
    The failure track: carries a message, an error code and an optional captured exception.

    >>> failure = ResultFailure(None, ResultErrorCode.NOT_FOUND)
    >>> failure.message
    'No message provided.'
    """

    message: Optional[str]
    error_code: ResultErrorCode
    exception: Optional[BaseException] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.error_code, ResultErrorCode):
            raise TypeError(
                f"ResultFailure error_code must be a ResultErrorCode, got {type(self.error_code).__name__}"
            )
        object.__setattr__(self, "message", _message_or_default(self.message))

    def full_stack_trace(self) -> str:
        """Message followed by the formatted traceback of the captured exception, if any."""
        if self.exception is None:
            return self.message
        tb = "".join(
            traceback.format_exception(type(self.exception), self.exception, self.exception.__traceback__)
        )
        return f"{self.message}\n{tb}"


class PendingResult(Generic[T]):
    """
    Awaitable handle to a Result that may not be resolved yet.

    Awaiting it yields the Result; the resolution is cached so later awaits
    return the same value (or re-raise the same exception if the wrapped
    awaitable raised). .then() chains without awaiting first:

        result = await fetch_user(user_id).then(normalize).then(save_async)

    Wrap any coroutine producing a Result to bring it into a chain:

        PendingResult(load_profile(user_id)).then(render)
    """

    __slots__ = ("_awaitable", "_result", "_error", "_done")

    def __init__(self, awaitable: Awaitable[Result[T]]) -> None:
        self._awaitable: Optional[Awaitable[Result[T]]] = awaitable
        self._result: Optional[Result[T]] = None
        self._error: Optional[BaseException] = None
        self._done = False

    @classmethod
    def resolved(cls, result: Result[T]) -> PendingResult[T]:
        """An already-resolved handle. No coroutine is created."""
        pending = cls.__new__(cls)
        pending._awaitable = None
        pending._result = result
        pending._error = None
        pending._done = True
        return pending

    def done(self) -> bool:
        """True once the underlying Result has been resolved."""
        return self._done

    def then(self, func: Optional[Step]) -> PendingResult[U]:
        """Chain a sync or async step onto this pending Result."""
        return PendingResult(_bind_pending(self, func))

    async def _resolve(self) -> Result[T]:
        if not self._done:
            try:
                self._result = await self._awaitable  # type: ignore[misc]
            except (Exception, asyncio.CancelledError) as e:
                self._error = e
            self._awaitable = None
            self._done = True
        if self._error is not None:
            raise self._error
        return self._result  # type: ignore[return-value]

    def __await__(self) -> Generator[Any, None, Result[T]]:
        return self._resolve().__await__()

    def __repr__(self) -> str:
        if self._error is not None:
            return f"PendingResult(<raised {type(self._error).__name__}>)"
        if self._done:
            return f"PendingResult({self._result!r})"
        return "PendingResult(<pending>)"


# ──────────────────────── Free-function API ────────────────────────


def then(
    result: Union[Result[T], Awaitable[Result[T]]],
    func: Optional[Step],
) -> Union[Result[U], PendingResult[U]]:
    """
    Functional form of .then() that also accepts a bare awaitable.

        then(ResultSuccess(1), step)          # Result or PendingResult
        then(fetch_user_async(user_id), step)  # PendingResult
    """
    if isinstance(result, PendingResult):
        return result.then(func)
    if isinstance(result, Result):
        return _bind(result, func)
    if inspect.isawaitable(result):
        return PendingResult(result).then(func)
    return _bind(result, func)  # type: ignore[arg-type]


def to_async(result: Result[T]) -> PendingResult[T]:
    """Functional form of Result.to_async()."""
    return PendingResult.resolved(result)


# ──────────────────────── Resolution ────────────────────────


def _message_or_default(message: Optional[str]) -> str:
    return message if message else NO_MESSAGE_PROVIDED


def _step_name(func: Any) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def _short_circuit(result: Any, func: Optional[Step]) -> Optional[ResultFailure[Any]]:
    """The failure a link resolves to without calling func, or None when func must run."""
    match result:
        case ResultFailure():
            return ResultFailure(result.message, result.error_code, result.exception)
        case ResultSuccess():
            if func is None:
                log.debug("then.null_function")
                return ResultFailure(NULL_FUNC_MESSAGE, ResultErrorCode.UNEXPECTED_RESULT_FAILURE)
            return None
    log.debug("then.unresolved_result", result_type=type(result).__name__)
    return ResultFailure(UNRESOLVED_RESULT_MESSAGE, ResultErrorCode.UNEXPECTED_RESULT_FAILURE)


def _should_log_captured() -> bool:
    try:
        return get_settings().log_captured_exceptions
    except ValidationError as e:
        # Invalid settings must not turn a contained fault into a raised one.
        log.error("then.settings_invalid", error=str(e))
        return True


def _captured(exc: BaseException, func: Any) -> ResultFailure[Any]:
    if _should_log_captured():
        log.warning(
            "then.exception_captured",
            step=_step_name(func),
            error=str(exc),
            error_type=type(exc).__name__,
        )
    return ResultFailure(
        UNCAUGHT_EXCEPTION_PREFIX + str(exc),
        ResultErrorCode.UNCAUGHT_EXCEPTION_IN_THEN_FUNC,
        exc,
    )


def _checked(next_result: Any) -> Any:
    if next_result is None:
        log.debug("then.null_result")
        return ResultFailure(NULL_RESULT_MESSAGE, ResultErrorCode.UNEXPECTED_RESULT_FAILURE)
    return next_result


def _bind(result: Any, func: Optional[Step]) -> Union[Result[Any], PendingResult[Any]]:
    short = _short_circuit(result, func)
    if short is not None:
        if inspect.iscoroutinefunction(func):
            return PendingResult.resolved(short)
        return short
    try:
        next_result = func(result.data)  # type: ignore[misc]
    except Exception as e:
        return _captured(e, func)
    if isinstance(next_result, Result):
        return next_result
    if inspect.isawaitable(next_result):
        return PendingResult(_settle(next_result, func))
    return _checked(next_result)


async def _settle(awaitable: Awaitable[Any], func: Any) -> Result[Any]:
    # CancelledError is not an Exception subclass; a cancelled step still ends as a failure.
    try:
        next_result = await awaitable
    except (Exception, asyncio.CancelledError) as e:
        return _captured(e, func)
    return _checked(next_result)


async def _bind_pending(pending: Awaitable[Any], func: Optional[Step]) -> Result[Any]:
    try:
        result = await pending
    except (Exception, asyncio.CancelledError) as e:
        return _captured(e, func)
    outcome = _bind(result, func)
    if isinstance(outcome, PendingResult):
        return await outcome
    return outcome
