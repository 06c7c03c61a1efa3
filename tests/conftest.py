"""
Shared test fixtures for the result_monad test suite.

Every test starts from default settings and default structlog configuration,
so environment tweaks and configure_structlog() calls cannot leak between tests.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator

import pytest
import structlog

from result_monad import Result, ResultErrorCode, ResultFailure, ResultSuccess, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


# ─────────────────────── Registration pipeline steps ───────────────────────


@dataclass(frozen=True)
class User:
    username: str
    password: str


def validate_input(username: str, password: str) -> Result[User]:
    if not username.strip() or not password.strip():
        return ResultFailure("Invalid input", ResultErrorCode.VALIDATION_FAILED)
    return ResultSuccess(User(username, password), "input valid")


def check_user_does_not_exist(user: User) -> Result[User]:
    if user.username == "bob":
        return ResultFailure("User already exists", ResultErrorCode.VALIDATION_FAILED)
    return ResultSuccess(user, "user does not exist")


async def check_user_does_not_exist_async(user: User) -> Result[User]:
    return check_user_does_not_exist(user)


def hash_password(user: User) -> Result[User]:
    return ResultSuccess(replace(user, password="hashed:" + user.password), "password hashed")


def save_user(user: User) -> Result[User]:
    return ResultSuccess(user, "user saved")


def send_welcome_email(user: User) -> Result[User]:
    return ResultSuccess(user, "email sent")


def registered(user: User) -> Result[str]:
    return ResultSuccess(f"User {user.username} registered successfully!", "done")
