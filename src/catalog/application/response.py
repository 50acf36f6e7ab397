"""Structured outcomes returned across the boundary.

Every use case, successful or not, ends up as an ``OperationResult``.
``result_from_exception`` is the single place where exceptions become
user-visible failures; unclassified errors are logged and replaced with an
opaque message so internal details never leak.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import pydantic

from catalog.domain.exceptions import DomainException, ErrorKind, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENERIC_FAILURE_MESSAGE = "An error occurred while processing your request."


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    success: bool
    data: T | None = None
    message: str | None = None
    errors: list[str] | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def ok(cls, data: T | None = None, message: str | None = None) -> OperationResult[T]:
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(
        cls,
        message: str,
        errors: list[str] | None = None,
        error_kind: ErrorKind | None = None,
    ) -> OperationResult[Any]:
        return cls(success=False, message=message, errors=errors, error_kind=error_kind)


def result_from_exception(exc: Exception) -> OperationResult[Any]:
    """Translate an exception raised by a use case into a failed result."""
    if isinstance(exc, pydantic.ValidationError):
        return OperationResult.fail(
            "Validation failed",
            errors=[_format_pydantic_error(err) for err in exc.errors()],
            error_kind=ErrorKind.VALIDATION,
        )
    if isinstance(exc, ValidationError):
        return OperationResult.fail(str(exc), errors=exc.errors or None, error_kind=exc.kind)
    if isinstance(exc, DomainException):
        return OperationResult.fail(str(exc), error_kind=exc.kind)

    logger.error("Unhandled error: %s", exc, exc_info=exc)
    return OperationResult.fail(GENERIC_FAILURE_MESSAGE)


def _format_pydantic_error(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def execute(operation: Callable[[], Awaitable[T]]) -> OperationResult[T]:
    """Await a use case and capture its outcome, successful or not.

    ``operation`` is called inside the guarded block so that input
    validation errors raised while building a command are captured the
    same way as failures from the handler itself. Cancellation is not an
    outcome and propagates.
    """
    try:
        return OperationResult.ok(await operation())
    except Exception as exc:
        return result_from_exception(exc)
