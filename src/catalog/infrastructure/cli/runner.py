"""Runs a use case from a click command and reports failures.

This is the top-level boundary: every outcome arrives as an
``OperationResult``; failures are shown to the user as a ``ClickException``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import click

from catalog.application.response import OperationResult, execute

T = TypeVar("T")


def run(operation: Callable[[], Awaitable[T]]) -> T:
    """Build and await ``operation`` on a fresh event loop and unwrap its data."""
    result = asyncio.run(execute(operation))
    if not result.success:
        raise click.ClickException(format_failure(result))
    return result.data  # type: ignore[return-value]


def format_failure(result: OperationResult) -> str:
    lines = [result.message or "Operation failed"]
    for error in result.errors or []:
        lines.append(f"  - {error}")
    return "\n".join(lines)
