"""
Database retry utilities for handling transient write conflicts.

Provides a helper that re-runs a unit of work when it fails
because of a unique-constraint violation (two writers taking the same
transaction reference) or a deadlock / lock wait timeout.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# PostgreSQL SQLSTATE / MySQL error codes
UNIQUE_VIOLATION_CODES = ("23505", "1062", "UNIQUE constraint failed")
DEADLOCK_CODES = ("40P01", "1213", "1205")


def is_unique_violation(error: Exception) -> bool:
    """
    Check if an exception is a unique-constraint violation.

    Args:
        error: The exception to check

    Returns:
        True if the write collided with an existing unique value
    """
    if isinstance(error, IntegrityError):
        error_str = str(error)
        return any(code in error_str for code in UNIQUE_VIOLATION_CODES)
    return False


def is_deadlock_error(error: Exception) -> bool:
    """Check if an exception is a deadlock or a lock wait timeout."""
    if isinstance(error, (OperationalError, DBAPIError)) and not isinstance(error, IntegrityError):
        error_str = str(error)
        return any(code in error_str for code in DEADLOCK_CODES)
    return False


def is_retryable_conflict(error: Exception) -> bool:
    return is_unique_violation(error) or is_deadlock_error(error)


async def retry_on_conflict(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 0.05,
) -> T:
    """
    Retry a unit of work if it fails due to a write conflict.

    Uses exponential backoff: base_delay * (2 ** attempt). The unit of work
    must open (and roll back) its own transaction so every attempt starts
    from a clean state.

    Args:
        func: The async function to execute
        max_attempts: Maximum number of attempts (default: 3)
        base_delay: Base delay in seconds for exponential backoff (default: 0.05)

    Returns:
        The result of the function call

    Raises:
        The original exception if max attempts exceeded or non-retryable error
    """
    for attempt in range(max_attempts):
        try:
            return await func()
        except Exception as e:
            if not is_retryable_conflict(e):
                raise

            if attempt < max_attempts - 1:
                delay = base_delay * (2 ** attempt)
                logger.warning(
                    "Database write conflict detected, retrying",
                    extra={
                        "attempt": attempt + 1,
                        "max_attempts": max_attempts,
                        "retry_delay": delay,
                        "error": str(e),
                    },
                )
                await asyncio.sleep(delay)
            else:
                logger.error(
                    "Database write conflict persists after max retries",
                    extra={
                        "attempts": max_attempts,
                        "error": str(e),
                    },
                )
                raise

    raise RuntimeError("retry_on_conflict called with max_attempts < 1")
