"""
Tests del reintento ante conflictos de escritura.

- Detecta violaciones de UNIQUE (PostgreSQL 23505, MySQL 1062, SQLite)
- Detecta deadlocks / lock wait timeouts
- Reintenta con backoff exponencial y se rinde tras max_attempts
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from gestion_reservas.infrastructure.db.retry import (
    is_deadlock_error,
    is_retryable_conflict,
    is_unique_violation,
    retry_on_conflict,
)


def _unique_violation() -> IntegrityError:
    return IntegrityError(
        "INSERT INTO pagos ...",
        {},
        Exception("UNIQUE constraint failed: pagos.referencia_transaccion"),
    )


class TestConflictDetection:
    @pytest.mark.parametrize(
        "message",
        [
            "UNIQUE constraint failed: pagos.referencia_transaccion",
            '(asyncpg.exceptions.UniqueViolationError) 23505 duplicate key value',
            "(1062, \"Duplicate entry 'TXN001' for key 'referencia_transaccion'\")",
        ],
    )
    def test_detect_unique_violation(self, message):
        error = IntegrityError("statement", {}, Exception(message))
        assert is_unique_violation(error)
        assert is_retryable_conflict(error)

    def test_foreign_key_violation_is_not_retryable(self):
        error = IntegrityError("statement", {}, Exception("FOREIGN KEY constraint failed"))
        assert not is_unique_violation(error)
        assert not is_retryable_conflict(error)

    @pytest.mark.parametrize("code", ["40P01", "1213", "1205"])
    def test_detect_deadlock(self, code):
        error = OperationalError("statement", {}, Exception(f"({code}, 'Deadlock found')"))
        assert is_deadlock_error(error)

    def test_generic_errors_ignored(self):
        assert not is_retryable_conflict(Exception("Generic error"))
        assert not is_deadlock_error(
            OperationalError("statement", {}, Exception("(2013, 'Lost connection')"))
        )


class TestRetryOnConflict:
    @pytest.mark.asyncio
    async def test_success_on_first_attempt(self):
        func = AsyncMock(return_value="ok")

        assert await retry_on_conflict(func, max_attempts=3) == "ok"
        assert func.await_count == 1

    @pytest.mark.asyncio
    async def test_retries_until_success(self):
        func = AsyncMock(side_effect=[_unique_violation(), _unique_violation(), "ok"])

        with patch("gestion_reservas.infrastructure.db.retry.asyncio.sleep", new=AsyncMock()) as sleep:
            result = await retry_on_conflict(func, max_attempts=3, base_delay=0.1)

        assert result == "ok"
        assert func.await_count == 3
        # Backoff exponencial: 0.1, 0.2
        assert [call.args[0] for call in sleep.await_args_list] == [0.1, 0.2]

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        func = AsyncMock(side_effect=_unique_violation())

        with patch("gestion_reservas.infrastructure.db.retry.asyncio.sleep", new=AsyncMock()):
            with pytest.raises(IntegrityError):
                await retry_on_conflict(func, max_attempts=3)

        assert func.await_count == 3

    @pytest.mark.asyncio
    async def test_non_retryable_error_raised_immediately(self):
        func = AsyncMock(side_effect=ValueError("boom"))

        with pytest.raises(ValueError):
            await retry_on_conflict(func, max_attempts=3)

        assert func.await_count == 1
