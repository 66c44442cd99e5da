"""Shared SQL execution helpers for repositories."""

import logging
from typing import Any, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


def unique_constraint(error: IntegrityError) -> str | None:
    """Name of the violated unique constraint, or None for other integrity errors.

    asyncpg's exception (the adapted error's cause) carries the constraint name.
    """
    if getattr(error.orig, "sqlstate", None) != UNIQUE_VIOLATION:
        return None
    return getattr(error.orig.__cause__, "constraint_name", None) or ""


class SqlRepository:
    """Runs driver-level SQL with positional $n parameters."""

    resource: str = "resource"

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _execute(self, sql: str, values: Sequence[Any] = ()):
        conn = await self.db.connection()
        logger.debug(f"SQL: {sql}", extra={"resource": self.resource})
        return await conn.exec_driver_sql(sql, tuple(values))

    async def _fetch_all(self, sql: str, values: Sequence[Any] = ()) -> list[dict]:
        result = await self._execute(sql, values)
        return [dict(row) for row in result.mappings().all()]

    async def _fetch_one(self, sql: str, values: Sequence[Any] = ()) -> dict | None:
        result = await self._execute(sql, values)
        row = result.mappings().first()
        return dict(row) if row is not None else None

    def _log_operation(self, operation: str, **fields: Any) -> None:
        logger.info(
            f"{self.resource}.{operation} {fields}",
            extra={"resource": self.resource, "operation": operation},
        )
