"""Job Repository — SQL for the jobs table.

Invariants:
    - Partial updates go through build_update_fragment with JOB_COLUMNS
    - A job is only created for an existing company
    - equity leaves the repository as a decimal string (or None)
"""

from decimal import Decimal
from typing import Any, Mapping

from jobly.core.domain_types import JOB_COLUMNS, JobId
from jobly.core.errors import NotFoundError
from jobly.core.sql_fragments import build_update_fragment
from jobly.repositories.base import SqlRepository

JOB_COLUMNS_SQL = (
    'id, title, salary, equity, company_handle AS "companyHandle"'
)


def format_equity(equity: Decimal | float | None) -> str | None:
    if equity is None:
        return None
    return str(equity)


def _job_row(row: dict) -> dict:
    return {**row, "equity": format_equity(row["equity"])}


class JobSqlRepository(SqlRepository):
    resource = "job"

    async def create(self, data: Mapping[str, Any]) -> dict:
        """Insert a job. Raises NotFoundError for an unknown company."""
        handle = data["companyHandle"]
        company = await self._fetch_one(
            "SELECT handle FROM companies WHERE handle = $1", [handle],
        )
        if not company:
            raise NotFoundError("Company", handle)

        equity = data.get("equity")
        job = await self._fetch_one(
            "INSERT INTO jobs (title, salary, equity, company_handle) "
            "VALUES ($1, $2, $3, $4) "
            f"RETURNING {JOB_COLUMNS_SQL}",
            [
                data["title"],
                data.get("salary"),
                Decimal(str(equity)) if equity is not None else None,
                handle,
            ],
        )
        await self.db.commit()
        self._log_operation("create", id=job["id"], company=handle)
        return _job_row(job)

    async def find_all(self) -> list[dict]:
        rows = await self._fetch_all(f"SELECT {JOB_COLUMNS_SQL} FROM jobs ORDER BY id")
        return [_job_row(row) for row in rows]

    async def get(self, job_id: JobId) -> dict:
        job = await self._fetch_one(
            f"SELECT {JOB_COLUMNS_SQL} FROM jobs WHERE id = $1", [job_id],
        )
        if not job:
            raise NotFoundError("Job", str(job_id))
        return _job_row(job)

    async def update(self, job_id: JobId, data: Mapping[str, Any]) -> dict:
        """Apply a partial update. Raises EmptyInputError or NotFoundError."""
        fields = dict(data)
        if fields.get("equity") is not None:
            fields["equity"] = Decimal(str(fields["equity"]))
        set_cols, values = build_update_fragment(fields, JOB_COLUMNS)
        id_idx = len(values) + 1

        job = await self._fetch_one(
            f"UPDATE jobs SET {set_cols} WHERE id = ${id_idx} "
            f"RETURNING {JOB_COLUMNS_SQL}",
            [*values, job_id],
        )
        if not job:
            raise NotFoundError("Job", str(job_id))
        await self.db.commit()
        self._log_operation("update", id=job_id, fields=list(data))
        return _job_row(job)

    async def remove(self, job_id: JobId) -> None:
        deleted = await self._fetch_one(
            "DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id],
        )
        if not deleted:
            raise NotFoundError("Job", str(job_id))
        await self.db.commit()
        self._log_operation("remove", id=job_id)
