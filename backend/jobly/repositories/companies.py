"""Company Repository — SQL for the companies table.

Invariants:
    - Partial updates go through build_update_fragment with COMPANY_COLUMNS
    - Search criteria go through build_filter_fragment; an empty WHERE body
      means the list is unfiltered
    - Lists are ordered by name, nested jobs by id
"""

from typing import Any, Mapping

from sqlalchemy.exc import IntegrityError

from jobly.core.domain_types import COMPANY_COLUMNS, CompanyHandle
from jobly.core.errors import DuplicateError, NotFoundError
from jobly.core.sql_fragments import build_filter_fragment, build_update_fragment
from jobly.repositories.base import SqlRepository, unique_constraint
from jobly.repositories.jobs import format_equity

COMPANY_COLUMNS_SQL = (
    'handle, name, description, '
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)

# PostgreSQL's default name for the UNIQUE constraint on companies.name
NAME_CONSTRAINT = "companies_name_key"


def _duplicate_company(
    error: IntegrityError, handle: str, name: str | None,
) -> DuplicateError | None:
    constraint = unique_constraint(error)
    if constraint is None:
        return None
    if constraint == NAME_CONSTRAINT:
        return DuplicateError("Company", name)
    return DuplicateError("Company", handle)


class CompanySqlRepository(SqlRepository):
    resource = "company"

    async def create(self, data: Mapping[str, Any]) -> dict:
        """Insert a company. Raises DuplicateError when the handle or name is taken."""
        handle = data["handle"]
        duplicate = await self._fetch_one(
            "SELECT handle FROM companies WHERE handle = $1", [handle],
        )
        if duplicate:
            raise DuplicateError("Company", handle)

        try:
            company = await self._fetch_one(
                "INSERT INTO companies "
                "(handle, name, description, num_employees, logo_url) "
                "VALUES ($1, $2, $3, $4, $5) "
                f"RETURNING {COMPANY_COLUMNS_SQL}",
                [
                    handle,
                    data["name"],
                    data["description"],
                    data.get("numEmployees"),
                    data.get("logoUrl"),
                ],
            )
        except IntegrityError as e:
            duplicate = _duplicate_company(e, handle, data["name"])
            if duplicate is None:
                raise
            raise duplicate from e
        await self.db.commit()
        self._log_operation("create", handle=handle)
        return company

    async def find_all(self, criteria: Mapping[str, Any] | None = None) -> list[dict]:
        """List companies, optionally filtered by nameLike / min / maxEmployees."""
        sql = f"SELECT {COMPANY_COLUMNS_SQL} FROM companies"
        values: list[Any] = []
        if criteria:
            where_clause, values = build_filter_fragment(criteria)
            if where_clause:
                sql += f" WHERE {where_clause}"
        sql += " ORDER BY name"
        return await self._fetch_all(sql, values)

    async def get(self, handle: CompanyHandle) -> dict:
        """Company with its jobs. Raises NotFoundError."""
        company = await self._fetch_one(
            f"SELECT {COMPANY_COLUMNS_SQL} FROM companies WHERE handle = $1",
            [handle],
        )
        if not company:
            raise NotFoundError("Company", handle)

        jobs = await self._fetch_all(
            "SELECT id, title, salary, equity FROM jobs "
            "WHERE company_handle = $1 ORDER BY id",
            [handle],
        )
        company["jobs"] = [
            {**job, "equity": format_equity(job["equity"])} for job in jobs
        ]
        return company

    async def update(self, handle: CompanyHandle, data: Mapping[str, Any]) -> dict:
        """Apply a partial update. Raises EmptyInputError, NotFoundError or DuplicateError."""
        set_cols, values = build_update_fragment(data, COMPANY_COLUMNS)
        handle_idx = len(values) + 1

        try:
            company = await self._fetch_one(
                f"UPDATE companies SET {set_cols} "
                f"WHERE handle = ${handle_idx} "
                f"RETURNING {COMPANY_COLUMNS_SQL}",
                [*values, handle],
            )
        except IntegrityError as e:
            duplicate = _duplicate_company(e, handle, data.get("name"))
            if duplicate is None:
                raise
            raise duplicate from e
        if not company:
            raise NotFoundError("Company", handle)
        await self.db.commit()
        self._log_operation("update", handle=handle, fields=list(data))
        return company

    async def remove(self, handle: CompanyHandle) -> None:
        """Delete a company (jobs cascade). Raises NotFoundError."""
        deleted = await self._fetch_one(
            "DELETE FROM companies WHERE handle = $1 RETURNING handle", [handle],
        )
        if not deleted:
            raise NotFoundError("Company", handle)
        await self.db.commit()
        self._log_operation("remove", handle=handle)
