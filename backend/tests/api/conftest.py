"""API test fixtures — FastAPI test client over in-memory repositories.

Invariants:
    - Repository dependencies overridden with in-memory fakes; no database needed
    - Fakes raise the same JoblyErrors as the SQL repositories
    - Company search goes through build_filter_fragment so its errors are real
"""

import pytest
from httpx import ASGITransport, AsyncClient

from jobly.api.dependencies import get_company_repository, get_job_repository
from jobly.core.domain_types import Identity
from jobly.core.errors import DuplicateError, EmptyInputError, NotFoundError
from jobly.core.numeric import parse_number
from jobly.core.sql_fragments import build_filter_fragment
from jobly.infrastructure.security import create_token
from jobly.main import app


class InMemoryCompanies:
    def __init__(self, jobs: "InMemoryJobs"):
        self.rows: dict[str, dict] = {}
        self.jobs = jobs

    async def create(self, data):
        if data["handle"] in self.rows:
            raise DuplicateError("Company", data["handle"])
        if any(r["name"] == data["name"] for r in self.rows.values()):
            raise DuplicateError("Company", data["name"])
        row = {
            "handle": data["handle"],
            "name": data["name"],
            "description": data["description"],
            "numEmployees": data.get("numEmployees"),
            "logoUrl": data.get("logoUrl"),
        }
        self.rows[row["handle"]] = row
        return dict(row)

    async def find_all(self, criteria=None):
        rows = sorted(self.rows.values(), key=lambda r: r["name"])
        if criteria:
            build_filter_fragment(criteria)
            rows = [r for r in rows if _matches(r, criteria)]
        return [dict(r) for r in rows]

    async def get(self, handle):
        if handle not in self.rows:
            raise NotFoundError("Company", handle)
        jobs = [
            {k: j[k] for k in ("id", "title", "salary", "equity")}
            for j in await self.jobs.find_all()
            if j["companyHandle"] == handle
        ]
        return {**self.rows[handle], "jobs": jobs}

    async def update(self, handle, data):
        if not data:
            raise EmptyInputError()
        if handle not in self.rows:
            raise NotFoundError("Company", handle)
        self.rows[handle].update(data)
        return dict(self.rows[handle])

    async def remove(self, handle):
        if handle not in self.rows:
            raise NotFoundError("Company", handle)
        del self.rows[handle]
        self.jobs.rows = {
            k: j for k, j in self.jobs.rows.items() if j["companyHandle"] != handle
        }


def _matches(row: dict, criteria: dict) -> bool:
    if "nameLike" in criteria and criteria["nameLike"].lower() not in row["name"].lower():
        return False
    employees = row["numEmployees"]
    if "minEmployees" in criteria and employees < parse_number(criteria["minEmployees"]).value:
        return False
    if "maxEmployees" in criteria and employees > parse_number(criteria["maxEmployees"]).value:
        return False
    return True


class InMemoryJobs:
    def __init__(self):
        self.rows: dict[int, dict] = {}
        self.companies: InMemoryCompanies | None = None
        self._next_id = 1

    async def create(self, data):
        if data["companyHandle"] not in self.companies.rows:
            raise NotFoundError("Company", data["companyHandle"])
        equity = data.get("equity")
        row = {
            "id": self._next_id,
            "title": data["title"],
            "salary": data.get("salary"),
            "equity": str(equity) if equity is not None else None,
            "companyHandle": data["companyHandle"],
        }
        self.rows[row["id"]] = row
        self._next_id += 1
        return dict(row)

    async def find_all(self):
        return [dict(self.rows[k]) for k in sorted(self.rows)]

    async def get(self, job_id):
        if job_id not in self.rows:
            raise NotFoundError("Job", str(job_id))
        return dict(self.rows[job_id])

    async def update(self, job_id, data):
        if not data:
            raise EmptyInputError()
        if job_id not in self.rows:
            raise NotFoundError("Job", str(job_id))
        fields = dict(data)
        if fields.get("equity") is not None:
            fields["equity"] = str(fields["equity"])
        self.rows[job_id].update(fields)
        return dict(self.rows[job_id])

    async def remove(self, job_id):
        if job_id not in self.rows:
            raise NotFoundError("Job", str(job_id))
        del self.rows[job_id]


@pytest.fixture
async def repositories():
    jobs = InMemoryJobs()
    companies = InMemoryCompanies(jobs)
    jobs.companies = companies
    for n in (1, 2, 3):
        await companies.create({
            "handle": f"c{n}",
            "name": f"C{n}",
            "description": f"Desc{n}",
            "numEmployees": n,
            "logoUrl": f"http://c{n}.img",
        })
    await jobs.create({"title": "j1", "salary": 1, "equity": 0, "companyHandle": "c1"})
    return companies, jobs


@pytest.fixture
async def client(repositories):
    """FastAPI test client with repository dependencies overridden."""
    companies, jobs = repositories
    app.dependency_overrides[get_company_repository] = lambda: companies
    app.dependency_overrides[get_job_repository] = lambda: jobs

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_token(Identity('admin', is_admin=True))}"}


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {create_token(Identity('u1'))}"}
