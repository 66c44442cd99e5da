"""FastAPI Dependencies — identity, schema validator and repositories per request.

Invariants:
    - current_identity never raises; anonymous callers get None
    - Repositories are bound to the request's DB session (get_db)
    - Tests swap any of these through app.dependency_overrides
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.config import get_settings
from jobly.core.domain_types import Identity
from jobly.core.repository_protocols import (
    CompanyRepository, JobRepository, SchemaValidator,
)
from jobly.infrastructure.database import get_db
from jobly.infrastructure.schema_validator import JsonSchemaValidator
from jobly.infrastructure.security import identity_from_authorization
from jobly.repositories.companies import CompanySqlRepository
from jobly.repositories.jobs import JobSqlRepository

_validator = JsonSchemaValidator()


async def current_identity(request: Request) -> Identity | None:
    """Identity from the bearer token, or None."""
    identity = identity_from_authorization(
        request.headers.get("authorization"), get_settings(),
    )
    request.state.identity = identity
    return identity


def get_validator() -> SchemaValidator:
    return _validator


async def get_company_repository(
    db: AsyncSession = Depends(get_db),
) -> CompanyRepository:
    return CompanySqlRepository(db)


async def get_job_repository(
    db: AsyncSession = Depends(get_db),
) -> JobRepository:
    return JobSqlRepository(db)


async def read_json_body(request: Request):
    """Parsed JSON body, or None when the body is empty or not JSON.

    A None payload fails the shape check, which only runs after
    authorization, so a malformed body never hides a 401.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return await request.json()
    except ValueError:
        return None
