"""Job Routes — CRUD over /api/v1/jobs.

Invariants:
    - Every handler calls pass_gate first: authorization → shape → repository
    - The id path segment is parsed after the gate; a non-integer id is a
      missing job, never a 400 that could precede a 401
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status

from jobly.api.dependencies import (
    current_identity, get_job_repository, get_validator, read_json_body,
)
from jobly.core.domain_types import INT4_MAX, Capability, Identity, JobId
from jobly.core.errors import NotFoundError
from jobly.core.repository_protocols import JobRepository, SchemaValidator
from jobly.core.request_gate import pass_gate
from jobly.infrastructure.schema_validator import load_schema
from jobly.schemas.job import JobDeleted, JobEnvelope, JobListEnvelope

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/jobs", tags=["jobs"])


def _parse_job_id(raw: str) -> JobId:
    """ASCII digits within the int4 id range, otherwise no such job."""
    if not (raw.isascii() and raw.isdigit()) or len(raw) > 10 or int(raw) > INT4_MAX:
        raise NotFoundError("Job", raw)
    return JobId(int(raw))


@router.post("", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
async def create_job(
    identity: Identity | None = Depends(current_identity),
    body: Any = Depends(read_json_body),
    validator: SchemaValidator = Depends(get_validator),
    jobs: JobRepository = Depends(get_job_repository),
):
    """Create a job for an existing company. Admin only."""
    data = pass_gate(
        identity, Capability.ADMIN_ONLY, body, load_schema("jobNew"), validator,
    )
    return {"job": await jobs.create(data)}


@router.get("", response_model=JobListEnvelope)
async def list_jobs(
    identity: Identity | None = Depends(current_identity),
    jobs: JobRepository = Depends(get_job_repository),
):
    pass_gate(identity, Capability.PUBLIC)
    return {"jobs": await jobs.find_all()}


@router.get("/{job_id}", response_model=JobEnvelope)
async def get_job(
    job_id: str,
    identity: Identity | None = Depends(current_identity),
    jobs: JobRepository = Depends(get_job_repository),
):
    pass_gate(identity, Capability.PUBLIC)
    return {"job": await jobs.get(_parse_job_id(job_id))}


@router.patch("/{job_id}", response_model=JobEnvelope)
async def update_job(
    job_id: str,
    identity: Identity | None = Depends(current_identity),
    body: Any = Depends(read_json_body),
    validator: SchemaValidator = Depends(get_validator),
    jobs: JobRepository = Depends(get_job_repository),
):
    """Partial update of title, salary, equity. Admin only."""
    data = pass_gate(
        identity, Capability.ADMIN_ONLY, body, load_schema("jobUpdate"), validator,
    )
    return {"job": await jobs.update(_parse_job_id(job_id), data)}


@router.delete("/{job_id}", response_model=JobDeleted)
async def delete_job(
    job_id: str,
    identity: Identity | None = Depends(current_identity),
    jobs: JobRepository = Depends(get_job_repository),
):
    """Delete a job. Admin only."""
    pass_gate(identity, Capability.ADMIN_ONLY)
    parsed = _parse_job_id(job_id)
    await jobs.remove(parsed)
    logger.info(f"Job {parsed} deleted", extra={"username": identity.username})
    return {"deleted": parsed}
