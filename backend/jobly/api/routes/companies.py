"""Company Routes — CRUD and search over /api/v1/companies.

Invariants:
    - Every handler calls pass_gate first: authorization → shape → repository
    - Not-found is raised by the repository, so it can only follow a passed gate
    - Search query strings are validated like bodies (unknown keys rejected)
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status

from jobly.api.dependencies import (
    current_identity, get_company_repository, get_validator, read_json_body,
)
from jobly.core.domain_types import Capability, CompanyHandle, Identity
from jobly.core.repository_protocols import CompanyRepository, SchemaValidator
from jobly.core.request_gate import pass_gate
from jobly.infrastructure.schema_validator import load_schema
from jobly.schemas.company import (
    CompanyDeleted, CompanyDetailEnvelope, CompanyEnvelope, CompanyListEnvelope,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/companies", tags=["companies"])


@router.post(
    "", response_model=CompanyEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_company(
    identity: Identity | None = Depends(current_identity),
    body: Any = Depends(read_json_body),
    validator: SchemaValidator = Depends(get_validator),
    companies: CompanyRepository = Depends(get_company_repository),
):
    """Create a company. Admin only."""
    data = pass_gate(
        identity, Capability.ADMIN_ONLY, body, load_schema("companyNew"), validator,
    )
    company = await companies.create(data)
    return {"company": company}


@router.get("", response_model=CompanyListEnvelope)
async def list_companies(
    request: Request,
    identity: Identity | None = Depends(current_identity),
    validator: SchemaValidator = Depends(get_validator),
    companies: CompanyRepository = Depends(get_company_repository),
):
    """List companies, filtered by nameLike, minEmployees, maxEmployees."""
    criteria = pass_gate(
        identity, Capability.PUBLIC, dict(request.query_params),
        load_schema("companySearch"), validator,
    )
    return {"companies": await companies.find_all(criteria or None)}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
async def get_company(
    handle: str,
    identity: Identity | None = Depends(current_identity),
    companies: CompanyRepository = Depends(get_company_repository),
):
    """Company detail with its jobs."""
    pass_gate(identity, Capability.PUBLIC)
    return {"company": await companies.get(CompanyHandle(handle))}


@router.patch("/{handle}", response_model=CompanyEnvelope)
async def update_company(
    handle: str,
    identity: Identity | None = Depends(current_identity),
    body: Any = Depends(read_json_body),
    validator: SchemaValidator = Depends(get_validator),
    companies: CompanyRepository = Depends(get_company_repository),
):
    """Partial update. The handle itself cannot change. Admin only."""
    data = pass_gate(
        identity, Capability.ADMIN_ONLY, body, load_schema("companyUpdate"), validator,
    )
    company = await companies.update(CompanyHandle(handle), data)
    return {"company": company}


@router.delete("/{handle}", response_model=CompanyDeleted)
async def delete_company(
    handle: str,
    identity: Identity | None = Depends(current_identity),
    companies: CompanyRepository = Depends(get_company_repository),
):
    """Delete a company and its jobs. Admin only."""
    pass_gate(identity, Capability.ADMIN_ONLY)
    await companies.remove(CompanyHandle(handle))
    logger.info(
        f"Company {handle} deleted",
        extra={"username": identity.username},
    )
    return {"deleted": handle}
