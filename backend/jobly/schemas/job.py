"""Job Schemas — response shapes for /jobs routes.

Equity is NUMERIC in PostgreSQL; it is serialized as a decimal string so no
precision is lost on the way out.
"""

from pydantic import BaseModel, Field


class JobResponse(BaseModel):
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None
    company_handle: str = Field(alias="companyHandle")

    model_config = {"populate_by_name": True}


class JobEnvelope(BaseModel):
    job: JobResponse


class JobListEnvelope(BaseModel):
    jobs: list[JobResponse]


class JobDeleted(BaseModel):
    deleted: int
