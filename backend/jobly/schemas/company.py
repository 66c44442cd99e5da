"""Company Schemas — response shapes for /companies routes."""

from pydantic import BaseModel, Field


class CompanyJob(BaseModel):
    """Job summary nested inside a company detail."""
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None


class CompanyResponse(BaseModel):
    handle: str
    name: str
    description: str
    num_employees: int | None = Field(None, alias="numEmployees")
    logo_url: str | None = Field(None, alias="logoUrl")

    model_config = {"populate_by_name": True}


class CompanyDetailResponse(CompanyResponse):
    jobs: list[CompanyJob] = []


class CompanyEnvelope(BaseModel):
    company: CompanyResponse


class CompanyDetailEnvelope(BaseModel):
    company: CompanyDetailResponse


class CompanyListEnvelope(BaseModel):
    companies: list[CompanyResponse]


class CompanyDeleted(BaseModel):
    deleted: str
