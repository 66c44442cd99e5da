"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - IO is reached only through these Protocol types
    - Implementations are provided by the shell via FastAPI dependencies

Design Decisions:
    - Protocol over ABC: structural subtyping, so test fakes need no base class
    - SchemaValidator is sync: validation is pure CPU work, no IO
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

from jobly.core.domain_types import CompanyHandle, JobId


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a schema check. errors keeps the validator's order."""
    valid: bool
    errors: list[str] = field(default_factory=list)


class SchemaValidator(Protocol):
    """Validates a payload against a JSON schema document."""
    def validate(self, payload: Any, schema: Mapping[str, Any]) -> ValidationResult: ...


class CompanyRepository(Protocol):
    """Contract for company persistence. Rows use API (camelCase) keys."""
    async def create(self, data: Mapping[str, Any]) -> dict: ...
    async def find_all(self, criteria: Mapping[str, Any] | None = None) -> list[dict]: ...
    async def get(self, handle: CompanyHandle) -> dict: ...
    async def update(self, handle: CompanyHandle, data: Mapping[str, Any]) -> dict: ...
    async def remove(self, handle: CompanyHandle) -> None: ...


class JobRepository(Protocol):
    """Contract for job persistence. Rows use API (camelCase) keys."""
    async def create(self, data: Mapping[str, Any]) -> dict: ...
    async def find_all(self) -> list[dict]: ...
    async def get(self, job_id: JobId) -> dict: ...
    async def update(self, job_id: JobId, data: Mapping[str, Any]) -> dict: ...
    async def remove(self, job_id: JobId) -> None: ...
