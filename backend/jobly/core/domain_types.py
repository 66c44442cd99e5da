"""Domain Types — identity, capabilities and the static column translations.

Invariants:
    - Identity is immutable; None stands for an anonymous caller
    - Capability values are the only authorization levels a route may declare
    - Column translations are module constants, never mutated at runtime
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, NewType

CompanyHandle = NewType("CompanyHandle", str)
JobId = NewType("JobId", int)

NameTranslation = Mapping[str, str]


@dataclass(frozen=True)
class Identity:
    """Claims of an authenticated caller."""
    username: str
    is_admin: bool = False


class Capability(str, Enum):
    """Authorization level a route requires."""
    PUBLIC = "public"
    AUTHENTICATED_USER = "authenticated_user"
    ADMIN_ONLY = "admin_only"


# Logical (API) field name → physical column name
COMPANY_COLUMNS: NameTranslation = MappingProxyType({
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
})

JOB_COLUMNS: NameTranslation = MappingProxyType({})

# Bounds of a PostgreSQL integer (int4) column or parameter
INT4_MIN = -2_147_483_648
INT4_MAX = 2_147_483_647
