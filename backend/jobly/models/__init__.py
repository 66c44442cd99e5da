"""ORM Models — table definitions for companies and jobs.

Invariants:
    - All models inherit from Base (db/base.py)
    - Queries go through repositories/ with raw SQL; models only describe tables

Design Decisions:
    - All models imported here so string-based relationship() references
      resolve before metadata is used
"""

from jobly.models.company import Company  # noqa: F401
from jobly.models.job import Job  # noqa: F401
