"""JSON Schema Validation — jsonschema adapter for the request gate.

Invariants:
    - validate() never raises for an invalid payload; it reports every error
    - Errors are ordered by instance path, then by message, so output is stable
    - Schema documents are loaded once per process and treated as read-only
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from jsonschema import Draft202012Validator

from jobly.core.repository_protocols import ValidationResult

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).resolve().parent.parent / "schemas" / "json"


@lru_cache
def load_schema(name: str) -> dict[str, Any]:
    """Load a schema document by name (e.g. "companyNew")."""
    path = SCHEMA_DIR / f"{name}.json"
    with path.open("r", encoding="utf-8") as f:
        schema = json.load(f)
    Draft202012Validator.check_schema(schema)
    logger.debug(f"Loaded JSON schema {name}")
    return schema


def _format_error(error) -> str:
    path = ".".join(str(p) for p in error.absolute_path)
    if path:
        return f"{path}: {error.message}"
    return error.message


class JsonSchemaValidator:
    """SchemaValidator backed by jsonschema's Draft 2020-12 validator."""

    def validate(self, payload: Any, schema: Mapping[str, Any]) -> ValidationResult:
        validator = Draft202012Validator(schema)
        errors = sorted(
            validator.iter_errors(payload),
            key=lambda err: ([str(p) for p in err.absolute_path], err.message),
        )
        if not errors:
            return ValidationResult(valid=True)
        return ValidationResult(valid=False, errors=[_format_error(e) for e in errors])
