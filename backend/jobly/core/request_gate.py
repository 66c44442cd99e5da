"""Request Gate — authorization and payload-shape checks run before domain work.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Each check either returns (proceed) or raises a terminal JoblyError
    - pass_gate order is fixed: authorization → shape; domain work and
      not-found checks only happen after pass_gate returns
    - ValidationError carries every validator message, in validator order
"""

from typing import Any, Mapping

from jobly.core.domain_types import Capability, Identity
from jobly.core.errors import UnauthorizedError, ValidationError
from jobly.core.repository_protocols import SchemaValidator


def is_authenticated(identity: Identity | None) -> bool:
    return identity is not None and bool(identity.username)


def is_admin(identity: Identity | None) -> bool:
    return is_authenticated(identity) and identity.is_admin


def authorize(identity: Identity | None, capability: Capability) -> None:
    """Raise UnauthorizedError unless identity satisfies the capability."""
    if capability is Capability.PUBLIC:
        return
    if capability is Capability.AUTHENTICATED_USER:
        allowed = is_authenticated(identity)
    elif capability is Capability.ADMIN_ONLY:
        allowed = is_admin(identity)
    else:
        raise ValueError(f"Unknown capability: {capability!r}")
    if not allowed:
        raise UnauthorizedError()


def check_shape(
    payload: Any, schema: Mapping[str, Any], validator: SchemaValidator,
) -> None:
    """Raise ValidationError with all messages when payload violates schema."""
    result = validator.validate(payload, schema)
    if not result.valid:
        raise ValidationError(result.errors or ["Invalid request data"])


def pass_gate(
    identity: Identity | None,
    capability: Capability,
    payload: Any = None,
    schema: Mapping[str, Any] | None = None,
    validator: SchemaValidator | None = None,
) -> Any:
    """Run authorization, then the shape check when a schema is given.

    Returns the payload unchanged so handlers can chain straight into
    domain work.
    """
    authorize(identity, capability)
    if schema is not None:
        if validator is None:
            raise ValueError("A schema check needs a validator")
        check_shape(payload, schema, validator)
    return payload
