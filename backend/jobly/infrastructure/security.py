"""Token Security — JWT issuance and verification for caller identity.

Invariants:
    - Tokens are signed with settings.secret_key using settings.jwt_algorithm
    - Claims carry `username` and `isAdmin`; anything else is ignored
    - identity_from_authorization never raises: a bad or missing token is anonymous
"""

import logging

import jwt

from jobly.config import Settings, get_settings
from jobly.core.domain_types import Identity

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def create_token(identity: Identity, settings: Settings | None = None) -> str:
    """Sign a JWT carrying the identity's claims."""
    settings = settings or get_settings()
    payload = {"username": identity.username, "isAdmin": identity.is_admin}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings | None = None) -> Identity:
    """Verify a JWT and return its identity. Raises jwt.PyJWTError when invalid."""
    settings = settings or get_settings()
    claims = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    username = claims.get("username")
    if not isinstance(username, str) or not username:
        raise jwt.InvalidTokenError("token has no username claim")
    return Identity(username=username, is_admin=claims.get("isAdmin") is True)


def identity_from_authorization(
    header: str | None, settings: Settings | None = None,
) -> Identity | None:
    """Resolve an Authorization header to an Identity, or None for anonymous."""
    if not header or not header.lower().startswith(BEARER_PREFIX):
        return None
    token = header[len(BEARER_PREFIX):].strip()
    try:
        return decode_token(token, settings)
    except jwt.PyJWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        return None
