"""Request Gate — tests for authorization predicates and gate ordering.

Tests cover:
    - is_authenticated / is_admin predicates
    - authorize per Capability
    - check_shape collects every validator message
    - pass_gate reports unauthorized before invalid payloads
"""

import pytest

from jobly.core.domain_types import Capability, Identity
from jobly.core.errors import UnauthorizedError, ValidationError
from jobly.core.repository_protocols import ValidationResult
from jobly.core.request_gate import (
    authorize, check_shape, is_admin, is_authenticated, pass_gate,
)

ADMIN = Identity(username="admin", is_admin=True)
USER = Identity(username="u1")


class StubValidator:
    """Records calls; fails with the configured messages."""

    def __init__(self, errors: list[str] | None = None):
        self.errors = errors or []
        self.calls = 0

    def validate(self, payload, schema):
        self.calls += 1
        return ValidationResult(valid=not self.errors, errors=list(self.errors))


SCHEMA = {"type": "object"}


# ─── predicates ──────────────────────────────────────────────────

def test_predicates():
    assert not is_authenticated(None)
    assert is_authenticated(USER)
    assert not is_admin(USER)
    assert is_admin(ADMIN)
    assert not is_admin(None)


def test_empty_username_is_not_authenticated():
    assert not is_authenticated(Identity(username="", is_admin=True))
    assert not is_admin(Identity(username="", is_admin=True))


# ─── authorize ───────────────────────────────────────────────────

def test_public_allows_anonymous():
    authorize(None, Capability.PUBLIC)


def test_authenticated_user_requires_identity():
    authorize(USER, Capability.AUTHENTICATED_USER)
    with pytest.raises(UnauthorizedError):
        authorize(None, Capability.AUTHENTICATED_USER)


@pytest.mark.parametrize("identity", [None, USER])
def test_admin_only_rejects_non_admins(identity):
    with pytest.raises(UnauthorizedError):
        authorize(identity, Capability.ADMIN_ONLY)


def test_admin_only_allows_admin():
    authorize(ADMIN, Capability.ADMIN_ONLY)


# ─── check_shape ─────────────────────────────────────────────────

def test_check_shape_passes_valid_payload():
    check_shape({"a": 1}, SCHEMA, StubValidator())


def test_check_shape_collects_all_messages_in_order():
    validator = StubValidator(["handle: required", "name: too short"])
    with pytest.raises(ValidationError) as exc_info:
        check_shape({}, SCHEMA, validator)
    assert exc_info.value.messages == ["handle: required", "name: too short"]
    assert exc_info.value.http_status == 400


# ─── pass_gate ───────────────────────────────────────────────────

def test_unauthorized_wins_over_invalid_payload():
    validator = StubValidator(["salary: not an integer"])
    with pytest.raises(UnauthorizedError):
        pass_gate(USER, Capability.ADMIN_ONLY, {"salary": "x"}, SCHEMA, validator)
    assert validator.calls == 0


def test_admin_with_invalid_payload_gets_validation_error():
    validator = StubValidator(["salary: not an integer"])
    with pytest.raises(ValidationError):
        pass_gate(ADMIN, Capability.ADMIN_ONLY, {"salary": "x"}, SCHEMA, validator)


def test_pass_gate_returns_payload():
    payload = {"name": "New"}
    assert pass_gate(ADMIN, Capability.ADMIN_ONLY, payload, SCHEMA, StubValidator()) is payload


def test_pass_gate_without_schema_skips_shape_check():
    assert pass_gate(None, Capability.PUBLIC) is None


def test_pass_gate_schema_without_validator_is_a_programming_error():
    with pytest.raises(ValueError):
        pass_gate(ADMIN, Capability.ADMIN_ONLY, {}, SCHEMA)
