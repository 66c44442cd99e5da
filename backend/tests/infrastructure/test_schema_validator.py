"""JSON Schema Validation — tests for the jsonschema adapter and schema documents."""

import pytest

from jobly.infrastructure.schema_validator import JsonSchemaValidator, load_schema

validator = JsonSchemaValidator()


@pytest.mark.parametrize("name", [
    "companyNew", "companyUpdate", "companySearch", "jobNew", "jobUpdate",
])
def test_schemas_load_and_are_cached(name):
    schema = load_schema(name)
    assert schema["type"] == "object"
    assert schema["additionalProperties"] is False
    assert load_schema(name) is schema


def test_valid_new_company():
    result = validator.validate(
        {
            "handle": "new",
            "name": "New",
            "logoUrl": "http://new.img",
            "description": "DescNew",
            "numEmployees": 10,
        },
        load_schema("companyNew"),
    )
    assert result.valid
    assert result.errors == []


def test_missing_fields_reports_every_error():
    result = validator.validate({"handle": "new"}, load_schema("companyNew"))
    assert not result.valid
    assert len(result.errors) == 2
    assert any("'name' is a required property" in e for e in result.errors)
    assert any("'description' is a required property" in e for e in result.errors)


def test_error_messages_carry_field_path():
    result = validator.validate({"numEmployees": "ten"}, load_schema("companyUpdate"))
    assert not result.valid
    assert result.errors[0].startswith("numEmployees: ")


def test_company_update_rejects_handle_change():
    result = validator.validate({"handle": "c1-new"}, load_schema("companyUpdate"))
    assert not result.valid
    assert "handle" in result.errors[0]


def test_company_update_rejects_bad_logo_url():
    result = validator.validate({"logoUrl": "not-a-url"}, load_schema("companyUpdate"))
    assert not result.valid


def test_company_search_rejects_unknown_param():
    result = validator.validate({"bad": "yes"}, load_schema("companySearch"))
    assert not result.valid


def test_company_search_accepts_query_strings():
    result = validator.validate(
        {"nameLike": "c", "minEmployees": "1", "maxEmployees": "2"},
        load_schema("companySearch"),
    )
    assert result.valid


def test_job_new_rejects_string_salary():
    result = validator.validate(
        {"title": "testNew", "salary": "salary", "companyHandle": "test"},
        load_schema("jobNew"),
    )
    assert not result.valid
    assert result.errors == ["salary: 'salary' is not of type 'integer'"]


def test_job_new_rejects_equity_above_one():
    result = validator.validate(
        {"title": "t", "equity": 1.5, "companyHandle": "c1"}, load_schema("jobNew"),
    )
    assert not result.valid


def test_non_object_payload_is_invalid():
    result = validator.validate(None, load_schema("jobUpdate"))
    assert not result.valid
    assert result.errors == ["None is not of type 'object'"]


@pytest.mark.parametrize("name, payload", [
    ("companyNew", {"handle": "h", "name": "n", "description": "d", "numEmployees": 2147483648}),
    ("companyUpdate", {"numEmployees": 2147483648}),
    ("jobNew", {"title": "t", "companyHandle": "c1", "salary": 2147483648}),
    ("jobUpdate", {"salary": 2147483648}),
])
def test_integer_columns_capped_at_int4(name, payload):
    result = validator.validate(payload, load_schema(name))
    assert not result.valid
    assert "2147483648 is greater than the maximum of 2147483647" in result.errors[0]


def test_int4_max_itself_is_accepted():
    assert validator.validate({"salary": 2147483647}, load_schema("jobUpdate")).valid
