"""
Unit tests for user request DTO rules (create and update), the translation of
validation errors into field violations, and the path ID check.
"""
import pytest
from bson import ObjectId
from pydantic import ValidationError

from user_api.application.dto.user_dto import UserCreateRequest, UserUpdateRequest
from user_api.application.validation.user_validation import (
    INVALID_ID_MESSAGE,
    FieldViolation,
    validate_user_id,
    violations_from_errors,
)

REQUIRED_FIELDS = ["firstName", "lastName", "ageGroup", "gender", "hasLaptop", "bio", "heardFrom"]


def _is_object_id(value):
    return isinstance(value, str) and len(value) == 24 and ObjectId.is_valid(value)


def _violations(request_model, payload):
    try:
        request_model.model_validate(payload)
    except ValidationError as exc:
        return violations_from_errors(exc.errors())
    return []


class TestUserCreateRequest:
    """Tests for UserCreateRequest rules"""

    def test_valid_payload_has_no_violations(self, valid_user_payload):
        assert _violations(UserCreateRequest, valid_user_payload) == []

    @pytest.mark.parametrize("missing", REQUIRED_FIELDS)
    def test_missing_field_is_reported(self, valid_user_payload, missing):
        del valid_user_payload[missing]
        violations = _violations(UserCreateRequest, valid_user_payload)
        assert [v.field for v in violations] == [missing]

    def test_empty_body_reports_every_field_in_order(self):
        violations = _violations(UserCreateRequest, {})
        assert [v.field for v in violations] == REQUIRED_FIELDS
        assert violations[0].message == "First Name is required"
        assert violations[1].message == "Last Name is required"
        assert violations[6].message == "Select at least one option for how you heard about us"

    def test_empty_names_rejected(self, valid_user_payload):
        valid_user_payload["firstName"] = ""
        valid_user_payload["lastName"] = ""
        violations = _violations(UserCreateRequest, valid_user_payload)
        assert [(v.field, v.message) for v in violations] == [
            ("firstName", "First Name is required"),
            ("lastName", "Last Name is required"),
        ]

    @pytest.mark.parametrize("age_group", ["18", "65+", "", None, 20])
    def test_age_group_outside_enum(self, valid_user_payload, age_group):
        valid_user_payload["ageGroup"] = age_group
        violations = _violations(UserCreateRequest, valid_user_payload)
        assert [(v.field, v.message) for v in violations] == [("ageGroup", "Invalid age group")]

    @pytest.mark.parametrize("age_group", ["<18", "18-24", "25-34", "35-44", "45+"])
    def test_age_group_enum_members_accepted(self, valid_user_payload, age_group):
        valid_user_payload["ageGroup"] = age_group
        assert _violations(UserCreateRequest, valid_user_payload) == []

    @pytest.mark.parametrize("gender", ["male", "Unknown", ""])
    def test_gender_outside_enum(self, valid_user_payload, gender):
        valid_user_payload["gender"] = gender
        violations = _violations(UserCreateRequest, valid_user_payload)
        assert [(v.field, v.message) for v in violations] == [("gender", "Invalid gender")]

    @pytest.mark.parametrize("has_laptop", ["true", 1, 0, None])
    def test_has_laptop_must_be_boolean(self, valid_user_payload, has_laptop):
        valid_user_payload["hasLaptop"] = has_laptop
        violations = _violations(UserCreateRequest, valid_user_payload)
        assert [(v.field, v.message) for v in violations] == [
            ("hasLaptop", "Laptop ownership must be true or false")
        ]

    def test_has_laptop_false_accepted(self, valid_user_payload):
        valid_user_payload["hasLaptop"] = False
        assert _violations(UserCreateRequest, valid_user_payload) == []

    @pytest.mark.parametrize("bio", ["too short", 1234567890])
    def test_short_or_non_string_bio_rejected(self, valid_user_payload, bio):
        valid_user_payload["bio"] = bio
        violations = _violations(UserCreateRequest, valid_user_payload)
        assert [(v.field, v.message) for v in violations] == [
            ("bio", "Bio must be at least 10 characters long")
        ]

    def test_bio_of_exactly_ten_characters_accepted(self, valid_user_payload):
        valid_user_payload["bio"] = "x" * 10
        assert _violations(UserCreateRequest, valid_user_payload) == []

    @pytest.mark.parametrize("heard_from", [[], "friend", None])
    def test_heard_from_needs_one_element(self, valid_user_payload, heard_from):
        valid_user_payload["heardFrom"] = heard_from
        violations = _violations(UserCreateRequest, valid_user_payload)
        assert [(v.field, v.message) for v in violations] == [
            ("heardFrom", "Select at least one option for how you heard about us")
        ]

    def test_heard_from_items_must_be_strings(self, valid_user_payload):
        valid_user_payload["heardFrom"] = ["friend", 3]
        violations = _violations(UserCreateRequest, valid_user_payload)
        assert [(v.field, v.message) for v in violations] == [
            ("heardFrom", "Heard From entries must be strings")
        ]

    def test_unknown_fields_are_ignored(self, valid_user_payload):
        valid_user_payload["role"] = "admin"
        request = UserCreateRequest.model_validate(valid_user_payload)
        assert "role" not in request.to_fields()

    def test_to_fields_uses_wire_names(self, valid_user_payload):
        request = UserCreateRequest.model_validate(valid_user_payload)
        assert request.to_fields() == valid_user_payload

    def test_violations_default_to_body_location(self):
        violations = _violations(UserCreateRequest, {})
        assert all(v.location == "body" for v in violations)


class TestUserUpdateRequest:
    """Tests for UserUpdateRequest rules"""

    def test_empty_body_is_valid_and_sets_nothing(self):
        assert UserUpdateRequest.model_validate({}).to_fields() == {}

    def test_only_supplied_fields_are_kept(self):
        request = UserUpdateRequest.model_validate({"bio": "Still likes computers", "_id": "x"})
        assert request.to_fields() == {"bio": "Still likes computers"}

    def test_present_empty_name_rejected(self):
        violations = _violations(UserUpdateRequest, {"firstName": ""})
        assert [(v.field, v.message) for v in violations] == [
            ("firstName", "First Name cannot be empty")
        ]

    def test_explicit_null_is_validated(self):
        violations = _violations(UserUpdateRequest, {"lastName": None})
        assert [(v.field, v.message) for v in violations] == [
            ("lastName", "Last Name cannot be empty")
        ]

    def test_empty_heard_from_allowed_on_update(self):
        assert UserUpdateRequest.model_validate({"heardFrom": []}).to_fields() == {"heardFrom": []}

    def test_heard_from_must_be_array_on_update(self):
        violations = _violations(UserUpdateRequest, {"heardFrom": "friend"})
        assert [v.message for v in violations] == ["Heard From must be an array"]

    def test_all_violations_reported_in_field_order(self):
        violations = _violations(
            UserUpdateRequest,
            {"bio": "short", "hasLaptop": "yes", "gender": "x", "ageGroup": "old"},
        )
        assert [v.field for v in violations] == ["ageGroup", "gender", "hasLaptop", "bio"]


class TestRequestSchema:
    """The generated JSON schema carries the field types"""

    def test_create_schema_lists_enums_and_requirements(self):
        schema = UserCreateRequest.model_json_schema(by_alias=True)
        assert set(schema["required"]) == set(REQUIRED_FIELDS)
        assert schema["properties"]["ageGroup"]["enum"] == ["<18", "18-24", "25-34", "35-44", "45+"]
        assert schema["properties"]["gender"]["enum"] == ["Male", "Female", "Other"]
        assert schema["properties"]["hasLaptop"]["type"] == "boolean"
        assert schema["properties"]["bio"]["minLength"] == 10
        assert schema["properties"]["heardFrom"]["minItems"] == 1

    def test_update_schema_requires_nothing(self):
        schema = UserUpdateRequest.model_json_schema(by_alias=True)
        assert "required" not in schema
        assert "firstName" in schema["properties"]


class TestViolationsFromErrors:
    """Tests for translating request validation errors"""

    def test_path_id_error_becomes_id_violation(self):
        errors = [
            {"type": "string_pattern_mismatch", "loc": ("path", "user_id"), "msg": "String should match pattern"},
            {"type": "user_field", "loc": ("body", "bio"), "msg": "Bio must be at least 10 characters long"},
        ]
        assert violations_from_errors(errors) == [
            FieldViolation(field="id", message=INVALID_ID_MESSAGE, location="params"),
            FieldViolation(field="bio", message="Bio must be at least 10 characters long"),
        ]

    def test_missing_request_field_gets_required_message(self):
        errors = [{"type": "missing", "loc": ("body", "lastName"), "msg": "Field required"}]
        assert violations_from_errors(errors) == [
            FieldViolation(field="lastName", message="Last Name is required")
        ]

    def test_malformed_json_reported_against_body(self):
        errors = [{"type": "json_invalid", "loc": ("body", 12), "msg": "JSON decode error"}]
        assert violations_from_errors(errors) == [
            FieldViolation(field="body", message="JSON decode error")
        ]

    def test_one_violation_per_field(self):
        errors = [
            {"type": "string_type", "loc": ("body", "heardFrom", 0), "msg": "first"},
            {"type": "string_type", "loc": ("body", "heardFrom", 1), "msg": "second"},
        ]
        assert [v.message for v in violations_from_errors(errors)] == ["first"]

    def test_to_dict_shape(self):
        violation = FieldViolation(field="id", message=INVALID_ID_MESSAGE, location="params")
        assert violation.to_dict() == {
            "field": "id",
            "message": "Invalid user ID format",
            "location": "params",
        }


class TestValidateUserId:
    """Tests for validate_user_id"""

    def test_valid_object_id(self):
        assert validate_user_id(str(ObjectId()), _is_object_id) == []

    @pytest.mark.parametrize("user_id", ["123", "not-an-id", "zzzzzzzzzzzzzzzzzzzzzzzz"])
    def test_invalid_id(self, user_id):
        violations = validate_user_id(user_id, _is_object_id)
        assert len(violations) == 1
        assert violations[0].field == "id"
        assert violations[0].message == INVALID_ID_MESSAGE
        assert violations[0].location == "params"
