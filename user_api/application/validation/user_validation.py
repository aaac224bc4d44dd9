"""
Field messages for user requests and the translation of validation errors
into the {field, message, location} violations returned with HTTP 422.

The rules themselves live on the request DTOs (UserCreateRequest,
UserUpdateRequest). Every failing field is reported once, with the message
below for its mode, in field declaration order after any path error.
"""

# Standard library imports
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Set, Tuple

# Local application imports
from ...domain.constants import UserFields, BIO_MIN_LENGTH


USER_FIELD_ERROR_TYPE = "user_field"

INVALID_ID_MESSAGE = "Invalid user ID format"
HEARD_FROM_ITEMS_MESSAGE = "Heard From entries must be strings"

_SHARED_MESSAGES = {
    UserFields.AGE_GROUP: "Invalid age group",
    UserFields.GENDER: "Invalid gender",
    UserFields.HAS_LAPTOP: "Laptop ownership must be true or false",
    UserFields.BIO: f"Bio must be at least {BIO_MIN_LENGTH} characters long",
}

CREATE_MESSAGES: Dict[str, str] = {
    UserFields.FIRST_NAME: "First Name is required",
    UserFields.LAST_NAME: "Last Name is required",
    **_SHARED_MESSAGES,
    UserFields.HEARD_FROM: "Select at least one option for how you heard about us",
}

UPDATE_MESSAGES: Dict[str, str] = {
    UserFields.FIRST_NAME: "First Name cannot be empty",
    UserFields.LAST_NAME: "Last Name cannot be empty",
    **_SHARED_MESSAGES,
    UserFields.HEARD_FROM: "Heard From must be an array",
}

# FastAPI location prefix -> location reported to clients
_REQUEST_LOCATIONS = {
    "body": "body",
    "path": "params",
    "query": "query",
}
_PATH_ID_PARAM = "user_id"


@dataclass(frozen=True)
class FieldViolation:
    """A single failed rule"""
    field: str
    message: str
    location: str = "body"

    def to_dict(self) -> Dict[str, str]:
        """
        Serialize for the 422 response body

        Returns:
            Dictionary with field, message and location keys
        """
        return {"field": self.field, "message": self.message, "location": self.location}


def validate_user_id(user_id: str, is_valid_id: Callable[[str], bool]) -> List[FieldViolation]:
    """
    Check a path identifier against the store's ID format

    Args:
        user_id: Raw path parameter
        is_valid_id: Format check supplied by the repository

    Returns:
        A single "id" violation, or an empty list
    """
    if is_valid_id(user_id):
        return []
    return [FieldViolation(field="id", message=INVALID_ID_MESSAGE, location="params")]


def violations_from_errors(errors: Iterable[Mapping[str, Any]]) -> List[FieldViolation]:
    """
    Convert pydantic / FastAPI validation errors into field violations

    Accepts both request errors (loc starting with "body" or "path") and
    errors from validating a DTO directly (loc starting at the field).

    Args:
        errors: Output of RequestValidationError.errors() or ValidationError.errors()

    Returns:
        Ordered violations, at most one per field
    """
    violations: List[FieldViolation] = []
    seen: Set[Tuple[str, str]] = set()

    for error in errors:
        loc = tuple(error.get("loc") or ())
        if loc and loc[0] in _REQUEST_LOCATIONS:
            prefix, parts = loc[0], loc[1:]
        else:
            prefix, parts = "body", loc
        location = _REQUEST_LOCATIONS[prefix]

        # Top-level field name; list indexes and JSON offsets are dropped
        names = [part for part in parts if isinstance(part, str)]
        field = names[0] if names else prefix
        message = error.get("msg", "Invalid value")

        if prefix == "path" and field == _PATH_ID_PARAM:
            field, message = "id", INVALID_ID_MESSAGE
        elif error.get("type") == "missing" and field in CREATE_MESSAGES:
            message = CREATE_MESSAGES[field]

        if (field, location) in seen:
            continue
        seen.add((field, location))
        violations.append(FieldViolation(field=field, message=message, location=location))

    return violations
