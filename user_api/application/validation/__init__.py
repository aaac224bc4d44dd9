from .user_validation import (
    CREATE_MESSAGES,
    UPDATE_MESSAGES,
    HEARD_FROM_ITEMS_MESSAGE,
    INVALID_ID_MESSAGE,
    USER_FIELD_ERROR_TYPE,
    FieldViolation,
    validate_user_id,
    violations_from_errors,
)

__all__ = [
    "CREATE_MESSAGES",
    "UPDATE_MESSAGES",
    "HEARD_FROM_ITEMS_MESSAGE",
    "INVALID_ID_MESSAGE",
    "USER_FIELD_ERROR_TYPE",
    "FieldViolation",
    "validate_user_id",
    "violations_from_errors",
]
