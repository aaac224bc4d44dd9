"""Constants for domain model field names"""

from .user_fields import (
    UserFields,
    AgeGroup,
    Gender,
    AGE_GROUPS,
    GENDERS,
    BIO_MIN_LENGTH,
    OBJECT_ID_PATTERN,
)

__all__ = [
    "UserFields",
    "AgeGroup",
    "Gender",
    "AGE_GROUPS",
    "GENDERS",
    "BIO_MIN_LENGTH",
    "OBJECT_ID_PATTERN",
]
