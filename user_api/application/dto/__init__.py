from .user_dto import (
    UserCreateRequest,
    UserUpdateRequest,
    UserResponse,
    FieldErrorResponse,
    ValidationErrorResponse,
    ErrorResponse,
    MessageResponse,
)

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "FieldErrorResponse",
    "ValidationErrorResponse",
    "ErrorResponse",
    "MessageResponse",
]
