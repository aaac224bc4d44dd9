"""Errors raised by user use cases and translated to HTTP responses by the API layer"""

# Standard library imports
from typing import List

# Local application imports
from .validation.user_validation import FieldViolation


class UserValidationError(ValueError):
    """Request fields or path ID failed validation (HTTP 422)"""
    
    def __init__(self, violations: List[FieldViolation]) -> None:
        self.violations = list(violations)
        fields = ", ".join(violation.field for violation in self.violations)
        super().__init__(f"Validation failed for: {fields}")


class UserNotFoundError(ValueError):
    """Well-formed user ID with no matching record (HTTP 404)"""
    
    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__("User not found")
