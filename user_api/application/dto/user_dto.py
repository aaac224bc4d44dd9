# Standard library imports
from typing import Any, ClassVar, Dict, List, Optional

# External package imports
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic_core import PydanticCustomError

# Local application imports
from ...domain.constants import UserFields, AgeGroup, Gender, BIO_MIN_LENGTH
from ...domain.models.user import User
from ..validation.user_validation import (
    CREATE_MESSAGES,
    UPDATE_MESSAGES,
    HEARD_FROM_ITEMS_MESSAGE,
    USER_FIELD_ERROR_TYPE,
)


class _UserRequest(BaseModel):
    """Shared behaviour of user request bodies; unknown keys are ignored"""
    field_messages: ClassVar[Dict[str, str]] = {}
    
    @field_validator("*", mode="wrap")
    @classmethod
    def _apply_field_message(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        """Report each failing field once, with its user-facing message"""
        try:
            return handler(value)
        except ValidationError as exc:
            name = cls.model_fields[info.field_name].alias or info.field_name
            if name == UserFields.HEARD_FROM and any(error["loc"] for error in exc.errors()):
                # Failure inside the list, not of the list itself
                message = HEARD_FROM_ITEMS_MESSAGE
            else:
                message = cls.field_messages[name]
            raise PydanticCustomError(USER_FIELD_ERROR_TYPE, message)
    
    def to_fields(self) -> Dict[str, Any]:
        """camelCase mapping of the fields the client actually sent"""
        return self.model_dump(by_alias=True, exclude_unset=True)


class UserCreateRequest(_UserRequest):
    """DTO for user creation request; every field is required"""
    field_messages: ClassVar[Dict[str, str]] = CREATE_MESSAGES
    
    first_name: StrictStr = Field(alias="firstName", min_length=1)
    last_name: StrictStr = Field(alias="lastName", min_length=1)
    age_group: AgeGroup = Field(alias="ageGroup")
    gender: Gender
    has_laptop: StrictBool = Field(alias="hasLaptop")
    bio: StrictStr = Field(min_length=BIO_MIN_LENGTH)
    heard_from: List[StrictStr] = Field(alias="heardFrom", min_length=1)


class UserUpdateRequest(_UserRequest):
    """
    DTO for user update request.
    
    Absent fields stay unchanged. Defaults are not validated, but an explicit
    null is, so it is rejected like any other invalid value.
    """
    field_messages: ClassVar[Dict[str, str]] = UPDATE_MESSAGES
    
    first_name: StrictStr = Field(default=None, alias="firstName", min_length=1)
    last_name: StrictStr = Field(default=None, alias="lastName", min_length=1)
    age_group: AgeGroup = Field(default=None, alias="ageGroup")
    gender: Gender = None
    has_laptop: StrictBool = Field(default=None, alias="hasLaptop")
    bio: StrictStr = Field(default=None, min_length=BIO_MIN_LENGTH)
    heard_from: List[StrictStr] = Field(default=None, alias="heardFrom")


class UserResponse(BaseModel):
    """DTO for a stored user record, serialized with the document store's field names"""
    model_config = ConfigDict(populate_by_name=True)
    
    id: str = Field(alias="_id")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    age_group: Optional[str] = Field(default=None, alias="ageGroup")
    gender: Optional[str] = None
    has_laptop: Optional[bool] = Field(default=None, alias="hasLaptop")
    bio: Optional[str] = None
    heard_from: Optional[List[str]] = Field(default=None, alias="heardFrom")
    
    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            first_name=user.first_name,
            last_name=user.last_name,
            age_group=user.age_group,
            gender=user.gender,
            has_laptop=user.has_laptop,
            bio=user.bio,
            heard_from=user.heard_from,
        )


class FieldErrorResponse(BaseModel):
    """DTO for a single field violation"""
    field: str
    message: str
    location: str


class ValidationErrorResponse(BaseModel):
    """DTO for a 422 response body"""
    errors: List[FieldErrorResponse]


class ErrorResponse(BaseModel):
    """DTO for 404 / 500 response bodies"""
    error: str


class MessageResponse(BaseModel):
    """DTO for informational responses"""
    message: str
