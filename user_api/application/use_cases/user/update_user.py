# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse, UserUpdateRequest
from ...exceptions import UserNotFoundError, UserValidationError
from ...validation.user_validation import validate_user_id

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for merge-updating a user"""
    
    def __init__(
        self,
        user_repository: UserRepository,
    ) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: UserUpdateRequest) -> UserResponse:
        """
        Update only the fields present in the request body
        
        Args:
            user_id: ID of the user
            request: Validated partial user record
            
        Returns:
            UserResponse with the record as it is after the update
            
        Raises:
            UserValidationError: If the ID is not in the store's format
            UserNotFoundError: If no user has this ID
            RuntimeError: If the store write fails
        """
        violations = validate_user_id(user_id, self.user_repository.is_valid_id)
        if violations:
            raise UserValidationError(violations)
        
        fields = request.to_fields()
        updated_user = await self.user_repository.update(user_id, fields)
        if not updated_user:
            raise UserNotFoundError(user_id)
        
        logger.info(f"Updated user {user_id}: {sorted(fields)}")
        return UserResponse.from_user(updated_user)
