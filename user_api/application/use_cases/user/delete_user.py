# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...exceptions import UserNotFoundError, UserValidationError
from ...validation.user_validation import validate_user_id

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user"""
    
    def __init__(
        self,
        user_repository: UserRepository,
    ) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> None:
        """
        Delete a user by ID
        
        Raises:
            UserValidationError: If the ID is not in the store's format
            UserNotFoundError: If no user has this ID
            RuntimeError: If the store write fails
        """
        violations = validate_user_id(user_id, self.user_repository.is_valid_id)
        if violations:
            raise UserValidationError(violations)
        
        deleted_user = await self.user_repository.delete(user_id)
        if not deleted_user:
            raise UserNotFoundError(user_id)
        
        logger.info(f"User {user_id} deleted successfully")
