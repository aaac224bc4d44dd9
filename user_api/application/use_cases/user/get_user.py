# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from ...exceptions import UserNotFoundError, UserValidationError
from ...validation.user_validation import validate_user_id


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(
        self,
        user_repository: UserRepository,
    ) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> UserResponse:
        """
        Get a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            UserResponse with user information
            
        Raises:
            UserValidationError: If the ID is not in the store's format
            UserNotFoundError: If no user has this ID
        """
        violations = validate_user_id(user_id, self.user_repository.is_valid_id)
        if violations:
            raise UserValidationError(violations)
        
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        
        return UserResponse.from_user(user)
