# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.user_dto import UserCreateRequest, UserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(
        self,
        user_repository: UserRepository,
    ) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserCreateRequest) -> UserResponse:
        """
        Insert a new user
        
        Args:
            request: Validated user creation request
            
        Returns:
            UserResponse with the created user, including its assigned ID
            
        Raises:
            RuntimeError: If the store write fails
        """
        new_user = User.from_fields(request.to_fields())
        saved_user = await self.user_repository.create(new_user)
        
        logger.info(f"Created user {saved_user.id}")
        return UserResponse.from_user(saved_user)
