from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    def is_valid_id(self, user_id: str) -> bool:
        """Check whether user_id matches the store's identifier format"""
        pass
    
    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user; the store assigns the id"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def update(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """Merge fields into the stored user; None if it does not exist"""
        pass
    
    @abstractmethod
    async def delete(self, user_id: str) -> Optional[User]:
        """Remove the user and return it; None if it does not exist"""
        pass
