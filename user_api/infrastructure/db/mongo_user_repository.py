# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
    
    def is_valid_id(self, user_id: str) -> bool:
        """ObjectId hex strings only; 12-byte raw strings are not accepted over HTTP"""
        return isinstance(user_id, str) and len(user_id) == 24 and ObjectId.is_valid(user_id)
    
    async def create(self, user: User) -> User:
        """
        Insert a new user document
        
        Args:
            user: User domain model without an id
            
        Returns:
            Created User domain model with the store-assigned ID set
        """
        if not user:
            raise ValueError("User cannot be None")
        
        try:
            user_dict = self._user_to_dict(user)
            result = await self.user_collection.insert_one(user_dict)
            
            # Fetch and return the newly created document
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("User was created but could not be retrieved")
            
            return self._document_to_user(new_document)
        except RuntimeError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error creating user: {str(e)}")
    
    async def find_all(self) -> List[User]:
        """Return all users in insertion order"""
        try:
            cursor = self.user_collection.find({})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error listing users: {str(e)}")
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
    
    async def update(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """
        Merge fields into an existing user document
        
        Args:
            user_id: ID of the user to update
            fields: camelCase fields to set; other fields are left untouched
            
        Returns:
            Updated User domain model, None if no user has this ID
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return None
        
        # $set with an empty document is rejected by the server
        update_fields = {k: v for k, v in fields.items() if k in UserFields.WRITABLE}
        if not update_fields:
            return await self.find_by_id(user_id)
        
        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": update_fields},
                return_document=ReturnDocument.AFTER,
            )
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error updating user: {str(e)}")
    
    async def delete(self, user_id: str) -> Optional[User]:
        """
        Delete a user document
        
        Args:
            user_id: ID of the user to delete
            
        Returns:
            The deleted User domain model, None if no user has this ID
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one_and_delete({UserFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}")
    
    def _to_object_id(self, user_id: str) -> Optional[ObjectId]:
        if not self.is_valid_id(user_id):
            return None
        try:
            return ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None
    
    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User.from_fields(document, user_id=str(document[UserFields.MONGO_ID]))
    
    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document
        
        The _id is never written here; MongoDB assigns it on insert.
        """
        if not user:
            raise ValueError("User cannot be None")
        
        return user.to_fields()
