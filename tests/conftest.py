"""
Shared pytest fixtures for user_api tests.
"""
import copy
import os
from typing import Any, Dict, List, Optional
from unittest.mock import patch

import pytest
from bson import ObjectId

from user_api.di.base_container import BaseContainer
from user_api.di.providers.user_provider import UserProvider
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a dict; records every store call in `calls`."""

    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.calls: List[str] = []

    def is_valid_id(self, user_id: str) -> bool:
        return isinstance(user_id, str) and len(user_id) == 24 and ObjectId.is_valid(user_id)

    async def create(self, user: User) -> User:
        self.calls.append("create")
        user_id = str(ObjectId())
        self.documents[user_id] = copy.deepcopy(user.to_fields())
        return User.from_fields(self.documents[user_id], user_id=user_id)

    async def find_all(self) -> List[User]:
        self.calls.append("find_all")
        return [User.from_fields(doc, user_id=user_id) for user_id, doc in self.documents.items()]

    async def find_by_id(self, user_id: str) -> Optional[User]:
        self.calls.append("find_by_id")
        document = self.documents.get(user_id)
        return User.from_fields(document, user_id=user_id) if document is not None else None

    async def update(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        self.calls.append("update")
        document = self.documents.get(user_id)
        if document is None:
            return None
        document.update(copy.deepcopy(fields))
        return User.from_fields(document, user_id=user_id)

    async def delete(self, user_id: str) -> Optional[User]:
        self.calls.append("delete")
        document = self.documents.pop(user_id, None)
        return User.from_fields(document, user_id=user_id) if document is not None else None


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_registry",
        "PORT": "3100",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def valid_user_payload():
    """A request body that passes create validation."""
    return {
        "firstName": "A",
        "lastName": "B",
        "ageGroup": "18-24",
        "gender": "Other",
        "hasLaptop": True,
        "bio": "I like computers",
        "heardFrom": ["friend"],
    }


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def container(user_repository):
    """Container wired like DIContainer but with the in-memory repository."""
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    UserProvider.register(container)
    return container
