"""
Shared pytest fixtures for crud_backend tests.
"""
import os
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from bson.errors import InvalidId

from crud_backend.domain.exceptions import UniquenessConflictError
from crud_backend.domain.models.user import User
from crud_backend.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """UserRepository fake with the same ID and uniqueness semantics as MongoDB."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self._clock = 0

    def _now(self) -> datetime:
        self._clock += 1
        return datetime(2025, 1, 1, 0, 0, self._clock % 60, tzinfo=timezone.utc)

    @staticmethod
    def _valid(user_id: str) -> bool:
        try:
            ObjectId(user_id)
        except (InvalidId, TypeError):
            return False
        return True

    def _email_taken(self, email: str, exclude_id: Optional[str] = None) -> bool:
        return any(u.email == email and u.id != exclude_id for u in self.users.values())

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_email_excluding_id(self, email: str, user_id: str) -> Optional[User]:
        return next(
            (u for u in self.users.values() if u.email == email and u.id != user_id),
            None,
        )

    async def insert(self, user: User) -> User:
        if self._email_taken(user.email):
            raise UniquenessConflictError("User with this email already exists.")
        now = self._now()
        stored = replace(user, id=str(ObjectId()), created_at=now, updated_at=now)
        self.users[stored.id] = stored
        return stored

    async def find_all(self) -> List[User]:
        return list(self.users.values())

    async def find_by_id(self, user_id: str) -> Optional[User]:
        if not self._valid(user_id):
            return None
        return self.users.get(user_id)

    async def update_by_id(self, user_id: str, user: User) -> Optional[User]:
        existing = await self.find_by_id(user_id)
        if existing is None:
            return None
        if self._email_taken(user.email, exclude_id=user_id):
            raise UniquenessConflictError("User with this email already exists.")
        updated = replace(
            existing,
            name=user.name,
            surname=user.surname,
            email=user.email,
            job_title=user.job_title,
            updated_at=self._now(),
        )
        self.users[user_id] = updated
        return updated

    async def delete_by_id(self, user_id: str) -> bool:
        if not self._valid(user_id):
            return False
        return self.users.pop(user_id, None) is not None


@pytest.fixture
def user_repo():
    """In-memory UserRepository."""
    return InMemoryUserRepository()


@pytest.fixture
def valid_payload():
    return {
        "name": "Ada",
        "surname": "Lovelace",
        "email": "ada@example.com",
        "jobTitle": "Engineer",
    }


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_crud_db",
        "USERS_COLLECTION": "crud",
        "PORT": "5050",
        "FRONTEND_ORIGIN": "http://localhost:3000",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.users_collection_name = "crud"
    mock.mongo_timeout_ms = 100
    mock.host = "127.0.0.1"
    mock.port = 5050
    mock.frontend_origin = "http://localhost:3000"
    mock.log_level = "INFO"

    with patch("crud_backend.core.config.get_settings", return_value=mock), patch(
        "crud_backend.main.get_settings", return_value=mock
    ):
        yield mock
