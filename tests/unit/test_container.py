"""
Unit tests for the DI container and MongoConnection lifecycle.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from crud_backend.application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from crud_backend.di.base_container import BaseContainer
from crud_backend.di.container import DIContainer
from crud_backend.domain.exceptions import PersistenceError
from crud_backend.domain.repositories.user_repository import UserRepository
from crud_backend.infrastructure.db.mongo_connection import MongoConnection
from crud_backend.infrastructure.db.mongo_user_repository import MongoUserRepository


class TestBaseContainer:

    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_called_per_get(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_unknown_key_raises_value_error(self):
        with pytest.raises(ValueError, match="No dependency registered"):
            BaseContainer().get(UserRepository)


class TestDIContainer:

    def test_wires_repository_and_use_cases(self):
        connection = MagicMock(spec=MongoConnection)
        container = DIContainer(connection)

        repository = container.get(UserRepository)
        assert isinstance(repository, MongoUserRepository)
        assert repository.user_collection is connection.get_user_collection.return_value

        for use_case_type in (
            CreateUserUseCase,
            ListUsersUseCase,
            GetUserUseCase,
            UpdateUserUseCase,
            DeleteUserUseCase,
        ):
            use_case = container.get(use_case_type)
            assert isinstance(use_case, use_case_type)
            assert use_case.user_repository is repository


class TestMongoConnection:

    @pytest.mark.asyncio
    async def test_connect_pings_and_exposes_collection(self):
        with patch("crud_backend.infrastructure.db.mongo_connection.AsyncIOMotorClient") as client_cls:
            client = client_cls.return_value
            client.admin.command = AsyncMock(return_value={"ok": 1})

            connection = MongoConnection("mongodb://db:27017", "crud_app", "crud", timeout_ms=500)
            await connection.connect()

            client.admin.command.assert_awaited_once_with("ping")
            assert client_cls.call_args.kwargs["serverSelectionTimeoutMS"] == 500
            connection.get_user_collection()
            client.__getitem__.return_value.__getitem__.assert_called_with("crud")

            connection.close()
            client.close.assert_called_once()
            with pytest.raises(RuntimeError):
                connection.get_user_collection()

    @pytest.mark.asyncio
    async def test_connect_failure_raises_persistence_error(self):
        with patch("crud_backend.infrastructure.db.mongo_connection.AsyncIOMotorClient") as client_cls:
            client = client_cls.return_value
            client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("refused"))

            connection = MongoConnection("mongodb://db:27017", "crud_app")
            with pytest.raises(PersistenceError, match="Failed to connect"):
                await connection.connect()
            client.close.assert_called_once()
            with pytest.raises(RuntimeError):
                connection.get_user_collection()

    @pytest.mark.asyncio
    async def test_empty_uri_rejected(self):
        with pytest.raises(PersistenceError, match="MONGO_URI"):
            await MongoConnection("", "crud_app").connect()

    def test_use_before_connect_raises(self):
        with pytest.raises(RuntimeError):
            MongoConnection("mongodb://db:27017", "crud_app").get_user_collection()
