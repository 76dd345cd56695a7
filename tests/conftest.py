"""
Global test fixtures for todolist-init.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor) with user administration commands
- Application credential factories
- Environment isolation for settings
"""

import sys
from pathlib import Path

import pytest
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import OperationFailure

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from todolist_init.models.credentials import AppCredentials  # noqa: E402


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

class AdminMockDatabase:
    """
    mongomock-motor database with the user administration commands added.

    mongomock has no createUser/usersInfo; those are answered here and fail
    on duplicates the way mongod does. Collection operations go to
    mongomock-motor. Every administrative call is recorded on the client.
    """

    def __init__(self, client: "AdminMockClient", name: str):
        self.client = client
        self.name = name
        self.database = client.mock_client[name]
        self.users: dict[str, dict] = {}

    def __getitem__(self, name):
        return self.database[name]

    async def command(self, command: str, value=1, **kwargs):
        self.client.calls.append((self.name, command, value))

        if command == "createUser":
            if value in self.users:
                raise OperationFailure(
                    f'User "{value}@{self.name}" already exists', code=51003
                )
            self.users[value] = {
                "user": value,
                "db": self.name,
                "pwd": kwargs["pwd"],
                "roles": kwargs["roles"],
            }
            return {"ok": 1.0}

        if command == "usersInfo":
            users = []
            if value in self.users:
                user = self.users[value]
                users.append({k: v for k, v in user.items() if k != "pwd"})
            return {"users": users, "ok": 1.0}

        return await self.database.command(command, value, **kwargs)

    async def create_collection(self, name: str, **kwargs):
        self.client.calls.append((self.name, "create", name))
        return await self.database.create_collection(name, **kwargs)

    async def list_collection_names(self, filter=None, **kwargs):
        self.client.calls.append((self.name, "listCollections", filter))
        return await self.database.list_collection_names(filter=filter, **kwargs)


class AdminMockClient:
    """AsyncMongoMockClient handing out AdminMockDatabase instances by name."""

    def __init__(self):
        self.mock_client = AsyncMongoMockClient()
        self.databases: dict[str, AdminMockDatabase] = {}
        self.calls: list[tuple] = []

    def __getitem__(self, name: str) -> AdminMockDatabase:
        if name not in self.databases:
            self.databases[name] = AdminMockDatabase(self, name)
        return self.databases[name]

    def close(self):
        self.mock_client.close()


@pytest.fixture
def mock_mongo_client():
    """
    Create a mock MongoDB server using mongomock-motor.

    Starts with no users and no collections.
    """
    client = AdminMockClient()
    yield client
    client.close()


# =============================================================================
# Credential Fixtures
# =============================================================================

@pytest.fixture
def app_credentials() -> AppCredentials:
    """Credentials of the application user."""
    return AppCredentials(username="alice", password="secret")


@pytest.fixture
def empty_credentials() -> AppCredentials:
    """Credentials as read from an environment with empty values."""
    return AppCredentials(username="", password="")


# =============================================================================
# Settings Fixtures
# =============================================================================

SETTINGS_ENV_VARS = [
    "MONGO_URI",
    "APP_USER",
    "APP_PASSWORD",
    "BOOTSTRAP_SKIP_EXISTING",
    "SERVER_SELECTION_TIMEOUT_MS",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the settings read from the process environment."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def app_env(clean_env):
    """Environment with the application credentials set."""
    clean_env.setenv("APP_USER", "alice")
    clean_env.setenv("APP_PASSWORD", "secret")
    return clean_env
