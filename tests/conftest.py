"""Pytest configuration and shared test fixtures.

All database fixtures use SQLite, in memory unless a test needs a file
that outlives the session manager.
"""

import sys
from unittest.mock import MagicMock

import pytest
from cryptography.fernet import Fernet

from relay_config.database import SessionManager, init_database
from relay_config.services import SecretCipher
from relay_config.share import ConfigurationController, SettingsStore


@pytest.fixture(scope="session")
def test_db_config():
    """Database configuration for testing (SQLite in-memory)."""
    return "sqlite:///:memory:"


@pytest.fixture(scope="function")
def session_manager(test_db_config):
    """Provide a session manager with all tables created."""
    manager = SessionManager(connection_string=test_db_config)
    init_database(manager)

    try:
        yield manager
    finally:
        manager.close()


@pytest.fixture(scope="function")
def db_session(session_manager):
    """Provide a database session on the in-memory database."""
    with session_manager.session() as session:
        yield session


@pytest.fixture
def secret_key():
    return Fernet.generate_key()


@pytest.fixture
def cipher(secret_key):
    return SecretCipher(secret_key)


@pytest.fixture
def store(session_manager, cipher):
    """A settings store loaded from an empty database."""
    settings_store = SettingsStore(session_manager, cipher)
    settings_store.load()
    return settings_store


@pytest.fixture
def relay():
    """A relay bootstrapper mock."""
    return MagicMock()


@pytest.fixture
def controller(store, relay):
    return ConfigurationController(store, relay)


@pytest.fixture
def valid_submission():
    """A complete configuration form as the UI submits it."""
    return {
        "connectionFactory": {
            "url": "https://teamforge.example.com",
            "username": "admin",
            "password": "tf-secret",
        },
        "actionHubMqHost": "mq.example.com",
        "actionHubMqPort": 5672,
        "actionHubMqUsername": "u",
        "actionHubMqPassword": "p",
        "actionHubMqExchange": "ex",
        "actionHubMqWorkflowQueue": "wf",
        "actionHubMqActionsQueue": "act",
        "actionHubMsgIncludeRadio": "selected",
        "actionHubMsgManual": True,
        "actionHubMsgWorkitem": False,
        "actionHubMsgCommit": True,
        "actionHubMsgBuild": True,
        "actionHubMsgReview": False,
        "actionHubMsgCustom": True,
        "actionHubMsgCustomTxt": "deploy, release",
    }


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Configure logging for tests."""
    from loguru import logger

    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )

    yield

    logger.remove()
