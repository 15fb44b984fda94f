"""
Global fixtures for all unit tests.

This conftest provides autouse fixtures that prevent real external service calls:
- MongoDB connection attempts (MongoClient is replaced by a MagicMock)
- Environment variable isolation (prevents credential leakage)

These fixtures apply automatically to ALL tests in tests/unit/.
"""

import pytest
from unittest.mock import MagicMock, patch

from jobboard.config import get_settings


@pytest.fixture(autouse=True)
def mock_mongodb():
    """
    Prevent MongoDB connection attempts in all unit tests.

    Setup chain: client["db"]["collection"], with collection.name echoing
    the key it was looked up with.
    """
    with patch("jobboard.repositories.store.MongoClient") as mock_client:
        mock_instance = MagicMock()
        mock_db = MagicMock()
        collections = {}

        def get_collection(name):
            if name not in collections:
                collections[name] = MagicMock(name=f"collection:{name}")
                collections[name].name = name
            return collections[name]

        mock_instance.__getitem__ = MagicMock(return_value=mock_db)
        mock_db.__getitem__ = MagicMock(side_effect=get_collection)

        mock_client.return_value = mock_instance
        mock_client.collections = collections
        yield mock_client


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """
    Isolate test environment from real credentials and configurations.
    """
    monkeypatch.setenv("ENVIRONMENT", "development")
    for name in ("MONGODB_URI", "DB_USER", "DB_PASS", "DB_HOST", "MONGO_DB_NAME", "CLIENT_ORIGIN", "PORT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
