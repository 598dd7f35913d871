"""
Shared pytest fixtures for device catalog tests.
"""
import os
from unittest.mock import patch

import pytest

from device_catalog.core.config import Settings
from device_catalog.di.container import DIContainer
from device_catalog.infrastructure.memory.entity_store import EntityStore


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables (empty catalog, literal behaviour)."""
    env_vars = {
        "LOG_LEVEL": "WARNING",
        "CATALOG_SEED_DEFAULTS": "false",
        "CATALOG_ENFORCE_UNIQUE_KEYS": "false",
        "CATALOG_PROTECT_REFERENCED": "false",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def settings(mock_env):
    return Settings()


@pytest.fixture
def container(settings):
    """Fresh container (and entity store) per test."""
    return DIContainer(settings=settings)


@pytest.fixture
def store(container):
    return container.get(EntityStore)


@pytest.fixture
def client(container, monkeypatch):
    """TestClient wired to the per-test container."""
    from fastapi.testclient import TestClient
    from device_catalog.main import app

    monkeypatch.setattr("device_catalog.di.container._container", container)
    with TestClient(app) as c:
        yield c
