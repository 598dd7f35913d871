"""
Unit tests for the DI container and its providers.
"""
import os
from unittest.mock import patch

import pytest

from device_catalog.application.use_cases.device import CreateDeviceUseCase
from device_catalog.application.use_cases.device_type import (
    DeleteDeviceTypeUseCase,
    ListDeviceTypesUseCase,
)
from device_catalog.core.config import Settings
from device_catalog.di.base_container import BaseContainer
from device_catalog.di.container import DIContainer
from device_catalog.domain.repositories.device_type_repository import DeviceTypeRepository
from device_catalog.infrastructure.memory.entity_store import EntityStore


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_unknown_key_raises_value_error(self):
        with pytest.raises(ValueError, match="No registration found"):
            BaseContainer().get("missing")

    def test_factory_builds_new_instances(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_singleton_is_shared(self):
        container = BaseContainer()
        marker = object()
        container.register_singleton("thing", marker)
        assert container.get("thing") is marker


class TestDIContainer:
    """Tests for DIContainer wiring"""

    def test_store_repositories_are_shared(self, container):
        store = container.get(EntityStore)
        assert container.get(DeviceTypeRepository) is store.device_types
        use_case = container.get(ListDeviceTypesUseCase)
        assert use_case.device_type_repository is store.device_types

    @pytest.mark.asyncio
    async def test_seed_disabled_gives_empty_store(self, container):
        counts = await container.get(EntityStore).counts()
        assert set(counts.values()) == {0}

    @pytest.mark.asyncio
    async def test_seed_enabled_loads_sample_data(self, mock_env):
        with patch.dict(os.environ, {"CATALOG_SEED_DEFAULTS": "true"}):
            store = DIContainer(settings=Settings()).get(EntityStore)
        assert [item.name for item in await store.device_types.list_all()] == ["deviceType1", "deviceType2"]
        assert await store.device_models.count() == 2
        assert (await store.devices.find_by_key("macAddress1")).state.value == "installed"

    def test_flags_reach_use_cases(self, mock_env):
        flags = {"CATALOG_ENFORCE_UNIQUE_KEYS": "true", "CATALOG_PROTECT_REFERENCED": "yes"}
        with patch.dict(os.environ, flags):
            container = DIContainer(settings=Settings())
        assert container.get(CreateDeviceUseCase).enforce_unique_keys is True
        assert container.get(DeleteDeviceTypeUseCase).protect_referenced is True
