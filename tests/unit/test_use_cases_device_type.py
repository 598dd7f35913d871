"""
Unit tests for device type use cases.
"""
from unittest.mock import AsyncMock

import pytest

from device_catalog.application.errors import (
    DuplicateKeyError,
    EntityInUseError,
    EntityNotFoundError,
    PayloadValidationError,
)
from device_catalog.application.use_cases.device_type import (
    CreateDeviceTypeUseCase,
    DeleteDeviceTypeUseCase,
    GetDeviceTypeUseCase,
    ListDeviceTypesUseCase,
    ReplaceDeviceTypeUseCase,
)
from device_catalog.domain.models.device_model import DeviceModel
from device_catalog.domain.models.device_type import DeviceType
from device_catalog.infrastructure.memory.in_memory_repositories import (
    InMemoryDeviceModelRepository,
    InMemoryDeviceTypeRepository,
)


@pytest.fixture
def type_repo():
    return InMemoryDeviceTypeRepository([DeviceType(name="sensor"), DeviceType(name="gateway")])


@pytest.fixture
def model_repo():
    return InMemoryDeviceModelRepository(
        [DeviceModel(name="sensorX", device_type=DeviceType(name="sensor"))]
    )


class TestListDeviceTypesUseCase:
    """Tests for ListDeviceTypesUseCase"""

    @pytest.mark.asyncio
    async def test_list_empty(self):
        repo = AsyncMock()
        repo.list_all.return_value = []
        use_case = ListDeviceTypesUseCase(repo)
        result = await use_case.execute()
        assert result == []

    @pytest.mark.asyncio
    async def test_list_passes_filters(self):
        repo = AsyncMock()
        repo.list_all.return_value = [DeviceType(name="sensor")]
        use_case = ListDeviceTypesUseCase(repo)
        result = await use_case.execute({"name": "sensor"})
        repo.list_all.assert_awaited_once_with({"name": "sensor"})
        assert [item.name for item in result] == ["sensor"]


class TestGetDeviceTypeUseCase:
    """Tests for GetDeviceTypeUseCase"""

    @pytest.mark.asyncio
    async def test_get_found(self):
        repo = AsyncMock()
        repo.find_by_key.return_value = DeviceType(name="sensor")
        result = await GetDeviceTypeUseCase(repo).execute("sensor")
        assert result.name == "sensor"

    @pytest.mark.asyncio
    async def test_get_not_found_raises(self):
        repo = AsyncMock()
        repo.find_by_key.return_value = None
        with pytest.raises(EntityNotFoundError, match="Device type not found"):
            await GetDeviceTypeUseCase(repo).execute("missing")


class TestCreateDeviceTypeUseCase:
    """Tests for CreateDeviceTypeUseCase"""

    @pytest.mark.asyncio
    async def test_create_appends(self, type_repo):
        result = await CreateDeviceTypeUseCase(type_repo).execute({"name": "camera"})
        assert result.name == "camera"
        assert [item.name for item in await type_repo.list_all()] == ["sensor", "gateway", "camera"]

    @pytest.mark.asyncio
    async def test_invalid_payload_leaves_store_untouched(self, type_repo):
        with pytest.raises(PayloadValidationError):
            await CreateDeviceTypeUseCase(type_repo).execute({"name": "ab"})
        assert await type_repo.count() == 2

    @pytest.mark.asyncio
    async def test_duplicate_allowed_by_default(self, type_repo):
        await CreateDeviceTypeUseCase(type_repo).execute({"name": "sensor"})
        assert await type_repo.count() == 3

    @pytest.mark.asyncio
    async def test_duplicate_rejected_when_enforced(self, type_repo):
        use_case = CreateDeviceTypeUseCase(type_repo, enforce_unique_keys=True)
        with pytest.raises(DuplicateKeyError, match="Device type already exists"):
            await use_case.execute({"name": "sensor"})
        assert await type_repo.count() == 2


class TestReplaceDeviceTypeUseCase:
    """Tests for ReplaceDeviceTypeUseCase"""

    @pytest.mark.asyncio
    async def test_replace_renames_in_place(self, type_repo):
        result = await ReplaceDeviceTypeUseCase(type_repo).execute("sensor", {"name": "probe"})
        assert result.name == "probe"
        assert [item.name for item in await type_repo.list_all()] == ["probe", "gateway"]

    @pytest.mark.asyncio
    async def test_replace_unknown_raises_not_found(self, type_repo):
        with pytest.raises(EntityNotFoundError):
            await ReplaceDeviceTypeUseCase(type_repo).execute("missing", {"name": "probe"})
        assert [item.name for item in await type_repo.list_all()] == ["sensor", "gateway"]

    @pytest.mark.asyncio
    async def test_validation_runs_before_lookup(self, type_repo):
        with pytest.raises(PayloadValidationError):
            await ReplaceDeviceTypeUseCase(type_repo).execute("missing", {})

    @pytest.mark.asyncio
    async def test_replace_does_not_touch_embedded_copies(self, type_repo, model_repo):
        await ReplaceDeviceTypeUseCase(type_repo).execute("sensor", {"name": "probe"})
        model = await model_repo.find_by_key("sensorX")
        assert model.device_type.name == "sensor"

    @pytest.mark.asyncio
    async def test_rename_onto_taken_name_rejected_when_enforced(self, type_repo):
        use_case = ReplaceDeviceTypeUseCase(type_repo, enforce_unique_keys=True)
        with pytest.raises(DuplicateKeyError):
            await use_case.execute("sensor", {"name": "gateway"})

    @pytest.mark.asyncio
    async def test_same_name_replace_allowed_when_enforced(self, type_repo):
        use_case = ReplaceDeviceTypeUseCase(type_repo, enforce_unique_keys=True)
        result = await use_case.execute("sensor", {"name": "sensor"})
        assert result.name == "sensor"


class TestDeleteDeviceTypeUseCase:
    """Tests for DeleteDeviceTypeUseCase"""

    @pytest.mark.asyncio
    async def test_delete_existing(self, type_repo, model_repo):
        result = await DeleteDeviceTypeUseCase(type_repo, model_repo).execute("gateway")
        assert result.message == "Device type deleted"
        assert await type_repo.find_by_key("gateway") is None

    @pytest.mark.asyncio
    async def test_delete_unknown_raises(self, type_repo, model_repo):
        with pytest.raises(EntityNotFoundError):
            await DeleteDeviceTypeUseCase(type_repo, model_repo).execute("missing")
        assert await type_repo.count() == 2

    @pytest.mark.asyncio
    async def test_delete_referenced_type_does_not_cascade(self, type_repo, model_repo):
        await DeleteDeviceTypeUseCase(type_repo, model_repo).execute("sensor")
        assert await type_repo.find_by_key("sensor") is None
        assert await model_repo.find_by_key("sensorX") is not None

    @pytest.mark.asyncio
    async def test_delete_referenced_type_blocked_when_protected(self, type_repo, model_repo):
        use_case = DeleteDeviceTypeUseCase(type_repo, model_repo, protect_referenced=True)
        with pytest.raises(EntityInUseError, match="Device type is in use"):
            await use_case.execute("sensor")
        assert await type_repo.find_by_key("sensor") is not None
