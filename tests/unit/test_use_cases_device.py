"""
Unit tests for device use cases (state default, reference checks against device models).
"""
import pytest

from device_catalog.application.errors import (
    DuplicateKeyError,
    EntityNotFoundError,
    PayloadValidationError,
    ReferentialIntegrityError,
)
from device_catalog.application.services.reference_checker import ReferenceChecker
from device_catalog.application.use_cases.device import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    ReplaceDeviceUseCase,
)
from device_catalog.domain.models.device import DeviceState
from device_catalog.domain.models.device_model import DeviceModel
from device_catalog.domain.models.device_type import DeviceType
from device_catalog.infrastructure.memory.in_memory_repositories import (
    InMemoryDeviceModelRepository,
    InMemoryDeviceRepository,
    InMemoryDeviceTypeRepository,
)


def _device_payload(mac_address="AA:BB:CC", model_name="sensorX", type_name="sensor", **extra):
    payload = {
        "macAddress": mac_address,
        "deviceModel": {"name": model_name, "deviceType": {"name": type_name}},
    }
    payload.update(extra)
    return payload


@pytest.fixture
def model_repo():
    return InMemoryDeviceModelRepository(
        [DeviceModel(name="sensorX", device_type=DeviceType(name="sensor"))]
    )


@pytest.fixture
def device_repo():
    return InMemoryDeviceRepository()


@pytest.fixture
def checker(model_repo):
    # the device type collection is deliberately empty: devices only check their model
    return ReferenceChecker(InMemoryDeviceTypeRepository(), model_repo)


@pytest.fixture
def create_use_case(model_repo, device_repo, checker):
    return CreateDeviceUseCase(model_repo, device_repo, checker)


class TestCreateDeviceUseCase:
    """Tests for CreateDeviceUseCase"""

    @pytest.mark.asyncio
    async def test_state_defaults_to_stock(self, create_use_case, device_repo):
        result = await create_use_case.execute(_device_payload())
        assert result.state == DeviceState.STOCK
        assert (await device_repo.find_by_key("AA:BB:CC")).state == DeviceState.STOCK

    @pytest.mark.asyncio
    async def test_explicit_state_kept(self, create_use_case):
        result = await create_use_case.execute(_device_payload(state="maintenance"))
        assert result.state == DeviceState.MAINTENANCE

    @pytest.mark.asyncio
    async def test_unknown_state_rejected(self, create_use_case, device_repo):
        with pytest.raises(PayloadValidationError):
            await create_use_case.execute(_device_payload(state="lost"))
        assert await device_repo.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_model_rejected(self, create_use_case, device_repo):
        with pytest.raises(ReferentialIntegrityError, match="Invalid device model"):
            await create_use_case.execute(_device_payload(model_name="ghostModel"))
        assert await device_repo.count() == 0

    @pytest.mark.asyncio
    async def test_embedded_type_not_rechecked(self, create_use_case):
        result = await create_use_case.execute(_device_payload(type_name="anything"))
        assert result.device_model.device_type.name == "anything"

    @pytest.mark.asyncio
    async def test_duplicate_mac_rejected_when_enforced(self, model_repo, device_repo, checker):
        use_case = CreateDeviceUseCase(model_repo, device_repo, checker, enforce_unique_keys=True)
        await use_case.execute(_device_payload())
        with pytest.raises(DuplicateKeyError, match="Device already exists"):
            await use_case.execute(_device_payload())
        assert await device_repo.count() == 1


class TestDeviceLifecycle:
    """Get / list / replace / delete against a populated repository"""

    @pytest.mark.asyncio
    async def test_replace_then_get(self, create_use_case, model_repo, device_repo, checker):
        await create_use_case.execute(_device_payload())
        replace = ReplaceDeviceUseCase(model_repo, device_repo, checker)
        await replace.execute("AA:BB:CC", _device_payload(state="installed"))

        result = await GetDeviceUseCase(device_repo).execute("AA:BB:CC")
        assert result.state == DeviceState.INSTALLED

    @pytest.mark.asyncio
    async def test_replace_unknown(self, model_repo, device_repo, checker):
        replace = ReplaceDeviceUseCase(model_repo, device_repo, checker)
        with pytest.raises(EntityNotFoundError, match="Device not found"):
            await replace.execute("FF:FF:FF", _device_payload(mac_address="FF:FF:FF"))
        assert await device_repo.count() == 0

    @pytest.mark.asyncio
    async def test_list_filtered_by_state(self, create_use_case, device_repo):
        await create_use_case.execute(_device_payload(mac_address="AA:AA:AA", state="installed"))
        await create_use_case.execute(_device_payload(mac_address="BB:BB:BB"))

        result = await ListDevicesUseCase(device_repo).execute({"state": "stock"})
        assert [item.mac_address for item in result] == ["BB:BB:BB"]

    @pytest.mark.asyncio
    async def test_delete_then_get_is_not_found(self, create_use_case, device_repo):
        await create_use_case.execute(_device_payload())
        result = await DeleteDeviceUseCase(device_repo).execute("AA:BB:CC")
        assert result.message == "Device deleted"
        with pytest.raises(EntityNotFoundError):
            await GetDeviceUseCase(device_repo).execute("AA:BB:CC")

    @pytest.mark.asyncio
    async def test_delete_unknown(self, device_repo):
        with pytest.raises(EntityNotFoundError):
            await DeleteDeviceUseCase(device_repo).execute("FF:FF:FF")
