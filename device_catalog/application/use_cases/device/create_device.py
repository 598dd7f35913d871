# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_model_repository import DeviceModelRepository
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse
from ...services.key_guard import ensure_key_available
from ...services.reference_checker import ReferenceChecker
from ...validation.payload_validator import validate_device

logger = logging.getLogger(__name__)


class CreateDeviceUseCase:
    """Use case for creating a new device"""

    def __init__(
        self,
        device_model_repository: DeviceModelRepository,
        device_repository: DeviceRepository,
        reference_checker: ReferenceChecker,
        enforce_unique_keys: bool = False,
    ) -> None:
        self.device_model_repository = device_model_repository
        self.device_repository = device_repository
        self.reference_checker = reference_checker
        self.enforce_unique_keys = enforce_unique_keys

    async def execute(self, payload: Any) -> DeviceResponse:
        """
        Create a new device

        Only ``deviceModel.name`` is checked against stored models; the
        embedded ``deviceModel.deviceType`` is kept as sent.

        Args:
            payload: Raw decoded request body

        Returns:
            DeviceResponse with the stored device (state defaults to "stock")

        Raises:
            PayloadValidationError: If the payload does not match the schema
            ReferentialIntegrityError: If deviceModel.name is not a stored device model
            DuplicateKeyError: If unique keys are enforced and the MAC address is taken
        """
        device = validate_device(payload).to_entity()

        async with self.device_model_repository.lock, self.device_repository.lock:
            await self.reference_checker.ensure_device_model_exists(device.device_model.name)
            if self.enforce_unique_keys:
                await ensure_key_available(self.device_repository, CatalogKind.DEVICE, device.mac_address)
            saved_device = await self.device_repository.add(device)

        logger.info(
            f"Created device '{saved_device.mac_address}' "
            f"({saved_device.state.value}) of model '{saved_device.device_model.name}'"
        )
        return DeviceResponse.from_entity(saved_device)
