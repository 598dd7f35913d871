# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_type_repository import DeviceTypeRepository
from ...dto.device_type_dto import DeviceTypeResponse
from ...services.key_guard import ensure_key_available
from ...validation.payload_validator import validate_device_type

logger = logging.getLogger(__name__)


class CreateDeviceTypeUseCase:
    """Use case for creating a new device type"""

    def __init__(
        self,
        device_type_repository: DeviceTypeRepository,
        enforce_unique_keys: bool = False,
    ) -> None:
        self.device_type_repository = device_type_repository
        self.enforce_unique_keys = enforce_unique_keys

    async def execute(self, payload: Any) -> DeviceTypeResponse:
        """
        Create a new device type

        Args:
            payload: Raw decoded request body

        Returns:
            DeviceTypeResponse with the stored device type

        Raises:
            PayloadValidationError: If the payload does not match the schema
            DuplicateKeyError: If unique keys are enforced and the name is taken
        """
        device_type = validate_device_type(payload).to_entity()

        async with self.device_type_repository.lock:
            if self.enforce_unique_keys:
                await ensure_key_available(self.device_type_repository, CatalogKind.DEVICE_TYPE, device_type.name)
            saved_device_type = await self.device_type_repository.add(device_type)

        logger.info(f"Created device type '{saved_device_type.name}'")
        return DeviceTypeResponse.from_entity(saved_device_type)
