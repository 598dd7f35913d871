# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_model_repository import DeviceModelRepository
from ....domain.repositories.device_type_repository import DeviceTypeRepository
from ...dto.device_model_dto import DeviceModelResponse
from ...services.key_guard import ensure_key_available
from ...services.reference_checker import ReferenceChecker
from ...validation.payload_validator import validate_device_model

logger = logging.getLogger(__name__)


class CreateDeviceModelUseCase:
    """Use case for creating a new device model"""

    def __init__(
        self,
        device_type_repository: DeviceTypeRepository,
        device_model_repository: DeviceModelRepository,
        reference_checker: ReferenceChecker,
        enforce_unique_keys: bool = False,
    ) -> None:
        self.device_type_repository = device_type_repository
        self.device_model_repository = device_model_repository
        self.reference_checker = reference_checker
        self.enforce_unique_keys = enforce_unique_keys

    async def execute(self, payload: Any) -> DeviceModelResponse:
        """
        Create a new device model

        Args:
            payload: Raw decoded request body

        Returns:
            DeviceModelResponse with the stored device model

        Raises:
            PayloadValidationError: If the payload does not match the schema
            ReferentialIntegrityError: If deviceType.name is not a stored device type
            DuplicateKeyError: If unique keys are enforced and the name is taken
        """
        device_model = validate_device_model(payload).to_entity()

        # Hold the device type lock so the referenced type cannot vanish before the insert
        async with self.device_type_repository.lock, self.device_model_repository.lock:
            await self.reference_checker.ensure_device_type_exists(device_model.device_type.name)
            if self.enforce_unique_keys:
                await ensure_key_available(self.device_model_repository, CatalogKind.DEVICE_MODEL, device_model.name)
            saved_device_model = await self.device_model_repository.add(device_model)

        logger.info(
            f"Created device model '{saved_device_model.name}' "
            f"of type '{saved_device_model.device_type.name}'"
        )
        return DeviceModelResponse.from_entity(saved_device_model)
