# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_model_repository import DeviceModelRepository
from ....domain.repositories.device_type_repository import DeviceTypeRepository
from ...dto.device_model_dto import DeviceModelResponse
from ...errors import EntityNotFoundError
from ...services.key_guard import ensure_key_available
from ...services.reference_checker import ReferenceChecker
from ...validation.payload_validator import validate_device_model

logger = logging.getLogger(__name__)


class ReplaceDeviceModelUseCase:
    """Use case for replacing a device model by name"""

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

    async def execute(self, name: str, payload: Any) -> DeviceModelResponse:
        """
        Replace the first device model named ``name`` with the payload

        Checks run in order: payload schema, referenced device type, then the
        replacement itself (404 when the name is unknown).

        Raises:
            PayloadValidationError: If the payload does not match the schema
            ReferentialIntegrityError: If deviceType.name is not a stored device type
            EntityNotFoundError: If no device model has this name
            DuplicateKeyError: If unique keys are enforced and the new name is taken
        """
        device_model = validate_device_model(payload).to_entity()

        async with self.device_type_repository.lock, self.device_model_repository.lock:
            await self.reference_checker.ensure_device_type_exists(device_model.device_type.name)

            if (
                self.enforce_unique_keys
                and device_model.name != name
                and await self.device_model_repository.find_by_key(name) is not None
            ):
                await ensure_key_available(self.device_model_repository, CatalogKind.DEVICE_MODEL, device_model.name)

            replaced = await self.device_model_repository.replace(name, device_model)

        if replaced is None:
            raise EntityNotFoundError(CatalogKind.DEVICE_MODEL, name)

        logger.info(f"Replaced device model '{name}' with '{replaced.name}'")
        return DeviceModelResponse.from_entity(replaced)
