# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_type_repository import DeviceTypeRepository
from ...dto.device_type_dto import DeviceTypeResponse
from ...errors import EntityNotFoundError
from ...services.key_guard import ensure_key_available
from ...validation.payload_validator import validate_device_type

logger = logging.getLogger(__name__)


class ReplaceDeviceTypeUseCase:
    """Use case for replacing a device type by name"""

    def __init__(
        self,
        device_type_repository: DeviceTypeRepository,
        enforce_unique_keys: bool = False,
    ) -> None:
        self.device_type_repository = device_type_repository
        self.enforce_unique_keys = enforce_unique_keys

    async def execute(self, name: str, payload: Any) -> DeviceTypeResponse:
        """
        Replace the first device type named ``name`` with the payload

        Device types reference nothing, so no reference check is made. Models
        that embedded the old type keep their copy.

        Raises:
            PayloadValidationError: If the payload does not match the schema
            EntityNotFoundError: If no device type has this name
            DuplicateKeyError: If unique keys are enforced and the new name is taken
        """
        device_type = validate_device_type(payload).to_entity()

        async with self.device_type_repository.lock:
            if (
                self.enforce_unique_keys
                and device_type.name != name
                and await self.device_type_repository.find_by_key(name) is not None
            ):
                await ensure_key_available(self.device_type_repository, CatalogKind.DEVICE_TYPE, device_type.name)

            replaced = await self.device_type_repository.replace(name, device_type)

        if replaced is None:
            raise EntityNotFoundError(CatalogKind.DEVICE_TYPE, name)

        logger.info(f"Replaced device type '{name}' with '{replaced.name}'")
        return DeviceTypeResponse.from_entity(replaced)
