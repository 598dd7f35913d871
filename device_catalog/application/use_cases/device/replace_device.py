# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_model_repository import DeviceModelRepository
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse
from ...errors import EntityNotFoundError
from ...services.key_guard import ensure_key_available
from ...services.reference_checker import ReferenceChecker
from ...validation.payload_validator import validate_device

logger = logging.getLogger(__name__)


class ReplaceDeviceUseCase:
    """Use case for replacing a device by MAC address"""

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

    async def execute(self, mac_address: str, payload: Any) -> DeviceResponse:
        """
        Replace the first device with ``mac_address`` with the payload

        Raises:
            PayloadValidationError: If the payload does not match the schema
            ReferentialIntegrityError: If deviceModel.name is not a stored device model
            EntityNotFoundError: If no device has this MAC address
            DuplicateKeyError: If unique keys are enforced and the new MAC address is taken
        """
        device = validate_device(payload).to_entity()

        async with self.device_model_repository.lock, self.device_repository.lock:
            await self.reference_checker.ensure_device_model_exists(device.device_model.name)

            if (
                self.enforce_unique_keys
                and device.mac_address != mac_address
                and await self.device_repository.find_by_key(mac_address) is not None
            ):
                await ensure_key_available(self.device_repository, CatalogKind.DEVICE, device.mac_address)

            replaced = await self.device_repository.replace(mac_address, device)

        if replaced is None:
            raise EntityNotFoundError(CatalogKind.DEVICE, mac_address)

        logger.info(f"Replaced device '{mac_address}' with '{replaced.mac_address}'")
        return DeviceResponse.from_entity(replaced)
