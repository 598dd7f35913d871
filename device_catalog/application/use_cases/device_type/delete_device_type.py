# Standard library imports
import logging

# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_model_repository import DeviceModelRepository
from ....domain.repositories.device_type_repository import DeviceTypeRepository
from ...dto.message_dto import MessageResponse
from ...errors import EntityInUseError, EntityNotFoundError

logger = logging.getLogger(__name__)


class DeleteDeviceTypeUseCase:
    """Use case for deleting a device type by name"""

    def __init__(
        self,
        device_type_repository: DeviceTypeRepository,
        device_model_repository: DeviceModelRepository,
        protect_referenced: bool = False,
    ) -> None:
        self.device_type_repository = device_type_repository
        self.device_model_repository = device_model_repository
        self.protect_referenced = protect_referenced

    async def execute(self, name: str) -> MessageResponse:
        """
        Delete the first device type named ``name``

        Models embedding the type are left untouched (no cascade). With
        ``protect_referenced`` the delete is refused while such models exist.

        Raises:
            EntityNotFoundError: If no device type has this name
            EntityInUseError: If protected and a device model still embeds it
        """
        async with self.device_type_repository.lock, self.device_model_repository.lock:
            if await self.device_type_repository.find_by_key(name) is None:
                raise EntityNotFoundError(CatalogKind.DEVICE_TYPE, name)

            if self.protect_referenced and await self.device_model_repository.find_by_device_type(name):
                raise EntityInUseError(CatalogKind.DEVICE_TYPE, name)

            await self.device_type_repository.delete(name)

        logger.info(f"Deleted device type '{name}'")
        return MessageResponse(message=f"{CatalogKind.DEVICE_TYPE.label} deleted")
