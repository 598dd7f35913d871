# Standard library imports
import logging

# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_model_repository import DeviceModelRepository
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.message_dto import MessageResponse
from ...errors import EntityInUseError, EntityNotFoundError

logger = logging.getLogger(__name__)


class DeleteDeviceModelUseCase:
    """Use case for deleting a device model by name"""

    def __init__(
        self,
        device_model_repository: DeviceModelRepository,
        device_repository: DeviceRepository,
        protect_referenced: bool = False,
    ) -> None:
        self.device_model_repository = device_model_repository
        self.device_repository = device_repository
        self.protect_referenced = protect_referenced

    async def execute(self, name: str) -> MessageResponse:
        """
        Delete the first device model named ``name``

        Raises:
            EntityNotFoundError: If no device model has this name
            EntityInUseError: If protected and a device still embeds it
        """
        async with self.device_model_repository.lock, self.device_repository.lock:
            if await self.device_model_repository.find_by_key(name) is None:
                raise EntityNotFoundError(CatalogKind.DEVICE_MODEL, name)

            if self.protect_referenced and await self.device_repository.find_by_device_model(name):
                raise EntityInUseError(CatalogKind.DEVICE_MODEL, name)

            await self.device_model_repository.delete(name)

        logger.info(f"Deleted device model '{name}'")
        return MessageResponse(message=f"{CatalogKind.DEVICE_MODEL.label} deleted")
