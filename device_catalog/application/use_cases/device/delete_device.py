# Standard library imports
import logging

# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.message_dto import MessageResponse
from ...errors import EntityNotFoundError

logger = logging.getLogger(__name__)


class DeleteDeviceUseCase:
    """Use case for deleting a device by MAC address"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(self, mac_address: str) -> MessageResponse:
        """
        Delete the first device with ``mac_address``

        Raises:
            EntityNotFoundError: If no device has this MAC address
        """
        async with self.device_repository.lock:
            deleted = await self.device_repository.delete(mac_address)

        if not deleted:
            raise EntityNotFoundError(CatalogKind.DEVICE, mac_address)

        logger.info(f"Deleted device '{mac_address}'")
        return MessageResponse(message=f"{CatalogKind.DEVICE.label} deleted")
