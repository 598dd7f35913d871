# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse
from ...errors import EntityNotFoundError


class GetDeviceUseCase:
    """Use case for getting a device by MAC address"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(self, mac_address: str) -> DeviceResponse:
        """
        Get a device by MAC address

        Raises:
            EntityNotFoundError: If no device has this MAC address
        """
        device = await self.device_repository.find_by_key(mac_address)
        if device is None:
            raise EntityNotFoundError(CatalogKind.DEVICE, mac_address)

        return DeviceResponse.from_entity(device)
