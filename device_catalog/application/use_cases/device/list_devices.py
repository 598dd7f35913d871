# Standard library imports
from typing import List, Mapping, Optional

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse


class ListDevicesUseCase:
    """Use case for listing devices"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(
        self,
        filters: Optional[Mapping[str, str]] = None,
    ) -> List[DeviceResponse]:
        """
        List devices in insertion order

        Args:
            filters: Optional equality filters (macAddress, state, deviceModel.name)

        Returns:
            List of DeviceResponse objects (possibly empty)
        """
        devices = await self.device_repository.list_all(filters)
        return [DeviceResponse.from_entity(device) for device in devices]
