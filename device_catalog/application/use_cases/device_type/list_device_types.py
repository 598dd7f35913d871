# Standard library imports
from typing import List, Mapping, Optional

# Local application imports
from ....domain.repositories.device_type_repository import DeviceTypeRepository
from ...dto.device_type_dto import DeviceTypeResponse


class ListDeviceTypesUseCase:
    """Use case for listing device types"""

    def __init__(
        self,
        device_type_repository: DeviceTypeRepository,
    ) -> None:
        self.device_type_repository = device_type_repository

    async def execute(
        self,
        filters: Optional[Mapping[str, str]] = None,
    ) -> List[DeviceTypeResponse]:
        """
        List device types in insertion order

        Args:
            filters: Optional field name -> expected value equality filters

        Returns:
            List of DeviceTypeResponse objects (possibly empty)
        """
        device_types = await self.device_type_repository.list_all(filters)
        return [DeviceTypeResponse.from_entity(device_type) for device_type in device_types]
