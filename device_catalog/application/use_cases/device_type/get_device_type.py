# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_type_repository import DeviceTypeRepository
from ...dto.device_type_dto import DeviceTypeResponse
from ...errors import EntityNotFoundError


class GetDeviceTypeUseCase:
    """Use case for getting a device type by name"""

    def __init__(
        self,
        device_type_repository: DeviceTypeRepository,
    ) -> None:
        self.device_type_repository = device_type_repository

    async def execute(self, name: str) -> DeviceTypeResponse:
        """
        Get a device type by name

        Raises:
            EntityNotFoundError: If no device type has this name
        """
        device_type = await self.device_type_repository.find_by_key(name)
        if device_type is None:
            raise EntityNotFoundError(CatalogKind.DEVICE_TYPE, name)

        return DeviceTypeResponse.from_entity(device_type)
