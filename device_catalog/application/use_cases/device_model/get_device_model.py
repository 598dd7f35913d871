# Local application imports
from ....domain.models.catalog_kind import CatalogKind
from ....domain.repositories.device_model_repository import DeviceModelRepository
from ...dto.device_model_dto import DeviceModelResponse
from ...errors import EntityNotFoundError


class GetDeviceModelUseCase:
    """Use case for getting a device model by name"""

    def __init__(
        self,
        device_model_repository: DeviceModelRepository,
    ) -> None:
        self.device_model_repository = device_model_repository

    async def execute(self, name: str) -> DeviceModelResponse:
        device_model = await self.device_model_repository.find_by_key(name)
        if device_model is None:
            raise EntityNotFoundError(CatalogKind.DEVICE_MODEL, name)

        return DeviceModelResponse.from_entity(device_model)
