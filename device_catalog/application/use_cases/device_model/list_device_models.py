# Standard library imports
from typing import List, Mapping, Optional

# Local application imports
from ....domain.repositories.device_model_repository import DeviceModelRepository
from ...dto.device_model_dto import DeviceModelResponse


class ListDeviceModelsUseCase:
    """Use case for listing device models"""

    def __init__(
        self,
        device_model_repository: DeviceModelRepository,
    ) -> None:
        self.device_model_repository = device_model_repository

    async def execute(
        self,
        filters: Optional[Mapping[str, str]] = None,
    ) -> List[DeviceModelResponse]:
        """List device models in insertion order, optionally filtered"""
        device_models = await self.device_model_repository.list_all(filters)
        return [DeviceModelResponse.from_entity(device_model) for device_model in device_models]
