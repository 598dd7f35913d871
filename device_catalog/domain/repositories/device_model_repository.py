from abc import abstractmethod
from typing import List

from .catalog_repository import CatalogRepository
from ..models.device_model import DeviceModel


class DeviceModelRepository(CatalogRepository[DeviceModel]):
    """Repository interface - defines contract for device model data access"""

    @abstractmethod
    async def find_by_device_type(self, device_type_name: str) -> List[DeviceModel]:
        """Find all models embedding the given device type name"""
        pass
