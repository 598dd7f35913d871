from abc import abstractmethod
from typing import List

from .catalog_repository import CatalogRepository
from ..models.device import Device


class DeviceRepository(CatalogRepository[Device]):
    """Repository interface - defines contract for device data access"""

    @abstractmethod
    async def find_by_device_model(self, device_model_name: str) -> List[Device]:
        """Find all devices embedding the given device model name"""
        pass
