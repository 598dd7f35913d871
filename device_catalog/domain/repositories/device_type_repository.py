from .catalog_repository import CatalogRepository
from ..models.device_type import DeviceType


class DeviceTypeRepository(CatalogRepository[DeviceType]):
    """Repository interface - defines contract for device type data access"""
