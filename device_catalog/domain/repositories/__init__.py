from .catalog_repository import CatalogRepository
from .device_type_repository import DeviceTypeRepository
from .device_model_repository import DeviceModelRepository
from .device_repository import DeviceRepository

__all__ = ["CatalogRepository", "DeviceTypeRepository", "DeviceModelRepository", "DeviceRepository"]
