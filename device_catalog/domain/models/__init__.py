from .catalog_kind import CatalogKind
from .device_type import DeviceType
from .device_model import DeviceModel
from .device import Device, DeviceState

__all__ = ["CatalogKind", "DeviceType", "DeviceModel", "Device", "DeviceState"]
