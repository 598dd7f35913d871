from .store_provider import StoreProvider
from .device_type_provider import DeviceTypeProvider
from .device_model_provider import DeviceModelProvider
from .device_provider import DeviceProvider


__all__ = [
    "StoreProvider",
    "DeviceTypeProvider",
    "DeviceModelProvider",
    "DeviceProvider",
]
