from .list_devices import ListDevicesUseCase
from .get_device import GetDeviceUseCase
from .create_device import CreateDeviceUseCase
from .replace_device import ReplaceDeviceUseCase
from .delete_device import DeleteDeviceUseCase

__all__ = [
    "ListDevicesUseCase",
    "GetDeviceUseCase",
    "CreateDeviceUseCase",
    "ReplaceDeviceUseCase",
    "DeleteDeviceUseCase",
]
