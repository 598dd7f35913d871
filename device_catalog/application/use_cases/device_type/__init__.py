from .list_device_types import ListDeviceTypesUseCase
from .get_device_type import GetDeviceTypeUseCase
from .create_device_type import CreateDeviceTypeUseCase
from .replace_device_type import ReplaceDeviceTypeUseCase
from .delete_device_type import DeleteDeviceTypeUseCase

__all__ = [
    "ListDeviceTypesUseCase",
    "GetDeviceTypeUseCase",
    "CreateDeviceTypeUseCase",
    "ReplaceDeviceTypeUseCase",
    "DeleteDeviceTypeUseCase",
]
