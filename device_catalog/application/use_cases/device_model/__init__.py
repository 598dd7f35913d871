from .list_device_models import ListDeviceModelsUseCase
from .get_device_model import GetDeviceModelUseCase
from .create_device_model import CreateDeviceModelUseCase
from .replace_device_model import ReplaceDeviceModelUseCase
from .delete_device_model import DeleteDeviceModelUseCase

__all__ = [
    "ListDeviceModelsUseCase",
    "GetDeviceModelUseCase",
    "CreateDeviceModelUseCase",
    "ReplaceDeviceModelUseCase",
    "DeleteDeviceModelUseCase",
]
