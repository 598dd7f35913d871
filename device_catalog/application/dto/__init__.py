from .device_type_dto import DeviceTypeRequest, DeviceTypeResponse
from .device_model_dto import DeviceModelRequest, DeviceModelResponse
from .device_dto import DeviceRequest, DeviceResponse
from .message_dto import MessageResponse

__all__ = [
    "DeviceTypeRequest",
    "DeviceTypeResponse",
    "DeviceModelRequest",
    "DeviceModelResponse",
    "DeviceRequest",
    "DeviceResponse",
    "MessageResponse",
]
