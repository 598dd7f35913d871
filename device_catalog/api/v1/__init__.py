from .root_controller import router as root_router
from .device_type_controller import router as device_type_router
from .device_model_controller import router as device_model_router
from .device_controller import router as device_router


__all__ = ["root_router", "device_type_router", "device_model_router", "device_router"]
