from .payload_validator import (
    collect_violations,
    validate_device,
    validate_device_model,
    validate_device_type,
)

__all__ = [
    "collect_violations",
    "validate_device",
    "validate_device_model",
    "validate_device_type",
]
