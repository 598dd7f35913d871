"""Constants for domain model field names"""

from .catalog_fields import DeviceTypeFields, DeviceModelFields, DeviceFields

__all__ = [
    "DeviceTypeFields",
    "DeviceModelFields",
    "DeviceFields",
]
