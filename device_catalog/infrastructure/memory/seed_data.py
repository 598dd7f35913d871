"""Sample catalog content loaded at startup when CATALOG_SEED_DEFAULTS is on."""
# Standard library imports
from typing import List

# Local application imports
from ...domain.models.device import Device, DeviceState
from ...domain.models.device_model import DeviceModel
from ...domain.models.device_type import DeviceType


def default_device_types() -> List[DeviceType]:
    return [
        DeviceType(name="deviceType1"),
        DeviceType(name="deviceType2"),
    ]


def default_device_models() -> List[DeviceModel]:
    device_type = DeviceType(name="deviceType1")
    return [
        DeviceModel(name="deviceModel1", device_type=device_type),
        DeviceModel(name="deviceModel2", device_type=device_type),
    ]


def default_devices() -> List[Device]:
    device_model_1, device_model_2 = default_device_models()
    return [
        Device(mac_address="macAddress1", device_model=device_model_1, state=DeviceState.INSTALLED),
        Device(mac_address="macAddress2", device_model=device_model_2, state=DeviceState.STOCK),
    ]
