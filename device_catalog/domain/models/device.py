# Standard library imports
from dataclasses import dataclass
from enum import Enum

# Local application imports
from .device_model import DeviceModel


class DeviceState(str, Enum):
    """Lifecycle state of a physical device"""
    INSTALLED = "installed"
    MAINTENANCE = "maintenance"
    STOCK = "stock"


@dataclass(frozen=True)
class Device:
    """
    Pure domain model for Device entity.

    Devices are identified by their MAC address and embed a copy of the
    device model (itself embedding its device type).
    """
    mac_address: str
    device_model: DeviceModel
    state: DeviceState = DeviceState.STOCK

    @property
    def key(self) -> str:
        return self.mac_address
