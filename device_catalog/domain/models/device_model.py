# Standard library imports
from dataclasses import dataclass

# Local application imports
from .device_type import DeviceType


@dataclass(frozen=True)
class DeviceModel:
    """
    Pure domain model for DeviceModel entity.

    ``device_type`` is a snapshot of the referenced type taken when the model
    was created or replaced, not a live link.
    """
    name: str
    device_type: DeviceType

    @property
    def key(self) -> str:
        return self.name
