# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True)
class DeviceType:
    """
    Pure domain model for DeviceType entity.

    A device type is identified by its name. Instances are immutable so a
    copy embedded in a DeviceModel can never drift with the stored type.
    """
    name: str

    @property
    def key(self) -> str:
        return self.name
