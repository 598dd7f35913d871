from pydantic import BaseModel, ConfigDict, Field, StrictStr

from ...domain.constants import DeviceFields
from ...domain.models.device import Device, DeviceState
from .device_model_dto import DeviceModelRequest, DeviceModelResponse


class DeviceRequest(BaseModel):
    """DTO for device create/replace request"""
    model_config = ConfigDict(extra="forbid")

    mac_address: StrictStr = Field(alias=DeviceFields.MAC_ADDRESS, min_length=3, max_length=30)
    state: DeviceState = DeviceState.STOCK
    device_model: DeviceModelRequest = Field(alias=DeviceFields.DEVICE_MODEL)

    def to_entity(self) -> Device:
        return Device(
            mac_address=self.mac_address,
            device_model=self.device_model.to_entity(),
            state=self.state,
        )


class DeviceResponse(BaseModel):
    """DTO for device response"""
    model_config = ConfigDict(populate_by_name=True)

    mac_address: str = Field(alias=DeviceFields.MAC_ADDRESS)
    state: DeviceState
    device_model: DeviceModelResponse = Field(alias=DeviceFields.DEVICE_MODEL)

    @classmethod
    def from_entity(cls, device: Device) -> "DeviceResponse":
        return cls(
            mac_address=device.mac_address,
            state=device.state,
            device_model=DeviceModelResponse.from_entity(device.device_model),
        )
