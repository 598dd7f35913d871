from pydantic import BaseModel, ConfigDict, Field, StrictStr

from ...domain.constants import DeviceModelFields
from ...domain.models.device_model import DeviceModel
from .device_type_dto import DeviceTypeRequest, DeviceTypeResponse


class DeviceModelRequest(BaseModel):
    """DTO for device model create/replace request"""
    model_config = ConfigDict(extra="forbid")

    name: StrictStr = Field(min_length=3, max_length=30)
    device_type: DeviceTypeRequest = Field(alias=DeviceModelFields.DEVICE_TYPE)

    def to_entity(self) -> DeviceModel:
        return DeviceModel(name=self.name, device_type=self.device_type.to_entity())


class DeviceModelResponse(BaseModel):
    """DTO for device model response"""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    device_type: DeviceTypeResponse = Field(alias=DeviceModelFields.DEVICE_TYPE)

    @classmethod
    def from_entity(cls, device_model: DeviceModel) -> "DeviceModelResponse":
        return cls(
            name=device_model.name,
            device_type=DeviceTypeResponse.from_entity(device_model.device_type),
        )
