from pydantic import BaseModel, ConfigDict, Field, StrictStr

from ...domain.models.device_type import DeviceType


class DeviceTypeRequest(BaseModel):
    """DTO for device type create/replace request"""
    model_config = ConfigDict(extra="forbid")

    name: StrictStr = Field(min_length=3, max_length=30)

    def to_entity(self) -> DeviceType:
        return DeviceType(name=self.name)


class DeviceTypeResponse(BaseModel):
    """DTO for device type response"""
    name: str

    @classmethod
    def from_entity(cls, device_type: DeviceType) -> "DeviceTypeResponse":
        return cls(name=device_type.name)
