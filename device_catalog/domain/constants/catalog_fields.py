"""Constants for catalog model field names (wire names, as exchanged over HTTP)"""


class DeviceTypeFields:
    """Field name constants for DeviceType model"""
    NAME = "name"


class DeviceModelFields:
    """Field name constants for DeviceModel model"""
    NAME = "name"
    DEVICE_TYPE = "deviceType"

    # Nested lookups used by listing filters
    DEVICE_TYPE_NAME = "deviceType.name"


class DeviceFields:
    """Field name constants for Device model"""
    MAC_ADDRESS = "macAddress"
    STATE = "state"
    DEVICE_MODEL = "deviceModel"

    # Nested lookups used by listing filters
    DEVICE_MODEL_NAME = "deviceModel.name"
