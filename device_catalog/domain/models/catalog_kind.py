# Standard library imports
from enum import Enum


class CatalogKind(str, Enum):
    """
    The three entity kinds held by the catalog.

    The value doubles as the collection's URL segment; ``label`` is the
    human readable name used in response messages.
    """
    DEVICE_TYPE = "device-types"
    DEVICE_MODEL = "device-models"
    DEVICE = "devices"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    CatalogKind.DEVICE_TYPE: "Device type",
    CatalogKind.DEVICE_MODEL: "Device model",
    CatalogKind.DEVICE: "Device",
}
