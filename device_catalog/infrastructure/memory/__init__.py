from .entity_store import EntityStore
from .in_memory_collection import InMemoryCollection
from .in_memory_repositories import (
    InMemoryDeviceModelRepository,
    InMemoryDeviceRepository,
    InMemoryDeviceTypeRepository,
)

__all__ = [
    "EntityStore",
    "InMemoryCollection",
    "InMemoryDeviceTypeRepository",
    "InMemoryDeviceModelRepository",
    "InMemoryDeviceRepository",
]
