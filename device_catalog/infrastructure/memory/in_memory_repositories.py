# Standard library imports
import asyncio
from typing import Callable, Dict, Iterable, List, Mapping, Optional, TypeVar

# Local application imports
from ...domain.constants import DeviceFields, DeviceModelFields, DeviceTypeFields
from ...domain.models.device import Device
from ...domain.models.device_model import DeviceModel
from ...domain.models.device_type import DeviceType
from ...domain.repositories.catalog_repository import CatalogRepository
from ...domain.repositories.device_model_repository import DeviceModelRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.device_type_repository import DeviceTypeRepository
from .in_memory_collection import InMemoryCollection

EntityT = TypeVar("EntityT")

DEVICE_TYPE_ACCESSORS: Dict[str, Callable[[DeviceType], str]] = {
    DeviceTypeFields.NAME: lambda device_type: device_type.name,
}

DEVICE_MODEL_ACCESSORS: Dict[str, Callable[[DeviceModel], str]] = {
    DeviceModelFields.NAME: lambda device_model: device_model.name,
    DeviceModelFields.DEVICE_TYPE_NAME: lambda device_model: device_model.device_type.name,
}

DEVICE_ACCESSORS: Dict[str, Callable[[Device], str]] = {
    DeviceFields.MAC_ADDRESS: lambda device: device.mac_address,
    DeviceFields.STATE: lambda device: device.state.value,
    DeviceFields.DEVICE_MODEL_NAME: lambda device: device.device_model.name,
}


class _InMemoryCatalogRepository(CatalogRepository[EntityT]):
    """Shared in-memory implementation backed by an InMemoryCollection"""

    def __init__(self, collection: InMemoryCollection[EntityT]) -> None:
        self._collection = collection
        self._lock = asyncio.Lock()

    @property
    def lock(self) -> asyncio.Lock:
        return self._lock

    async def list_all(self, filters: Optional[Mapping[str, str]] = None) -> List[EntityT]:
        """List entities in insertion order (returns a snapshot)"""
        return self._collection.matching(filters)

    async def find_by_key(self, key: str) -> Optional[EntityT]:
        """Find the first entity with the given key"""
        if not key:
            return None
        return self._collection.first(key)

    async def add(self, entity: EntityT) -> EntityT:
        """Append an entity"""
        if entity is None:
            raise ValueError("Entity cannot be None")
        self._collection.append(entity)
        return entity

    async def replace(self, key: str, entity: EntityT) -> Optional[EntityT]:
        """Overwrite the first entity with the given key in place"""
        if entity is None:
            raise ValueError("Entity cannot be None")
        if not self._collection.replace_first(key, entity):
            return None
        return entity

    async def delete(self, key: str) -> bool:
        """Remove the first entity with the given key"""
        return self._collection.remove_first(key)

    async def count(self) -> int:
        return len(self._collection)


class InMemoryDeviceTypeRepository(_InMemoryCatalogRepository[DeviceType], DeviceTypeRepository):
    """In-memory implementation of DeviceTypeRepository"""

    def __init__(self, initial: Iterable[DeviceType] = ()) -> None:
        super().__init__(
            InMemoryCollection(lambda device_type: device_type.key, DEVICE_TYPE_ACCESSORS, initial)
        )


class InMemoryDeviceModelRepository(_InMemoryCatalogRepository[DeviceModel], DeviceModelRepository):
    """In-memory implementation of DeviceModelRepository"""

    def __init__(self, initial: Iterable[DeviceModel] = ()) -> None:
        super().__init__(
            InMemoryCollection(lambda device_model: device_model.key, DEVICE_MODEL_ACCESSORS, initial)
        )

    async def find_by_device_type(self, device_type_name: str) -> List[DeviceModel]:
        """Find all models embedding the given device type name"""
        return self._collection.matching({DeviceModelFields.DEVICE_TYPE_NAME: device_type_name})


class InMemoryDeviceRepository(_InMemoryCatalogRepository[Device], DeviceRepository):
    """In-memory implementation of DeviceRepository"""

    def __init__(self, initial: Iterable[Device] = ()) -> None:
        super().__init__(
            InMemoryCollection(lambda device: device.key, DEVICE_ACCESSORS, initial)
        )

    async def find_by_device_model(self, device_model_name: str) -> List[Device]:
        """Find all devices embedding the given device model name"""
        return self._collection.matching({DeviceFields.DEVICE_MODEL_NAME: device_model_name})
