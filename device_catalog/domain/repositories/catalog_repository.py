import asyncio
from abc import ABC, abstractmethod
from typing import Generic, List, Mapping, Optional, TypeVar

EntityT = TypeVar("EntityT")


class CatalogRepository(ABC, Generic[EntityT]):
    """
    Repository interface - keyed access to one entity kind.

    Entities are listed in insertion order. Keys are not required to be
    unique: lookups, replacements and deletions act on the first entity
    carrying the key.

    Mutating callers that first check other collections must hold ``lock``
    (and the locks of the collections they read) for the whole
    check-then-act sequence. Locks are always taken in the order
    device types, device models, devices.
    """

    @property
    @abstractmethod
    def lock(self) -> asyncio.Lock:
        """Lock serializing mutations of this collection"""
        pass

    @abstractmethod
    async def list_all(self, filters: Optional[Mapping[str, str]] = None) -> List[EntityT]:
        """List entities, keeping only those whose fields equal every filter value"""
        pass

    @abstractmethod
    async def find_by_key(self, key: str) -> Optional[EntityT]:
        """Find the first entity with the given key"""
        pass

    @abstractmethod
    async def add(self, entity: EntityT) -> EntityT:
        """Append an entity"""
        pass

    @abstractmethod
    async def replace(self, key: str, entity: EntityT) -> Optional[EntityT]:
        """Overwrite the first entity with the given key; None when absent"""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove the first entity with the given key; False when absent"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored entities"""
        pass
