# Standard library imports
import logging
from dataclasses import dataclass
from typing import Dict

# Local application imports
from ...domain.models.catalog_kind import CatalogKind
from ...domain.repositories.device_model_repository import DeviceModelRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.device_type_repository import DeviceTypeRepository
from .in_memory_repositories import (
    InMemoryDeviceModelRepository,
    InMemoryDeviceRepository,
    InMemoryDeviceTypeRepository,
)
from .seed_data import default_device_models, default_device_types, default_devices

logger = logging.getLogger(__name__)


@dataclass
class EntityStore:
    """
    The catalog's three collections, owned by the composition root.

    Nothing outside the store holds the collections; request handlers receive
    the repositories through the DI container.
    """
    device_types: DeviceTypeRepository
    device_models: DeviceModelRepository
    devices: DeviceRepository

    @classmethod
    def in_memory(cls, seed: bool = False) -> "EntityStore":
        """
        Build a process-local store.

        Args:
            seed: Preload the sample device types, models and devices

        Returns:
            EntityStore backed by in-memory repositories
        """
        if seed:
            store = cls(
                device_types=InMemoryDeviceTypeRepository(default_device_types()),
                device_models=InMemoryDeviceModelRepository(default_device_models()),
                devices=InMemoryDeviceRepository(default_devices()),
            )
            logger.info("Entity store seeded with sample device types, models and devices")
            return store

        return cls(
            device_types=InMemoryDeviceTypeRepository(),
            device_models=InMemoryDeviceModelRepository(),
            devices=InMemoryDeviceRepository(),
        )

    async def counts(self) -> Dict[CatalogKind, int]:
        return {
            CatalogKind.DEVICE_TYPE: await self.device_types.count(),
            CatalogKind.DEVICE_MODEL: await self.device_models.count(),
            CatalogKind.DEVICE: await self.devices.count(),
        }
