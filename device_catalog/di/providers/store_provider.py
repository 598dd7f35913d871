from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.device_type_repository import DeviceTypeRepository
from ...domain.repositories.device_model_repository import DeviceModelRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...application.services.reference_checker import ReferenceChecker
from ...infrastructure.memory.entity_store import EntityStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StoreProvider:
    """Entity store provider - single owner of the catalog collections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Build the entity store and register its repositories.
        Domain interfaces -> in-memory implementations.
        """
        settings: Settings = container.get(Settings)
        store = EntityStore.in_memory(seed=settings.seed_defaults)

        container.register_singleton(EntityStore, store)
        container.register_singleton(DeviceTypeRepository, store.device_types)
        container.register_singleton(DeviceModelRepository, store.device_models)
        container.register_singleton(DeviceRepository, store.devices)

        container.register_singleton(
            ReferenceChecker,
            ReferenceChecker(
                device_type_repository=store.device_types,
                device_model_repository=store.device_models,
            )
        )
