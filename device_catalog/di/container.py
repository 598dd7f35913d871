# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DeviceModelProvider,
    DeviceProvider,
    DeviceTypeProvider,
    StoreProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings
    2. Entity store and repositories (StoreProvider)
    3. Use cases (DeviceTypeProvider, DeviceModelProvider, DeviceProvider) - depend on repositories
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: settings → store → use cases
        """
        self.register_singleton(Settings, self.settings)

        StoreProvider.register(self)

        DeviceTypeProvider.register(self)
        DeviceModelProvider.register(self)
        DeviceProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
