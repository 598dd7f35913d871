from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.device_model_repository import DeviceModelRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...application.services.reference_checker import ReferenceChecker
from ...application.use_cases.device import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    ReplaceDeviceUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DeviceProvider:
    """Device use case provider - registers all device-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all device use cases.
        Use cases are created on-demand via factories.
        """
        settings: Settings = container.get(Settings)

        container.register_factory(
            ListDevicesUseCase,
            lambda: ListDevicesUseCase(
                device_repository=container.get(DeviceRepository),
            )
        )

        container.register_factory(
            GetDeviceUseCase,
            lambda: GetDeviceUseCase(
                device_repository=container.get(DeviceRepository),
            )
        )

        container.register_factory(
            CreateDeviceUseCase,
            lambda: CreateDeviceUseCase(
                device_model_repository=container.get(DeviceModelRepository),
                device_repository=container.get(DeviceRepository),
                reference_checker=container.get(ReferenceChecker),
                enforce_unique_keys=settings.enforce_unique_keys,
            )
        )

        container.register_factory(
            ReplaceDeviceUseCase,
            lambda: ReplaceDeviceUseCase(
                device_model_repository=container.get(DeviceModelRepository),
                device_repository=container.get(DeviceRepository),
                reference_checker=container.get(ReferenceChecker),
                enforce_unique_keys=settings.enforce_unique_keys,
            )
        )

        container.register_factory(
            DeleteDeviceUseCase,
            lambda: DeleteDeviceUseCase(
                device_repository=container.get(DeviceRepository),
            )
        )
