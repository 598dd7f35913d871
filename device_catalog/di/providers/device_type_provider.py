from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.device_type_repository import DeviceTypeRepository
from ...domain.repositories.device_model_repository import DeviceModelRepository
from ...application.use_cases.device_type import (
    CreateDeviceTypeUseCase,
    DeleteDeviceTypeUseCase,
    GetDeviceTypeUseCase,
    ListDeviceTypesUseCase,
    ReplaceDeviceTypeUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DeviceTypeProvider:
    """Device type use case provider - registers all device-type use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all device type use cases.
        Use cases are created on-demand via factories.
        """
        settings: Settings = container.get(Settings)

        container.register_factory(
            ListDeviceTypesUseCase,
            lambda: ListDeviceTypesUseCase(
                device_type_repository=container.get(DeviceTypeRepository),
            )
        )

        container.register_factory(
            GetDeviceTypeUseCase,
            lambda: GetDeviceTypeUseCase(
                device_type_repository=container.get(DeviceTypeRepository),
            )
        )

        container.register_factory(
            CreateDeviceTypeUseCase,
            lambda: CreateDeviceTypeUseCase(
                device_type_repository=container.get(DeviceTypeRepository),
                enforce_unique_keys=settings.enforce_unique_keys,
            )
        )

        container.register_factory(
            ReplaceDeviceTypeUseCase,
            lambda: ReplaceDeviceTypeUseCase(
                device_type_repository=container.get(DeviceTypeRepository),
                enforce_unique_keys=settings.enforce_unique_keys,
            )
        )

        container.register_factory(
            DeleteDeviceTypeUseCase,
            lambda: DeleteDeviceTypeUseCase(
                device_type_repository=container.get(DeviceTypeRepository),
                device_model_repository=container.get(DeviceModelRepository),
                protect_referenced=settings.protect_referenced,
            )
        )
