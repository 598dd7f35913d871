from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.device_type_repository import DeviceTypeRepository
from ...domain.repositories.device_model_repository import DeviceModelRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...application.services.reference_checker import ReferenceChecker
from ...application.use_cases.device_model import (
    CreateDeviceModelUseCase,
    DeleteDeviceModelUseCase,
    GetDeviceModelUseCase,
    ListDeviceModelsUseCase,
    ReplaceDeviceModelUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DeviceModelProvider:
    """Device model use case provider - registers all device-model use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """Register all device model use cases."""
        settings: Settings = container.get(Settings)

        container.register_factory(
            ListDeviceModelsUseCase,
            lambda: ListDeviceModelsUseCase(
                device_model_repository=container.get(DeviceModelRepository),
            )
        )

        container.register_factory(
            GetDeviceModelUseCase,
            lambda: GetDeviceModelUseCase(
                device_model_repository=container.get(DeviceModelRepository),
            )
        )

        container.register_factory(
            CreateDeviceModelUseCase,
            lambda: CreateDeviceModelUseCase(
                device_type_repository=container.get(DeviceTypeRepository),
                device_model_repository=container.get(DeviceModelRepository),
                reference_checker=container.get(ReferenceChecker),
                enforce_unique_keys=settings.enforce_unique_keys,
            )
        )

        container.register_factory(
            ReplaceDeviceModelUseCase,
            lambda: ReplaceDeviceModelUseCase(
                device_type_repository=container.get(DeviceTypeRepository),
                device_model_repository=container.get(DeviceModelRepository),
                reference_checker=container.get(ReferenceChecker),
                enforce_unique_keys=settings.enforce_unique_keys,
            )
        )

        container.register_factory(
            DeleteDeviceModelUseCase,
            lambda: DeleteDeviceModelUseCase(
                device_model_repository=container.get(DeviceModelRepository),
                device_repository=container.get(DeviceRepository),
                protect_referenced=settings.protect_referenced,
            )
        )
