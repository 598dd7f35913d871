# Standard library imports
import logging

# Local application imports
from ...domain.models.catalog_kind import CatalogKind
from ...domain.repositories.device_model_repository import DeviceModelRepository
from ...domain.repositories.device_type_repository import DeviceTypeRepository
from ..errors import ReferentialIntegrityError

logger = logging.getLogger(__name__)


class ReferenceChecker:
    """
    Confirms that an embedded reference resolves to a stored parent.

    Only the directly referenced collection is consulted: a device's model is
    looked up, the model's embedded type is not re-checked. Callers run this
    after payload validation and before the mutation, holding the parent
    collection's lock.
    """

    def __init__(
        self,
        device_type_repository: DeviceTypeRepository,
        device_model_repository: DeviceModelRepository,
    ) -> None:
        self.device_type_repository = device_type_repository
        self.device_model_repository = device_model_repository

    async def ensure_device_type_exists(self, device_type_name: str) -> None:
        """
        Raises:
            ReferentialIntegrityError: If no device type has this name
        """
        if await self.device_type_repository.find_by_key(device_type_name) is None:
            logger.warning(f"Rejected reference to unknown device type '{device_type_name}'")
            raise ReferentialIntegrityError(CatalogKind.DEVICE_TYPE)

    async def ensure_device_model_exists(self, device_model_name: str) -> None:
        """
        Raises:
            ReferentialIntegrityError: If no device model has this name
        """
        if await self.device_model_repository.find_by_key(device_model_name) is None:
            logger.warning(f"Rejected reference to unknown device model '{device_model_name}'")
            raise ReferentialIntegrityError(CatalogKind.DEVICE_MODEL)
