# Local application imports
from ...domain.models.catalog_kind import CatalogKind
from ...domain.repositories.catalog_repository import CatalogRepository
from ..errors import DuplicateKeyError


async def ensure_key_available(repository: CatalogRepository, kind: CatalogKind, key: str) -> None:
    """Raise DuplicateKeyError if an entity with ``key`` is already stored"""
    if await repository.find_by_key(key) is not None:
        raise DuplicateKeyError(kind, key)
