# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...application.errors import (
    CatalogError,
    DuplicateKeyError,
    EntityInUseError,
    EntityNotFoundError,
    PayloadValidationError,
    ReferentialIntegrityError,
)

_STATUS_BY_ERROR = (
    (PayloadValidationError, status.HTTP_400_BAD_REQUEST),
    (ReferentialIntegrityError, status.HTTP_400_BAD_REQUEST),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateKeyError, status.HTTP_409_CONFLICT),
    (EntityInUseError, status.HTTP_409_CONFLICT),
)


def to_http_exception(exception: CatalogError) -> HTTPException:
    """Map a catalog error to the HTTPException returned to the client"""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exception, error_type):
            return HTTPException(status_code=status_code, detail=exception.message)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exception.message)
