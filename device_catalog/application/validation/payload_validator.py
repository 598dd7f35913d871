"""
Structural validation of create/replace payloads.

Each entity kind has a pydantic request model describing required fields,
string bounds and enumerations. Validation errors are turned into
``Violation``s whose messages read like::

    "name" length must be at least 3 characters long
    "deviceModel.deviceType.name" is required
    "state" must be one of [installed, maintenance, stock]

The first violation (schema field order, unknown keys last) becomes the
error message returned to the caller.
"""
# Standard library imports
import logging
import re
from typing import Any, Dict, List, Type, TypeVar

# External package imports
from pydantic import BaseModel, ValidationError

# Local application imports
from ..dto.device_dto import DeviceRequest
from ..dto.device_model_dto import DeviceModelRequest
from ..dto.device_type_dto import DeviceTypeRequest
from ..errors import PayloadValidationError, Violation

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)

_OBJECT_ERROR_TYPES = {"model_type", "model_attributes_type", "dict_type"}


def validate_device_type(payload: Any) -> DeviceTypeRequest:
    """Validate a device type payload; raises PayloadValidationError"""
    return _validate(DeviceTypeRequest, payload)


def validate_device_model(payload: Any) -> DeviceModelRequest:
    """Validate a device model payload; raises PayloadValidationError"""
    return _validate(DeviceModelRequest, payload)


def validate_device(payload: Any) -> DeviceRequest:
    """
    Validate a device payload; raises PayloadValidationError.

    The whole embedded chain (deviceModel and its deviceType) must be well
    formed. A missing ``state`` defaults to ``stock``.
    """
    return _validate(DeviceRequest, payload)


def collect_violations(error: ValidationError) -> List[Violation]:
    """Convert pydantic errors into violations, preserving their order"""
    return [_to_violation(detail) for detail in error.errors()]


def _validate(model: Type[RequestT], payload: Any) -> RequestT:
    try:
        return model.model_validate(payload)
    except ValidationError as exception:
        violations = collect_violations(exception)
        logger.debug(f"{model.__name__} rejected: {violations[0].message}")
        raise PayloadValidationError(violations) from exception


def _to_violation(detail: Dict[str, Any]) -> Violation:
    field = ".".join(str(part) for part in detail.get("loc", ())) or "value"
    error_type = detail.get("type", "")
    context = detail.get("ctx") or {}
    label = f'"{field}"'

    if error_type == "missing":
        message = f"{label} is required"
    elif error_type == "string_type":
        message = f"{label} must be a string"
    elif error_type == "string_too_short":
        message = f"{label} length must be at least {context.get('min_length')} characters long"
    elif error_type == "string_too_long":
        message = (
            f"{label} length must be less than or equal to "
            f"{context.get('max_length')} characters long"
        )
    elif error_type in ("enum", "literal_error"):
        allowed = re.findall(r"'([^']*)'", str(context.get("expected", "")))
        message = f"{label} must be one of [{', '.join(allowed)}]"
    elif error_type in _OBJECT_ERROR_TYPES:
        message = f"{label} must be of type object"
    elif error_type == "extra_forbidden":
        message = f"{label} is not allowed"
    else:
        message = f"{label} {detail.get('msg', 'is invalid')}"

    return Violation(field=field, constraint=error_type, message=message)
