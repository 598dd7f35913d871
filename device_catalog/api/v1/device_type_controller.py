# Standard library imports
from typing import Any, List

# External package imports
from fastapi import APIRouter, Body, Request, status

# Local application imports
from ...application.dto.device_type_dto import DeviceTypeResponse
from ...application.dto.message_dto import MessageResponse
from ...application.errors import CatalogError
from ...application.use_cases.device_type import (
    CreateDeviceTypeUseCase,
    DeleteDeviceTypeUseCase,
    GetDeviceTypeUseCase,
    ListDeviceTypesUseCase,
    ReplaceDeviceTypeUseCase,
)
from ...di.container import get_container
from .errors import to_http_exception


router = APIRouter(tags=["device-types"])


@router.get("", response_model=List[DeviceTypeResponse])
async def list_device_types(request: Request) -> List[DeviceTypeResponse]:
    """
    List device types

    Any query parameter is an equality filter (e.g. ``?name=sensor``).
    Unknown fields match nothing.
    """
    container = get_container()
    list_device_types_use_case = container.get(ListDeviceTypesUseCase)

    return await list_device_types_use_case.execute(filters=dict(request.query_params))


@router.get("/{name}", response_model=DeviceTypeResponse)
async def get_device_type(name: str) -> DeviceTypeResponse:
    """
    Get a device type by name

    Args:
        name: Name of the device type

    Returns:
        DeviceTypeResponse, or 404 "Device type not found"
    """
    container = get_container()
    get_device_type_use_case = container.get(GetDeviceTypeUseCase)

    try:
        return await get_device_type_use_case.execute(name)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception


@router.post("", response_model=DeviceTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_device_type(payload: Any = Body(default=None)) -> DeviceTypeResponse:
    """
    Create a new device type

    Args:
        payload: Device type body, e.g. {"name": "sensor"}

    Returns:
        DeviceTypeResponse with the created device type, or 400 with the
        first validation message
    """
    container = get_container()
    create_device_type_use_case = container.get(CreateDeviceTypeUseCase)

    try:
        return await create_device_type_use_case.execute(payload)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception


@router.put("/{name}", response_model=DeviceTypeResponse)
async def replace_device_type(name: str, payload: Any = Body(default=None)) -> DeviceTypeResponse:
    """Replace a device type by name (400 on invalid body, 404 when unknown)"""
    container = get_container()
    replace_device_type_use_case = container.get(ReplaceDeviceTypeUseCase)

    try:
        return await replace_device_type_use_case.execute(name, payload)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception


@router.delete("/{name}", response_model=MessageResponse)
async def delete_device_type(name: str) -> MessageResponse:
    """Delete a device type by name. Models embedding it are kept."""
    container = get_container()
    delete_device_type_use_case = container.get(DeleteDeviceTypeUseCase)

    try:
        return await delete_device_type_use_case.execute(name)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception
