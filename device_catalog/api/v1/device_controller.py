# Standard library imports
from typing import Any, List

# External package imports
from fastapi import APIRouter, Body, Request, status

# Local application imports
from ...application.dto.device_dto import DeviceResponse
from ...application.dto.message_dto import MessageResponse
from ...application.errors import CatalogError
from ...application.use_cases.device import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    ReplaceDeviceUseCase,
)
from ...di.container import get_container
from .errors import to_http_exception


router = APIRouter(tags=["devices"])


@router.get("", response_model=List[DeviceResponse])
async def list_devices(request: Request) -> List[DeviceResponse]:
    """
    List devices

    Supported filters: macAddress, state, deviceModel.name
    """
    container = get_container()
    list_devices_use_case = container.get(ListDevicesUseCase)

    return await list_devices_use_case.execute(filters=dict(request.query_params))


@router.get("/{mac_address}", response_model=DeviceResponse)
async def get_device(mac_address: str) -> DeviceResponse:
    """
    Get a device by MAC address

    Args:
        mac_address: MAC address of the device

    Returns:
        DeviceResponse with device information
    """
    container = get_container()
    get_device_use_case = container.get(GetDeviceUseCase)

    try:
        return await get_device_use_case.execute(mac_address)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def create_device(payload: Any = Body(default=None)) -> DeviceResponse:
    """
    Create a new device

    Args:
        payload: Device body; ``state`` defaults to "stock"

    Returns:
        DeviceResponse with the created device; 400 "Invalid device model"
        when deviceModel.name is not a stored device model
    """
    container = get_container()
    create_device_use_case = container.get(CreateDeviceUseCase)

    try:
        return await create_device_use_case.execute(payload)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception


@router.put("/{mac_address}", response_model=DeviceResponse)
async def replace_device(mac_address: str, payload: Any = Body(default=None)) -> DeviceResponse:
    """Replace a device by MAC address"""
    container = get_container()
    replace_device_use_case = container.get(ReplaceDeviceUseCase)

    try:
        return await replace_device_use_case.execute(mac_address, payload)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception


@router.delete("/{mac_address}", response_model=MessageResponse)
async def delete_device(mac_address: str) -> MessageResponse:
    """Delete a device by MAC address"""
    container = get_container()
    delete_device_use_case = container.get(DeleteDeviceUseCase)

    try:
        return await delete_device_use_case.execute(mac_address)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception
