# Standard library imports
from typing import Any, List

# External package imports
from fastapi import APIRouter, Body, Request, status

# Local application imports
from ...application.dto.device_model_dto import DeviceModelResponse
from ...application.dto.message_dto import MessageResponse
from ...application.errors import CatalogError
from ...application.use_cases.device_model import (
    CreateDeviceModelUseCase,
    DeleteDeviceModelUseCase,
    GetDeviceModelUseCase,
    ListDeviceModelsUseCase,
    ReplaceDeviceModelUseCase,
)
from ...di.container import get_container
from .errors import to_http_exception


router = APIRouter(tags=["device-models"])


@router.get("", response_model=List[DeviceModelResponse])
async def list_device_models(request: Request) -> List[DeviceModelResponse]:
    """List device models (filters: name, deviceType.name)"""
    container = get_container()
    list_device_models_use_case = container.get(ListDeviceModelsUseCase)

    return await list_device_models_use_case.execute(filters=dict(request.query_params))


@router.get("/{name}", response_model=DeviceModelResponse)
async def get_device_model(name: str) -> DeviceModelResponse:
    """Get a device model by name"""
    container = get_container()
    get_device_model_use_case = container.get(GetDeviceModelUseCase)

    try:
        return await get_device_model_use_case.execute(name)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception


@router.post("", response_model=DeviceModelResponse, status_code=status.HTTP_201_CREATED)
async def create_device_model(payload: Any = Body(default=None)) -> DeviceModelResponse:
    """
    Create a new device model

    Args:
        payload: Device model body, e.g.
            {"name": "sensorX", "deviceType": {"name": "sensor"}}

    Returns:
        DeviceModelResponse with the created model; 400 "Invalid device type"
        when deviceType.name is not a stored device type
    """
    container = get_container()
    create_device_model_use_case = container.get(CreateDeviceModelUseCase)

    try:
        return await create_device_model_use_case.execute(payload)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception


@router.put("/{name}", response_model=DeviceModelResponse)
async def replace_device_model(name: str, payload: Any = Body(default=None)) -> DeviceModelResponse:
    """Replace a device model by name"""
    container = get_container()
    replace_device_model_use_case = container.get(ReplaceDeviceModelUseCase)

    try:
        return await replace_device_model_use_case.execute(name, payload)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception


@router.delete("/{name}", response_model=MessageResponse)
async def delete_device_model(name: str) -> MessageResponse:
    """Delete a device model by name"""
    container = get_container()
    delete_device_model_use_case = container.get(DeleteDeviceModelUseCase)

    try:
        return await delete_device_model_use_case.execute(name)
    except CatalogError as exception:
        raise to_http_exception(exception) from exception
