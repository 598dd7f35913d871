# External package imports
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter(tags=["root"])

WELCOME_MESSAGE = "Welcome to the Device Catalog API!"


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    """Plain text greeting, handy as a liveness probe"""
    return WELCOME_MESSAGE
