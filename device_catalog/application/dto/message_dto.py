from pydantic import BaseModel


class MessageResponse(BaseModel):
    """DTO for plain confirmation messages (e.g. after a delete)"""
    message: str
