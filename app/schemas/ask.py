from typing import Optional
from pydantic import BaseModel


class AskRequest(BaseModel):
    # missing or null is answered with "Empty message", same as ""
    message: Optional[str] = None


class AskResponse(BaseModel):
    answer: str


class ErrorResponse(BaseModel):
    error: str
