from typing import Optional
from pydantic import BaseModel


class ChatRequest(BaseModel):
    user_query: Optional[str] = None


class ChatResponse(BaseModel):
    answer: str


class UploadResponse(BaseModel):
    message: str
    rows: int
    filename: str
