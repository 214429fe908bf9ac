from pydantic import BaseModel, Field
from typing import List, Optional

class PhotoDocument(BaseModel):
    objectKey: str = Field(min_length=1)
    bucket: str = Field(min_length=1)
    createdTimestamp: str
    labels: List[str] = []

class PhotoResult(BaseModel):
    objectKey: Optional[str] = None
    bucket: Optional[str] = None
    labels: Optional[List[str]] = None
    url: Optional[str] = None

class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None
