from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from urllib.parse import unquote_plus

from photoindex.core.enums import IngestStatus

class S3Bucket(BaseModel):
    name: str

class S3Object(BaseModel):
    model_config = ConfigDict(extra="ignore")
    key: str

class S3Entity(BaseModel):
    model_config = ConfigDict(extra="ignore")
    bucket: S3Bucket
    object: S3Object

class S3EventRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")
    eventTime: Optional[str] = None
    s3: S3Entity

class S3Event(BaseModel):
    """S3 ObjectCreated notification batch."""
    model_config = ConfigDict(extra="ignore")
    Records: List[S3EventRecord] = []

class UploadNotification(BaseModel):
    bucket: str
    key: str
    event_time: Optional[str] = None

    @classmethod
    def from_record(cls, record: S3EventRecord) -> "UploadNotification":
        # S3 url-encodes keys in notifications, spaces as '+'
        return cls(
            bucket=record.s3.bucket.name,
            key=unquote_plus(record.s3.object.key),
            event_time=record.eventTime,
        )

class IngestResult(BaseModel):
    key: str
    status: IngestStatus
    error: Optional[str] = Field(default=None)
