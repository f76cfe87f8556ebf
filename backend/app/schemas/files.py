from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UploadResponse(CamelModel):
    success: Literal[True] = True
    file_name: str
    file_size: int
    mime_type: str
    url: str


class FileInfoResponse(CamelModel):
    success: Literal[True] = True
    file_name: str
    public_url: str
    signed_url: str
    expires_in: str


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: datetime | None = None
