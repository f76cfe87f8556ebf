from app.schemas.files import (
    ErrorResponse,
    FileInfoResponse,
    HealthResponse,
    UploadResponse,
)

__all__ = [
    "UploadResponse",
    "FileInfoResponse",
    "ErrorResponse",
    "HealthResponse",
]
