from dataclasses import dataclass
from typing import Generic, TypeVar

from fastapi import status

T = TypeVar("T")


class UploadServiceError(Exception):
    """Base for failures that end a request."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)


class ValidationError(UploadServiceError):
    """Raised when the request is missing the uploaded file."""

    status_code = status.HTTP_400_BAD_REQUEST
    public_message = "No file uploaded"


class StorageError(UploadServiceError):
    """Raised when the object store rejects or fails an operation."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message = "Upload failed"


class NotFoundError(UploadServiceError):
    """Raised when a key cannot be resolved in the object store."""

    status_code = status.HTTP_404_NOT_FOUND
    public_message = "File not found"


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: UploadServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: UploadServiceError) -> "Result[T]":
        return cls(error=error)
