from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.core.errors import UploadServiceError
from app.schemas import ErrorResponse
from app.services.storage import StorageGateway
from app.services.uploads import UploadService


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_storage_gateway(request: Request) -> StorageGateway:
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("Storage gateway not initialised")
    return storage


def get_upload_service(
    storage: StorageGateway = Depends(get_storage_gateway),
    settings: Settings = Depends(get_app_settings),
) -> UploadService:
    return UploadService(storage, settings.public_base_url)


def error_response(error: UploadServiceError) -> JSONResponse:
    payload = ErrorResponse(error=error.public_message)
    return JSONResponse(status_code=error.status_code, content=payload.model_dump())
