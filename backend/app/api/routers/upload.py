import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request, status
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from app.api.deps import error_response, get_upload_service
from app.schemas import ErrorResponse, HealthResponse, UploadResponse
from app.services.uploads import UploadRequest, UploadService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])


async def _read_upload(request: Request) -> UploadRequest | None:
    try:
        form = await request.form()
    except (StarletteHTTPException, MultiPartException) as exc:
        logger.warning("Unreadable upload form: %s", getattr(exc, "detail", exc))
        return None
    upload = form.get("file")
    # Plain text fields named "file" are not uploads.
    if not isinstance(upload, UploadFile):
        return None
    try:
        body = await upload.read()
    finally:
        await upload.close()
    return UploadRequest(
        body=body,
        filename=upload.filename,
        content_type=upload.content_type or "application/octet-stream",
    )


@router.post(
    "",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def upload_file(
    request: Request,
    service: UploadService = Depends(get_upload_service),
):
    result = await service.upload(await _read_upload(request))
    if not result.ok:
        return error_response(result.error)

    stored = result.value
    return UploadResponse(
        file_name=stored.key,
        file_size=stored.size,
        mime_type=stored.content_type,
        url=stored.public_url,
    )


@router.get("", response_model=HealthResponse)
async def upload_health() -> HealthResponse:
    return HealthResponse(timestamp=datetime.now(timezone.utc))
