from fastapi import APIRouter, Depends, status

from app.api.deps import error_response, get_upload_service
from app.schemas import ErrorResponse, FileInfoResponse
from app.services.uploads import SIGNED_URL_EXPIRY_LABEL, UploadService

router = APIRouter(prefix="/file", tags=["files"])


@router.get(
    "/{file_name}",
    response_model=FileInfoResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_file(
    file_name: str,
    service: UploadService = Depends(get_upload_service),
):
    result = await service.retrieve(file_name)
    if not result.ok:
        return error_response(result.error)

    stored = result.value
    return FileInfoResponse(
        file_name=stored.key,
        public_url=stored.public_url,
        signed_url=stored.signed_url,
        expires_in=SIGNED_URL_EXPIRY_LABEL,
    )
