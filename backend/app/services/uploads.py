import logging
from dataclasses import dataclass

from app.core.errors import NotFoundError, Result, StorageError, ValidationError
from app.services.keys import generate_object_key
from app.services.storage import StorageGateway

logger = logging.getLogger(__name__)

SIGNED_URL_TTL_SECONDS = 3600
SIGNED_URL_EXPIRY_LABEL = "1 hour"


@dataclass(frozen=True)
class UploadRequest:
    body: bytes
    filename: str | None
    content_type: str


@dataclass(frozen=True)
class StoredObject:
    key: str
    public_url: str
    size: int | None = None
    content_type: str | None = None
    signed_url: str | None = None


class UploadService:
    def __init__(self, storage: StorageGateway, public_base_url: str) -> None:
        self.storage = storage
        self.public_base_url = public_base_url.removesuffix("/")

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url}/{key}"

    async def upload(self, request: UploadRequest | None) -> Result[StoredObject]:
        if request is None:
            return Result.failure(ValidationError())

        key = generate_object_key(request.filename)
        try:
            await self.storage.put(key, request.body, request.content_type)
        except StorageError:
            logger.exception("Upload of %s (%s) failed", key, request.filename)
            return Result.failure(StorageError())

        logger.info(
            "Stored %s (%d bytes, %s)", key, len(request.body), request.content_type
        )
        return Result.success(
            StoredObject(
                key=key,
                public_url=self.public_url(key),
                size=len(request.body),
                content_type=request.content_type,
            )
        )

    async def retrieve(self, key: str) -> Result[StoredObject]:
        # Any gateway failure is reported as a missing object.
        try:
            signed_url = await self.storage.signed_read_url(key, SIGNED_URL_TTL_SECONDS)
        except StorageError:
            logger.exception("Could not sign read URL for %s", key)
            return Result.failure(NotFoundError())

        return Result.success(
            StoredObject(key=key, public_url=self.public_url(key), signed_url=signed_url)
        )
