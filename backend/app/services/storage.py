import asyncio
import logging
from typing import Protocol

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import Settings
from app.core.errors import StorageError

logger = logging.getLogger(__name__)


class StorageGateway(Protocol):
    async def put(self, key: str, body: bytes, content_type: str) -> None: ...

    async def signed_read_url(self, key: str, ttl_seconds: int) -> str: ...


class R2StorageGateway:
    """Cloudflare R2 bucket accessed through the S3-compatible API."""

    def __init__(self, settings: Settings, client=None) -> None:
        self.bucket = settings.r2_bucket_name
        if client is None:
            session = boto3.session.Session()
            client = session.client(
                "s3",
                endpoint_url=settings.r2_endpoint,
                aws_access_key_id=settings.r2_access_key_id,
                aws_secret_access_key=settings.r2_secret_access_key,
                region_name="auto",
                config=Config(signature_version="s3v4"),
            )
        self.client = client

    async def put(self, key: str, body: bytes, content_type: str) -> None:
        def _put() -> None:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )

        try:
            await asyncio.to_thread(_put)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"put_object failed for {key}: {exc}") from exc

    async def signed_read_url(self, key: str, ttl_seconds: int) -> str:
        # Presigning is offline; head_object makes an absent key fail here.
        # SigV4 timestamps have one-second resolution, so calls within the same
        # second return identical URLs.
        def _sign() -> str:
            self.client.head_object(Bucket=self.bucket, Key=key)
            return self.client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=ttl_seconds,
            )

        try:
            return await asyncio.to_thread(_sign)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"signing failed for {key}: {exc}") from exc


def build_storage_gateway(settings: Settings) -> R2StorageGateway:
    gateway = R2StorageGateway(settings)
    logger.info("R2 storage gateway ready for bucket %s", gateway.bucket)
    return gateway
