import os
import sys
from pathlib import Path
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# app.main builds the application at import time
os.environ.setdefault("ENV", "test")
os.environ.setdefault("R2_ACCOUNT_ID", "test-account")
os.environ.setdefault("R2_ACCESS_KEY_ID", "test")
os.environ.setdefault("R2_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("R2_BUCKET_NAME", "test-bucket")
os.environ.setdefault("R2_PUBLIC_URL", "https://files.example.com")

from app.core.config import get_settings
from app.core.errors import StorageError
from app.main import create_app

PUBLIC_BASE = "https://files.example.com"


class FakeStorage:
    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.fail_puts = False
        self.fail_signing = False

    async def put(self, key: str, body: bytes, content_type: str) -> None:
        if self.fail_puts:
            raise StorageError("AccessDenied: secret internal detail")
        self.objects[key] = (body, content_type)

    async def signed_read_url(self, key: str, ttl_seconds: int) -> str:
        if self.fail_signing:
            raise StorageError("connection reset")
        if key not in self.objects:
            raise StorageError(f"NoSuchKey: {key}")
        return f"https://signed.example.com/{key}?X-Amz-Expires={ttl_seconds}&sig={uuid4().hex}"


@pytest.fixture(scope="session", autouse=True)
def configure_environment():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def app_instance(storage):
    return create_app(settings=get_settings(), storage=storage)


@pytest_asyncio.fixture
async def client(app_instance):
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
