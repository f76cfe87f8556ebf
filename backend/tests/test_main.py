import pytest
from pydantic import ValidationError

from app.core.config import Settings, get_settings
from app.main import create_app
from app.services.storage import R2StorageGateway

R2_VARS = (
    "R2_ACCOUNT_ID",
    "R2_ACCESS_KEY_ID",
    "R2_SECRET_ACCESS_KEY",
    "R2_BUCKET_NAME",
    "R2_PUBLIC_URL",
)


@pytest.mark.parametrize("varname", R2_VARS)
def test_settings_require_r2_configuration(monkeypatch, tmp_path, varname):
    monkeypatch.chdir(tmp_path)  # no .env file
    monkeypatch.delenv(varname, raising=False)
    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.asyncio
async def test_lifespan_builds_r2_gateway():
    app = create_app(settings=get_settings())
    assert app.state.storage is None
    async with app.router.lifespan_context(app):
        assert isinstance(app.state.storage, R2StorageGateway)
        assert app.state.storage.bucket == "test-bucket"


@pytest.mark.asyncio
async def test_lifespan_keeps_injected_storage(storage):
    app = create_app(settings=get_settings(), storage=storage)
    async with app.router.lifespan_context(app):
        assert app.state.storage is storage
