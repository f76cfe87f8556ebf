import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api.routers import files as files_router
from app.api.routers import health as health_router
from app.api.routers import upload as upload_router
from app.core.config import Settings, get_settings
from app.core.logging import configure_logging
from app.services.storage import StorageGateway, build_storage_gateway

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "storage", None) is None:
        app.state.storage = build_storage_gateway(app.state.settings)
    logger.info("Upload service started")
    yield


def create_app(
    settings: Settings | None = None,
    storage: StorageGateway | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        debug=settings.debug,
        title="R2 Upload API",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage

    app.include_router(upload_router.router)
    app.include_router(files_router.router)
    app.include_router(health_router.router)

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
