"""FastAPI application factory."""

from fastapi import FastAPI

from errorgate.api.v1.error_handlers import register_exception_handlers
from errorgate.config.settings import Settings, get_settings
from errorgate.core.logging import RequestIDMiddleware, setup_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(title=settings.APP_NAME, version="0.1.0")
    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app, settings)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app
