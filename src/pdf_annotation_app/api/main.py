"""FastAPI application setup."""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from pdf_annotation_app.api.errors import register_exception_handlers
from pdf_annotation_app.api.routers import annotations, health, uploads
from pdf_annotation_app.config.logging import build_logging_config, configure_logging
from pdf_annotation_app.config.settings import AppSettings, get_settings


def create_app() -> FastAPI:
    """Application factory to wire routes and dependencies."""
    settings: AppSettings = get_settings()
    configure_logging(build_logging_config(level=settings.log_level, fmt=settings.log_format))

    app = FastAPI(
        title="PDF Annotation Service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    register_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(uploads.router)
    app.include_router(annotations.router)
    app.mount(
        settings.public_upload_prefix,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    @app.get("/config", include_in_schema=False)
    def show_runtime_configuration() -> dict[str, str | int | bool]:
        """Return non-sensitive runtime settings for smoke testing."""
        return settings.snapshot()

    return app


app = create_app()
