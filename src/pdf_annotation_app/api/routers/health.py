"""Health check endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from pdf_annotation_app.annotations.errors import StoreError
from pdf_annotation_app.api.dependencies import get_annotation_repository
from pdf_annotation_app.config.settings import get_settings
from pdf_annotation_app.db.annotation_repository import AnnotationRepository


router = APIRouter(tags=["health"])


@router.get("/healthz", summary="Liveness probe")
async def healthcheck() -> dict[str, str]:
    """Return basic app health information."""
    settings = get_settings()
    return {"status": "ok", "environment": settings.environment}


@router.get("/readyz", summary="Readiness probe")
def readiness(repository: AnnotationRepository = Depends(get_annotation_repository)) -> dict[str, str]:
    """Report whether the annotation store answers a ping."""
    try:
        repository.ping()
    except StoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.code) from exc
    return {"status": "ready", "database": repository.settings.mongo_database}
