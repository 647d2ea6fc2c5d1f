"""Annotation ingest and field-schema endpoints."""

from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from pdf_annotation_app.annotations.bulk_ingest import AnnotationIngestor
from pdf_annotation_app.annotations.projector import FieldSchemaProjector
from pdf_annotation_app.annotations.schemas import FieldDescriptor, IngestResult
from pdf_annotation_app.api.dependencies import get_annotation_ingestor, get_field_schema_projector

router = APIRouter(tags=["annotations"])


class BulkIngestResponse(IngestResult):
    ok: bool = True


class FetchTableRequest(BaseModel):
    process_id: Any = None
    form_id: Any = None


@router.post("/api/pdf-annotation-mappings/bulk/", response_model=BulkIngestResponse)
def bulk_save_annotations(
    payload: Any = Body(default=None),
    ingestor: AnnotationIngestor = Depends(get_annotation_ingestor),
) -> BulkIngestResponse:
    """Accept one annotation object or an array of them; all or nothing."""
    result = ingestor.ingest(payload)
    return BulkIngestResponse(inserted_count=result.inserted_count, annotations=result.annotations)


@router.post("/app_admin/api/fetch-create-table/", response_model=List[FieldDescriptor])
def fetch_create_table(
    payload: FetchTableRequest | None = Body(default=None),
    projector: FieldSchemaProjector = Depends(get_field_schema_projector),
) -> List[FieldDescriptor]:
    payload = payload or FetchTableRequest()
    return projector.project(payload.process_id, payload.form_id)
