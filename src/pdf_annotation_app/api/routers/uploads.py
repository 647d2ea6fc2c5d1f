"""PDF upload endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, UploadFile

from pdf_annotation_app.annotations.errors import StoreError
from pdf_annotation_app.annotations.schemas import UploadResult
from pdf_annotation_app.api.dependencies import get_file_storage, get_upload_coordinator
from pdf_annotation_app.uploads.coordinator import UploadCoordinator
from pdf_annotation_app.uploads.storage import LocalFileStorage

router = APIRouter(prefix="/api", tags=["uploads"])


class UploadResponse(UploadResult):
    ok: bool = True


@router.post("/upload-pdf", response_model=UploadResponse)
def upload_pdf(
    file: UploadFile | None = File(default=None),
    process_id: str | None = Form(default=None),
    form_id: str | None = Form(default=None),
    storage: LocalFileStorage = Depends(get_file_storage),
    coordinator: UploadCoordinator = Depends(get_upload_coordinator),
) -> UploadResponse:
    """Store a PDF and return the pdf_id/form_id pair its annotations must carry."""
    stored = None
    if file is not None:
        try:
            stored = storage.save(file.filename or "upload.pdf", file.file)
        finally:
            file.file.close()

    try:
        result = coordinator.register(stored, process_id=process_id, form_id=form_id)
    except StoreError:
        if stored is not None:
            storage.discard(stored)
        raise
    return UploadResponse(**result.model_dump())
