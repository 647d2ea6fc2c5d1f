"""Dependency providers wiring repositories into the route handlers."""

from __future__ import annotations

from fastapi import Depends

from pdf_annotation_app.annotations.bulk_ingest import AnnotationIngestor
from pdf_annotation_app.annotations.projector import FieldSchemaProjector
from pdf_annotation_app.db.annotation_repository import AnnotationRepository
from pdf_annotation_app.db.file_repository import FileRepository
from pdf_annotation_app.uploads.coordinator import UploadCoordinator
from pdf_annotation_app.uploads.id_generator import IdGenerator, MongoSequenceIdGenerator
from pdf_annotation_app.uploads.storage import LocalFileStorage


def get_annotation_repository() -> AnnotationRepository:
    return AnnotationRepository()


def get_file_repository() -> FileRepository:
    return FileRepository()


def get_id_generator() -> IdGenerator:
    return MongoSequenceIdGenerator()


def get_file_storage() -> LocalFileStorage:
    return LocalFileStorage()


def get_annotation_ingestor(
    repository: AnnotationRepository = Depends(get_annotation_repository),
) -> AnnotationIngestor:
    return AnnotationIngestor(repository)


def get_field_schema_projector(
    repository: AnnotationRepository = Depends(get_annotation_repository),
) -> FieldSchemaProjector:
    return FieldSchemaProjector(repository)


def get_upload_coordinator(
    repository: FileRepository = Depends(get_file_repository),
    id_generator: IdGenerator = Depends(get_id_generator),
) -> UploadCoordinator:
    return UploadCoordinator(repository, id_generator=id_generator)
