"""Repository for uploaded PDF file records."""

from __future__ import annotations

from typing import Any

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from pdf_annotation_app.annotations.errors import StoreError
from pdf_annotation_app.annotations.schemas import FileRecord
from pdf_annotation_app.config.logging import get_logger
from pdf_annotation_app.config.settings import AppSettings, get_settings
from pdf_annotation_app.db.mongo_client import get_database

LOGGER = get_logger(__name__)


class FileRepository:
    """Repository for file record storage."""

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        collection: Collection[Any] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        if collection is None:
            db = get_database(self.settings.mongo_database, settings=settings)
            collection = db[self.settings.files_collection]
        self.collection = collection
        self.collection.create_index([("pdf_id", 1), ("form_id", 1)])

    def insert(self, record: FileRecord) -> FileRecord:
        LOGGER.info(
            "Saving file record",
            extra={"pdf_id": record.pdf_id, "form_id": record.form_id, "file_path": record.file_path},
        )
        try:
            result = self.collection.insert_one(record.to_document())
        except PyMongoError as exc:
            LOGGER.exception("File record insert failed", extra={"pdf_id": record.pdf_id})
            raise StoreError("Upload failed", code="upload_failed") from exc
        return record.model_copy(update={"id": str(result.inserted_id)})
