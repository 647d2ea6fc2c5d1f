"""Annotation repository for MongoDB."""

from __future__ import annotations

from typing import Any, List, Sequence

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from pdf_annotation_app.annotations.errors import StoreError
from pdf_annotation_app.annotations.schemas import AnnotationRecord
from pdf_annotation_app.config.logging import get_logger
from pdf_annotation_app.config.settings import AppSettings, get_settings
from pdf_annotation_app.db.mongo_client import get_database

LOGGER = get_logger(__name__)


class AnnotationRepository:
    """Persist and query annotation records."""

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        collection: Collection[Any] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        if collection is None:
            db = get_database(self.settings.mongo_database, settings=settings)
            collection = db[self.settings.annotations_collection]
        self.collection = collection
        self.collection.create_index([("process", 1), ("form_id", 1)])

    def insert_many(self, records: Sequence[AnnotationRecord]) -> List[AnnotationRecord]:
        if not records:
            return []

        documents = [record.to_document() for record in records]
        LOGGER.info(
            "Inserting annotations",
            extra={"count": len(documents), "collection": self.settings.annotations_collection},
        )
        try:
            result = self.collection.insert_many(documents, ordered=True)
        except PyMongoError as exc:
            LOGGER.exception("Annotation insert failed", extra={"count": len(documents)})
            raise StoreError("Failed to save annotations", code="ingest_failed") from exc

        return [
            record.model_copy(update={"id": str(object_id)})
            for record, object_id in zip(records, result.inserted_ids)
        ]

    def find_by_process_and_form(self, process: int, form_id: int) -> List[AnnotationRecord]:
        try:
            documents = list(self.collection.find({"process": process, "form_id": form_id}))
        except PyMongoError as exc:
            LOGGER.exception(
                "Annotation lookup failed",
                extra={"process_id": process, "form_id": form_id},
            )
            raise StoreError("Failed to fetch annotations", code="fetch_failed") from exc
        return [AnnotationRecord.from_document(doc) for doc in documents]

    def ping(self) -> None:
        try:
            self.collection.database.command("ping")
        except PyMongoError as exc:
            LOGGER.exception("MongoDB ping failed")
            raise StoreError("Database unavailable", code="store_unavailable") from exc

    def count(self) -> int:
        return int(self.collection.count_documents({}))

    def clear(self) -> int:
        result = self.collection.delete_many({})
        LOGGER.info(
            "Cleared annotations collection",
            extra={"collection": self.settings.annotations_collection, "deleted": result.deleted_count},
        )
        return int(result.deleted_count)
