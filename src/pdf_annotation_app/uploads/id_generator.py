"""Strategies for assigning PDF process identifiers."""

from __future__ import annotations

import itertools
from typing import Any, Protocol

from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from pdf_annotation_app.annotations.errors import StoreError
from pdf_annotation_app.config.logging import get_logger
from pdf_annotation_app.config.settings import AppSettings, get_settings
from pdf_annotation_app.db.mongo_client import get_database

LOGGER = get_logger(__name__)


class IdGenerator(Protocol):
    def next_id(self) -> int:
        ...


class CounterIdGenerator:
    """In-process monotonic ids, starting at ``start``."""

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("start must be positive")
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)


class MongoSequenceIdGenerator:
    """Ids drawn from an atomically incremented counter document."""

    def __init__(
        self,
        name: str = "pdf_id",
        *,
        settings: AppSettings | None = None,
        collection: Collection[Any] | None = None,
    ) -> None:
        self.name = name
        self.settings = settings or get_settings()
        if collection is None:
            db = get_database(self.settings.mongo_database, settings=settings)
            collection = db[self.settings.counters_collection]
        self.collection = collection

    def next_id(self) -> int:
        try:
            document = self.collection.find_one_and_update(
                {"_id": self.name},
                {"$inc": {"value": 1}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            LOGGER.exception("Id sequence increment failed", extra={"sequence": self.name})
            raise StoreError("Upload failed", code="upload_failed") from exc
        return int(document["value"])
