"""Pytest configuration and fixtures."""

from __future__ import annotations

import copy
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Generator

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from pdf_annotation_app.api import dependencies
from pdf_annotation_app.api.main import create_app
from pdf_annotation_app.config.settings import AppSettings
from pdf_annotation_app.db.annotation_repository import AnnotationRepository
from pdf_annotation_app.db.file_repository import FileRepository
from pdf_annotation_app.uploads.id_generator import CounterIdGenerator
from pdf_annotation_app.uploads.storage import LocalFileStorage

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeCollection:
    """In-memory stand-in for the handful of pymongo collection calls we make."""

    def __init__(self, *, fail_writes: bool = False, fail_reads: bool = False) -> None:
        self.documents: list[dict[str, Any]] = []
        self.indexes: list[Any] = []
        self.fail_writes = fail_writes
        self.fail_reads = fail_reads
        self.insert_calls = 0
        self.database = SimpleNamespace(command=self._command)

    def _command(self, name: str) -> dict[str, float]:
        if self.fail_reads:
            raise PyMongoError("server selection timeout")
        return {"ok": 1.0}

    def create_index(self, keys: Any, **_: Any) -> str:
        self.indexes.append(keys)
        return "index"

    def _store(self, document: dict[str, Any]) -> ObjectId:
        doc = copy.deepcopy(document)
        doc.setdefault("_id", ObjectId())
        self.documents.append(doc)
        return doc["_id"]

    def insert_one(self, document: dict[str, Any]) -> SimpleNamespace:
        self.insert_calls += 1
        if self.fail_writes:
            raise PyMongoError("connection reset by peer")
        return SimpleNamespace(inserted_id=self._store(document))

    def insert_many(self, documents: list[dict[str, Any]], ordered: bool = True) -> SimpleNamespace:
        self.insert_calls += 1
        if self.fail_writes:
            raise PyMongoError("connection reset by peer")
        return SimpleNamespace(inserted_ids=[self._store(doc) for doc in documents])

    def _matches(self, document: dict[str, Any], query: dict[str, Any]) -> bool:
        return all(document.get(key) == value for key, value in query.items())

    def find(self, query: dict[str, Any] | None = None, projection: Any = None) -> list[dict[str, Any]]:
        if self.fail_reads:
            raise PyMongoError("server selection timeout")
        return [copy.deepcopy(doc) for doc in self.documents if self._matches(doc, query or {})]

    def count_documents(self, query: dict[str, Any]) -> int:
        return len(self.find(query))

    def delete_many(self, query: dict[str, Any]) -> SimpleNamespace:
        kept = [doc for doc in self.documents if not self._matches(doc, query)]
        deleted = len(self.documents) - len(kept)
        self.documents = kept
        return SimpleNamespace(deleted_count=deleted)

    def find_one_and_update(
        self,
        query: dict[str, Any],
        update: dict[str, Any],
        upsert: bool = False,
        return_document: Any = None,
    ) -> dict[str, Any] | None:
        if self.fail_writes:
            raise PyMongoError("connection reset by peer")
        existing = next((doc for doc in self.documents if self._matches(doc, query)), None)
        if existing is None:
            if not upsert:
                return None
            existing = dict(query)
            self.documents.append(existing)
        for key, step in update.get("$inc", {}).items():
            existing[key] = existing.get(key, 0) + step
        return copy.deepcopy(existing)


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(upload_dir=tmp_path / "uploads")


@pytest.fixture
def annotations_collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def files_collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def annotation_repository(settings: AppSettings, annotations_collection: FakeCollection) -> AnnotationRepository:
    return AnnotationRepository(settings=settings, collection=annotations_collection)


@pytest.fixture
def file_repository(settings: AppSettings, files_collection: FakeCollection) -> FileRepository:
    return FileRepository(settings=settings, collection=files_collection)


@pytest.fixture
def dob_item() -> dict[str, Any]:
    return {
        "process": 5,
        "form_id": 2,
        "field_id": 1,
        "field_name": "dob",
        "field_header": "Date of Birth",
        "bbox": [10, 20, 110, 40],
        "page": 1,
        "scale": 1.0,
        "field_type": "date",
        "metadata": {"required": True},
    }


@pytest.fixture
def client(
    settings: AppSettings,
    annotation_repository: AnnotationRepository,
    file_repository: FileRepository,
) -> Generator[TestClient, None, None]:
    """Test client with MongoDB replaced by in-memory collections."""
    app = create_app()
    id_generator = CounterIdGenerator(start=1000)
    app.dependency_overrides[dependencies.get_annotation_repository] = lambda: annotation_repository
    app.dependency_overrides[dependencies.get_file_repository] = lambda: file_repository
    app.dependency_overrides[dependencies.get_id_generator] = lambda: id_generator
    app.dependency_overrides[dependencies.get_file_storage] = lambda: LocalFileStorage(settings.upload_dir)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_collection() -> type[FakeCollection]:
    return FakeCollection


@pytest.fixture
def clock():
    return lambda: FIXED_NOW
