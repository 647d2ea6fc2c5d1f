"""Persisted records and projected field descriptors."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StoredDocument(BaseModel):
    """Base for records whose identity is assigned by MongoDB on insert."""

    id: str | None = None

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(exclude={"id"})

    @classmethod
    def from_document(cls, document: Mapping[str, Any]):
        doc = dict(document)
        object_id = doc.pop("_id", None)
        return cls(id=str(object_id) if object_id is not None else None, **doc)


class AnnotationMetadata(BaseModel):
    """Optional per-field settings; unknown keys are carried through untouched."""

    model_config = ConfigDict(extra="allow")

    max_length: int | None = None
    required: bool | None = None

    @field_validator("required", mode="before")
    @classmethod
    def _truthy_required(cls, value: Any) -> Any:
        # Strings go through pydantic's parsing so "false" stays False.
        if value is None or isinstance(value, (str, bool)):
            return value
        return bool(value)

    def as_document(self) -> dict[str, Any]:
        """Known keys the client actually sent, followed by any unknown keys."""
        known = {
            key: getattr(self, key)
            for key in ("max_length", "required")
            if key in self.model_fields_set
        }
        return {**known, **(self.model_extra or {})}


class AnnotationRecord(StoredDocument):
    process: int
    form_id: int
    field_id: int
    field_name: str = Field(min_length=1)
    field_header: str = ""
    bbox: List[float] = Field(min_length=4, max_length=4)
    page: int
    scale: float
    field_type: str
    metadata: AnnotationMetadata = Field(default_factory=AnnotationMetadata)
    created_at: datetime

    @field_serializer("metadata")
    def _serialize_metadata(self, metadata: AnnotationMetadata) -> dict[str, Any]:
        return metadata.as_document()


class FileRecord(StoredDocument):
    pdf_id: int
    form_id: int
    file_path: str
    uploaded_at: datetime


class IngestResult(BaseModel):
    inserted_count: int
    annotations: List[AnnotationRecord] = Field(default_factory=list)


class UploadResult(BaseModel):
    pdf_id: int
    form_id: int
    file_path: str
    file: FileRecord


class BBoxCorners(BaseModel):
    # Emission order is x1, x2, y1, y2; consumers rely on it.
    x1: float
    x2: float
    y1: float
    y2: float


class AnnotationSummary(BaseModel):
    bbox: BBoxCorners
    page: int
    field_id: int
    field_name: str
    field_header: str
    process: int
    form_id: int


class FieldDescriptor(BaseModel):
    """One form field as consumed by the dynamic table UI."""

    id: str | None
    annotation: AnnotationSummary
    table_name: str
    field_name: str
    field_type: str
    max_length: int = 0
    relation_type: str = ""
    related_table_name: str = ""
    related_field: str = ""
    group: int = 1
    field_header: str = ""
    placeholder: str
    required: bool = False
    field_options: str = "[]"
    types: str
    validation_code: str | None = None
    required_if: str | None = None
    regex_ptn: str | None = None
    form_id: int
    process_id: str
