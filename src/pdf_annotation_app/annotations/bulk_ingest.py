"""Bulk ingestion of raw annotation items."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, List, Mapping

from pydantic import ValidationError as PydanticValidationError

from pdf_annotation_app.annotations.errors import ValidationError
from pdf_annotation_app.annotations.schemas import AnnotationRecord, IngestResult, utcnow
from pdf_annotation_app.annotations.validator import validate_annotation_item
from pdf_annotation_app.config.logging import get_logger
from pdf_annotation_app.db.annotation_repository import AnnotationRepository

LOGGER = get_logger(__name__)


def _as_items(payload: Any) -> List[Any]:
    if isinstance(payload, Mapping):
        return [payload]
    if isinstance(payload, (list, tuple)):
        return list(payload)
    raise ValidationError(
        "Payload must be an annotation object or an array of annotation objects",
        code="invalid_payload",
    )


def _error_field(exc: PydanticValidationError) -> str:
    loc = exc.errors()[0]["loc"]
    if loc and loc[0] == "metadata" and len(loc) > 1:
        return f"metadata.{loc[1]}"
    return str(loc[0]) if loc else "item"


def build_annotation_record(item: Mapping[str, Any], *, created_at: datetime) -> AnnotationRecord:
    """Coerce a validated raw item into an annotation record."""
    header = item.get("field_header")
    payload = {
        "process": item["process"],
        "form_id": item["form_id"],
        "field_id": item["field_id"],
        "field_name": str(item["field_name"]),
        "field_header": str(header) if header else "",
        "bbox": list(item["bbox"]),
        "page": item["page"],
        "scale": item["scale"],
        "field_type": str(item["field_type"]),
        "metadata": item.get("metadata") or {},
        "created_at": created_at,
    }
    try:
        return AnnotationRecord.model_validate(payload)
    except PydanticValidationError as exc:
        field = _error_field(exc)
        raise ValidationError(f"Invalid field: {field}", code="invalid_field", field=field) from exc


class AnnotationIngestor:
    """Validate, normalize and persist annotation batches."""

    def __init__(
        self,
        repository: AnnotationRepository | None = None,
        *,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.repository = repository or AnnotationRepository()
        self.clock = clock

    def prepare(self, payload: Any) -> List[AnnotationRecord]:
        """Validate and coerce every item; nothing is written."""
        records: List[AnnotationRecord] = []
        for index, item in enumerate(_as_items(payload)):
            try:
                validate_annotation_item(item)
                record = build_annotation_record(item, created_at=self.clock())
            except ValidationError as exc:
                LOGGER.warning(
                    "Rejected annotation batch",
                    extra={"index": index, "error": exc.code, "field": exc.field},
                )
                raise exc.at_index(index) from exc

            x1, y1, x2, y2 = record.bbox
            if x2 < x1 or y2 < y1:
                LOGGER.warning(
                    "Annotation bbox has inverted corners",
                    extra={"index": index, "field_name": record.field_name, "bbox": record.bbox},
                )
            records.append(record)
        return records

    def ingest(self, payload: Any) -> IngestResult:
        records = self.prepare(payload)
        if not records:
            return IngestResult(inserted_count=0, annotations=[])

        inserted = self.repository.insert_many(records)
        LOGGER.info(
            "Annotations ingested",
            extra={"count": len(inserted), "process_id": records[0].process, "form_id": records[0].form_id},
        )
        return IngestResult(inserted_count=len(inserted), annotations=inserted)
