"""Project stored annotations into form-field descriptors."""

from __future__ import annotations

from typing import Any, List

from pdf_annotation_app.annotations.errors import InputError
from pdf_annotation_app.annotations.schemas import (
    AnnotationRecord,
    AnnotationSummary,
    BBoxCorners,
    FieldDescriptor,
)
from pdf_annotation_app.annotations.validator import parse_int
from pdf_annotation_app.config.logging import get_logger
from pdf_annotation_app.db.annotation_repository import AnnotationRepository

LOGGER = get_logger(__name__)


def derive_table_name(process: int) -> str:
    return f"table_{process}_qc"


def infer_field_type(field_type: str) -> str:
    """Map a free-form type tag onto the UI input types; only dates are recognised."""
    return "date" if "date" in (field_type or "").lower() else "text"


def _require_identifier(name: str, value: Any) -> int:
    if value is None or value == "":
        raise InputError(f"{name} is required", code="missing_identifier", field=name)
    number = parse_int(value)
    if number is None:
        raise InputError(f"{name} must be an integer", code="invalid_identifier", field=name)
    return number


def project_annotation(record: AnnotationRecord) -> FieldDescriptor:
    x1, y1, x2, y2 = record.bbox
    metadata = record.metadata
    return FieldDescriptor(
        id=record.id,
        annotation=AnnotationSummary(
            bbox=BBoxCorners(x1=x1, x2=x2, y1=y1, y2=y2),
            page=record.page,
            field_id=record.field_id,
            field_name=record.field_name,
            field_header=record.field_header,
            process=record.process,
            form_id=record.form_id,
        ),
        table_name=derive_table_name(record.process),
        field_name=record.field_name,
        field_type=record.field_type,
        max_length=metadata.max_length or 0,
        field_header=record.field_header,
        placeholder=record.field_header or record.field_name,
        required=bool(metadata.required),
        types=infer_field_type(record.field_type),
        form_id=record.form_id,
        process_id=str(record.process),
    )


class FieldSchemaProjector:
    """Load annotations for a process/form pair and shape them for the table UI."""

    def __init__(self, repository: AnnotationRepository | None = None) -> None:
        self.repository = repository or AnnotationRepository()

    def project(self, process_id: Any, form_id: Any) -> List[FieldDescriptor]:
        process = _require_identifier("process_id", process_id)
        form = _require_identifier("form_id", form_id)

        records = self.repository.find_by_process_and_form(process, form)
        LOGGER.info(
            "Projected field schema",
            extra={"process_id": process, "form_id": form, "fields": len(records)},
        )
        return [project_annotation(record) for record in records]
