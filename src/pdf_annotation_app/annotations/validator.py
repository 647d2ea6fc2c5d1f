"""Required-field and bbox checks for raw annotation items."""

from __future__ import annotations

from typing import Any, Mapping

from pdf_annotation_app.annotations.errors import ValidationError

REQUIRED_FIELDS = (
    "process",
    "form_id",
    "field_id",
    "field_name",
    "bbox",
    "page",
    "scale",
    "field_type",
)
BBOX_LENGTH = 4


def validate_annotation_item(item: Any) -> Mapping[str, Any]:
    """Check one raw item and return it unchanged.

    Stops at the first problem found: a non-mapping item, then the first
    required field that is missing or null (an empty ``field_name`` counts as
    missing), then a ``bbox`` that is not a sequence of exactly four values.
    """
    if not isinstance(item, Mapping):
        raise ValidationError("Invalid payload item", code="invalid_item")

    for key in REQUIRED_FIELDS:
        value = item.get(key)
        if value is None or (key == "field_name" and value == ""):
            raise ValidationError(f"Missing field: {key}", code="missing_field", field=key)

    bbox = item["bbox"]
    if not isinstance(bbox, (list, tuple)) or len(bbox) != BBOX_LENGTH:
        raise ValidationError("bbox must be [x1,y1,x2,y2]", code="invalid_bbox", field="bbox")

    return item


def parse_int(value: Any) -> int | None:
    """Read an integer from JSON or form input, returning None when it is not one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None
