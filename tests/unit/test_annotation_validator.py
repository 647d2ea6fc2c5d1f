"""Tests for the raw annotation item checks."""

from __future__ import annotations

import pytest

from pdf_annotation_app.annotations.errors import ValidationError
from pdf_annotation_app.annotations.validator import REQUIRED_FIELDS, parse_int, validate_annotation_item


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_missing_required_field_is_reported_by_name(dob_item, field: str) -> None:
    del dob_item[field]

    with pytest.raises(ValidationError) as excinfo:
        validate_annotation_item(dob_item)

    assert excinfo.value.code == "missing_field"
    assert excinfo.value.field == field


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_null_required_field_counts_as_missing(dob_item, field: str) -> None:
    dob_item[field] = None

    with pytest.raises(ValidationError) as excinfo:
        validate_annotation_item(dob_item)

    assert excinfo.value.field == field


def test_first_missing_field_wins(dob_item) -> None:
    del dob_item["scale"]
    del dob_item["form_id"]

    with pytest.raises(ValidationError) as excinfo:
        validate_annotation_item(dob_item)

    assert excinfo.value.field == "form_id"


def test_empty_field_name_is_rejected(dob_item) -> None:
    dob_item["field_name"] = ""

    with pytest.raises(ValidationError) as excinfo:
        validate_annotation_item(dob_item)

    assert excinfo.value.field == "field_name"


@pytest.mark.parametrize("bbox", [[1, 2, 3], [1, 2, 3, 4, 5], [], "1,2,3,4", {"x1": 1}])
def test_bbox_must_hold_four_values(dob_item, bbox) -> None:
    dob_item["bbox"] = bbox

    with pytest.raises(ValidationError) as excinfo:
        validate_annotation_item(dob_item)

    assert excinfo.value.code == "invalid_bbox"
    assert excinfo.value.field == "bbox"


def test_inverted_bbox_is_not_rejected(dob_item) -> None:
    dob_item["bbox"] = [110, 40, 10, 20]

    assert validate_annotation_item(dob_item) is dob_item


def test_non_mapping_item_is_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_annotation_item(["not", "an", "object"])

    assert excinfo.value.code == "invalid_item"


def test_optional_fields_may_be_absent(dob_item) -> None:
    del dob_item["field_header"]
    del dob_item["metadata"]

    validate_annotation_item(dob_item)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(7, 7), ("12", 12), (" 3 ", 3), (4.0, 4), (4.5, None), ("abc", None), (None, None), (True, None), ([1], None)],
)
def test_parse_int(value, expected) -> None:
    assert parse_int(value) == expected
