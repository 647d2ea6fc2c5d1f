"""Tests for local file storage, settings and logging helpers."""

from __future__ import annotations

import io

import pytest

from pdf_annotation_app.config.logging import build_logging_config
from pdf_annotation_app.config.settings import AppSettings
from pdf_annotation_app.db.mongo_client import build_mongo_uri
from pdf_annotation_app.uploads.storage import LocalFileStorage, unique_filename


def test_unique_filename_replaces_whitespace() -> None:
    name = unique_filename("my  scanned\tform.pdf")

    stamp, rand, rest = name.split("-", 2)
    assert stamp.isdigit()
    assert rand.isdigit()
    assert rest == "my_scanned_form.pdf"


def test_unique_filename_drops_directories() -> None:
    assert unique_filename("../../etc/passwd").endswith("-passwd")


def test_save_writes_bytes(tmp_path) -> None:
    storage = LocalFileStorage(tmp_path / "uploads")

    stored = storage.save("report.pdf", io.BytesIO(b"%PDF-1.4 test"))

    assert stored.path.parent == tmp_path / "uploads"
    assert stored.path.read_bytes() == b"%PDF-1.4 test"
    assert stored.original_filename == "report.pdf"


@pytest.mark.parametrize(
    ("host", "user", "password", "expected"),
    [
        ("localhost:27017", None, None, "mongodb://localhost:27017"),
        ("db:27017", "admin", "secret", "mongodb://admin:secret@db:27017"),
        ("mongodb://127.0.0.1:27017/pdf_annotations_demo", "ignored", None, "mongodb://127.0.0.1:27017/pdf_annotations_demo"),
        ("mongodb+srv://u:p@cluster.example.net", None, None, "mongodb+srv://u:p@cluster.example.net"),
    ],
)
def test_build_mongo_uri(host, user, password, expected) -> None:
    settings = AppSettings(mongodb_uri=host, mongodb_user=user, mongodb_password=password)

    assert build_mongo_uri(settings) == expected


def test_snapshot_hides_credentials() -> None:
    settings = AppSettings(mongodb_uri="mongodb://admin:secret@db:27017")

    snapshot = settings.snapshot()

    assert snapshot["mongodb_host"] == "mongodb://db:27017"
    assert "secret" not in str(snapshot)


def test_json_logging_config() -> None:
    config = build_logging_config(level="debug", fmt="json")

    assert config["handlers"]["default"]["formatter"] == "json"
    assert config["root"]["level"] == "DEBUG"


def test_unknown_logging_format() -> None:
    with pytest.raises(ValueError):
        build_logging_config(fmt="xml")


def test_sanitize_uri_without_scheme_drops_credentials() -> None:
    assert AppSettings.sanitize_uri("user:pw@db:27017") == "db:27017"
    assert AppSettings.sanitize_uri("db:27017") == "db:27017"
