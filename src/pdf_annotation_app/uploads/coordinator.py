"""Register uploaded PDFs and hand back the ids annotations are tagged with."""

from __future__ import annotations

from datetime import datetime
from pathlib import PurePath
from typing import Any, Callable

from pdf_annotation_app.annotations.errors import InputError
from pdf_annotation_app.annotations.schemas import FileRecord, UploadResult, utcnow
from pdf_annotation_app.annotations.validator import parse_int
from pdf_annotation_app.config.logging import get_logger
from pdf_annotation_app.config.settings import AppSettings, get_settings
from pdf_annotation_app.db.file_repository import FileRepository
from pdf_annotation_app.uploads.id_generator import IdGenerator, MongoSequenceIdGenerator
from pdf_annotation_app.uploads.storage import StoredFile

LOGGER = get_logger(__name__)


class UploadCoordinator:
    def __init__(
        self,
        repository: FileRepository | None = None,
        *,
        id_generator: IdGenerator | None = None,
        settings: AppSettings | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.settings = settings or get_settings()
        self.repository = repository or FileRepository(settings=settings)
        self.id_generator = id_generator or MongoSequenceIdGenerator(settings=settings)
        self.clock = clock

    def public_path(self, stored: StoredFile) -> str:
        prefix = self.settings.public_upload_prefix.rstrip("/")
        return f"{prefix}/{PurePath(stored.path).name}"

    def register(
        self,
        stored: StoredFile | None,
        *,
        process_id: Any = None,
        form_id: Any = None,
    ) -> UploadResult:
        """Persist a file record for ``stored``.

        A missing or non-positive ``process_id`` is replaced by the next id from
        the configured generator; a missing ``form_id`` becomes 0.
        """
        if stored is None:
            raise InputError("No file uploaded", code="missing_file", field="file")

        pdf_id = parse_int(process_id)
        if pdf_id is None or pdf_id <= 0:
            pdf_id = self.id_generator.next_id()
            LOGGER.info("Assigned generated pdf id", extra={"pdf_id": pdf_id})

        form = parse_int(form_id)
        if form is None:
            form = 0

        record = FileRecord(
            pdf_id=pdf_id,
            form_id=form,
            file_path=self.public_path(stored),
            uploaded_at=self.clock(),
        )
        saved = self.repository.insert(record)
        return UploadResult(
            pdf_id=saved.pdf_id,
            form_id=saved.form_id,
            file_path=saved.file_path,
            file=saved,
        )
