"""Local disk storage for uploaded PDFs."""

from __future__ import annotations

import random
import re
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from pdf_annotation_app.config.logging import get_logger
from pdf_annotation_app.config.settings import AppSettings, get_settings

LOGGER = get_logger(__name__)


@dataclass
class StoredFile:
    path: Path
    original_filename: str


def unique_filename(original_filename: str) -> str:
    name = re.sub(r"\s+", "_", Path(original_filename).name) or "upload.pdf"
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}-{name}"


class LocalFileStorage:
    """Write uploaded binaries under the configured upload directory."""

    def __init__(self, upload_dir: Path | None = None, *, settings: AppSettings | None = None) -> None:
        self.upload_dir = upload_dir or (settings or get_settings()).upload_dir
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def save(self, original_filename: str, stream: BinaryIO) -> StoredFile:
        target = self.upload_dir / unique_filename(original_filename)
        with target.open("wb") as handle:
            shutil.copyfileobj(stream, handle)

        LOGGER.info(
            "Stored uploaded file",
            extra={"original_filename": original_filename, "path": str(target), "bytes": target.stat().st_size},
        )
        return StoredFile(path=target, original_filename=original_filename)

    def discard(self, stored: StoredFile) -> None:
        """Remove a stored file whose record could not be saved."""
        stored.path.unlink(missing_ok=True)
        LOGGER.warning("Discarded orphaned upload", extra={"path": str(stored.path)})
