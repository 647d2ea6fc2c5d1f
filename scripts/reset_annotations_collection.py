"""Utility to clear the annotations collection in MongoDB."""

from __future__ import annotations

import argparse

from pdf_annotation_app.config.logging import configure_logging, get_logger
from pdf_annotation_app.config.settings import get_settings
from pdf_annotation_app.db.annotation_repository import AnnotationRepository

configure_logging()
LOGGER = get_logger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Reset the annotations collection")
    parser.add_argument("--force", action="store_true", help="Skip confirmation prompt")
    args = parser.parse_args()

    settings = get_settings()
    repository = AnnotationRepository(settings=settings)

    doc_count = repository.count()
    if doc_count == 0:
        print("Collection is already empty.")
        return

    if not args.force:
        message = (
            f"About to delete {doc_count} documents from "
            f"'{settings.mongo_database}.{settings.annotations_collection}'. Proceed? [y/N] "
        )
        if input(message).strip().lower() not in {"y", "yes"}:
            print("Aborted.")
            return

    LOGGER.warning(
        "Clearing annotations collection",
        extra={
            "database": settings.mongo_database,
            "collection": settings.annotations_collection,
            "documents": doc_count,
        },
    )
    deleted = repository.clear()
    print(f"Deleted {deleted} documents.")


if __name__ == "__main__":
    main()
