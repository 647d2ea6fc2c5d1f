"""CLI entrypoint for bulk-ingesting annotation JSON files."""

from __future__ import annotations

import json
from pathlib import Path

import click

from pdf_annotation_app.annotations.bulk_ingest import AnnotationIngestor
from pdf_annotation_app.annotations.errors import InputError, StoreError
from pdf_annotation_app.config.logging import configure_logging, get_logger

configure_logging()
LOGGER = get_logger(__name__)


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--dry-run", is_flag=True, help="Validate the file without writing to MongoDB")
def ingest_annotations(source: Path, dry_run: bool) -> None:
    """Ingest an annotation object or array from a JSON file."""
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Invalid JSON in {source}: {exc}") from exc

    ingestor = AnnotationIngestor()
    try:
        if dry_run:
            records = ingestor.prepare(payload)
            click.echo(f"Validated {len(records)} annotations from {source}.")
            return
        result = ingestor.ingest(payload)
    except InputError as exc:
        location = f" (item {exc.index})" if getattr(exc, "index", None) is not None else ""
        raise click.ClickException(f"{exc.code}: {exc.message}{location}") from exc
    except StoreError as exc:
        raise click.ClickException(f"{exc.code}: {exc.message}") from exc

    LOGGER.info("Ingestion complete", extra={"file": str(source), "count": result.inserted_count})
    click.echo(f"Ingested {result.inserted_count} annotations from {source}.")


if __name__ == "__main__":
    ingest_annotations()
