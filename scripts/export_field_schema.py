"""Print the projected field schema for a process/form pair."""

from __future__ import annotations

import json

import click

from pdf_annotation_app.annotations.errors import InputError, StoreError
from pdf_annotation_app.annotations.projector import FieldSchemaProjector
from pdf_annotation_app.config.logging import configure_logging

configure_logging()


@click.command()
@click.argument("process_id")
@click.argument("form_id")
@click.option("--indent", type=int, default=2, show_default=True)
def export_field_schema(process_id: str, form_id: str, indent: int) -> None:
    """Dump field descriptors for PROCESS_ID and FORM_ID as JSON."""
    projector = FieldSchemaProjector()
    try:
        descriptors = projector.project(process_id, form_id)
    except (InputError, StoreError) as exc:
        raise click.ClickException(f"{exc.code}: {exc.message}") from exc

    click.echo(json.dumps([descriptor.model_dump(mode="json") for descriptor in descriptors], indent=indent))


if __name__ == "__main__":
    export_field_schema()
