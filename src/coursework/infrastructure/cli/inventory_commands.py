"""CLI commands for the inventory log exercise."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click

from coursework.application import sample_data
from coursework.application.record_inventory import (
    RecordInventoryHandler,
    ShowInventoryHandler,
)
from coursework.infrastructure.bootstrap import inventory_log

_file_option = click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Inventory JSON file (defaults to the data directory).",
)


def _echo_inventory(file_path: Path | None) -> None:
    lines = ShowInventoryHandler(inventory_log(file_path)).handle()

    if not lines:
        click.echo("No items found.")
        return

    for line in lines:
        click.echo(
            f"ID: {line.id}, Name: {line.name}, Quantity: {line.quantity}, "
            f"Date Added: {line.date_added}"
        )


@click.command("demo")
@_file_option
def inventory_demo(file_path: Path | None) -> None:
    """Seed sample items, save them, then reload and list them."""
    log = inventory_log(file_path)
    saved = RecordInventoryHandler(log).handle(
        sample_data.inventory_items(datetime.now())
    )
    if not saved:
        click.echo("Error saving to file; see log output.", err=True)

    # Reload through a fresh log to prove the file round-trips.
    _echo_inventory(log.file_path)
    click.echo(f"\nInventory file saved at: {log.file_path}")


@click.command("show")
@_file_option
def inventory_show(file_path: Path | None) -> None:
    """List the items stored in the inventory file."""
    _echo_inventory(file_path)
