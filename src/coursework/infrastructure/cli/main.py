import click

from coursework.infrastructure.cli.finance_commands import finance_run
from coursework.infrastructure.cli.health_commands import (
    health_patients,
    health_prescriptions,
)
from coursework.infrastructure.cli.inventory_commands import (
    inventory_demo,
    inventory_show,
)
from coursework.infrastructure.cli.school_commands import school_grade
from coursework.infrastructure.cli.warehouse_commands import warehouse_demo
from coursework.infrastructure.logging_config import configure_logging

PAUSE_MESSAGE = "\nPress any key to exit..."


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.option("--pause", is_flag=True, default=False, help="Wait for a keypress before exiting.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, pause: bool) -> None:
    """Coursework — small record-keeping exercises"""
    configure_logging(verbose)
    if pause:
        ctx.call_on_close(lambda: click.pause(PAUSE_MESSAGE))


@cli.group()
def finance() -> None:
    """Process payments against a savings account."""


@cli.group()
def health() -> None:
    """Look up patients and prescriptions."""


@cli.group()
def inventory() -> None:
    """Record inventory to a JSON file."""


@cli.group()
def school() -> None:
    """Grade student results."""


@cli.group()
def warehouse() -> None:
    """Manage warehouse stock."""


# Register subcommands
finance.add_command(finance_run)
health.add_command(health_patients)
health.add_command(health_prescriptions)
inventory.add_command(inventory_demo)
inventory.add_command(inventory_show)
school.add_command(school_grade)
warehouse.add_command(warehouse_demo)
