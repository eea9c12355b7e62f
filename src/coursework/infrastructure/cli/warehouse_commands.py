"""CLI commands for the warehouse exercise."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import click

from coursework.application import sample_data
from coursework.application.manage_stock import (
    AddStockItemHandler,
    IncreaseStockHandler,
    RemoveStockItemHandler,
    UpdateQuantityHandler,
)
from coursework.application.show_stock import ShowStockHandler
from coursework.domain.exceptions import DomainException
from coursework.domain.model.warehouse import ElectronicItem
from coursework.domain.repository.keyed_repository import K, S, StockRepository
from coursework.infrastructure.bootstrap import (
    electronics_repository,
    groceries_repository,
)


def _echo_stock(title: str, repo: StockRepository[K, S]) -> None:
    click.echo(f"\n{title}:")
    for line in ShowStockHandler(repo).handle():
        click.echo(f"ID: {line.id}, Name: {line.name}, Quantity: {line.quantity}")


def _attempt(action: Callable[[], object], success: str) -> None:
    """Run a stock operation, reporting a domain error instead of aborting."""
    try:
        action()
    except DomainException as exc:
        click.echo(str(exc))
        return
    click.echo(success)


@click.command("demo")
def warehouse_demo() -> None:
    """Seed stock, try a few invalid operations, and show the result."""
    electronics = electronics_repository()
    groceries = groceries_repository()

    add_electronic = AddStockItemHandler(electronics)
    for item in sample_data.electronics():
        add_electronic.handle(item)
    add_grocery = AddStockItemHandler(groceries)
    for item in sample_data.groceries(datetime.now()):
        add_grocery.handle(item)

    _echo_stock("Electronics", electronics)
    _echo_stock("Groceries", groceries)
    click.echo()

    _attempt(
        lambda: add_electronic.handle(
            ElectronicItem(id=1, name="Tablet", quantity=5, brand="Apple", warranty_months=12)
        ),
        "Item added successfully.",
    )
    _attempt(lambda: RemoveStockItemHandler(groceries).handle(99), "Item removed successfully.")
    _attempt(lambda: UpdateQuantityHandler(groceries).handle(1, -5), "Stock updated successfully.")
    _attempt(lambda: IncreaseStockHandler(electronics).handle(2, 5), "Stock updated successfully.")

    click.echo("\nFinal Inventory:")
    _echo_stock("Electronics", electronics)
    _echo_stock("Groceries", groceries)
