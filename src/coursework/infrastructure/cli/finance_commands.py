"""CLI commands for the finance exercise."""

from __future__ import annotations

from datetime import datetime

import click

from coursework.application import sample_data
from coursework.application.process_transactions import ProcessTransactionsHandler
from coursework.domain.model.finance import SavingsAccount


@click.command("run")
def finance_run() -> None:
    """Dispatch the sample transactions and debit the savings account."""
    account = SavingsAccount(
        sample_data.SAVINGS_ACCOUNT_NUMBER, sample_data.SAVINGS_OPENING_BALANCE
    )
    handler = ProcessTransactionsHandler(account)

    results = handler.handle(sample_data.routed_transactions(datetime.now()))

    for result in results:
        for message in result.messages:
            click.echo(message)
    click.echo()
    click.echo(f"{len(handler.processed)} transaction(s) processed.")
    click.echo(f"Final balance of {account.account_number}: {account.balance}")
