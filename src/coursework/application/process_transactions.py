"""Application service: Process Transactions use case.

Each transaction is dispatched through its channel and then debited
from the account. A refused debit does not stop the remaining ones.
"""

from __future__ import annotations

from typing import Iterable

from coursework.application.dto import TransactionResultDTO
from coursework.domain.model.finance import (
    INSUFFICIENT_FUNDS,
    Account,
    Channel,
    Transaction,
)
from coursework.domain.service.transaction_dispatch import dispatch


class ProcessTransactionsHandler:

    def __init__(self, account: Account) -> None:
        self._account = account
        self._processed: list[Transaction] = []

    @property
    def processed(self) -> list[Transaction]:
        """Every transaction handled so far, applied or not."""
        return list(self._processed)

    def handle(
        self, routed: Iterable[tuple[Transaction, Channel]]
    ) -> list[TransactionResultDTO]:
        results: list[TransactionResultDTO] = []
        for transaction, channel in routed:
            messages = dispatch(transaction, channel)
            applied = self._account.apply_transaction(transaction)
            if applied:
                messages.append(
                    f"Transaction applied to {self._account.kind} "
                    f"{self._account.account_number}. "
                    f"New balance: {self._account.balance}"
                )
            else:
                messages.append(INSUFFICIENT_FUNDS)
            self._processed.append(transaction)
            results.append(
                TransactionResultDTO(
                    transaction_id=transaction.id,
                    channel=channel.label,
                    messages=messages,
                    applied=applied,
                    balance=str(self._account.balance),
                )
            )
        return results
