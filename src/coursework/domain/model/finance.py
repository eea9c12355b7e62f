"""Finance exercise: transactions, payment channels and accounts.

Overdraft policy: no account may be driven below zero. A transaction
larger than the current balance is refused, the balance is left as is
and the refusal is reported as "Insufficient funds". Opening balances
are ``Money`` and so can never be negative either.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from coursework.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

INSUFFICIENT_FUNDS = "Insufficient funds"


@dataclass(frozen=True)
class Transaction:
    id: int
    date: datetime
    amount: Money
    category: str


class Channel(Enum):
    """Closed set of payment channels a transaction can travel through."""

    BANK_TRANSFER = "Bank Transfer"
    MOBILE_MONEY = "Mobile Money"
    CRYPTO = "Crypto"

    @property
    def label(self) -> str:
        return self.value


class Account:
    """A debit account holding a non-negative ``Money`` balance."""

    kind = "Account"

    def __init__(self, account_number: str, initial_balance: Money) -> None:
        self.account_number = account_number
        self._balance = initial_balance

    @property
    def balance(self) -> Money:
        return self._balance

    def apply_transaction(self, transaction: Transaction) -> bool:
        """Debit ``transaction.amount`` from the balance.

        Returns False, leaving the balance unchanged, when the amount
        exceeds the current balance.
        """
        if transaction.amount > self._balance:
            logger.warning(
                "%s: transaction %s for %s refused on %s %s (balance %s)",
                INSUFFICIENT_FUNDS,
                transaction.id,
                transaction.amount,
                self.kind,
                self.account_number,
                self._balance,
            )
            return False
        self._balance = self._balance - transaction.amount
        logger.info(
            "Transaction %s applied to %s %s. New balance: %s",
            transaction.id,
            self.kind,
            self.account_number,
            self._balance,
        )
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.account_number!r}, {self._balance})"


class SavingsAccount(Account):
    kind = "Savings Account"
