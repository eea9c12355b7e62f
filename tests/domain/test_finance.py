"""Unit tests for accounts and the overdraft policy."""

import logging
from datetime import datetime

from coursework.domain.model.finance import (
    Account,
    Channel,
    SavingsAccount,
    Transaction,
)
from coursework.domain.model.value_objects import Money


def _txn(amount: str, txn_id: int = 1) -> Transaction:
    return Transaction(
        id=txn_id, date=datetime(2026, 1, 15), amount=Money.of(amount), category="Food stuff"
    )


class TestSavingsAccount:

    def test_apply_decrements_balance(self):
        account = SavingsAccount("Ha7927363jk", Money.of("50000"))
        assert account.apply_transaction(_txn("150")) is True
        assert account.balance == Money.of("49850")

    def test_successive_transactions(self):
        account = SavingsAccount("Ha7927363jk", Money.of("50000"))
        for i, amount in enumerate(["150", "200", "300"], start=1):
            account.apply_transaction(_txn(amount, i))
        assert account.balance == Money.of("49350")

    def test_insufficient_funds_leaves_balance(self, caplog):
        account = SavingsAccount("Ha7927363jk", Money.of("100"))
        with caplog.at_level(logging.WARNING):
            assert account.apply_transaction(_txn("150")) is False
        assert account.balance == Money.of("100")
        assert "Insufficient funds" in caplog.text

    def test_exact_balance_can_be_spent(self):
        account = SavingsAccount("Ha7927363jk", Money.of("150"))
        assert account.apply_transaction(_txn("150")) is True
        assert account.balance == Money.of("0")


class TestAccountPolicy:

    def test_plain_account_also_refuses_overdraft(self):
        account = Account("CUR-1", Money.of("100"))
        assert account.apply_transaction(_txn("101")) is False
        assert account.balance == Money.of("100")

    def test_kind_labels(self):
        assert Account.kind == "Account"
        assert SavingsAccount.kind == "Savings Account"


class TestChannel:

    def test_closed_set_of_labels(self):
        assert [c.label for c in Channel] == ["Bank Transfer", "Mobile Money", "Crypto"]
