"""Money for account balances and transaction amounts."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from coursework.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "GHS"


@dataclass(frozen=True)
class Money:
    """A non-negative Decimal amount tagged with its currency.

    Only what debiting an account needs is supported: comparing two
    amounts and taking one from another. Both refuse mixed currencies.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(f"Amount cannot be negative, got {self.amount}")

    @classmethod
    def of(cls, amount: str | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        try:
            return cls(Decimal(str(amount)), currency)
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid amount: {amount!r}") from exc

    def __gt__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount > other.amount

    def __sub__(self, other: Money) -> Money:
        """Debit ``other``; a result below zero is a ValidationError."""
        self._check_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:,.2f}"

    def _check_currency(self, other: Money) -> None:
        if other.currency != self.currency:
            raise ValidationError(
                f"Currency mismatch: {self.currency} vs {other.currency}"
            )
