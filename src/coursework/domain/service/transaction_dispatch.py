"""Domain service: route a transaction through a payment channel.

Every channel follows the same process-and-log contract; only the
wording differs, so there is one function parameterised by ``Channel``.
"""

from __future__ import annotations

import logging

from coursework.domain.model.finance import Channel, Transaction

logger = logging.getLogger(__name__)


def describe(transaction: Transaction) -> str:
    return (
        f"{transaction.id}, {transaction.date:%Y-%m-%d %H:%M}, "
        f"{transaction.amount}, {transaction.category}"
    )


def dispatch(transaction: Transaction, channel: Channel) -> list[str]:
    """Process ``transaction`` via ``channel`` and return the messages shown."""
    logger.info("Dispatching transaction %s via %s", transaction.id, channel.label)
    return [
        f"Processing {channel.label.lower()} transaction: {describe(transaction)}",
        f"Transaction processed successfully via {channel.label}.",
    ]
