"""Abstract keyed repository.

Defined in the domain layer so the domain never depends on
infrastructure. The key type is a parameter: the warehouse keys stock
by ``int``, the clinic keys patients and prescriptions by ``str``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Protocol, TypeVar

K = TypeVar("K", bound=Hashable)


class Identified(Protocol):
    """Anything exposing an ``id`` attribute."""

    @property
    def id(self) -> Hashable: ...


class Stocked(Identified, Protocol):
    """An identified entity whose quantity can be overwritten."""

    name: str
    quantity: int


T = TypeVar("T", bound=Identified)
S = TypeVar("S", bound=Stocked)


class KeyedRepository(ABC, Generic[K, T]):

    @abstractmethod
    def add(self, item: T) -> None:
        """Store a new entity.

        Raises DuplicateEntityError if an entity with ``item.id`` exists.
        """

    @abstractmethod
    def get_by_id(self, item_id: K) -> T:
        """Return the stored entity itself (not a copy).

        Raises EntityNotFoundError if the id is absent.
        """

    @abstractmethod
    def remove_by_id(self, item_id: K) -> None:
        """Delete an entity. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return a snapshot of every entity in insertion order."""


class StockRepository(KeyedRepository[K, S]):

    @abstractmethod
    def update_quantity(self, item_id: K, new_quantity: int) -> None:
        """Overwrite the quantity of a stored entity in place.

        Raises InvalidQuantityError if ``new_quantity`` is negative and
        EntityNotFoundError if the id is absent.
        """
