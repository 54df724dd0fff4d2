"""Abstract repository for the Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The concrete store lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pizzeria.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Insert an order, replacing any order with the same ID."""

    @abstractmethod
    def get(self, order_id: int) -> Order | None:
        """Return a copy of the order, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return a snapshot of every stored order, in no set order."""
