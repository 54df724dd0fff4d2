"""Application service: Show Order History use case (query)."""

from __future__ import annotations

from pizzeria.application.dto import OrderDTO
from pizzeria.domain.repository.order_repository import OrderRepository


class ShowHistoryHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        """Every stored order, oldest first."""
        orders = sorted(self._order_repo.list_all(), key=lambda o: o.id)
        return [OrderDTO.from_order(order) for order in orders]
