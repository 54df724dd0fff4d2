"""Process-lifetime, thread-safe implementation of OrderRepository.

Every operation takes the same lock for its own duration and never
while holding another, so there is no lock ordering to get wrong.
Orders go in and come out as deep copies; a caller mutating an order
it got back changes nothing until it calls ``add`` again.
"""

from __future__ import annotations

import copy
import threading

from pizzeria.domain.model.order import Order
from pizzeria.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._lock = threading.Lock()

    def add(self, order: Order) -> None:
        with self._lock:
            self._store[order.id] = copy.deepcopy(order)

    def get(self, order_id: int) -> Order | None:
        with self._lock:
            order = self._store.get(order_id)
            return copy.deepcopy(order) if order is not None else None

    def list_all(self) -> list[Order]:
        with self._lock:
            return [copy.deepcopy(o) for o in self._store.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
