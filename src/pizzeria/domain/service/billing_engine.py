"""Domain service: Billing.

Totals an order from its items and issues a timestamped receipt.
Adapters call this once a payment has gone through, so every receipt
is priced the same way regardless of how the customer paid.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from pizzeria.domain.model.order import Order
from pizzeria.domain.model.receipt import PaymentReceipt
from pizzeria.domain.model.value_objects import Money


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BillingEngine:

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock

    def calculate_total(self, order: Order) -> Money:
        """Sum the cost of every item; zero for an empty order."""
        return sum((item.cost() for item in order.items), Money.zero())

    def generate_receipt(self, order: Order) -> PaymentReceipt:
        return PaymentReceipt(
            order_id=order.id,
            total_amount=self.calculate_total(order),
            issued_at=self._clock(),
        )
