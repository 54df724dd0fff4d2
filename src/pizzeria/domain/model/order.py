"""Order aggregate.

An order owns the priced items the customer picked, in the order they
were picked.  The total is never cached; it is summed from the items
every time it is asked for.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pizzeria.domain.model.pizza import PricedItem
from pizzeria.domain.model.value_objects import Money
from pizzeria.domain.service.id_generator import IdGenerator

WALK_IN_CUSTOMER = "Walk-in"

# Process-wide so identifiers stay unique across every order ever created.
_order_ids = IdGenerator()


class OrderStatus(Enum):
    CREATED = "CREATED"
    PAID = "PAID"
    COMPLETED = "COMPLETED"


@dataclass
class Order:
    """Aggregate root for pizza orders.

    Use ``Order.create()`` for new orders; it assigns the identifier.
    The plain ``__init__`` exists so tests and stores can build or copy
    an order without consuming a new identifier.
    """

    id: int
    items: list[PricedItem]
    status: OrderStatus = OrderStatus.CREATED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    customer_name: str = WALK_IN_CUSTOMER

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        items: list[PricedItem],
        customer_name: str = WALK_IN_CUSTOMER,
    ) -> Order:
        """Create a new order with a fresh identifier.

        An empty item list is allowed here and yields a zero total;
        use-case handlers decide whether to reject it.
        """
        return Order(
            id=_order_ids.next_value(),
            items=list(items),
            customer_name=customer_name,
        )

    # --- State transitions ----------------------------------------------------

    def mark_paid(self) -> None:
        """Move to PAID.

        Not checked against the current status; callers confirm that a
        payment actually went through before calling this.
        """
        self.status = OrderStatus.PAID

    def mark_completed(self) -> None:
        """Move to COMPLETED, whatever the current status."""
        self.status = OrderStatus.COMPLETED

    # --- Computed properties --------------------------------------------------

    def total_cost(self) -> Money:
        return sum((item.cost() for item in self.items), Money.zero())

    @property
    def item_count(self) -> int:
        return len(self.items)
