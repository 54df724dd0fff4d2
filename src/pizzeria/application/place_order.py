"""Application service: Place Order use case.

Turns the customer's menu selections into priced items, lets the Order
aggregate assign an identifier, and stores the result.  Each stored order
is then passed to the optional ``on_placed`` hook (the kitchen queue).
"""

from __future__ import annotations

import logging
from typing import Callable

from pizzeria.application.dto import OrderDTO
from pizzeria.domain.exceptions import MissingCustomerNameError, NoPizzaSelectedError
from pizzeria.domain.model import catalog
from pizzeria.domain.model.order import WALK_IN_CUSTOMER, Order
from pizzeria.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        on_placed: Callable[[Order], None] | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._on_placed = on_placed

    def handle(
        self,
        selections: list[str],
        customer_name: str = WALK_IN_CUSTOMER,
    ) -> OrderDTO:
        """Place an order for the named menu selections.

        Raises NoPizzaSelectedError for an empty selection and
        EntityNotFoundError for a name that is not on the menu.
        """
        if not customer_name or not customer_name.strip():
            raise MissingCustomerNameError()
        if not selections:
            raise NoPizzaSelectedError()

        items = [catalog.build(name) for name in selections]
        order = Order.create(items, customer_name=customer_name.strip())
        self._order_repo.add(order)
        if self._on_placed is not None:
            self._on_placed(order)

        logger.info(
            "Placed order #%s for %s: %d pizza(s), total %s",
            order.id, order.customer_name, order.item_count, order.total_cost(),
        )
        return OrderDTO.from_order(order)
