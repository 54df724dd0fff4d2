"""Application service: Pay For Order use case.

Looks the order up, hands it to the adapter for the chosen payment
method, and on success marks the order PAID and stores it back.
A failed payment leaves the stored order untouched.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from pizzeria.application.dto import ReceiptDTO
from pizzeria.domain.exceptions import (
    EntityNotFoundError,
    InvalidPaymentMethodError,
    InvoiceGenerationError,
    PaymentFailedError,
    ValidationError,
)
from pizzeria.domain.model.order import OrderStatus
from pizzeria.domain.repository.order_repository import OrderRepository
from pizzeria.domain.service.payment_adapter import PaymentAdapter, PaymentMethod

logger = logging.getLogger(__name__)

AdapterFactory = Callable[[], PaymentAdapter]


class PayOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        adapters: Mapping[PaymentMethod, AdapterFactory],
    ) -> None:
        self._order_repo = order_repo
        self._adapters = adapters

    def handle(self, order_id: int, method: PaymentMethod) -> ReceiptDTO:
        order = self._order_repo.get(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        if order.status != OrderStatus.CREATED:
            raise ValidationError(
                f"Cannot pay for order #{order_id} — current status is "
                f"{order.status.value}, expected CREATED"
            )

        factory = self._adapters.get(method)
        if factory is None:
            raise InvalidPaymentMethodError(method)
        adapter = factory()

        try:
            receipt = adapter.pay(order)
        except PaymentFailedError:
            logger.info("Payment for order #%s via %s failed", order_id, adapter.label)
            raise

        if receipt.order_id != order.id:
            raise InvoiceGenerationError(
                f"receipt issued for order #{receipt.order_id}, expected #{order.id}"
            )

        order.mark_paid()
        self._order_repo.add(order)

        logger.info(
            "Order #%s paid via %s: %s", order_id, adapter.label, receipt.total_amount
        )
        return ReceiptDTO.from_receipt(receipt, adapter.label)
