"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pizzeria.application.pay_order import PayOrderHandler
from pizzeria.application.place_order import PlaceOrderHandler
from pizzeria.application.show_history import ShowHistoryHandler
from pizzeria.domain.model.order import WALK_IN_CUSTOMER
from pizzeria.domain.repository.order_repository import OrderRepository
from pizzeria.domain.service.payment_adapter import PaymentMethod
from pizzeria.infrastructure.concurrency.order_queue import OrderQueue
from pizzeria.infrastructure.payment import card_payment, upi_payment
from pizzeria.infrastructure.payment.card_payment import CardPayment
from pizzeria.infrastructure.payment.upi_payment import UpiPayment
from pizzeria.infrastructure.persistence.file_payment_log import FilePaymentLog
from pizzeria.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, filled in from CLI options."""

    customer_name: str = WALK_IN_CUSTOMER
    log_file: Path | None = None
    upi_id: str = "tester@upi"
    upi_success_rate: float = 1.0
    card_number: str = "4111222233334444"
    cvv: int = 123
    upi_delay_ms: int = upi_payment.DEFAULT_DELAY_MS
    card_delay_ms: int = card_payment.DEFAULT_DELAY_MS


class PizzeriaApp:
    """One running shop: a single order store shared by every handler.

    Placed orders are also sent to ``kitchen_queue`` for a consumer thread.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        order_repo: OrderRepository | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.order_repo = order_repo or InMemoryOrderRepository()
        self.kitchen_queue = OrderQueue()
        self._payment_log = (
            FilePaymentLog(self.settings.log_file) if self.settings.log_file else None
        )

    # --- Handlers -------------------------------------------------------------

    def place_order_handler(self) -> PlaceOrderHandler:
        return PlaceOrderHandler(self.order_repo, on_placed=self.kitchen_queue.send)

    def show_history_handler(self) -> ShowHistoryHandler:
        return ShowHistoryHandler(self.order_repo)

    def pay_order_handler(self) -> PayOrderHandler:
        return PayOrderHandler(
            self.order_repo,
            adapters={
                PaymentMethod.UPI: self._upi_adapter,
                PaymentMethod.CARD: self._card_adapter,
            },
        )

    # --- Payment adapters (a fresh one per attempt) ---------------------------

    def _upi_adapter(self) -> UpiPayment:
        return UpiPayment(
            self.settings.upi_id,
            success_rate=self.settings.upi_success_rate,
            delay_ms=self.settings.upi_delay_ms,
            payment_log=self._payment_log,
        )

    def _card_adapter(self) -> CardPayment:
        return CardPayment(
            self.settings.card_number,
            self.settings.cvv,
            delay_ms=self.settings.card_delay_ms,
            payment_log=self._payment_log,
        )
