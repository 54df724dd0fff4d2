"""Simulated UPI (wallet transfer) payments.

Each attempt waits out a short simulated network delay, then draws one
random number to decide the outcome.  Inject a seeded
``random.Random`` to make the outcome reproducible.
"""

from __future__ import annotations

import logging
import random
import time

from pizzeria.domain.exceptions import PaymentFailedError
from pizzeria.domain.model.order import Order
from pizzeria.domain.model.receipt import PaymentReceipt
from pizzeria.domain.repository.payment_log import PaymentLog
from pizzeria.domain.service.billing_engine import BillingEngine
from pizzeria.domain.service.payment_adapter import PaymentAdapter

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_RATE = 0.8
DEFAULT_DELAY_MS = 200


class UpiPayment(PaymentAdapter):

    label = "UPI"

    def __init__(
        self,
        upi_id: str,
        success_rate: float = DEFAULT_SUCCESS_RATE,
        delay_ms: int = DEFAULT_DELAY_MS,
        payment_log: PaymentLog | None = None,
        rng: random.Random | None = None,
        billing: BillingEngine | None = None,
    ) -> None:
        super().__init__(payment_log=payment_log, billing=billing)
        self.upi_id = upi_id
        self.success_rate = min(max(success_rate, 0.0), 1.0)
        self.delay_ms = delay_ms
        self._rng = rng or random.Random()

    def pay(self, order: Order) -> PaymentReceipt:
        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000)

        # random() is in [0, 1): a rate of 1.0 always passes, 0.0 never does.
        chance = self._rng.random()
        success = chance < self.success_rate

        self._log(
            f"UPI payment attempt: upi_id={self.upi_id}, order_id={order.id}, "
            f"chance={chance:.3f}, success={success}"
        )

        if not success:
            self._log(f"UPI payment failed: order_id={order.id}")
            logger.info("UPI payment rejected for order #%s", order.id)
            raise PaymentFailedError("UPI transaction rejected")

        receipt = self._billing.generate_receipt(order)
        self._log(
            f"UPI payment success: order_id={order.id}, "
            f"amount={receipt.total_amount.amount:.2f}"
        )
        return receipt
