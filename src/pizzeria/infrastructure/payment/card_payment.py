"""Simulated card payments.

A card is accepted when its CVV is a plausible three-digit code
(100-999).  Only the last four digits of the card number ever reach
the payment log.
"""

from __future__ import annotations

import logging
import time

from pizzeria.domain.exceptions import PaymentFailedError
from pizzeria.domain.model.order import Order
from pizzeria.domain.model.receipt import PaymentReceipt
from pizzeria.domain.repository.payment_log import PaymentLog
from pizzeria.domain.service.billing_engine import BillingEngine
from pizzeria.domain.service.payment_adapter import PaymentAdapter

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 150
CVV_RANGE = range(100, 1000)


def mask_card_number(card_number: str) -> str:
    return f"****{card_number[-4:]}"


class CardPayment(PaymentAdapter):

    label = "Card"

    _fail_on_invalid_cvv = True

    def __init__(
        self,
        card_number: str,
        cvv: int,
        delay_ms: int = DEFAULT_DELAY_MS,
        payment_log: PaymentLog | None = None,
        billing: BillingEngine | None = None,
    ) -> None:
        super().__init__(payment_log=payment_log, billing=billing)
        self.card_number = card_number
        self.cvv = cvv
        self.delay_ms = delay_ms

    @classmethod
    def in_test_mode(cls, card_number: str, cvv: int, **kwargs) -> CardPayment:
        """Build an adapter that accepts cards with an invalid CVV.

        For exercising the happy path with arbitrary card data only.
        """
        adapter = cls(card_number, cvv, **kwargs)
        adapter._fail_on_invalid_cvv = False
        logger.warning(
            "Card adapter for %s built in test mode; invalid CVVs will be accepted",
            mask_card_number(card_number),
        )
        return adapter

    @property
    def cvv_valid(self) -> bool:
        return self.cvv in CVV_RANGE

    def pay(self, order: Order) -> PaymentReceipt:
        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000)

        valid = self.cvv_valid
        self._log(
            f"Card payment attempt: card={mask_card_number(self.card_number)}, "
            f"order_id={order.id}, cvv_valid={valid}"
        )

        if not valid:
            self._log(f"Card payment failed (invalid CVV): order_id={order.id}")
            if self._fail_on_invalid_cvv:
                logger.info("Card payment rejected for order #%s", order.id)
                raise PaymentFailedError("Invalid CVV")
            return self._billing.generate_receipt(order)

        receipt = self._billing.generate_receipt(order)
        self._log(
            f"Card payment success: order_id={order.id}, "
            f"amount={receipt.total_amount.amount:.2f}"
        )
        return receipt
