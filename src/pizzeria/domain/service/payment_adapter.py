"""Payment adapter contract shared by every payment method.

An adapter settles one order: it returns a receipt on success and
raises ``PaymentFailedError`` otherwise.  Adapters keep no state
between attempts, so callers build a fresh one whenever they like.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum

from pizzeria.domain.model.order import Order
from pizzeria.domain.model.receipt import PaymentReceipt
from pizzeria.domain.repository.payment_log import PaymentLog
from pizzeria.domain.service.billing_engine import BillingEngine

logger = logging.getLogger(__name__)


class PaymentMethod(Enum):
    UPI = "upi"
    CARD = "card"


class PaymentAdapter(ABC):

    label: str

    def __init__(
        self,
        payment_log: PaymentLog | None = None,
        billing: BillingEngine | None = None,
    ) -> None:
        self._payment_log = payment_log
        self._billing = billing or BillingEngine()

    @abstractmethod
    def pay(self, order: Order) -> PaymentReceipt:
        """Settle *order* or raise PaymentFailedError."""

    def _log(self, message: str) -> None:
        """Write to the payment log, if any.

        A log that cannot be written is reported and otherwise ignored;
        it never changes the outcome of the payment.
        """
        if self._payment_log is None:
            return
        try:
            self._payment_log.log_with_timestamp(message)
        except OSError as exc:
            logger.warning("Failed to persist %s log: %s", self.label, exc)
