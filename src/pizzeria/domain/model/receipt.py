"""Payment receipt value object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pizzeria.domain.model.value_objects import Money


@dataclass(frozen=True)
class PaymentReceipt:
    """Proof of one successful payment attempt.

    Returned to whoever asked for the payment; it is not stored on the
    order.
    """

    order_id: int
    total_amount: Money
    issued_at: datetime

    @property
    def timestamp(self) -> int:
        """Issue time in Unix milliseconds."""
        return int(self.issued_at.timestamp() * 1000)
