"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from pizzeria.domain.model.order import Order
from pizzeria.domain.model.receipt import PaymentReceipt


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single pizza as displayed to the user."""

    description: str
    cost: str  # formatted, e.g. "₹130.00"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    status: str
    items: list[OrderItemDTO]
    total: str
    created_at: str

    @property
    def item_count(self) -> int:
        return len(self.items)

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_name=order.customer_name,
            status=order.status.value,
            items=[
                OrderItemDTO(description=item.description(), cost=str(item.cost()))
                for item in order.items
            ],
            total=str(order.total_cost()),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a successful payment."""

    order_id: int
    method: str
    total: str
    issued_at: str

    @staticmethod
    def from_receipt(receipt: PaymentReceipt, method: str) -> ReceiptDTO:
        return ReceiptDTO(
            order_id=receipt.order_id,
            method=method,
            total=str(receipt.total_amount),
            issued_at=receipt.issued_at.strftime("%Y-%m-%d %H:%M:%S UTC"),
        )
