"""Parsing of the shell's free-text input lines.

Both parsers return None for input that does not fit, leaving the
caller to print a message and prompt again.
"""

from __future__ import annotations

from pizzeria.domain.model import catalog
from pizzeria.domain.service.payment_adapter import PaymentMethod


def parse_order_line(line: str) -> list[str] | None:
    """Split 'margherita farmhouse' into selection names.

    One unknown name rejects the whole line.
    """
    names = line.split()
    if not all(catalog.is_selection(name) for name in names):
        return None
    return names


def parse_payment_line(line: str) -> tuple[int, PaymentMethod] | None:
    """Parse '<order_id> <upi|card>', optionally prefixed with 'pay'."""
    tokens = line.split()
    if tokens and tokens[0] == "pay":
        tokens = tokens[1:]
    if len(tokens) < 2 or not (tokens[0].isascii() and tokens[0].isdigit()):
        return None
    try:
        method = PaymentMethod(tokens[1])
    except ValueError:
        return None
    return int(tokens[0]), method
