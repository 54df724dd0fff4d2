"""Text rendering shared by the shell and the one-shot commands."""

from __future__ import annotations

import click

from pizzeria.application.dto import OrderDTO, ReceiptDTO
from pizzeria.domain.model import catalog


def display_menu() -> None:
    click.echo("Menu")
    for section, entries in catalog.menu_sections().items():
        click.echo()
        click.echo(f"  {section}")
        click.echo(f"  {'-'*34}")
        for entry in entries:
            price = str(entry.price) if section == "Pizzas" else f"+{entry.price}"
            click.echo(f"  {entry.name:<22} {price:>11}")

    click.echo()
    click.echo("  Order by name")
    click.echo(f"  {'-'*34}")
    for entry in catalog.selection_entries():
        click.echo(f"  {entry.name:<22} {str(entry.price):>11}")


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Pizza':<40} {'Price':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(f"  {item.description:<40} {item.cost:>10}")
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<27} {dto.total:>23}")


def display_history(orders: list[OrderDTO]) -> None:
    click.echo("Order History:")
    if not orders:
        click.echo("  (no orders yet)")
        return
    for dto in orders:
        click.echo(
            f" - Order #{dto.id} | {dto.item_count} pizzas | {dto.total} | {dto.status}"
        )


def display_receipt(receipt: ReceiptDTO) -> None:
    click.echo(f"Payment successful for Order {receipt.order_id}!")
    click.echo(f"Method:     {receipt.method}")
    click.echo(f"Total paid: {receipt.total}")
    click.echo(f"Issued:     {receipt.issued_at}")
