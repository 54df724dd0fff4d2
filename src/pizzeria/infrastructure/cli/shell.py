"""The interactive, numbered-choice shell.

Orders live only as long as the shell does.  Domain errors are printed
and the shell carries on; only choice 5 or end of input ends it.
"""

from __future__ import annotations

import click

from pizzeria.domain.exceptions import DomainException
from pizzeria.domain.model import catalog
from pizzeria.infrastructure.bootstrap import PizzeriaApp
from pizzeria.infrastructure.cli.display import (
    display_history,
    display_menu,
    display_order,
    display_receipt,
)
from pizzeria.infrastructure.cli.parsing import parse_order_line, parse_payment_line

CHOICES = (
    ("1", "Show Menu"),
    ("2", "Place Order"),
    ("3", "View Order History"),
    ("4", "Pay for Order"),
    ("5", "Exit"),
)


def _read(prompt: str = "Enter choice") -> str:
    return click.prompt(prompt, default="", show_default=False).strip()


def _place_order(app: PizzeriaApp) -> None:
    click.echo("Enter pizzas (space separated):")
    click.echo(f"Options: {' '.join(catalog.SELECTIONS)}")
    line = _read("Pizzas")
    if not line:
        click.echo("No pizzas entered.")
        return

    selections = parse_order_line(line)
    if selections is None:
        click.echo("Invalid pizza names.")
        return

    dto = app.place_order_handler().handle(
        selections, customer_name=app.settings.customer_name
    )
    click.echo(f"Order placed successfully! Order ID: {dto.id}")
    click.echo()
    display_order(dto)


def _pay_order(app: PizzeriaApp) -> None:
    click.echo("Enter: <order_id> <upi|card>")
    click.echo("Example: 1 upi")
    parsed = parse_payment_line(_read("Payment"))
    if parsed is None:
        click.echo("Invalid payment input.")
        return

    order_id, method = parsed
    receipt = app.pay_order_handler().handle(order_id, method)
    display_receipt(receipt)


def run_shell(app: PizzeriaApp) -> None:
    click.echo("Welcome to the Pizzeria!")

    while True:
        click.echo()
        click.echo("=== Pizzeria Menu ===")
        for key, label in CHOICES:
            click.echo(f"{key}) {label}")

        try:
            choice = _read()
            if choice == "1":
                display_menu()
            elif choice == "2":
                _place_order(app)
            elif choice == "3":
                display_history(app.show_history_handler().handle())
            elif choice == "4":
                _pay_order(app)
            elif choice == "5":
                break
            else:
                click.echo("Invalid choice. Try again.")
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)
        except click.Abort:
            click.echo()
            break

    click.echo("Goodbye!")
