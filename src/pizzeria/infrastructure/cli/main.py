import logging
from pathlib import Path

import click

from pizzeria.infrastructure.bootstrap import PizzeriaApp, Settings
from pizzeria.infrastructure.cli.display import display_menu
from pizzeria.infrastructure.cli.shell import run_shell


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Pizzeria — pizza ordering and payment simulator"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@cli.command("menu")
def menu() -> None:
    """Show the menu and exit."""
    display_menu()


@cli.command("shell")
@click.option("--customer", envvar="PIZZERIA_CUSTOMER", default=Settings.customer_name,
              show_default=True, help="Customer name recorded on new orders.")
@click.option("--log-file", envvar="PIZZERIA_LOG_FILE", default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help="Append payment transactions to this file.")
@click.option("--upi-id", envvar="PIZZERIA_UPI_ID", default=Settings.upi_id,
              show_default=True, help="UPI ID charged for UPI payments.")
@click.option("--upi-success-rate", envvar="PIZZERIA_UPI_SUCCESS_RATE",
              default=Settings.upi_success_rate, show_default=True,
              type=click.FloatRange(0.0, 1.0, clamp=True),
              help="Chance that a simulated UPI payment goes through.")
@click.option("--card-number", envvar="PIZZERIA_CARD_NUMBER", default=Settings.card_number,
              show_default=True, help="Card charged for card payments.")
@click.option("--cvv", envvar="PIZZERIA_CVV", default=Settings.cvv, type=int,
              show_default=True, help="CVV presented with the card.")
def shell(
    customer: str,
    log_file: Path | None,
    upi_id: str,
    upi_success_rate: float,
    card_number: str,
    cvv: int,
) -> None:
    """Start the interactive ordering shell."""
    settings = Settings(
        customer_name=customer,
        log_file=log_file,
        upi_id=upi_id,
        upi_success_rate=upi_success_rate,
        card_number=card_number,
        cvv=cvv,
    )
    run_shell(PizzeriaApp(settings))
