"""End-to-end tests for the click CLI and the interactive shell."""

import re

import pytest
from click.testing import CliRunner

from pizzeria.domain.model.order import Order
from pizzeria.infrastructure.cli.main import cli


@pytest.fixture(autouse=True)
def no_payment_delay(monkeypatch):
    monkeypatch.setattr("time.sleep", lambda seconds: None)


@pytest.fixture
def runner():
    return CliRunner()


def _next_order_id() -> int:
    """The id the next placed order will get (ids are process-wide)."""
    return Order.create([]).id + 1


def _shell(runner, lines, *args, **kwargs):
    return runner.invoke(cli, ["shell", *args], input="\n".join(lines) + "\n", **kwargs)


class TestMenuCommand:

    def test_lists_pizzas_crusts_toppings(self, runner):
        result = runner.invoke(cli, ["menu"])
        assert result.exit_code == 0
        for text in ("Margherita", "₹120.00", "Thin Crust", "+₹20.00",
                     "Jalapenos", "+₹12.00", "cheese_burst_farmhouse", "₹200.00"):
            assert text in result.output


class TestShellNavigation:

    def test_exit(self, runner):
        result = _shell(runner, ["5"])
        assert result.exit_code == 0
        assert "1) Show Menu" in result.output
        assert "Goodbye!" in result.output

    def test_end_of_input_exits_cleanly(self, runner):
        result = runner.invoke(cli, ["shell"], input="")
        assert result.exit_code == 0
        assert "Goodbye!" in result.output

    def test_invalid_choice(self, runner):
        result = _shell(runner, ["9", "5"])
        assert "Invalid choice. Try again." in result.output

    def test_show_menu(self, runner):
        result = _shell(runner, ["1", "5"])
        assert "Farmhouse" in result.output
        assert "Olives" in result.output


class TestShellOrdering:

    def test_place_order_and_view_history(self, runner):
        order_id = _next_order_id()
        result = _shell(runner, ["2", "margherita thin_margherita", "3", "5"])
        assert result.exit_code == 0
        assert f"Order placed successfully! Order ID: {order_id}" in result.output
        assert "Margherita, Thin Crust" in result.output
        assert f"Order #{order_id} | 2 pizzas | ₹260.00 | CREATED" in result.output

    def test_one_bad_name_rejects_the_line(self, runner):
        result = _shell(runner, ["2", "margherita pepperoni", "3", "5"])
        assert "Invalid pizza names." in result.output
        assert "(no orders yet)" in result.output

    def test_empty_order_line(self, runner):
        result = _shell(runner, ["2", "", "5"])
        assert "No pizzas entered." in result.output

    def test_customer_from_env(self, runner):
        result = _shell(runner, ["2", "farmhouse", "5"], env={"PIZZERIA_CUSTOMER": "Ravi"})
        assert "Customer: Ravi" in result.output


class TestShellPayment:

    def test_pay_by_upi(self, runner):
        order_id = _next_order_id()
        result = _shell(runner, ["2", "margherita farmhouse", "4", f"{order_id} upi", "3", "5"])
        assert f"Payment successful for Order {order_id}!" in result.output
        assert "Total paid: ₹270.00" in result.output
        assert f"Order #{order_id} | 2 pizzas | ₹270.00 | PAID" in result.output

    def test_pay_by_card_with_pay_prefix(self, runner):
        order_id = _next_order_id()
        result = _shell(runner, ["2", "cheese_burst_farmhouse", "4", f"pay {order_id} card", "5"])
        assert "Method:     Card" in result.output
        assert "Total paid: ₹200.00" in result.output

    def test_declined_payment_keeps_shell_running(self, runner):
        order_id = _next_order_id()
        result = _shell(
            runner, ["2", "margherita", "4", f"{order_id} card", "3", "5"], "--cvv", "12",
        )
        assert result.exit_code == 0
        assert "Error: Payment failed: Invalid CVV" in result.output
        assert f"Order #{order_id} | 1 pizzas | ₹120.00 | CREATED" in result.output
        assert "Goodbye!" in result.output

    def test_upi_rejected_at_zero_rate(self, runner):
        order_id = _next_order_id()
        result = _shell(
            runner, ["2", "margherita", "4", f"{order_id} upi", "5"],
            "--upi-success-rate", "0",
        )
        assert "Error: Payment failed: UPI transaction rejected" in result.output

    def test_unknown_order(self, runner):
        result = _shell(runner, ["4", "999999 upi", "5"])
        assert "Error: Order #999999 not found" in result.output

    @pytest.mark.parametrize("line", ["abc upi", "1", "1 cash", "", "² upi"])
    def test_invalid_payment_input(self, runner, line):
        result = _shell(runner, ["4", line, "5"])
        assert result.exception is None
        assert "Invalid payment input." in result.output
        assert "Goodbye!" in result.output

    def test_transaction_log_file(self, runner, tmp_path):
        log_file = tmp_path / "payments.log"
        order_id = _next_order_id()
        _shell(runner, ["2", "margherita", "4", f"{order_id} upi", "5"],
               "--log-file", str(log_file))

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert re.match(rf"\[\d+\] UPI payment attempt: upi_id=tester@upi, order_id={order_id}", lines[0])
        assert lines[-1].endswith(f"UPI payment success: order_id={order_id}, amount=120.00")
