"""Integration tests for the ShowHistory query."""

from pizzeria.application.place_order import PlaceOrderHandler
from pizzeria.application.show_history import ShowHistoryHandler
from pizzeria.domain.model import pizza
from pizzeria.domain.model.order import Order
from pizzeria.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)


class TestShowHistory:

    def test_empty(self):
        assert ShowHistoryHandler(InMemoryOrderRepository()).handle() == []

    def test_lists_orders_oldest_first(self):
        repo = InMemoryOrderRepository()
        place = PlaceOrderHandler(repo)
        placed = [place.handle(["margherita"]), place.handle(["farmhouse", "farmhouse"])]

        history = ShowHistoryHandler(repo).handle()
        assert [o.id for o in history] == [p.id for p in placed]
        assert [o.item_count for o in history] == [1, 2]
        assert history[1].total == "₹300.00"

    def test_sorted_even_if_stored_out_of_order(self):
        repo = InMemoryOrderRepository()
        first, second = Order.create([pizza.margherita()]), Order.create([pizza.farmhouse()])
        repo.add(second)
        repo.add(first)

        history = ShowHistoryHandler(repo).handle()
        assert [o.id for o in history] == [first.id, second.id]

    def test_reflects_status(self):
        repo = InMemoryOrderRepository()
        order = Order.create([pizza.margherita()])
        order.mark_paid()
        repo.add(order)
        assert ShowHistoryHandler(repo).handle()[0].status == "PAID"
