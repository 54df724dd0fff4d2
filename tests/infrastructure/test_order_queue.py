"""Tests for the in-process order queue."""

import threading

import pytest

from pizzeria.domain.exceptions import OrderQueueError
from pizzeria.domain.model import pizza
from pizzeria.domain.model.order import Order
from pizzeria.infrastructure.concurrency.order_queue import OrderQueue


class TestOrderQueue:

    def test_sends_and_receives(self):
        q = OrderQueue()
        order = Order.create([pizza.margherita()])
        q.send(order)
        assert q.receive().id == order.id

    def test_fifo(self):
        q = OrderQueue()
        orders = [Order.create([]) for _ in range(3)]
        for o in orders:
            q.send(o)
        assert [q.receive().id for _ in orders] == [o.id for o in orders]

    def test_receive_times_out(self):
        with pytest.raises(OrderQueueError, match="no order received"):
            OrderQueue().receive(timeout=0.01)

    def test_send_to_full_queue_fails(self):
        q = OrderQueue(maxsize=1)
        q.send(Order.create([]))
        with pytest.raises(OrderQueueError, match="full"):
            q.send(Order.create([]))

    def test_closed_queue_refuses_sends(self):
        q = OrderQueue()
        q.close()
        with pytest.raises(OrderQueueError, match="closed"):
            q.send(Order.create([]))

    def test_closed_queue_drains_then_fails(self):
        q = OrderQueue()
        order = Order.create([])
        q.send(order)
        q.close()
        assert q.receive().id == order.id
        with pytest.raises(OrderQueueError, match="closed"):
            q.receive()

    def test_hands_orders_between_threads(self):
        q = OrderQueue()
        received: list[int] = []

        def consumer():
            for _ in range(5):
                received.append(q.receive(timeout=5).id)

        t = threading.Thread(target=consumer)
        t.start()
        sent = [Order.create([pizza.farmhouse()]) for _ in range(5)]
        for o in sent:
            q.send(o)
        t.join()

        assert received == [o.id for o in sent]

    def test_close_wakes_blocked_receiver(self):
        q = OrderQueue()
        errors: list[OrderQueueError] = []
        waiting = threading.Event()

        def consumer():
            waiting.set()
            try:
                q.receive()
            except OrderQueueError as exc:
                errors.append(exc)

        t = threading.Thread(target=consumer)
        t.start()
        waiting.wait(timeout=5)
        q.close()
        t.join(timeout=5)

        assert not t.is_alive()
        assert [e.reason for e in errors] == ["queue is closed"]

    def test_close_wakes_every_blocked_receiver(self):
        q = OrderQueue()
        errors: list[OrderQueueError] = []

        def consumer():
            try:
                q.receive()
            except OrderQueueError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=consumer) for _ in range(3)]
        for t in threads:
            t.start()
        q.close()
        for t in threads:
            t.join(timeout=5)

        assert not any(t.is_alive() for t in threads)
        assert len(errors) == 3

    def test_len_counts_waiting_orders_only(self):
        q = OrderQueue()
        q.send(Order.create([]))
        q.close()
        assert len(q) == 1
        q.receive()
        assert len(q) == 0
