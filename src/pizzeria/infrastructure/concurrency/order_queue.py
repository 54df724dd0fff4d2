"""In-process FIFO for handing orders from one thread to another."""

from __future__ import annotations

import queue
import threading

from pizzeria.domain.exceptions import OrderQueueError
from pizzeria.domain.model.order import Order

# Queued behind the last order by close() so blocked receivers wake up.
_CLOSED = object()


class OrderQueue:

    def __init__(self, maxsize: int = 0) -> None:
        self._queue: queue.Queue[object] = queue.Queue(maxsize=maxsize)
        self._lock = threading.Lock()
        self._closed = False
        self._marker_queued = False

    def send(self, order: Order) -> None:
        with self._lock:
            if self._closed:
                raise OrderQueueError("queue is closed")
            try:
                self._queue.put_nowait(order)
            except queue.Full:
                raise OrderQueueError("queue is full") from None

    def receive(self, timeout: float | None = None) -> Order:
        """Block until an order arrives.

        Raises OrderQueueError if *timeout* seconds pass first, or once the
        queue is closed and drained.  Receivers blocked when the queue is
        closed are woken and get the same error.
        """
        if self._closed:
            timeout = 0
        try:
            if timeout == 0:
                item = self._queue.get_nowait()
            else:
                item = self._queue.get(timeout=timeout)
        except queue.Empty:
            reason = "queue is closed" if self._closed else "no order received"
            raise OrderQueueError(reason) from None

        if item is _CLOSED:
            # Leave the marker for any other blocked receiver.
            self._queue.put_nowait(_CLOSED)
            raise OrderQueueError("queue is closed")
        return item

    def close(self) -> None:
        """Refuse further sends; queued orders can still be received."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            try:
                self._queue.put_nowait(_CLOSED)
                self._marker_queued = True
            except queue.Full:
                # A full queue has no blocked receivers to wake.
                pass

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        """Orders waiting to be received."""
        return self._queue.qsize() - (1 if self._marker_queued else 0)
