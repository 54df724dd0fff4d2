"""Abstract sink for payment transaction messages."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PaymentLog(ABC):

    @abstractmethod
    def log(self, message: str) -> None:
        """Record a raw message.  May raise OSError."""

    @abstractmethod
    def log_with_timestamp(self, message: str) -> None:
        """Record ``[<unix-seconds>] <message>``.  May raise OSError."""
