"""Append-only text file implementation of PaymentLog."""

from __future__ import annotations

import threading
import time
from pathlib import Path

from pizzeria.domain.repository.payment_log import PaymentLog


class FilePaymentLog(PaymentLog):
    """One line per message, appended; the file is created on first write."""

    def __init__(self, file_path: Path | str) -> None:
        self._file_path = Path(file_path)
        self._lock = threading.Lock()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def log(self, message: str) -> None:
        with self._lock:
            with self._file_path.open("a", encoding="utf-8") as fh:
                fh.write(message + "\n")

    def log_with_timestamp(self, message: str) -> None:
        self.log(f"[{int(time.time())}] {message}")
