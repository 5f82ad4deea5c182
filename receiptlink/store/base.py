"""
Receipt store contract.
"""
from __future__ import annotations

import secrets
from abc import ABC, abstractmethod
from typing import Any, Optional

from receiptlink.schemas import StoredReceipt

# URL-safe, without look-alikes (0/O, 1/l/I)
ID_ALPHABET = "23456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"
DEFAULT_ID_LENGTH = 21
MIN_ID_LENGTH = 16


class StoreError(RuntimeError):
    """The backing store failed; never means "not found"."""


def generate_receipt_id(length: int = DEFAULT_ID_LENGTH) -> str:
    length = max(length, MIN_ID_LENGTH)
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


class ReceiptStore(ABC):
    """Insert-once, read-many receipt storage."""

    def __init__(self, id_length: int = DEFAULT_ID_LENGTH):
        self.id_length = id_length

    def new_id(self) -> str:
        return generate_receipt_id(self.id_length)

    def init_schema(self) -> None:
        """Prepare the backing store at startup. No-op by default."""

    @abstractmethod
    def insert(
        self,
        text: str,
        type: Optional[str] = None,
        data: Optional[dict[str, Any]] = None,
    ) -> str:
        """Persist a new receipt and return its id."""

    @abstractmethod
    def get(self, receipt_id: str) -> Optional[StoredReceipt]:
        """Return the stored receipt, or ``None`` when no row has this id."""
