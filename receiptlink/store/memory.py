"""
Process-lifetime receipt store used when no database is configured.
"""
from __future__ import annotations

import copy
import threading
from datetime import datetime, timezone
from typing import Any, Optional

from receiptlink.schemas import StoredReceipt
from receiptlink.store.base import DEFAULT_ID_LENGTH, ReceiptStore


class InMemoryReceiptStore(ReceiptStore):
    def __init__(self, id_length: int = DEFAULT_ID_LENGTH):
        super().__init__(id_length)
        self._rows: dict[str, StoredReceipt] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._rows)

    def insert(
        self,
        text: str,
        type: Optional[str] = None,
        data: Optional[dict[str, Any]] = None,
    ) -> str:
        with self._lock:
            receipt_id = self.new_id()
            while receipt_id in self._rows:
                receipt_id = self.new_id()
            self._rows[receipt_id] = StoredReceipt(
                id=receipt_id,
                receipt_text=text,
                receipt_type=type,
                receipt_data=copy.deepcopy(data) if data is not None else {},
                created_at=datetime.now(timezone.utc),
            )
        return receipt_id

    def get(self, receipt_id: str) -> Optional[StoredReceipt]:
        row = self._rows.get(receipt_id)
        # hand out copies so callers cannot mutate the stored row
        return row.model_copy(deep=True) if row is not None else None
