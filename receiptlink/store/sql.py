"""
SQLAlchemy-backed receipt store (the external store).
"""
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from receiptlink.database import Base, make_session_factory
from receiptlink.models.receipt import ReceiptModel
from receiptlink.schemas import StoredReceipt
from receiptlink.store.base import DEFAULT_ID_LENGTH, ReceiptStore, StoreError


class SqlReceiptStore(ReceiptStore):
    def __init__(self, engine: Engine, id_length: int = DEFAULT_ID_LENGTH):
        super().__init__(id_length)
        self.engine = engine
        self.SessionLocal = make_session_factory(engine)

    def init_schema(self) -> None:
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not prepare receipts table: {exc}") from exc

    def insert(
        self,
        text: str,
        type: Optional[str] = None,
        data: Optional[dict[str, Any]] = None,
    ) -> str:
        receipt_id = self.new_id()
        record = ReceiptModel(
            id=receipt_id,
            receipt_text=text,
            receipt_type=type,
            receipt_data=data if data is not None else {},
        )
        db = self.SessionLocal()
        try:
            db.add(record)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise StoreError(f"Insert failed: {exc.__class__.__name__}: {exc}") from exc
        finally:
            db.close()
        return receipt_id

    def get(self, receipt_id: str) -> Optional[StoredReceipt]:
        db = self.SessionLocal()
        try:
            row = db.get(ReceiptModel, receipt_id)
            if row is None:
                return None
            return StoredReceipt(
                id=row.id,
                receipt_text=row.receipt_text,
                receipt_type=row.receipt_type,
                receipt_data=row.receipt_data or {},
                created_at=row.created_at,
            )
        except SQLAlchemyError as exc:
            raise StoreError(f"Lookup failed: {exc.__class__.__name__}: {exc}") from exc
        finally:
            db.close()
