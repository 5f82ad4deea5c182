"""
Receipt storage – one contract, two backings chosen once at startup.
"""
import logging

from receiptlink.config import Settings
from receiptlink.database import make_engine
from receiptlink.store.base import ReceiptStore, StoreError, generate_receipt_id
from receiptlink.store.memory import InMemoryReceiptStore
from receiptlink.store.sql import SqlReceiptStore

logger = logging.getLogger(__name__)

__all__ = [
    "InMemoryReceiptStore",
    "ReceiptStore",
    "SqlReceiptStore",
    "StoreError",
    "build_store",
    "generate_receipt_id",
]


def build_store(settings: Settings) -> ReceiptStore:
    if settings.DATABASE_URL:
        logger.info("Receipt store: database")
        engine = make_engine(settings.DATABASE_URL, echo=settings.DEBUG)
        return SqlReceiptStore(engine, id_length=settings.RECEIPT_ID_LENGTH)
    logger.warning("DATABASE_URL not set; receipts are kept in memory and lost on restart")
    return InMemoryReceiptStore(id_length=settings.RECEIPT_ID_LENGTH)
