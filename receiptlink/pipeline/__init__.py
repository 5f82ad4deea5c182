"""
Receipt pipeline.

normalize request body → (store) → project summary rows for the viewer.
"""
from receiptlink.pipeline.dates import format_transaction_time
from receiptlink.pipeline.normalizer import (
    ReceiptValidationError,
    normalize_receipt_request,
)
from receiptlink.pipeline.summary import build_summary_fields

__all__ = [
    "ReceiptValidationError",
    "build_summary_fields",
    "format_transaction_time",
    "normalize_receipt_request",
]
