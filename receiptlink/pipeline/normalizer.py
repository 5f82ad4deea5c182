"""
Request normalizer – reduces the accepted creation bodies to one receipt.

Accepted shapes, strongest first:

* ``{"receipt": {"text", "type", "data"}, "context": {...}}``
* ``{"payload": {"receiptText", "receiptType", "receiptData"}}``
* ``{"receiptText", "receiptType", "receiptData"}``
"""
from __future__ import annotations

from typing import Any, Optional

from receiptlink.schemas import NormalizedReceipt

MISSING_TEXT_MESSAGE = "receiptText is required and cannot be empty."


class ReceiptValidationError(ValueError):
    """The request carries no usable receipt text."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _as_dict(value: Any) -> Optional[dict[str, Any]]:
    return value if isinstance(value, dict) else None


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _first_str(value: Any, fallback: Optional[str]) -> Optional[str]:
    value = _as_str(value)
    return fallback if value is None else value


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def normalize_receipt_request(body: Any) -> NormalizedReceipt:
    """Pick text, type and data out of a creation request body.

    Raises :class:`ReceiptValidationError` when the resolved text is not a
    string with visible content.
    """
    body = _as_dict(body) or {}

    receipt_type = _as_str(body.get("receiptType"))
    receipt_text = body.get("receiptText")
    receipt_data = _as_dict(body.get("receiptData"))

    receipt = _as_dict(body.get("receipt"))
    payload = _as_dict(body.get("payload"))
    context = _as_dict(body.get("context"))

    if receipt is not None:
        receipt_type = _first_str(receipt.get("type"), receipt_type)
        receipt_text = receipt.get("text")
        receipt_data = dict(_as_dict(receipt.get("data")) or {})
        if context is not None:
            receipt_data["context"] = context
    elif payload is not None:
        receipt_type = _first_str(payload.get("receiptType"), receipt_type)
        receipt_text = payload.get("receiptText")
        receipt_data = _as_dict(payload.get("receiptData")) or {}

    if not isinstance(receipt_text, str) or not receipt_text.strip():
        raise ReceiptValidationError(MISSING_TEXT_MESSAGE)

    return NormalizedReceipt(text=receipt_text, type=receipt_type, data=receipt_data)
