"""
Summary projection – display rows for the receipt viewer.

Each row prefers the transaction's own ``receipt_data`` value and falls back
to the caller-supplied ``context`` mapping where one exists.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from receiptlink.pipeline.dates import format_transaction_time
from receiptlink.schemas import SummaryField


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _first(*candidates: Any) -> Any:
    """First truthy candidate, else ``None``."""
    for candidate in candidates:
        if candidate:
            return candidate
    return None


def _amount(data: Mapping[str, Any]) -> str:
    amount = data.get("amount")
    currency = data.get("currency")
    return f"{_to_text(amount) if amount else ''} {_to_text(currency) if currency else ''}"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def summary_rows(data: Optional[Mapping[str, Any]]) -> list[tuple[str, Any]]:
    """All ten (label, resolved value) pairs, in display order, unfiltered."""
    data = data if isinstance(data, Mapping) else {}
    context = data.get("context")
    if not isinstance(context, Mapping):
        context = {}

    return [
        ("Amount", _amount(data)),
        ("Card brand", data.get("cardBrand")),
        ("Truncated PAN", data.get("truncatedPAN")),
        ("Auth code", data.get("authorizationCode")),
        ("Response", _first(data.get("responseMessage"), data.get("responseCode"))),
        ("Transaction type", data.get("transactionType")),
        (
            "Transaction time",
            _first(format_transaction_time(data.get("transactionDateTime")), context.get("timestamp")),
        ),
        ("Terminal ID", _first(data.get("terminalId"), context.get("terminalId"))),
        ("Merchant ID", _first(data.get("merchantId"), context.get("merchantId"))),
        ("Transaction ID", _first(data.get("transactionId"), context.get("transactionId"))),
    ]


def build_summary_fields(data: Optional[Mapping[str, Any]]) -> list[SummaryField]:
    fields: list[SummaryField] = []
    for label, value in summary_rows(data):
        if isinstance(value, str):
            value = value if value.strip() else None
        if not value:
            continue
        fields.append(SummaryField(label=label, value=_to_text(value)))
    return fields
