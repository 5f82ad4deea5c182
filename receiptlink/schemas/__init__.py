"""
Pydantic v2 models shared by the store, the pipeline and the HTTP layer.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Canonical receipt input (normalizer output)
# ---------------------------------------------------------------------------

class NormalizedReceipt(BaseModel):
    """The one request shape every accepted body is reduced to."""
    text: str
    type: Optional[str] = None
    data: Optional[dict[str, Any]] = None


# ---------------------------------------------------------------------------
# Persisted row
# ---------------------------------------------------------------------------

class StoredReceipt(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    receipt_text: str
    receipt_type: Optional[str] = None
    receipt_data: dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Viewer summary
# ---------------------------------------------------------------------------

class SummaryField(BaseModel):
    """One label/value row of the summary table."""
    label: str
    value: str


# ---------------------------------------------------------------------------
# API envelopes
# ---------------------------------------------------------------------------

class CreateReceiptResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    url: str
    qr_payload: str = Field(..., alias="qrPayload")


class ErrorResponse(BaseModel):
    error: str
