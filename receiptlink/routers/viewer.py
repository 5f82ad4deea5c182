"""
Receipt viewer.

GET /r/{receipt_id}   — printable HTML page for one stored receipt
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from receiptlink.dependencies import get_store
from receiptlink.rendering import render_receipt_page
from receiptlink.store import ReceiptStore, StoreError

logger = logging.getLogger(__name__)
router = APIRouter()

NOT_FOUND_BODY = "Receipt not found"


# ── GET /r/{receipt_id} ──────────────────────────────────────────────────
@router.get("/r/{receipt_id}", response_class=HTMLResponse)
def view_receipt(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    try:
        receipt = store.get(receipt_id)
    except StoreError as exc:
        # viewers get a plain 404; the log keeps the real cause
        logger.error("Receipt lookup failed for %s: %s", receipt_id, exc)
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)

    if receipt is None:
        logger.warning("Receipt not found: %s", receipt_id)
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)

    return HTMLResponse(render_receipt_page(receipt))
