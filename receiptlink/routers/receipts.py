"""
Receipt creation endpoint.

POST /api/receipts   — store a receipt, answer with its viewer link
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from receiptlink.config import Settings
from receiptlink.dependencies import get_settings, get_store
from receiptlink.pipeline import ReceiptValidationError, normalize_receipt_request
from receiptlink.schemas import CreateReceiptResponse, ErrorResponse
from receiptlink.store import ReceiptStore, StoreError

logger = logging.getLogger(__name__)
router = APIRouter()


def public_base_url(request: Request, settings: Settings) -> str:
    """Scheme + host viewers should use, without a trailing slash."""
    if settings.PUBLIC_BASE_URL:
        return settings.PUBLIC_BASE_URL.rstrip("/")

    scheme = request.url.scheme
    host = request.headers.get("host") or request.url.netloc
    if settings.TRUST_PROXY:
        forwarded_proto = request.headers.get("x-forwarded-proto")
        if forwarded_proto:
            scheme = forwarded_proto.split(",")[0].strip()
    return f"{scheme}://{host}"


def viewer_url(base_url: str, receipt_id: str) -> str:
    return f"{base_url}/r/{receipt_id}"


# ── POST /api/receipts ───────────────────────────────────────────────────
@router.post(
    "/receipts",
    status_code=201,
    response_model=CreateReceiptResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_receipt(
    request: Request,
    body: Any = Body(None),
    store: ReceiptStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    try:
        receipt = normalize_receipt_request(body)
    except ReceiptValidationError as exc:
        logger.info("Rejected receipt: %s", exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    try:
        receipt_id = store.insert(receipt.text, type=receipt.type, data=receipt.data)
    except StoreError as exc:
        logger.error("Receipt insert failed: %s", exc)
        return JSONResponse(status_code=500, content={"error": "Failed to store receipt"})

    logger.info(
        "Stored receipt %s  len=%d  type=%s", receipt_id, len(receipt.text), receipt.type
    )
    url = viewer_url(public_base_url(request, settings), receipt_id)
    return CreateReceiptResponse(id=receipt_id, url=url, qr_payload=url)
