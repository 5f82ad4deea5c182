"""
Request-scoped access to the objects owned by the application.
"""
from fastapi import Request

from receiptlink.config import Settings
from receiptlink.store import ReceiptStore


def get_store(request: Request) -> ReceiptStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
