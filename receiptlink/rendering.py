"""
HTML rendering for the receipt viewer.
"""
from __future__ import annotations

from jinja2 import Environment, PackageLoader, select_autoescape

from receiptlink.pipeline import build_summary_fields
from receiptlink.schemas import StoredReceipt

jinja_env = Environment(
    loader=PackageLoader("receiptlink", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_receipt_page(receipt: StoredReceipt) -> str:
    template = jinja_env.get_template("receipt.html")
    return template.render(
        receipt_text=receipt.receipt_text,
        summary_fields=build_summary_fields(receipt.receipt_data),
    )
