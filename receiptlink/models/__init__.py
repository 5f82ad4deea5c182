from receiptlink.models.receipt import ReceiptModel

__all__ = ["ReceiptModel"]
