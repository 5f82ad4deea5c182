"""
receiptlink — shareable, printable links for payment-terminal receipts.
"""
__version__ = "0.1.0"
