from app.repositories.invoice_repository import InvoiceRepository, StoreError

__all__ = [
    "InvoiceRepository",
    "StoreError",
]
