from app.models.customer import Customer
from app.models.invoice import Invoice, InvoiceStatus

__all__ = [
    "Customer",
    "Invoice",
    "InvoiceStatus",
]
