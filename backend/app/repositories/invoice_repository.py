import logging
from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import delete, insert, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.invoice import Invoice, InvoiceStatus
from app.models.shared import generate_uuid

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The store rejected a write or could not be reached."""


def _parse_invoice_id(invoice_id: UUID | str) -> UUID:
    if isinstance(invoice_id, UUID):
        return invoice_id
    try:
        return UUID(invoice_id)
    except (TypeError, ValueError) as exc:
        raise StoreError(f"Malformed invoice id {invoice_id!r}") from exc


class InvoiceRepository:
    """Parameterized writes against the ``invoices`` table.

    Statements are built from SQLAlchemy constructs so every value reaches the
    driver as a bound parameter. Any failure surfaces as ``StoreError``.
    """

    def __init__(self, db: Session):
        self.db = db

    def _write(self, statement: Any, action: str) -> Any:
        try:
            result = self.db.execute(statement)
            self.db.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            self.db.rollback()
            logger.exception("Invoice %s failed", action)
            raise StoreError(f"Invoice {action} failed") from exc
        return result

    def insert(
        self,
        customer_id: str,
        amount: int,
        status: InvoiceStatus | str,
        invoice_date: date,
    ) -> UUID:
        """Insert a new invoice and return its generated id."""
        invoice_id = generate_uuid()
        statement = insert(Invoice).values(
            id=invoice_id,
            customer_id=customer_id,
            amount=amount,
            status=InvoiceStatus(status).value,
            date=invoice_date,
        )
        self._write(statement, "insert")
        return invoice_id

    def update(
        self,
        invoice_id: UUID | str,
        customer_id: str,
        amount: int,
        status: InvoiceStatus | str,
    ) -> None:
        """Overwrite customer, amount and status. The creation date is never touched."""
        statement = (
            update(Invoice)
            .where(Invoice.id == _parse_invoice_id(invoice_id))
            .values(
                customer_id=customer_id,
                amount=amount,
                status=InvoiceStatus(status).value,
            )
        )
        if self._write(statement, "update").rowcount == 0:
            raise StoreError(f"Invoice {invoice_id} not found")

    def delete(self, invoice_id: UUID | str) -> None:
        statement = delete(Invoice).where(Invoice.id == _parse_invoice_id(invoice_id))
        if self._write(statement, "delete").rowcount == 0:
            raise StoreError(f"Invoice {invoice_id} not found")
