"""Create, update and delete invoices submitted from the dashboard forms.

Every action follows the same pipeline: validate the draft, convert the
amount to cents, make a single write attempt, then invalidate the listing
view. Create and update end by redirecting to the listing view; delete
returns to the caller so it can stay on the current view.

Failures come back as an ``ActionState`` and use one of two channels that are
never mixed: field errors (validation, before any store access) or a single
database message (the write was rejected or the store was unreachable).
"""

import logging
from collections.abc import Mapping
from typing import Any, NoReturn
from uuid import UUID

from app.core.config import settings
from app.core.currency import to_minor_units
from app.core.navigation import redirect
from app.core.view_cache import ViewInvalidator
from app.models.shared import utc_today
from app.repositories.invoice_repository import InvoiceRepository, StoreError
from app.schemas.invoice import (
    CREATE_INVOICE_FIELDS,
    UPDATE_INVOICE_FIELDS,
    ActionState,
    CreateInvoice,
    UpdateInvoice,
    validate_draft,
)

logger = logging.getLogger(__name__)

CREATE_MISSING_FIELDS = "Missing Fields. Failed to Create Invoice."
UPDATE_MISSING_FIELDS = "Missing Fields. Failed to Update Invoice."
CREATE_DATABASE_ERROR = "Database Error: Failed to Create Invoice."
UPDATE_DATABASE_ERROR = "Database Error: Failed to Update Invoice."
DELETE_DATABASE_ERROR = "Database Error: Failed to Delete Invoice."


def _select(draft: Mapping[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    return {name: draft.get(name) for name in fields}


class InvoiceActionService:
    """Mutation pipeline for invoices.

    The repository and the view invalidator are owned by the caller; the
    service keeps no state between calls.
    """

    def __init__(
        self,
        repository: InvoiceRepository,
        views: ViewInvalidator,
        listing_path: str | None = None,
    ):
        self.repository = repository
        self.views = views
        self.listing_path = listing_path or settings.INVOICES_PATH

    def _invalidate_listing(self) -> None:
        try:
            self.views.revalidate_path(self.listing_path)
        except Exception:
            # The write stays committed.
            logger.exception("Failed to revalidate %s", self.listing_path)

    def _finish(self) -> NoReturn:
        self._invalidate_listing()
        redirect(self.listing_path)

    def create_invoice(self, draft: Mapping[str, Any]) -> ActionState:
        """Validate and insert a new invoice, then redirect to the listing view.

        Returns an ``ActionState`` only on failure; success raises
        ``RedirectSignal``.
        """
        values = _select(draft, CREATE_INVOICE_FIELDS)
        values["date"] = utc_today()

        validation = validate_draft(CreateInvoice, values)
        if not validation.ok:
            logger.warning("Rejected invoice draft: %s", sorted(validation.errors))
            return ActionState(errors=validation.errors, message=CREATE_MISSING_FIELDS)

        invoice: Any = validation.data
        try:
            invoice_id = self.repository.insert(
                customer_id=invoice.customer_id,
                amount=to_minor_units(invoice.amount),
                status=invoice.status,
                invoice_date=invoice.date,
            )
        except StoreError:
            logger.warning("Invoice create failed")
            return ActionState(message=CREATE_DATABASE_ERROR)

        logger.info("Created invoice %s", invoice_id)
        self._finish()

    def update_invoice(self, invoice_id: UUID | str, draft: Mapping[str, Any]) -> ActionState:
        """Validate and overwrite an invoice, then redirect to the listing view.

        Only customer, amount and status are read from ``draft``; a ``date``
        key is ignored.
        """
        validation = validate_draft(UpdateInvoice, _select(draft, UPDATE_INVOICE_FIELDS))
        if not validation.ok:
            logger.warning(
                "Rejected update of invoice %s: %s", invoice_id, sorted(validation.errors)
            )
            return ActionState(errors=validation.errors, message=UPDATE_MISSING_FIELDS)

        invoice: Any = validation.data
        try:
            self.repository.update(
                invoice_id,
                customer_id=invoice.customer_id,
                amount=to_minor_units(invoice.amount),
                status=invoice.status,
            )
        except StoreError:
            logger.warning("Invoice update failed for %s", invoice_id)
            return ActionState(message=UPDATE_DATABASE_ERROR)

        logger.info("Updated invoice %s", invoice_id)
        self._finish()

    def delete_invoice(self, invoice_id: UUID | str) -> ActionState:
        """Delete an invoice and invalidate the listing view without redirecting."""
        try:
            self.repository.delete(invoice_id)
        except StoreError:
            logger.warning("Invoice delete failed for %s", invoice_id)
            return ActionState(message=DELETE_DATABASE_ERROR)

        logger.info("Deleted invoice %s", invoice_id)
        self._invalidate_listing()
        return ActionState()
