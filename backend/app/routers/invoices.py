from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.view_cache import ViewCache, get_view_cache
from app.repositories.invoice_repository import InvoiceRepository
from app.schemas.invoice import ActionState
from app.services.invoice_actions import InvoiceActionService

router = APIRouter()


def get_invoice_actions(
    db: Session = Depends(get_db),
    views: ViewCache = Depends(get_view_cache),
) -> InvoiceActionService:
    return InvoiceActionService(InvoiceRepository(db), views)


def _state_response(state: ActionState) -> JSONResponse:
    if state.errors:
        status_code = 422
    elif state.message:
        status_code = 500
    else:
        status_code = 200
    return JSONResponse(content=state.model_dump(exclude_none=True), status_code=status_code)


@router.post(
    "/create",
    response_model=ActionState,
    summary="Create invoice",
    responses={
        303: {"description": "Invoice created, redirect to the invoices listing"},
        422: {"description": "Missing or invalid fields"},
        500: {"description": "Database error"},
    },
)
async def create_invoice(
    request: Request,
    actions: InvoiceActionService = Depends(get_invoice_actions),
) -> JSONResponse:
    """Create an invoice from a submitted form."""
    form = await request.form()
    return _state_response(actions.create_invoice(form))


@router.post(
    "/{invoice_id}/edit",
    response_model=ActionState,
    summary="Update invoice",
    responses={
        303: {"description": "Invoice updated, redirect to the invoices listing"},
        422: {"description": "Missing or invalid fields"},
        500: {"description": "Database error"},
    },
)
async def update_invoice(
    invoice_id: str,
    request: Request,
    actions: InvoiceActionService = Depends(get_invoice_actions),
) -> JSONResponse:
    """Update customer, amount and status of an invoice from a submitted form."""
    form = await request.form()
    return _state_response(actions.update_invoice(invoice_id, form))


@router.post(
    "/{invoice_id}/delete",
    response_model=ActionState,
    summary="Delete invoice",
    responses={500: {"description": "Database error"}},
)
async def delete_invoice(
    invoice_id: str,
    actions: InvoiceActionService = Depends(get_invoice_actions),
) -> JSONResponse:
    """Delete an invoice. The caller stays on its current view."""
    return _state_response(actions.delete_invoice(invoice_id))
