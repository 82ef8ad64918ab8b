from app.schemas.invoice import (
    ActionState,
    CreateInvoice,
    DraftValidation,
    UpdateInvoice,
    validate_draft,
)

__all__ = [
    "ActionState",
    "CreateInvoice",
    "DraftValidation",
    "UpdateInvoice",
    "validate_draft",
]
