"""Validation of invoice drafts submitted from the dashboard forms.

Field rules live in one table keyed by form field name. The create and update
schemas are both built by selecting a subset of that table, so a rule or its
message is only ever defined once.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from app.models.invoice import InvoiceStatus

FieldErrors = dict[str, list[str]]

# Largest amount whose cent value fits a 32-bit INTEGER column
MAX_AMOUNT = Decimal("21474836.47")


@dataclass(frozen=True)
class FieldRule:
    attribute: str
    annotation: Any
    constraints: dict[str, Any]
    # None for server-supplied fields, which never produce a field-level message
    message: str | None


INVOICE_FIELD_RULES: dict[str, FieldRule] = {
    "customerId": FieldRule(
        attribute="customer_id",
        annotation=str,
        constraints={"min_length": 1},
        message="Please select a customer.",
    ),
    "amount": FieldRule(
        attribute="amount",
        annotation=Decimal,
        constraints={
            "gt": 0,
            "le": MAX_AMOUNT,
            "decimal_places": 2,
            "allow_inf_nan": False,
        },
        message="Please enter an amount greater than $0.",
    ),
    "status": FieldRule(
        attribute="status",
        annotation=InvoiceStatus,
        constraints={},
        message="Please select an invoice status.",
    ),
    "date": FieldRule(
        attribute="date",
        annotation=date,
        constraints={},
        message=None,
    ),
}

CREATE_INVOICE_FIELDS = ("customerId", "amount", "status", "date")
UPDATE_INVOICE_FIELDS = ("customerId", "amount", "status")


def build_invoice_schema(name: str, fields: tuple[str, ...]) -> type[BaseModel]:
    """Build a pydantic model validating only ``fields`` of the rule table."""
    definitions: dict[str, Any] = {}
    for form_name in fields:
        rule = INVOICE_FIELD_RULES[form_name]
        definitions[rule.attribute] = (
            rule.annotation,
            Field(..., alias=form_name, **rule.constraints),
        )
    return create_model(  # type: ignore[call-overload, no-any-return]
        name,
        __config__=ConfigDict(extra="ignore", frozen=True),
        **definitions,
    )


CreateInvoice = build_invoice_schema("CreateInvoice", CREATE_INVOICE_FIELDS)
UpdateInvoice = build_invoice_schema("UpdateInvoice", UPDATE_INVOICE_FIELDS)


@dataclass
class DraftValidation:
    """Outcome of validating a draft: typed data, or messages per field."""

    data: BaseModel | None = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.data is not None


def collect_field_errors(exc: ValidationError) -> FieldErrors:
    """Map every failing field of ``exc`` to its user-facing message.

    Errors are listed in rule table order, one message per field.
    """
    failed = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
    errors: FieldErrors = {}
    for form_name, rule in INVOICE_FIELD_RULES.items():
        if form_name in failed and rule.message is not None:
            errors[form_name] = [rule.message]
    return errors


def validate_draft(schema: type[BaseModel], values: Mapping[str, Any]) -> DraftValidation:
    """Validate ``values`` against ``schema`` and report every failing field."""
    try:
        return DraftValidation(data=schema.model_validate(dict(values)))
    except ValidationError as exc:
        return DraftValidation(errors=collect_field_errors(exc))


class ActionState(BaseModel):
    """Result reported back to the form that submitted a mutation.

    Both fields absent means there is nothing to report.
    """

    errors: FieldErrors | None = None
    message: str | None = None
