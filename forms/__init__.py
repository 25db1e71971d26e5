"""
Claim form builders and validators
One builder per claim type, looked up by formType
"""

from forms.base import (
    FormBuilder, FormValues, RenderContext,
    get_builder, register_builder, registered_form_types,
)
from forms.expense_note import ExpenseNoteBuilder
from forms.public_transport import PublicTransportBuilder
from forms.relocation import RelocationBuilder
from forms.validation import validate, validate_expense_note, validate_public_transport

register_builder(ExpenseNoteBuilder())
register_builder(PublicTransportBuilder())
register_builder(RelocationBuilder())

__all__ = [
    "FormBuilder",
    "FormValues",
    "RenderContext",
    "get_builder",
    "register_builder",
    "registered_form_types",
    "ExpenseNoteBuilder",
    "PublicTransportBuilder",
    "RelocationBuilder",
    "validate",
    "validate_expense_note",
    "validate_public_transport",
]
