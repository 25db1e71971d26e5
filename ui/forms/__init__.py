"""Claim form pages, one per form type."""

from ui.forms.expense_note import render_expense_note_form
from ui.forms.public_transport import render_public_transport_form

FORM_PAGES = {
    "expense_note": ("Onkostennota", render_expense_note_form),
    "public_transport": ("Openbaar vervoer", render_public_transport_form),
}
