"""
Form validation
Returns {field: message} for every invalid field; an empty dict means valid.
Validators never raise, so callers can re-render the form with the messages.
"""

import math
from datetime import date
from typing import Dict, Optional

from core.iban import is_valid_belgian_iban
from forms.base import FormValues, is_affirmative

ValidationErrors = Dict[str, str]


def _get_text(values: FormValues, key: str) -> str:
    value = values.get(key)
    if value is None:
        return ""
    return str(value).strip()


def _get_number(values: FormValues, key: str) -> Optional[float]:
    raw = _get_text(values, key)
    if not raw:
        return None
    try:
        number = float(raw.replace(",", ".", 1))
    except ValueError:
        return None
    # float() also takes "nan", "inf" and "1_000"
    if "_" in raw or not math.isfinite(number):
        return None
    return number


def _has_attachments(values: FormValues) -> bool:
    attachments = values.get("facturen") or []
    return any(len(getattr(a, "content", b"") or b"") > 0 for a in attachments)


def _check_iban(values: FormValues, errors: ValidationErrors) -> None:
    account = _get_text(values, "rekeningnummer")
    if not account:
        errors["rekeningnummer"] = "Dit veld is verplicht."
    elif not is_valid_belgian_iban(account):
        errors["rekeningnummer"] = "Dit is geen geldig Belgisch IBAN-nummer."


def validate_expense_note(values: FormValues) -> ValidationErrors:
    errors: ValidationErrors = {}

    description = _get_text(values, "omschrijving")
    if not description:
        errors["omschrijving"] = "Vul hier een korte omschrijving in."
    elif len(description) < 5:
        errors["omschrijving"] = "De omschrijving is te kort."

    if not _get_text(values, "categorie"):
        errors["categorie"] = "Kies een categorie."

    amount = _get_number(values, "bedrag")
    if amount is None:
        errors["bedrag"] = "Vul een geldig bedrag in."
    elif amount < 0:
        errors["bedrag"] = "Het bedrag kan niet negatief zijn."

    _check_iban(values, errors)

    charged = _get_text(values, "doorgerekend")
    if not charged:
        errors["doorgerekend"] = "Maak een keuze."

    if is_affirmative(charged):
        if not _get_text(values, "uitstapOfVak"):
            errors["uitstapOfVak"] = "Vul in voor welke uitstap of welk vak dit is."

        student_amount = _get_number(values, "bedragLeerlingen")
        if student_amount is None:
            errors["bedragLeerlingen"] = "Vul een geldig bedrag in."
        elif student_amount < 0:
            errors["bedragLeerlingen"] = "Het bedrag kan niet negatief zijn."
        elif amount is not None and student_amount > amount:
            errors["bedragLeerlingen"] = "Dit bedrag kan niet groter zijn dan het totaalbedrag."

        if not _get_text(values, "klassenOfLeerlingen"):
            errors["klassenOfLeerlingen"] = "Vul in aan wie dit bedrag moet worden verrekend."

    if not _has_attachments(values):
        errors["facturen"] = "Voeg een factuur of kasbon toe."

    return errors


def validate_public_transport(values: FormValues, today: Optional[date] = None) -> ValidationErrors:
    errors: ValidationErrors = {}
    today = today or date.today()

    if not is_affirmative(values.get("verklaring")):
        errors["verklaring"] = (
            "Je moet de verklaring aanvinken om dit formulier te kunnen indienen."
        )

    current_year = today.year
    previous_year = current_year - 1
    year_text = _get_text(values, "jaar")
    if not year_text:
        errors["jaar"] = "Kies een jaar."
    else:
        try:
            year = int(year_text)
        except ValueError:
            year = None
        if year not in (current_year, previous_year):
            errors["jaar"] = f"Het jaar moet {previous_year} of {current_year} zijn."

    if not _get_text(values, "maand"):
        errors["maand"] = "Kies een maand."

    amount = _get_number(values, "bedrag")
    if amount is None or amount <= 0:
        errors["bedrag"] = "Geef een bedrag groter dan 0 in."

    account = _get_text(values, "rekeningnummer")
    if not is_valid_belgian_iban(account):
        errors["rekeningnummer"] = "Dit is geen geldig Belgisch IBAN-nummer."

    if not _has_attachments(values):
        errors["facturen"] = "Voeg minstens één betalingsbewijs toe (pdf of afbeelding)."

    return errors


def validate(values: FormValues, today: Optional[date] = None) -> ValidationErrors:
    """Validate against the rules of values["formType"]; other types have no rules."""
    form_type = values.get("formType")
    if form_type == "expense_note":
        return validate_expense_note(values)
    if form_type == "public_transport":
        return validate_public_transport(values, today)
    return {}
