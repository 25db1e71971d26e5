"""
Expense note ("Onkostennota") form page.
"""

from typing import Any, Dict, Optional

import streamlit as st

from ui.components.common import field_error, to_attachments

CATEGORIES = [
    "A-producten",
    "B-producten",
    "C-producten",
    "Andere",
]


def render_expense_note_form(user_display_name: str) -> Optional[Dict[str, Any]]:
    """Render the form; returns the submitted values, or None before submit."""
    st.subheader("Onkostennota")
    st.caption("Velden met * zijn verplicht.")

    charged = st.radio(
        "Worden (een deel van) de kosten doorgerekend aan leerlingen? *",
        options=["nee", "ja"],
        index=None,
        horizontal=True,
        key="doorgerekend",
    )
    field_error("doorgerekend")

    with st.form("expense_note_form"):
        description = st.text_area("Omschrijving aankoop/kosten *")
        field_error("omschrijving")

        category = st.selectbox("Categorie *", options=CATEGORIES, index=None)
        field_error("categorie")

        amount = st.text_input("Bedrag (€) *", placeholder="12,50")
        field_error("bedrag")

        account = st.text_input("Rekeningnummer (IBAN) *", placeholder="BE68 5390 0754 7034")
        field_error("rekeningnummer")

        trip_or_subject = student_amount = students = ""
        if charged == "ja":
            trip_or_subject = st.text_input("Voor welk vak of welke uitstap? *")
            field_error("uitstapOfVak")
            student_amount = st.text_input("Bedrag door te rekenen aan leerlingen (€) *")
            field_error("bedragLeerlingen")
            students = st.text_area("Klassen of leerlingen *")
            field_error("klassenOfLeerlingen")

        invoices = st.file_uploader(
            "Factuur of kasbon *",
            type=["pdf", "png", "jpg", "jpeg"],
            accept_multiple_files=True,
        )
        field_error("facturen")

        submitted = st.form_submit_button("Indienen", type="primary")

    if not submitted:
        return None

    return {
        "formType": "expense_note",
        "userDisplayName": user_display_name,
        "omschrijving": description,
        "categorie": category or "",
        "bedrag": amount,
        "rekeningnummer": account,
        "doorgerekend": charged or "",
        "uitstapOfVak": trip_or_subject,
        "bedragLeerlingen": student_amount,
        "klassenOfLeerlingen": students,
        "facturen": to_attachments(invoices),
    }
