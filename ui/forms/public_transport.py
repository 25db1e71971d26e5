"""
Public transport commute ("Openbaar vervoer") form page.
"""

from datetime import date
from typing import Any, Dict, Optional

import streamlit as st

from core.layout import DUTCH_MONTHS
from ui.components.common import field_error, to_attachments

DECLARATION = (
    "Ik verklaar op eer dat ik openbaar vervoer heb gebruikt voor de "
    "woon-werkverplaatsing of een deel ervan. Ik verklaar kennis te hebben "
    "genomen van het feit dat misbruiken kunnen bestraft worden, zie punt 4.6 "
    "van de omzendbrief 13AC/CR/JVM/js van 22/12/2000."
)


def render_public_transport_form(user_display_name: str) -> Optional[Dict[str, Any]]:
    """Render the form; returns the submitted values, or None before submit."""
    st.subheader("Openbaar vervoer voor het woon-werkverkeer")
    st.caption("Via dit formulier geef je je onkosten voor openbaar vervoer door. Alle velden zijn verplicht.")

    current_year = date.today().year

    with st.form("public_transport_form"):
        declaration = st.checkbox(DECLARATION)
        field_error("verklaring")

        year = st.selectbox("Jaar", options=[current_year - 1, current_year], index=1)
        field_error("jaar")

        month = st.selectbox("Maand", options=DUTCH_MONTHS, index=None)
        field_error("maand")

        amount = st.text_input("Terug te betalen bedrag (€)", placeholder="49,00")
        field_error("bedrag")

        account = st.text_input("Rekeningnummer (IBAN)", placeholder="BE68 5390 0754 7034")
        field_error("rekeningnummer")

        invoices = st.file_uploader(
            "Betalingsbewijs (pdf of afbeelding)",
            type=["pdf", "png", "jpg", "jpeg"],
            accept_multiple_files=True,
        )
        field_error("facturen")

        submitted = st.form_submit_button("Indienen", type="primary")

    if not submitted:
        return None

    return {
        "formType": "public_transport",
        "userDisplayName": user_display_name,
        "verklaring": "ja" if declaration else "",
        "jaar": str(year),
        "maand": month or "",
        "bedrag": amount,
        "rekeningnummer": account,
        "facturen": to_attachments(invoices),
    }
