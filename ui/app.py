"""
Financial Forms - Streamlit front-end
Claim forms with field validation and a downloadable PDF
"""

import streamlit as st
from pathlib import Path
import sys

# ---------------------------------------------------------------------------
# Path setup
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

try:
    from dotenv import load_dotenv
    load_dotenv(PROJECT_ROOT / ".env")
except ImportError:
    pass

from core.errors import FinancialFormsError
from financial_forms import FinancialForms
from ui.components.common import run_async
from ui.forms import FORM_PAGES

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Financiële formulieren",
    page_icon="🧾",
    layout="centered",
)


def render_sidebar():
    with st.sidebar:
        st.markdown("### Formulier")
        form_type = st.radio(
            "Type",
            options=list(FORM_PAGES),
            format_func=lambda key: FORM_PAGES[key][0],
            label_visibility="collapsed",
        )
        user_display_name = st.text_input("Voornaam en naam", key="user_display_name")
    return form_type, user_display_name


def render_result():
    claim = st.session_state.get("claim")
    if claim is None:
        return
    st.success(
        f"Het formulier is geldig, de PDF werd aangemaakt ({claim.page_count} pagina's)."
    )
    st.download_button(
        "Download PDF",
        data=claim.pdf_bytes,
        file_name=claim.file_name,
        mime="application/pdf",
        type="primary",
    )


def main():
    form_type, user_display_name = render_sidebar()

    # Switching form types clears stale messages
    if st.session_state.get("active_form") != form_type:
        st.session_state.active_form = form_type
        st.session_state.errors = {}
        st.session_state.pop("claim", None)

    _, render_form = FORM_PAGES[form_type]
    form_values = render_form(user_display_name)

    if form_values is not None:
        forms = FinancialForms()
        errors = forms.validate(form_values)
        st.session_state.errors = errors
        st.session_state.pop("claim", None)

        if errors:
            st.rerun()

        with st.spinner("PDF wordt aangemaakt..."):
            try:
                st.session_state.claim = run_async(forms.generate(form_values))
            except FinancialFormsError as e:
                st.error(f"Er is een fout opgetreden bij het aanmaken van het formulier: {e}")

    render_result()


main()
