"""
Expense note ("Onkostennota") builder
"""

from core.layout import LayoutCursor, format_date_dutch, format_euro
from forms.base import FormBuilder, FormValues, RenderContext, field_text, is_affirmative


class ExpenseNoteBuilder(FormBuilder):
    """Purchase or cost refund, optionally passed on to students."""

    form_type = "expense_note"
    document_name = "onkostennota"

    def render(self, cursor: LayoutCursor, values: FormValues, context: RenderContext) -> None:
        cursor.draw_text("Onkostennota", bold=True, size=18, line_gap=10)
        cursor.advance(10)

        name = field_text(values, "userDisplayName")
        cursor.draw_text(f"Voornaam en naam: {name}   Datum: {format_date_dutch(context.today)}")
        cursor.advance(10)

        cursor.draw_text("Heeft de toestemming verkregen via begroting of klasbudget voor:")
        cursor.advance(10)

        # Description and category
        with cursor.section():
            cursor.draw_text("Omschrijving aankoop/kosten:", bold=True)
            cursor.wrap_and_draw(field_text(values, "omschrijving"), context.wrap_chars)
            cursor.advance(10)

            cursor.draw_text("Categorie:", bold=True)
            cursor.draw_text(field_text(values, "categorie"))
            cursor.draw_text(
                "Aankoop B- of C-producten vereist VOORAF de toestemming van de preventiedienst",
                size=9,
            )
        cursor.advance(20)

        # Amount and bank account
        with cursor.section():
            amount = format_euro(values.get("bedrag"))
            cursor.draw_text(
                f"Volgend bedrag dient aan mij overgeschreven worden: € {amount}",
                bold=True,
            )
            cursor.advance(5)
            cursor.draw_text(f"Mijn rekeningnummer: {field_text(values, 'rekeningnummer')}")
        cursor.advance(20)

        if is_affirmative(values.get("doorgerekend")):
            self._render_student_charge(cursor, values, context)

        cursor.draw_text("Factuur of kassabon:", bold=True)
        cursor.draw_text("Zie bijlage.")
        cursor.advance(20)

        cursor.draw_text(context.footer_tag, size=8)

    @staticmethod
    def _render_student_charge(cursor: LayoutCursor, values: FormValues, context: RenderContext) -> None:
        with cursor.section():
            cursor.draw_text("Aankoop/onkosten door te rekenen aan de leerlingen", bold=True)
            cursor.advance(10)

            cursor.draw_text(
                f"Aankoop/onkosten voor vak of uitstap: {field_text(values, 'uitstapOfVak')}."
            )
            cursor.advance(5)

            student_amount = format_euro(values.get("bedragLeerlingen"))
            cursor.draw_text(
                f"Van dit bedrag moet € {student_amount} worden doorgerekend aan de volgende leerlingen:"
            )
            cursor.wrap_and_draw(field_text(values, "klassenOfLeerlingen"), context.wrap_chars)
            cursor.advance(10)
        cursor.advance(20)
