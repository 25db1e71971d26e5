"""
Public transport commute ("Openbaar vervoer") builder
"""

from core.layout import LayoutCursor, format_date_dutch, format_euro
from forms.base import FormBuilder, FormValues, RenderContext, field_text


class PublicTransportBuilder(FormBuilder):
    """Monthly refund of public transport used for commuting."""

    form_type = "public_transport"
    document_name = "openbaar_vervoer"

    def render(self, cursor: LayoutCursor, values: FormValues, context: RenderContext) -> None:
        cursor.draw_text("Openbaar vervoer voor het woon-werkverkeer", bold=True, size=18, line_gap=10)
        cursor.advance(10)

        with cursor.section():
            cursor.draw_text(f"Voornaam en naam: {field_text(values, 'userDisplayName')}")
            cursor.advance(10)
            cursor.draw_text(f"Datum: {format_date_dutch(context.today)}")
            cursor.advance(10)
            cursor.draw_text(f"Rekeningnummer: {field_text(values, 'rekeningnummer')}")
        cursor.advance(20)

        month = field_text(values, "maand")
        year = field_text(values, "jaar")
        cursor.wrap_and_draw(
            f"Ik verklaar op eer dat ik tijdens de maand {month} {year} het openbaar vervoer "
            "heb gebruikt voor de woon-werkverplaatsing of een deel ervan.",
            context.wrap_chars,
        )

        amount = format_euro(values.get("bedrag"))
        cursor.draw_text(f"Volgend bedrag dient aan mij overgeschreven worden: € {amount}", bold=True)
        cursor.advance(20)

        cursor.draw_text("Factuur of kassabon:", bold=True)
        cursor.draw_text("Zie bijlage.")
