"""
Relocation ("Verplaatsing") builder
"""

from core.layout import LayoutCursor
from forms.base import FormBuilder, FormValues, RenderContext


class RelocationBuilder(FormBuilder):
    """Recognised claim type without a form body yet: only the letterhead is drawn."""

    form_type = "relocation"
    document_name = "verplaatsing"

    def render(self, cursor: LayoutCursor, values: FormValues, context: RenderContext) -> None:
        """Nothing to draw below the letterhead."""
