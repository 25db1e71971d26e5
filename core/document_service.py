"""
Document Assembler
Builds the claim page(s) in memory with PyMuPDF: letterhead, then the
builder registered for the form type. Attachments are appended by the merger.
"""

from datetime import date
from typing import Any, Dict, Optional, Sequence

import fitz
from loguru import logger

from core.assets import AssetFetcher
from core.attachment_merger import AttachmentMerger, AttachmentResource
from core.config import FormsConfig, get_config
from core.errors import DocumentAssemblyError
from core.header import HeaderRenderer
from core.layout import BOLD_FONT, REGULAR_FONT, LayoutCursor
from forms import RenderContext, get_builder

# Gap between the letterhead and the first line of content
CONTENT_OFFSET = 30


class DocumentService:
    """Assembles claim documents and merges their attachments."""

    def __init__(
        self,
        config: Optional[FormsConfig] = None,
        fetcher: Optional[AssetFetcher] = None,
        merger: Optional[AttachmentMerger] = None,
    ):
        self.config = config or get_config()
        self.fetcher = fetcher or AssetFetcher(timeout=self.config.asset_timeout)
        self.merger = merger or AttachmentMerger()

    async def assemble(
        self,
        form_values: Dict[str, Any],
        today: Optional[date] = None,
    ) -> bytes:
        """
        Render the form page for form_values["formType"].

        Returns the serialised PDF. Raises UnsupportedFormTypeError for an
        unknown form type and DocumentAssemblyError if saving fails.
        """
        form_type = form_values.get("formType")
        builder = get_builder(form_type)

        doc = fitz.open()
        try:
            header = HeaderRenderer(self.config, self.fetcher, font=REGULAR_FONT)
            page = self._new_page(doc)
            header_result = await header.render(page)
            logger.debug(f"Header drawn ({header_result.mode.value}), bottom y={header_result.bottom_y:.1f}")

            def continuation_page():
                next_page = self._new_page(doc)
                continued = header.redraw(next_page)
                return next_page, continued.bottom_y - CONTENT_OFFSET

            cursor = LayoutCursor(
                page,
                font=REGULAR_FONT,
                bold_font=BOLD_FONT,
                margin_left=self.config.margin_left,
                margin_right=self.config.margin_right,
                margin_bottom=self.config.margin_bottom,
                page_factory=continuation_page if self.config.paginate else None,
            )
            cursor.y = header_result.bottom_y - CONTENT_OFFSET

            context = RenderContext(
                today=today or date.today(),
                footer_tag=self.config.footer_tag,
                wrap_chars=self.config.wrap_chars,
            )
            builder.render(cursor, form_values, context)

            try:
                data = doc.tobytes(garbage=4, deflate=True)
            except (RuntimeError, ValueError) as e:
                raise DocumentAssemblyError(f"Claim document could not be saved: {e}") from e

            logger.info(f"Assembled {form_type} document: {doc.page_count} page(s), {len(data)} bytes")
            return data
        finally:
            doc.close()

    async def merge(
        self,
        base_pdf: bytes,
        attachments: Sequence[AttachmentResource],
    ) -> bytes:
        return await self.merger.merge(base_pdf, attachments)

    def _new_page(self, doc: fitz.Document):
        page = doc.new_page(width=self.config.page_width, height=self.config.page_height)
        REGULAR_FONT.register(page)
        BOLD_FONT.register(page)
        return page
