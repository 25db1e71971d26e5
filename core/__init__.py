"""
Financial Forms Core Services
Layout, letterhead, attachment merging and IBAN checks.
The assembler lives in core.document_service (it depends on the forms package).
"""

from core.config import FormsConfig, get_config
from core.errors import (
    FinancialFormsError, DocumentAssemblyError,
    UnsupportedFormTypeError, AttachmentError,
)
from core.layout import (
    LayoutCursor, FontFace, REGULAR_FONT, BOLD_FONT,
    wrap_text, format_euro, format_date_dutch,
)
from core.assets import AssetFetcher
from core.header import HeaderRenderer, HeaderResult, HeaderMode
from core.attachment_merger import AttachmentMerger, AttachmentResource
from core.iban import is_valid_belgian_iban

__all__ = [
    "FormsConfig",
    "get_config",
    "FinancialFormsError",
    "DocumentAssemblyError",
    "UnsupportedFormTypeError",
    "AttachmentError",
    "LayoutCursor",
    "FontFace",
    "REGULAR_FONT",
    "BOLD_FONT",
    "wrap_text",
    "format_euro",
    "format_date_dutch",
    "AssetFetcher",
    "HeaderRenderer",
    "HeaderResult",
    "HeaderMode",
    "AttachmentMerger",
    "AttachmentResource",
    "is_valid_belgian_iban",
]
