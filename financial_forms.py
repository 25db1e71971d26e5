"""
Financial Forms - Main Orchestrator
Turns submitted claim form values plus invoices into one PDF
"""

import re
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass

import fitz
from loguru import logger

from core.attachment_merger import AttachmentResource
from core.config import FormsConfig, get_config
from core.document_service import DocumentService
from core.errors import DocumentAssemblyError
from forms import get_builder, validate


@dataclass
class GeneratedClaim:
    """Finished claim document"""
    pdf_bytes: bytes
    file_name: str
    page_count: int
    form_type: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_name": self.file_name,
            "page_count": self.page_count,
            "form_type": self.form_type,
            "size_bytes": len(self.pdf_bytes),
        }


def build_file_name(
    form_type: str,
    user_display_name: str,
    now: Optional[datetime] = None,
) -> str:
    """e.g. onkostennota_jan_peeters_2026_10_18T06_50_12.pdf"""
    prefix = get_builder(form_type).document_name or form_type
    safe_user = re.sub(r"\s+", "_", (user_display_name or "").lower())
    safe_user = re.sub(r"[^a-z0-9_]", "", safe_user)
    timestamp = (now or datetime.now(timezone.utc)).strftime("%Y_%m_%dT%H_%M_%S")
    return f"{prefix}_{safe_user}_{timestamp}.pdf"


class FinancialForms:
    """Entry point used by the UI and the CLI."""

    def __init__(
        self,
        config: Optional[FormsConfig] = None,
        document_service: Optional[DocumentService] = None,
    ):
        self.config = config or get_config()
        self.document_service = document_service or DocumentService(self.config)

    def validate(self, form_values: Dict[str, Any], today: Optional[date] = None) -> Dict[str, str]:
        """Field errors for the submitted values; empty when the form may be generated."""
        return validate(form_values, today)

    async def generate(
        self,
        form_values: Dict[str, Any],
        attachments: Optional[Sequence[AttachmentResource]] = None,
        today: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> GeneratedClaim:
        """
        Build the claim PDF and append its attachments.

        Attachments default to form_values["facturen"]; empty files are
        skipped. Failures propagate as DocumentAssemblyError subclasses.
        """
        form_type = form_values.get("formType")
        user = form_values.get("userDisplayName") or ""
        logger.info(f"Generating {form_type} claim for {user or 'unknown user'}")

        if attachments is None:
            attachments = form_values.get("facturen") or []
        invoice_files: List[AttachmentResource] = [
            a for a in attachments if a is not None and a.size > 0
        ]

        try:
            pdf_bytes = await self.document_service.assemble(form_values, today=today)
            if invoice_files:
                pdf_bytes = await self.document_service.merge(pdf_bytes, invoice_files)
        except DocumentAssemblyError as e:
            logger.error(f"Claim document generation failed: {e}")
            raise

        with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
            page_count = doc.page_count

        claim = GeneratedClaim(
            pdf_bytes=pdf_bytes,
            file_name=build_file_name(form_type, user, now),
            page_count=page_count,
            form_type=form_type,
        )
        logger.info(f"Claim ready: {claim.file_name} ({page_count} page(s))")
        return claim
