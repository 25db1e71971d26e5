"""
Attachment Merger
Appends invoices/receipts (PDF or image) as trailing pages of a claim document.
Images become a single page sized to their pixel dimensions.
"""

import io
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

import fitz
from PIL import Image
from loguru import logger

from core.errors import AttachmentError

PDF_MEDIA_TYPE = "application/pdf"
JPEG_MEDIA_TYPES = ("image/jpeg", "image/jpg")


@dataclass(frozen=True)
class AttachmentResource:
    """A named binary attachment with its declared media type"""
    name: str
    content: bytes
    media_type: str = "application/octet-stream"

    @property
    def is_pdf(self) -> bool:
        return self.media_type == PDF_MEDIA_TYPE

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(
        cls, path: Union[str, Path], media_type: Optional[str] = None
    ) -> "AttachmentResource":
        path = Path(path)
        if media_type is None:
            media_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        return cls(name=path.name, content=path.read_bytes(), media_type=media_type)


class AttachmentMerger:
    """Normalises attachments to PDF and copies their pages after the base document."""

    async def merge(
        self,
        base_pdf: bytes,
        attachments: Sequence[AttachmentResource],
    ) -> bytes:
        """
        Append every page of every attachment, in input order.

        Any unreadable attachment aborts the whole merge with AttachmentError.
        """
        base = self._open_pdf(base_pdf, "base document")
        try:
            for attachment in attachments:
                source = self._to_pdf(attachment)
                try:
                    base.insert_pdf(source)
                    logger.debug(
                        f"Appended {attachment.name} ({source.page_count} page(s), "
                        f"{attachment.media_type})"
                    )
                except (RuntimeError, ValueError) as e:
                    raise AttachmentError(f"{attachment.name}: pages could not be copied: {e}") from e
                finally:
                    source.close()

            try:
                merged = base.tobytes(garbage=4, deflate=True)
            except (RuntimeError, ValueError) as e:
                raise AttachmentError(f"Merged document could not be saved: {e}") from e

            logger.info(f"Merged {len(attachments)} attachment(s) into {base.page_count} page(s)")
            return merged
        finally:
            base.close()

    def _to_pdf(self, attachment: AttachmentResource) -> fitz.Document:
        if attachment.is_pdf:
            return self._open_pdf(attachment.content, attachment.name)
        return self._image_to_pdf(attachment)

    @staticmethod
    def _open_pdf(data: bytes, name: str) -> fitz.Document:
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except (RuntimeError, ValueError) as e:
            raise AttachmentError(f"{name}: not a readable PDF: {e}") from e
        if doc.page_count == 0:
            doc.close()
            raise AttachmentError(f"{name}: PDF has no pages")
        return doc

    @staticmethod
    def _image_to_pdf(attachment: AttachmentResource) -> fitz.Document:
        """One page exactly the image's pixel size, image drawn full-bleed."""
        # Undeclared types are tried as PNG only
        image_format = "JPEG" if attachment.media_type in JPEG_MEDIA_TYPES else "PNG"
        try:
            with Image.open(io.BytesIO(attachment.content), formats=[image_format]) as img:
                img.load()
                width, height = img.size
        except (OSError, ValueError) as e:
            raise AttachmentError(
                f"{attachment.name}: cannot decode {attachment.media_type} as {image_format}: {e}"
            ) from e

        doc = fitz.open()
        try:
            page = doc.new_page(width=width, height=height)
            page.insert_image(page.rect, stream=attachment.content)
        except (RuntimeError, ValueError) as e:
            doc.close()
            raise AttachmentError(f"{attachment.name}: image could not be embedded: {e}") from e
        return doc
