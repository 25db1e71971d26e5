"""
Layout Cursor
Single-pass vertical layout on a PyMuPDF page: text lines, word wrap,
framed sections, plus the euro/date formatting used by every form.

Coordinates are PDF user space (origin bottom-left, y grows upwards);
the cursor converts to PyMuPDF's top-left space when it draws.
"""

import math
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import Any, Callable, List, Optional, Tuple

import fitz
from loguru import logger

BLACK = (0, 0, 0)

DUTCH_MONTHS = [
    "januari", "februari", "maart", "april", "mei", "juni",
    "juli", "augustus", "september", "oktober", "november", "december",
]

# Section frame padding
BOX_PADDING_TOP = 6
BOX_PADDING_BOTTOM = 4
BOX_PADDING_SIDES = 4

# Returns (new page, cursor y to resume at)
PageFactory = Callable[[], Tuple[Any, float]]


@lru_cache(maxsize=None)
def _load_font(alias: str) -> fitz.Font:
    return fitz.Font(alias)


@dataclass(frozen=True)
class FontFace:
    """
    A Base-14 typeface embedded as a Unicode font.

    name is the resource name used on the page, base14 the PyMuPDF alias
    whose font file gets embedded. Simple Base-14 encoding has no euro sign,
    the embedded font does.
    """
    name: str
    base14: str

    @property
    def font(self) -> fitz.Font:
        return _load_font(self.base14)

    def text_length(self, text: str, size: float) -> float:
        return self.font.text_length(text, fontsize=size)

    def register(self, page) -> None:
        """Make the face available on page; repeated calls reuse the same font."""
        page.insert_font(fontname=self.name, fontbuffer=self.font.buffer)


REGULAR_FONT = FontFace("TimesRoman", "tiro")
BOLD_FONT = FontFace("TimesBold", "tibo")


# ----------------------------------------------------------------------
# Pure helpers
# ----------------------------------------------------------------------

def wrap_text(text: str, max_chars: int) -> List[str]:
    """Greedily pack words into lines of at most max_chars.

    Only existing whitespace is used as a break point; a word longer than
    max_chars ends up alone on its own line.
    """
    lines: List[str] = []
    current = ""

    for word in text.split():
        candidate = f"{current} {word}".strip()
        if len(candidate) > max_chars:
            if current:
                lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)
    return lines


def format_euro(value: Any) -> str:
    """12.5 / "12,5" / "12.5" -> "12,50". Unparsable input is returned as-is."""
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    else:
        try:
            number = float(str(value).strip().replace(",", ".", 1))
        except ValueError:
            return str(value)
    if math.isnan(number) or math.isinf(number):
        return str(value)
    return f"{number:.2f}".replace(".", ",")


def format_date_dutch(value: date) -> str:
    """nl-BE long date, e.g. "18 oktober 2026"."""
    return f"{value.day} {DUTCH_MONTHS[value.month - 1]} {value.year}"


# ----------------------------------------------------------------------
# Cursor
# ----------------------------------------------------------------------

class LayoutCursor:
    """
    Mutable write position on a page.

    Owns the current y, the margins and the two font faces. When a
    page_factory is given and a line would start below margin_bottom, the
    cursor moves to a fresh page and splits any open framed section.
    """

    def __init__(
        self,
        page,
        font: FontFace = REGULAR_FONT,
        bold_font: FontFace = BOLD_FONT,
        margin_left: float = 50.0,
        margin_right: float = 50.0,
        margin_bottom: float = 50.0,
        page_factory: Optional[PageFactory] = None,
    ):
        self.page = page
        self.font = font
        self.bold_font = bold_font
        self.margin_left = margin_left
        self.margin_right = margin_right
        self.margin_bottom = margin_bottom
        self.page_factory = page_factory
        self.content_width = page.rect.width - margin_left - margin_right
        self.y = 0.0
        self.page_count = 1
        # [top_y, top_offset] per open section, innermost last
        self._open_sections: List[List[float]] = []

    def _to_device(self, y: float) -> float:
        return self.page.rect.height - y

    # ------------------------------------------------------------------
    # Drawing primitives
    # ------------------------------------------------------------------

    def draw_text(
        self,
        text: str,
        bold: bool = False,
        size: float = 11,
        line_gap: float = 4,
    ) -> None:
        """Draw one line at the cursor and move down by size + line_gap.

        Blank lines draw nothing but still take their vertical space.
        """
        self._ensure_room()
        face = self.bold_font if bold else self.font

        if text and text.strip():
            self.page.insert_text(
                fitz.Point(self.margin_left, self._to_device(self.y)),
                text,
                fontsize=size,
                fontname=face.name,
                color=BLACK,
            )
        self.y -= size + line_gap

    def wrap_and_draw(self, text: str, max_chars: int, **options) -> None:
        if not text:
            return
        for line in wrap_text(text, max_chars):
            self.draw_text(line, **options)

    def advance(self, amount: float) -> None:
        """Extra vertical spacing.

        Never breaks the page, so y may end up below margin_bottom and a
        frame closed right after it extends into the margin. The next
        draw_text moves to a new page first.
        """
        self.y -= amount

    def draw_section_box(self, top_y: float, bottom_y: float) -> None:
        """Frame the lines drawn between two cursor captures.

        top_y is the cursor before the first line, bottom_y the cursor
        after the last one.
        """
        box_top = top_y + BOX_PADDING_TOP
        box_bottom = bottom_y - BOX_PADDING_BOTTOM
        x0 = self.margin_left - BOX_PADDING_SIDES
        x1 = x0 + self.content_width + BOX_PADDING_SIDES * 2

        rect = fitz.Rect(x0, self._to_device(box_top), x1, self._to_device(box_bottom))
        self.page.draw_rect(rect, color=BLACK, width=1)

    @contextmanager
    def section(self, top_offset: float = 5.0):
        """Frame everything drawn inside the block."""
        frame = [self.y + top_offset, top_offset]
        self._open_sections.append(frame)
        try:
            yield self
        finally:
            self._open_sections.pop()
        self.draw_section_box(frame[0], self.y)

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def _ensure_room(self) -> None:
        if self.page_factory is None or self.y >= self.margin_bottom:
            return
        self._break_page()

    def _break_page(self) -> None:
        # Close open frames on the page being left
        for frame in self._open_sections:
            self.draw_section_box(frame[0], self.y)

        self.page, self.y = self.page_factory()
        self.page_count += 1

        for frame in self._open_sections:
            frame[0] = self.y + frame[1]

        logger.debug(f"Layout continued on page {self.page_count} at y={self.y:.1f}")
