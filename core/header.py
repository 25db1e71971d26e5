"""
Header Renderer
Letterhead with two logos and a centered address block.
Falls back to the address block alone when a logo cannot be loaded.
"""

import asyncio
import io
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import fitz
from PIL import Image
from loguru import logger

from core.assets import AssetFetcher
from core.config import FormsConfig, get_config
from core.layout import BLACK, REGULAR_FONT, FontFace

LOGO_HEIGHT = 40
LOGO_TOP_OFFSET = 60
FALLBACK_TOP_OFFSET = 80
HEADER_FONT_SIZE = 9
HEADER_LINE_SPACING = 2


class HeaderMode(Enum):
    """Which header variant was drawn"""
    WITH_LOGOS = "with_logos"
    TEXT_ONLY = "text_only"


@dataclass
class HeaderResult:
    mode: HeaderMode
    bottom_y: float

    @property
    def with_logos(self) -> bool:
        return self.mode == HeaderMode.WITH_LOGOS


@dataclass
class Logo:
    """Decoded logo bytes plus their pixel size"""
    data: bytes
    width: int
    height: int

    def width_at(self, height: float) -> float:
        return self.width / self.height * height

    @classmethod
    def decode(cls, data: bytes) -> "Logo":
        """Logos must be PNG; any other format raises and the header drops to text."""
        with Image.open(io.BytesIO(data), formats=["PNG"]) as img:
            img.load()
            width, height = img.size
        return cls(data=data, width=width, height=height)


class HeaderRenderer:
    """
    Draws the letterhead on a page.

    One renderer belongs to one document: the logos fetched by render()
    are reused by redraw() for continuation pages.
    """

    def __init__(
        self,
        config: Optional[FormsConfig] = None,
        fetcher: Optional[AssetFetcher] = None,
        font: FontFace = REGULAR_FONT,
    ):
        self.config = config or get_config()
        self.fetcher = fetcher or AssetFetcher(timeout=self.config.asset_timeout)
        self.font = font
        self._logos: Optional[Tuple[Logo, Logo]] = None

    async def load_logos(self) -> Optional[Tuple[Logo, Logo]]:
        """Fetch and decode both logos; None if either one fails."""
        try:
            left_data, right_data = await asyncio.gather(
                self.fetcher.fetch(self.config.left_logo),
                self.fetcher.fetch(self.config.right_logo),
            )
            self._logos = (Logo.decode(left_data), Logo.decode(right_data))
        except Exception as e:
            logger.warning(f"Header logos unavailable, drawing text-only header: {e}")
            self._logos = None
        return self._logos

    async def render(self, page) -> HeaderResult:
        await self.load_logos()
        return self.redraw(page)

    def redraw(self, page) -> HeaderResult:
        """Draw the header with whatever render() loaded, without fetching."""
        width = page.rect.width
        height = page.rect.height

        if self._logos is None:
            bottom_y = self._draw_address(page, height - FALLBACK_TOP_OFFSET)
            return HeaderResult(mode=HeaderMode.TEXT_ONLY, bottom_y=bottom_y)

        left, right = self._logos
        logo_y = height - LOGO_TOP_OFFSET - LOGO_HEIGHT
        left_width = left.width_at(LOGO_HEIGHT)
        right_width = right.width_at(LOGO_HEIGHT)

        self._draw_logo(page, left, self.config.margin_left, logo_y, left_width)
        self._draw_logo(
            page, right, width - self.config.margin_right - right_width, logo_y, right_width
        )

        bottom_y = self._draw_address(page, logo_y + LOGO_HEIGHT - HEADER_FONT_SIZE)
        return HeaderResult(mode=HeaderMode.WITH_LOGOS, bottom_y=bottom_y)

    @staticmethod
    def _draw_logo(page, logo: Logo, x: float, y: float, width: float) -> None:
        height = page.rect.height
        rect = fitz.Rect(x, height - (y + LOGO_HEIGHT), x + width, height - y)
        page.insert_image(rect, stream=logo.data)

    def _draw_address(self, page, start_y: float) -> float:
        width = page.rect.width
        height = page.rect.height
        y = start_y

        self.font.register(page)
        for line in self.config.address_lines:
            text_width = self.font.text_length(line, HEADER_FONT_SIZE)
            page.insert_text(
                fitz.Point((width - text_width) / 2, height - y),
                line,
                fontsize=HEADER_FONT_SIZE,
                fontname=self.font.name,
                color=BLACK,
            )
            y -= HEADER_FONT_SIZE + HEADER_LINE_SPACING

        return y
