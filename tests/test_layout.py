"""
Tests for the layout cursor and the text helpers.
"""

import pytest
import sys
from datetime import date
from pathlib import Path

import fitz

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.layout import BOLD_FONT, REGULAR_FONT, LayoutCursor, format_date_dutch, format_euro, wrap_text
from fakes import PAGE_HEIGHT, RecordingPage


class TestWrapText:
    def test_packs_words_greedily(self):
        assert wrap_text("a b c d e f", 3) == ["a b", "c d", "e f"]

    def test_lines_respect_max_chars(self):
        text = "Knutselmateriaal voor het project rond de lente in het derde leerjaar van de school"
        lines = wrap_text(text, 20)
        assert all(len(line) <= 20 for line in lines)
        assert " ".join(lines) == text

    def test_long_word_gets_its_own_line(self):
        assert wrap_text("kort buitengewoonlang woord", 6) == ["kort", "buitengewoonlang", "woord"]

    def test_rewrapping_is_stable(self):
        lines = wrap_text("een twee drie vier vijf zes zeven acht negen tien", 12)
        assert wrap_text(" ".join(lines), 12) == lines

    def test_whitespace_only_gives_no_lines(self):
        assert wrap_text("", 10) == []
        assert wrap_text("   \n ", 10) == []


class TestFormatEuro:
    @pytest.mark.parametrize("value,expected", [
        (12.5, "12,50"),
        ("12,5", "12,50"),
        ("12.5", "12,50"),
        (0, "0,00"),
        ("7.25", "7,25"),
        (3, "3,00"),
    ])
    def test_formats_with_comma_and_two_decimals(self, value, expected):
        assert format_euro(value) == expected

    def test_none_is_empty(self):
        assert format_euro(None) == ""

    def test_unparsable_is_returned_unchanged(self):
        assert format_euro("abc") == "abc"


class TestFormatDate:
    def test_dutch_long_date(self):
        assert format_date_dutch(date(2026, 10, 18)) == "18 oktober 2026"
        assert format_date_dutch(date(2025, 3, 1)) == "1 maart 2025"


class TestLayoutCursor:
    def test_each_line_moves_down_by_size_and_gap(self, page):
        cursor = LayoutCursor(page)
        cursor.y = 700
        cursor.draw_text("eerste")
        assert cursor.y == pytest.approx(685)
        cursor.draw_text("Titel", bold=True, size=18, line_gap=10)
        assert cursor.y == pytest.approx(657)

    def test_text_is_placed_in_device_coordinates(self, page):
        cursor = LayoutCursor(page)
        cursor.y = 700
        cursor.draw_text("Naam: Jan", bold=True)

        point, text, options = page.texts[0]
        assert text == "Naam: Jan"
        assert point.x == pytest.approx(50)
        assert point.y == pytest.approx(PAGE_HEIGHT - 700)
        assert options["fontname"] == BOLD_FONT.name
        assert options["fontsize"] == 11

    def test_blank_lines_take_space_but_draw_nothing(self, page):
        cursor = LayoutCursor(page)
        cursor.y = 700
        cursor.draw_text("")
        cursor.draw_text("   ")
        assert page.texts == []
        assert cursor.y == pytest.approx(670)

    def test_cursor_never_moves_up(self, page):
        cursor = LayoutCursor(page)
        cursor.y = 700
        positions = [cursor.y]
        for line in ["a", "", "b"]:
            cursor.draw_text(line)
            positions.append(cursor.y)
        cursor.wrap_and_draw("een wat langere zin om te wrappen", 10)
        positions.append(cursor.y)
        cursor.advance(12)
        positions.append(cursor.y)
        assert positions == sorted(positions, reverse=True)

    def test_wrap_and_draw_draws_every_line(self, page):
        cursor = LayoutCursor(page)
        cursor.y = 700
        cursor.wrap_and_draw("a b c d e f", 3)
        assert page.drawn_text == ["a b", "c d", "e f"]
        assert cursor.y == pytest.approx(655)

    def test_section_box_geometry(self, page):
        cursor = LayoutCursor(page)
        cursor.draw_section_box(700, 650)

        rect, options = page.rects[0]
        assert rect.x0 == pytest.approx(46)
        assert rect.width == pytest.approx(cursor.content_width + 8)
        assert rect.height == pytest.approx(60)
        assert rect.y0 == pytest.approx(PAGE_HEIGHT - 706)
        assert options["width"] == 1

    def test_section_frames_its_lines(self, page):
        cursor = LayoutCursor(page)
        cursor.y = 700
        with cursor.section():
            cursor.draw_text("Omschrijving: boeken")
            cursor.draw_text("Categorie: A-producten")

        assert len(page.rects) == 1
        rect, _ = page.rects[0]
        # top = 700 + 5 + 6, bottom = 670 - 4
        assert rect.y0 == pytest.approx(PAGE_HEIGHT - 711)
        assert rect.y1 == pytest.approx(PAGE_HEIGHT - 666)


class TestPagination:
    def _factory(self, pages):
        def new_page():
            page = RecordingPage()
            pages.append(page)
            return page, 700.0
        return new_page

    def test_no_factory_keeps_drawing_on_one_page(self, page):
        cursor = LayoutCursor(page)
        cursor.y = 60
        for _ in range(10):
            cursor.draw_text("regel")
        assert cursor.page is page
        assert cursor.page_count == 1
        assert len(page.texts) == 10

    def test_breaks_to_new_page_below_bottom_margin(self, page):
        pages = []
        cursor = LayoutCursor(page, page_factory=self._factory(pages))
        cursor.y = 60
        cursor.draw_text("x")
        cursor.draw_text("y")

        assert cursor.page_count == 2
        assert cursor.page is pages[0]
        assert page.drawn_text == ["x"]
        assert pages[0].drawn_text == ["y"]
        assert cursor.y == pytest.approx(685)

    def test_open_section_is_split_across_pages(self, page):
        pages = []
        cursor = LayoutCursor(page, page_factory=self._factory(pages))
        cursor.y = 60
        with cursor.section():
            cursor.draw_text("x")
            cursor.draw_text("y")

        assert len(page.rects) == 1
        assert len(pages[0].rects) == 1

        first, _ = page.rects[0]
        # 65 + 6 down to 45 - 4
        assert first.y0 == pytest.approx(PAGE_HEIGHT - 71)
        assert first.y1 == pytest.approx(PAGE_HEIGHT - 41)

        second, _ = pages[0].rects[0]
        # 705 + 6 down to 685 - 4
        assert second.y0 == pytest.approx(PAGE_HEIGHT - 711)
        assert second.y1 == pytest.approx(PAGE_HEIGHT - 681)

    def test_advance_never_breaks_the_page(self, page):
        pages = []
        cursor = LayoutCursor(page, page_factory=self._factory(pages))
        cursor.y = 60
        with cursor.section():
            cursor.draw_text("x")
            cursor.advance(20)

        # The frame closes below the margin on the same page
        assert pages == []
        rect, _ = page.rects[0]
        assert rect.y1 == pytest.approx(PAGE_HEIGHT - 21)

        cursor.draw_text("y")
        assert cursor.page_count == 2
        assert pages[0].drawn_text == ["y"]


class TestFontFace:
    def test_euro_sign_has_a_width(self):
        assert BOLD_FONT.font.has_glyph(ord("€"))
        assert BOLD_FONT.text_length("€", 11) > 0

    def test_register_embeds_under_the_resource_name(self):
        doc = fitz.open()
        page = doc.new_page()
        REGULAR_FONT.register(page)
        REGULAR_FONT.register(page)

        fonts = page.get_fonts()
        assert [font[4] for font in fonts] == [REGULAR_FONT.name]
        doc.close()
