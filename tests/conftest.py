"""
Shared fixtures for Financial Forms tests.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.attachment_merger import AttachmentResource
from core.config import FormsConfig
from fakes import RecordingPage, StubFetcher, make_image_bytes


@pytest.fixture
def page():
    return RecordingPage()


@pytest.fixture
def left_logo_png():
    return make_image_bytes(120, 60, "PNG", color=(10, 120, 200))


@pytest.fixture
def right_logo_png():
    return make_image_bytes(80, 80, "PNG", color=(240, 180, 0))


@pytest.fixture
def forms_config():
    return FormsConfig(left_logo="left.png", right_logo="right.png")


@pytest.fixture
def logo_fetcher(left_logo_png, right_logo_png):
    return StubFetcher({"left.png": left_logo_png, "right.png": right_logo_png})


@pytest.fixture
def failing_fetcher():
    return StubFetcher({})


@pytest.fixture
def receipt_jpeg():
    return AttachmentResource(
        name="kasticket.jpg",
        content=make_image_bytes(300, 200, "JPEG"),
        media_type="image/jpeg",
    )


@pytest.fixture
def expense_note_values(receipt_jpeg):
    return {
        "formType": "expense_note",
        "userDisplayName": "Jan Peeters",
        "omschrijving": "Knutselmateriaal voor het project rond de lente in het derde leerjaar",
        "categorie": "A-producten",
        "bedrag": "42,5",
        "rekeningnummer": "BE68 5390 0754 7034",
        "doorgerekend": "nee",
        "facturen": [receipt_jpeg],
    }


@pytest.fixture
def public_transport_values(receipt_jpeg):
    return {
        "formType": "public_transport",
        "userDisplayName": "An Janssens",
        "verklaring": "ja",
        "maand": "september",
        "jaar": "2026",
        "bedrag": "49",
        "rekeningnummer": "BE68539007547034",
        "facturen": [receipt_jpeg],
    }
