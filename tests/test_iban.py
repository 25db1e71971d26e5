"""Tests for the Belgian IBAN check."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.iban import is_valid_belgian_iban

VALID_IBAN = "BE68539007547034"


class TestBelgianIban:
    def test_reference_iban_is_valid(self):
        assert is_valid_belgian_iban(VALID_IBAN) is True

    def test_spaces_and_lowercase_are_accepted(self):
        assert is_valid_belgian_iban("be68 5390 0754 7034") is True
        assert is_valid_belgian_iban("  BE68\t5390 0754 7034 ") is True

    @pytest.mark.parametrize("value", [
        "NL91ABNA0417164300",
        "FR1420041010050500013M02606",
        "BE6853900754703",
        "BE685390075470345",
        "BE68A39007547034",
        "68539007547034BE",
    ])
    def test_wrong_country_or_shape_is_rejected(self, value):
        assert is_valid_belgian_iban(value) is False

    @pytest.mark.parametrize("value", ["", None, 12345, "   "])
    def test_empty_or_non_text_is_rejected(self, value):
        assert is_valid_belgian_iban(value) is False

    def test_every_single_digit_change_is_detected(self):
        for position in range(2, len(VALID_IBAN)):
            digit = int(VALID_IBAN[position])
            for replacement in range(10):
                if replacement == digit:
                    continue
                mutated = VALID_IBAN[:position] + str(replacement) + VALID_IBAN[position + 1:]
                assert is_valid_belgian_iban(mutated) is False, mutated

    def test_wrong_check_digits(self):
        assert is_valid_belgian_iban("BE69539007547034") is False
