"""
Tests for the scanner and the shared lexical pieces of the grammars.
"""

import pytest
from patcite.parsers.phrases import (
    comma_grouped_number,
    country_phrase,
    imperial_year,
    patent_phrase,
    strip_leading_zeros,
    triplet,
)
from patcite.parsers.scanner import DIGIT, LETTER, Mismatch, Scanner


class TestScanner:
    """Test cursor movement and mismatch reporting."""

    def test_literal_mismatch_leaves_cursor(self):
        scanner = Scanner("EP1234567")

        with pytest.raises(Mismatch) as exc_info:
            scanner.literal("US")

        assert scanner.pos == 0
        assert exc_info.value.position == 0
        assert exc_info.value.expected == ('"US"',)

    def test_count_reports_offending_position(self):
        """Test that a short digit run fails where the digits stop."""
        scanner = Scanner("12a4")

        with pytest.raises(Mismatch) as exc_info:
            scanner.count(4, DIGIT, "digit")

        assert exc_info.value.position == 2

    def test_many1_is_greedy(self):
        scanner = Scanner("1234567B1")
        assert scanner.many1(DIGIT, "digit") == "1234567"
        assert scanner.pos == 7

    def test_many1_needs_one(self):
        with pytest.raises(Mismatch):
            Scanner("B1").many1(DIGIT, "digit")

    def test_letters(self):
        """Test that letters include non-ASCII but not digits or underscores."""
        assert Scanner("é").token(LETTER, "letter") == "é"
        for text in ("1", "_", " ", "½", "²"):
            with pytest.raises(Mismatch):
                Scanner(text).token(LETTER, "letter")

    def test_rest(self):
        scanner = Scanner("EP1B1")
        scanner.pos = 3
        assert scanner.rest() == "B1"
        assert scanner.at_end
        assert scanner.rest() is None

    def test_mark_and_reset(self):
        scanner = Scanner("U.S. Pat.")
        start = scanner.mark()
        scanner.literal("U.S.")
        scanner.spaces()
        assert scanner.pos == 5

        scanner.reset(start)
        assert scanner.peek() == "U"


class TestPhrases:
    """Test country, patent-type and signal phrases."""

    @pytest.mark.parametrize(
        "text,phrase",
        [("United States Pat.", "United States"), ("U.S. Pat.", "U.S."), ("US Pat", "US")],
    )
    def test_country_phrase(self, text, phrase):
        scanner = Scanner(text)
        assert country_phrase(scanner) == phrase
        assert scanner.pos == len(phrase)

    def test_country_phrase_mismatch(self):
        with pytest.raises(Mismatch) as exc_info:
            country_phrase(Scanner("EP Pat"))
        assert '"United States"' in exc_info.value.expected

    @pytest.mark.parametrize(
        "text,end",
        [
            ("Patent No. 1", 11),
            ("Pat. Number 1", 12),
            ("Pat 1", 4),
            ("Patent Number 1", 14),
            ("Pat.No.1", 7),
        ],
    )
    def test_patent_phrase(self, text, end):
        """Test that the phrase and the spaces after it are consumed."""
        scanner = Scanner(text)
        patent_phrase(scanner)
        assert scanner.pos == end
        assert scanner.peek() == "1"

    def test_patent_phrase_mismatch(self):
        with pytest.raises(Mismatch) as exc_info:
            patent_phrase(Scanner("Design No. 1"))
        assert exc_info.value.position == 0


class TestDigitGroups:
    """Test comma-grouped patent numbers."""

    def test_triplet(self):
        assert triplet(Scanner("234")) == "234"

        scanner = Scanner(",234")
        assert triplet(scanner) == "234"
        assert scanner.pos == 4

    def test_short_triplet(self):
        with pytest.raises(Mismatch) as exc_info:
            triplet(Scanner(",23,"))
        assert exc_info.value.position == 3

    @pytest.mark.parametrize("text", ["1,234,567", "1234567", "1,234567", "1234,567"])
    def test_comma_grouped_number(self, text):
        assert comma_grouped_number(Scanner(text)) == "1234567"

    def test_wrong_group_size(self):
        with pytest.raises(Mismatch) as exc_info:
            comma_grouped_number(Scanner("12,34,567"))
        assert exc_info.value.position == 2


class TestNumberHelpers:
    """Test imperial years and zero stripping."""

    def test_imperial_year(self):
        assert imperial_year("S", 50) == 1975
        assert imperial_year("S", 1) == 1926
        assert imperial_year("H", 1) == 1989
        assert imperial_year("H", 30) == 2018

    def test_unknown_era(self):
        with pytest.raises(ValueError, match="Unknown imperial era"):
            imperial_year("R", 1)

    def test_strip_leading_zeros(self):
        assert strip_leading_zeros("0012345") == "12345"
        assert strip_leading_zeros("1002030") == "1002030"
        assert strip_leading_zeros("0000000") == ""
