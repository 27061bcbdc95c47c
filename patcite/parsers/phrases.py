"""
Shared lexical pieces of the citation grammars.

Legal-register citations spell out the office and document type in several
ways ("United States Patent No.", "U.S. Pat.", "US Pat Number"). Longer
spellings are listed before their prefixes so "Patent" is never read as
"Pat" followed by stray "ent".
"""
from __future__ import annotations

from .scanner import DIGIT, Scanner

COUNTRY_PHRASES = ("United States", "U.S.", "US")
PATENT_TYPE_PHRASES = ("Patent", "Pat")
NUMBER_SIGNAL_PHRASES = ("Number", "No")

# Japanese era marker -> Gregorian year of era year 0
# http://www.epo.org/searching-for-patents/helpful-resources/asian/japan/numbering.html
IMPERIAL_ERA_OFFSETS = {
    "S": 1925,  # Showa
    "H": 1988,  # Heisei
}


def country_phrase(scanner: Scanner) -> str:
    """Match "United States", "U.S." or "US"."""
    return scanner.choice(COUNTRY_PHRASES)


def patent_phrase(scanner: Scanner) -> None:
    """Match e.g. "Pat. No. ", "Patent Number ", "Pat " (trailing spaces included)."""
    scanner.choice(PATENT_TYPE_PHRASES)
    scanner.optional_char(".")
    scanner.spaces()
    scanner.optional_choice(NUMBER_SIGNAL_PHRASES)
    scanner.optional_char(".")
    scanner.spaces()


def triplet(scanner: Scanner) -> str:
    """Three digits, optionally preceded by a grouping comma."""
    scanner.optional_char(",")
    return scanner.count(3, DIGIT, "digit")


def comma_grouped_number(scanner: Scanner) -> str:
    """
    A 7-digit patent number such as "1,234,567" or "1234567".

    Only the modern seven digit series is recognized: one leading digit and
    two groups of three.
    """
    lead = scanner.token(DIGIT, "digit")
    return lead + triplet(scanner) + triplet(scanner)


def imperial_year(era: str, year: int) -> int:
    """Convert a year within a Japanese era to the Gregorian year."""
    try:
        return IMPERIAL_ERA_OFFSETS[era] + year
    except KeyError:
        raise ValueError(f"Unknown imperial era marker: {era!r}") from None


def strip_leading_zeros(digits: str) -> str:
    """Drop leading zeros. An all-zero run becomes the empty string."""
    return digits.lstrip("0")
