"""
Citation Parser - turns one patent citation string into a Citation.

Patent offices and citation aggregators write the same document number in
several dialects. Five of them are understood, tried in this order:

US published applications:
  - US2016/0012345A1
  - US20160012345
  (the serial keeps the year but loses the zero padding: US201612345)

EPO "epodoc":
  - EP1234567
  - EP1234567B1
  - US1234567A1

Japanese imperial era:
  - JPS50123456   (Showa 50 -> 1975)
  - JPH01123456   (Heisei 1 -> 1989)

Legal-register US patents:
  - U.S. Pat. No. 1,234,567
  - United States Patent Number 1,234,567
  - 1,234,567

Slug style:
  - US_1234567_A1

Order matters: epodoc accepts anything shaped like two letters and digits,
so the US application format must be tried before it. Country phrases and
digit groups used by the legal-register format live in phrases.py.

More on number formats:
  http://www.hawkip.com/advice/variations-of-publication-number-formatting-by-country
"""
from __future__ import annotations

import logging
from typing import Callable

from ..config import get_settings
from ..models import Citation, CitationFormat
from .phrases import (
    comma_grouped_number,
    country_phrase,
    imperial_year,
    patent_phrase,
    strip_leading_zeros,
)
from .scanner import ANY_CHAR, DIGIT, LETTER, Mismatch, Scanner

logger = logging.getLogger(__name__)


class CitationParseError(ValueError):
    """No citation format matched the input."""

    def __init__(
        self,
        text: str,
        position: int,
        expected: tuple[str, ...],
        failures: dict[CitationFormat, int] | None = None,
    ):
        self.text = text
        self.position = position
        self.expected = expected
        self.found = text[position] if position < len(text) else None
        self.failures = failures or {}
        super().__init__(self._describe())

    def _describe(self) -> str:
        unexpected = "end of input" if self.found is None else repr(self.found)
        message = (
            f"No citation format matched {self.text!r} at column {self.position + 1}: "
            f"unexpected {unexpected}"
        )
        if self.expected:
            message += f"; expecting {', '.join(self.expected)}"
        return message


# =============================================================================
# Grammars
# =============================================================================


def us_published_application_format(scanner: Scanner) -> Citation:
    """US + 4-digit year + optional '/' + 7-digit serial + optional kind."""
    scanner.literal("US")
    year = scanner.count(4, DIGIT, "digit")
    scanner.optional_char("/")
    serial = scanner.count(7, DIGIT, "digit")
    kind = scanner.rest()
    # EPO data drops the zero padding of the serial part
    return Citation(country="US", serial=year + strip_leading_zeros(serial), kind=kind)


def epodoc_format(scanner: Scanner) -> Citation:
    country = scanner.count(2, LETTER, "letter")
    serial = scanner.many1(DIGIT, "digit")
    kind = scanner.rest()
    return Citation(country=country, serial=serial, kind=kind)


def japanese_imperial_format(scanner: Scanner) -> Citation:
    """
    JPS/JPH + 2-digit era year + 6-digit serial.

    The era year becomes a Gregorian year prefix on the serial. The kind is
    not written in this dialect; Japanese unexamined publications are "A".
    """
    marker = scanner.choice(("JPS", "JPH"))
    year = int(scanner.count(2, DIGIT, "digit"))
    serial = scanner.count(6, DIGIT, "digit")
    gregorian = imperial_year(marker[-1], year)
    return Citation(country="JP", serial=f"{gregorian}{serial}", kind="A")


def messy_us_format(scanner: Scanner) -> Citation:
    """Optional "U.S. Pat. No." style preamble, then a 1,234,567 number."""
    start = scanner.mark()
    try:
        country_phrase(scanner)
        scanner.spaces()
        patent_phrase(scanner)
    except Mismatch:
        # An incomplete preamble counts as no preamble at all
        scanner.reset(start)
    serial = comma_grouped_number(scanner)
    return Citation(country="US", serial=serial)


def slug_format(scanner: Scanner) -> Citation:
    country = scanner.count(2, LETTER, "letter")
    scanner.literal("_")
    serial = scanner.many1(DIGIT, "digit")
    scanner.literal("_")
    kind = scanner.many1(ANY_CHAR, "kind code")
    return Citation(country=country, serial=serial, kind=kind)


Grammar = Callable[[Scanner], Citation]


# =============================================================================
# Dispatcher
# =============================================================================


class CitationParser:
    """
    Normalizes free-form patent citations.

    Usage:
        parser = CitationParser()
        cite = parser.parse("U.S. Pat. No. 1,234,567")
        print(cite.country, cite.serial, cite.kind)
    """

    GRAMMARS: tuple[tuple[CitationFormat, Grammar], ...] = (
        (CitationFormat.US_PUBLISHED_APPLICATION, us_published_application_format),
        (CitationFormat.EPODOC, epodoc_format),
        (CitationFormat.JAPANESE_IMPERIAL, japanese_imperial_format),
        (CitationFormat.MESSY_US, messy_us_format),
        (CitationFormat.SLUG, slug_format),
    )

    # Formats whose country code is copied from the input as written
    PASS_THROUGH_COUNTRY = {CitationFormat.EPODOC, CitationFormat.SLUG}

    def __init__(self, uppercase_countries: bool | None = None):
        if uppercase_countries is None:
            uppercase_countries = get_settings().uppercase_countries
        self.uppercase_countries = uppercase_countries
        self._grammars = dict(self.GRAMMARS)

    def parse(self, text: str) -> Citation:
        """
        Parse a citation string.

        Raises:
            CitationParseError: if no format matches.
        """
        _, citation = self.match(text)
        return citation

    def try_parse(self, text: str) -> Citation | None:
        """Parse a citation string, returning None if no format matches."""
        try:
            return self.parse(text)
        except CitationParseError:
            return None

    def match(self, text: str) -> tuple[CitationFormat, Citation]:
        """
        Parse a citation string and report which format recognized it.

        Each format is tried from the start of the text; the first one to
        succeed wins. If every format fails, the error comes from the one
        that got furthest into the input.
        """
        self._check_text(text)
        failures: dict[CitationFormat, Mismatch] = {}

        for fmt, grammar in self.GRAMMARS:
            try:
                citation = self._run(fmt, grammar, text)
            except Mismatch as e:
                logger.debug(f"{fmt.value} rejected {text!r} at position {e.position}")
                failures[fmt] = e
                continue
            logger.debug(f"{fmt.value} matched {text!r}")
            return fmt, citation

        error = self._furthest_failure(text, failures)
        logger.info(str(error))
        raise error

    def parse_as(self, text: str, fmt: CitationFormat) -> Citation:
        """Parse a citation string with one specific format only."""
        self._check_text(text)
        try:
            return self._run(fmt, self._grammars[fmt], text)
        except Mismatch as e:
            raise CitationParseError(text, e.position, e.expected, {fmt: e.position}) from None

    # ==========================================================================
    # Internal Methods
    # ==========================================================================

    def _run(self, fmt: CitationFormat, grammar: Grammar, text: str) -> Citation:
        scanner = Scanner(text)
        citation = grammar(scanner)

        if not scanner.at_end:
            logger.debug(f"{fmt.value} ignored trailing input {text[scanner.pos:]!r}")

        if self.uppercase_countries and fmt in self.PASS_THROUGH_COUNTRY:
            upper = citation.country.upper()
            # Some letters grow when upper-cased ("ß" -> "SS"); keep those as written
            if len(upper) == 2:
                citation = citation.model_copy(update={"country": upper})
        return citation

    def _check_text(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"citation text must be str, not {type(text).__name__}")

    def _furthest_failure(
        self, text: str, failures: dict[CitationFormat, Mismatch]
    ) -> CitationParseError:
        """Build the error from the failure(s) that progressed furthest."""
        position = max(e.position for e in failures.values())

        expected: list[str] = []
        for e in failures.values():
            if e.position != position:
                continue
            for label in e.expected:
                if label not in expected:
                    expected.append(label)

        return CitationParseError(
            text,
            position,
            tuple(expected),
            {fmt: e.position for fmt, e in failures.items()},
        )


# =============================================================================
# Convenience Functions
# =============================================================================


def parse_citation(text: str) -> Citation:
    """Parse a citation string. Convenience wrapper around CitationParser."""
    return CitationParser().parse(text)


def try_parse_citation(text: str) -> Citation | None:
    """Parse a citation string, or return None if it is not recognized."""
    return CitationParser().try_parse(text)
