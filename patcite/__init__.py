"""
patcite - normalize free-form patent citations.

    >>> from patcite import parse_citation
    >>> parse_citation("U.S. Pat. No. 1,234,567")
    Citation(country='US', serial='1234567', kind=None, publication_date=None)
"""

from .models import Citation, CitationFormat
from .parsers import CitationParseError, CitationParser, parse_citation, try_parse_citation

__all__ = [
    "Citation",
    "CitationFormat",
    "CitationParseError",
    "CitationParser",
    "parse_citation",
    "try_parse_citation",
]
