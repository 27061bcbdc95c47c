"""Patent citation parsing."""

from .citations import CitationParseError, CitationParser, parse_citation, try_parse_citation

__all__ = ["CitationParseError", "CitationParser", "parse_citation", "try_parse_citation"]
