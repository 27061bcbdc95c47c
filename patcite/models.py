"""
Core data models for patent citation parsing.

A Citation is the only thing the parser produces. It is a frozen Pydantic
model so that a parsed result can be hashed, compared and passed around
without anyone mutating it afterwards.
"""
from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Enums
# =============================================================================


class CitationFormat(str, Enum):
    """Citation dialects the parser understands, in dispatch order."""

    US_PUBLISHED_APPLICATION = "us_published_application"  # US2016/0012345A1
    EPODOC = "epodoc"  # EP1234567B1
    JAPANESE_IMPERIAL = "japanese_imperial"  # JPS50123456
    MESSY_US = "messy_us"  # U.S. Pat. No. 1,234,567
    SLUG = "slug"  # US_1234567_A1


# =============================================================================
# Citation
# =============================================================================


class Citation(BaseModel):
    """A normalized patent document reference."""

    country: str = Field(description="Two-letter office code, e.g. 'US', 'EP', 'JP'")
    serial: str = Field(description="Serial number digits, including any computed year prefix")
    kind: str | None = Field(default=None, description="Kind code such as 'A1' or 'B2'")
    publication_date: date | None = None  # Reserved, never filled in by the parser

    model_config = {"frozen": True}

    @field_validator("country")
    @classmethod
    def _two_character_country(cls, value: str) -> str:
        if len(value) != 2:
            raise ValueError(f"country must be exactly two characters, got {value!r}")
        return value

    @field_validator("serial")
    @classmethod
    def _digit_serial(cls, value: str) -> str:
        if not value or not all("0" <= ch <= "9" for ch in value):
            raise ValueError(f"serial must be a non-empty run of digits, got {value!r}")
        return value
