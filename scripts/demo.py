#!/usr/bin/env python3
"""
patcite Demo - one parser, five citation dialects

Shows how differently written patent citations normalize to the same
country / serial / kind triple, and what a rejected citation reports.

Run: python scripts/demo.py [CITATION ...]
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from patcite.config import get_settings
from patcite.parsers.citations import CitationParseError, CitationParser

console = Console()

SAMPLE_CITATIONS = [
    "US2016/0012345A1",
    "US20160012345",
    "US1234567B2",
    "EP1234567",
    "ep1234567a1",
    "JPS50123456",
    "JPH01123456",
    "U.S. Pat. No. 1,234,567",
    "United States Patent Number 7,654,321",
    "1,234,567",
    "US_1234567_A1",
    "1,23,4567",
    "Patent pending",
]


def demo_citation_parser(citations: list[str]):
    """Parse each citation and show the normalized result."""
    console.print("\n")
    console.print(Panel.fit(
        "[bold cyan]Citation Parser[/bold cyan]\n\n"
        "Each citation is tried against the US application, epodoc, Japanese era,\n"
        "legal-register and slug formats, in that order.",
        border_style="cyan"
    ))

    parser = CitationParser()

    table = Table(title="Parsed Citations", box=box.ROUNDED)
    table.add_column("Raw", style="white")
    table.add_column("Format", style="cyan")
    table.add_column("Country", style="green")
    table.add_column("Serial", style="green")
    table.add_column("Kind", style="green")

    failures = []
    for raw in citations:
        try:
            fmt, cite = parser.match(raw)
        except CitationParseError as e:
            failures.append(e)
            table.add_row(raw, "[red]no match[/red]", "", "", "")
            continue
        table.add_row(raw, fmt.value, cite.country, cite.serial, cite.kind or "-")

    console.print(table)

    for error in failures:
        console.print(f"[red]✗[/red] {error}")


def main():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    demo_citation_parser(sys.argv[1:] or SAMPLE_CITATIONS)


if __name__ == "__main__":
    main()
