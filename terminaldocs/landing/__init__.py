"""Aggregate landing pages for coverage and source cross-reference reports."""

from .generator import (
    COVERAGE_PAGE,
    XREF_PAGE,
    LandingPage,
    LandingPageError,
    LandingPageGenerator,
    escape_html,
)

__all__ = [
    "COVERAGE_PAGE",
    "XREF_PAGE",
    "LandingPage",
    "LandingPageError",
    "LandingPageGenerator",
    "escape_html",
]
