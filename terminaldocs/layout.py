"""Build directory layout shared by report discovery and style injection."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

STAGING_DIR = "staging"
SITE_DIR = "site"

COVERAGE_INDEX = "jacoco/index.html"
XREF_INDEX = "xref/index.html"


def candidate_roots(build_dir: Path) -> Tuple[Path, Path]:
    """Return the staging and site directories of *build_dir*, in precedence order."""
    build_dir = Path(build_dir)
    return build_dir / STAGING_DIR, build_dir / SITE_DIR


def locate_report(build_dir: Path, relative: str) -> Optional[Path]:
    """Return the first existing ``<root>/<relative>`` under staging, then site."""
    for root in candidate_roots(build_dir):
        candidate = root / relative
        if candidate.exists():
            return candidate
    return None


def existing_output_root(build_dir: Path) -> Optional[Path]:
    """Return staging if present, otherwise site if present, otherwise ``None``."""
    for root in candidate_roots(build_dir):
        if root.is_dir():
            return root
    return None


def select_output_root(build_dir: Path, *, create: bool = True) -> Path:
    """Return the output root for *build_dir*.

    Staging is the sole root whenever it exists. Otherwise the site directory
    is used and, when ``create`` is true, created on the way.
    """
    staging, site = candidate_roots(build_dir)
    if staging.is_dir():
        return staging
    if create:
        site.mkdir(parents=True, exist_ok=True)
    return site


__all__ = [
    "COVERAGE_INDEX",
    "SITE_DIR",
    "STAGING_DIR",
    "XREF_INDEX",
    "candidate_roots",
    "existing_output_root",
    "locate_report",
    "select_output_root",
]
