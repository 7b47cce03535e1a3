"""Tests for page kind classification."""

from __future__ import annotations

from pathlib import Path

import pytest

from terminaldocs.models import PageKind
from terminaldocs.styles.classify import classify, classify_parts

ROOT = Path("/build/target/site")


@pytest.mark.parametrize(
    ("relative", "expected"),
    [
        ("coverage.html", PageKind.LANDING),
        ("source-xref.html", PageKind.LANDING),
        ("core/coverage.html", PageKind.LANDING),
        ("core/jacoco/coverage.html", PageKind.LANDING),
        ("xref/source-xref.html", PageKind.LANDING),
        ("jacoco/index.html", PageKind.COVERAGE),
        ("core/jacoco/com.example/Foo.java.html", PageKind.COVERAGE),
        ("xref/index.html", PageKind.CROSS_REFERENCE),
        ("core/xref/com/example/Foo.html", PageKind.CROSS_REFERENCE),
        ("apidocs/index.html", PageKind.API_DOCUMENTATION),
        ("core/apidocs/com/example/package-summary.html", PageKind.API_DOCUMENTATION),
        ("index.html", PageKind.GENERIC_SITE),
        ("about.html", PageKind.GENERIC_SITE),
        ("xref-test/index.html", PageKind.GENERIC_SITE),
        ("jacoco.html", PageKind.GENERIC_SITE),
    ],
)
def test_classify_by_path(relative: str, expected: PageKind) -> None:
    assert classify(ROOT / relative, ROOT) is expected


def test_coverage_wins_over_xref_when_both_segments_present() -> None:
    assert classify(ROOT / "xref" / "jacoco" / "index.html", ROOT) is PageKind.COVERAGE
    assert classify(ROOT / "jacoco" / "xref" / "index.html", ROOT) is PageKind.COVERAGE


def test_xref_wins_over_apidocs() -> None:
    assert classify(ROOT / "apidocs" / "xref" / "index.html", ROOT) is PageKind.CROSS_REFERENCE


def test_segments_above_root_are_ignored() -> None:
    root = Path("/work/xref/target/site")

    assert classify(root / "index.html", root) is PageKind.GENERIC_SITE


def test_classify_without_root_uses_full_path() -> None:
    assert classify(Path("/work/site/apidocs/index.html")) is PageKind.API_DOCUMENTATION


def test_classify_parts_directly() -> None:
    assert classify_parts("index.html", ["module", "jacoco"]) is PageKind.COVERAGE
    assert classify_parts("coverage.html", ["jacoco"]) is PageKind.LANDING
    assert classify_parts("index.html", []) is PageKind.GENERIC_SITE
