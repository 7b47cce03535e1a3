"""Tests for the staging-over-site layout rule."""

from __future__ import annotations

from pathlib import Path

from terminaldocs.layout import (
    COVERAGE_INDEX,
    existing_output_root,
    locate_report,
    select_output_root,
)


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("<html></html>", encoding="utf-8")
    return path


def test_locate_report_prefers_staging(tmp_path: Path) -> None:
    staging = _touch(tmp_path / "staging" / COVERAGE_INDEX)
    _touch(tmp_path / "site" / COVERAGE_INDEX)

    assert locate_report(tmp_path, COVERAGE_INDEX) == staging


def test_locate_report_falls_back_to_site(tmp_path: Path) -> None:
    (tmp_path / "staging").mkdir()
    site = _touch(tmp_path / "site" / COVERAGE_INDEX)

    assert locate_report(tmp_path, COVERAGE_INDEX) == site


def test_locate_report_missing_build_dir(tmp_path: Path) -> None:
    assert locate_report(tmp_path / "does-not-exist", COVERAGE_INDEX) is None


def test_select_output_root_uses_staging_when_present(tmp_path: Path) -> None:
    (tmp_path / "staging").mkdir()
    (tmp_path / "site").mkdir()

    assert select_output_root(tmp_path) == tmp_path / "staging"


def test_select_output_root_creates_site(tmp_path: Path) -> None:
    root = select_output_root(tmp_path)

    assert root == tmp_path / "site"
    assert root.is_dir()


def test_select_output_root_without_create(tmp_path: Path) -> None:
    root = select_output_root(tmp_path, create=False)

    assert root == tmp_path / "site"
    assert not root.exists()


def test_existing_output_root(tmp_path: Path) -> None:
    assert existing_output_root(tmp_path) is None
    (tmp_path / "site").mkdir()
    assert existing_output_root(tmp_path) == tmp_path / "site"
    (tmp_path / "staging").mkdir()
    assert existing_output_root(tmp_path) == tmp_path / "staging"
