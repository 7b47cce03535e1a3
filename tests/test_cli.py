"""CLI parser and entrypoint behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from terminaldocs.cli import _build_parser, main
from tests._fixtures.site_builder import SiteBuilder


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "inject"])
    assert args.verbose is True
    assert args.command == "inject"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["landing", "--verbose"])
    assert args.verbose is True
    assert args.command == "landing"


def test_cli_inject_options() -> None:
    parser = _build_parser()
    args = parser.parse_args(["inject", "proj", "--styles-dir", "custom", "--no-nested", "--skip"])
    assert args.path == "proj"
    assert args.styles_dir == "custom"
    assert args.process_nested is False
    assert args.skip is True


def test_cli_nested_defaults_to_config() -> None:
    parser = _build_parser()
    args = parser.parse_args(["inject"])
    assert args.process_nested is None
    assert args.styles_dir is None


def test_cli_landing_collects_modules() -> None:
    parser = _build_parser()
    args = parser.parse_args(["landing", "--module", "core", "--module", "web/target"])
    assert args.modules == [Path("core"), Path("web/target")]


def test_cli_requires_command() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args([])


def test_main_run_end_to_end(site_builder: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    site_builder.page("site/jacoco/index.html", module="core")
    site_builder.page("site/index.html")

    main(
        [
            "run",
            str(site_builder.root),
            "--module",
            str(site_builder.root / "core"),
            "--project-name",
            "CLI Project",
        ]
    )

    out = capsys.readouterr().out
    site = site_builder.build_dir() / "site"
    assert "Landing page written to" in out
    assert "Styled 2 file(s)" in out
    assert "CLI Project" in (site / "coverage.html").read_text(encoding="utf-8")
    assert "terminaldocs-injected [site]" in (site / "index.html").read_text(encoding="utf-8")


def test_main_inject_skip(site_builder: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    page = site_builder.page("site/index.html")

    main(["inject", str(site_builder.root), "--skip"])

    assert "Style injection skipped" in capsys.readouterr().out
    assert "terminaldocs-injected" not in page.read_text(encoding="utf-8")


def test_main_reports_config_errors(site_builder: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    (site_builder.root / ".terminaldocs.yml").write_text("- not a mapping\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["inject", str(site_builder.root)])

    assert excinfo.value.code == 1
    assert "must contain a mapping" in capsys.readouterr().err


def test_main_reports_missing_templates(
    site_builder: SiteBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    site_builder.page("site/jacoco/index.html", module="core")
    (site_builder.root / ".terminaldocs.yml").write_text(
        "modules:\n  - id: core\n", encoding="utf-8"
    )
    broken = tmp_path / "broken-templates"
    broken.mkdir()
    (broken / "coverage-page.html").write_text("{% if %}", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["landing", str(site_builder.root), "--templates-dir", str(broken)])

    assert excinfo.value.code == 1
    assert "terminaldocs landing failed" in capsys.readouterr().err


def test_main_rejects_repeated_module_names(
    site_builder: SiteBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(
            [
                "landing",
                str(site_builder.root),
                "--module",
                str(site_builder.root / "a" / "core"),
                "--module",
                str(site_builder.root / "b" / "core"),
            ]
        )

    assert excinfo.value.code == 1
    assert "Duplicate module id 'core'" in capsys.readouterr().err
    assert not site_builder.build_dir().exists()
