"""Render aggregate landing pages linking to each module's reports."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound
from markupsafe import Markup, escape

from ..logging import get_logger
from ..models import DiscoveryResult, ModuleSummary

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
ROW_TEMPLATE = "module-row.html"


class LandingPageError(RuntimeError):
    """Raised when a landing page cannot be rendered or written."""


@dataclass(frozen=True)
class LandingPage:
    """One aggregate page: its template, output filename and per-module link."""

    template: str
    filename: str
    report_path: str
    link_text: str


COVERAGE_PAGE = LandingPage(
    template="coverage-page.html",
    filename="coverage.html",
    report_path="jacoco/index.html",
    link_text="View Coverage →",
)
XREF_PAGE = LandingPage(
    template="xref-page.html",
    filename="source-xref.html",
    report_path="xref/index.html",
    link_text="Browse Source →",
)


def escape_html(value: object) -> Markup:
    """Escape ``& < > " '`` for embedding in markup; ``None`` becomes empty.

    Installed as the template environment's ``finalize`` hook, so every
    ``{{ ... }}`` expression passes through it. Values that are already
    ``Markup`` (such as rendered rows) are left as they are.
    """
    if value is None:
        return Markup("")
    return escape(value)


class LandingPageGenerator:
    """Fills landing page templates with one row per discovered module."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self.logger = get_logger("landing")
        self._env = self._create_env(templates_dir)

    def render(self, page: LandingPage, modules: Sequence[ModuleSummary], project_name: str) -> str:
        """Return the full HTML for *page* listing *modules*."""
        template = self._get_template(page.template)
        rows = self.render_rows(page, modules)
        try:
            return template.render(project_name=project_name, module_rows=rows)
        except TemplateError as exc:
            raise LandingPageError(f"Failed to render {page.template}: {exc}") from exc

    def render_rows(self, page: LandingPage, modules: Sequence[ModuleSummary]) -> Markup:
        template = self._get_template(ROW_TEMPLATE)
        rendered: List[str] = []
        for module in modules:
            try:
                rendered.append(
                    template.render(
                        module=module,
                        report_path=page.report_path,
                        link_text=page.link_text,
                    )
                )
            except TemplateError as exc:
                raise LandingPageError(f"Failed to render row for {module.identifier}: {exc}") from exc
        return Markup("".join(rendered))

    def write(self, result: DiscoveryResult, output_root: Path, project_name: str) -> List[Path]:
        """Write ``coverage.html`` and ``source-xref.html`` for the non-empty lists."""
        output_root = Path(output_root)
        written: List[Path] = []
        for page, modules in ((COVERAGE_PAGE, result.coverage), (XREF_PAGE, result.xref)):
            if not modules:
                continue
            html = self.render(page, modules, project_name)
            target = output_root / page.filename
            try:
                output_root.mkdir(parents=True, exist_ok=True)
                target.write_text(html, encoding="utf-8")
            except OSError as exc:
                raise LandingPageError(f"Failed to write {target}: {exc}") from exc
            self.logger.info("Generated %s landing page: %s", page.filename, target)
            written.append(target)

        if result.is_empty:
            self.logger.info("No modules with coverage or xref reports found")
        return written

    def _get_template(self, name: str):
        try:
            return self._env.get_template(name)
        except TemplateNotFound as exc:
            raise LandingPageError(f"Template not found: {name}") from exc
        except TemplateError as exc:
            raise LandingPageError(f"Failed to load template {name}: {exc}") from exc

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(DEFAULT_TEMPLATES_DIR))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=True,
            finalize=escape_html,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = [
    "COVERAGE_PAGE",
    "LandingPage",
    "LandingPageError",
    "LandingPageGenerator",
    "XREF_PAGE",
    "escape_html",
]
