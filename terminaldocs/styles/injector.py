"""Walk an output tree and attach page-kind stylesheets to every HTML page."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterator

from ..config import DEFAULT_STYLES_DIR, InjectionSettings
from ..logging import get_logger
from ..models import InjectionRecord, InjectionReport
from .classify import classify
from .markers import StyleBlock, inject, is_injected, relative_prefix
from .resources import provision_resources

_ENCODING = "utf-8"
# Round-trips bytes that are not valid UTF-8 so untouched regions stay identical.
_ERRORS = "surrogateescape"


class StyleInjector:
    """Applies the sentinel-guarded style block to each page under an output root."""

    def __init__(self, settings: InjectionSettings | None = None) -> None:
        self.settings = settings or InjectionSettings()
        self.logger = get_logger("styles.injector")

    def inject_all(self, output_root: Path) -> InjectionReport:
        """Provision resources, then style every HTML page below *output_root*."""
        root = Path(output_root)
        report = InjectionReport()
        if not root.is_dir():
            self.logger.info("Output root %s does not exist; nothing to style", root)
            return report

        provision_resources(root, self.settings.styles_dir, self.settings.resources_dir)

        for path in self.iter_html_files(root):
            self._process(path, root, report)

        self.logger.info(
            "Styled %d of %d HTML file(s) under %s (%d already styled, %d without </head>, %d failed)",
            report.count,
            report.visited,
            root,
            len(report.already_injected),
            len(report.skipped_headless),
            len(report.failed),
        )
        return report

    def iter_html_files(self, root: Path) -> Iterator[Path]:
        """Yield HTML files under *root*, skipping the resource directory."""
        pattern = "**/*.html" if self.settings.process_nested else "*.html"
        resources = root / self.settings.styles_dir
        for path in sorted(root.glob(pattern)):
            if not path.is_file():
                continue
            if path.parent == resources or resources in path.parents:
                continue
            yield path

    def record_for(self, path: Path, root: Path, html: str) -> InjectionRecord:
        return InjectionRecord(
            path=path,
            kind=classify(path, root),
            prefix=relative_prefix(path, root),
            already_injected=is_injected(html),
        )

    def _process(self, path: Path, root: Path, report: InjectionReport) -> None:
        try:
            html = path.read_bytes().decode(_ENCODING, _ERRORS)
        except OSError as exc:
            self.logger.warning("Could not read %s: %s", path, exc)
            report.failed.append(path)
            return

        record = self.record_for(path, root, html)
        if record.already_injected:
            self.logger.debug("Already styled: %s", path)
            report.already_injected.append(path)
            return

        block = StyleBlock(kind=record.kind, prefix=record.prefix, styles_dir=self.settings.styles_dir)
        updated = inject(html, block)
        if updated is None:
            self.logger.debug("No </head> in %s; leaving it unchanged", path)
            report.skipped_headless.append(path)
            return

        try:
            _replace_file(path, updated.encode(_ENCODING, _ERRORS))
        except OSError as exc:
            self.logger.warning("Could not write %s: %s", path, exc)
            report.failed.append(path)
            return
        self.logger.debug("Styled %s as %s", path, record.kind.label)
        report.modified.append(path)


def inject_all(
    output_root: Path,
    styles_dir: str = DEFAULT_STYLES_DIR,
    process_nested: bool = True,
) -> int:
    """Style every page under *output_root* and return the number of files modified."""
    settings = InjectionSettings(styles_dir=styles_dir, process_nested=process_nested)
    return StyleInjector(settings).inject_all(output_root).count


def _replace_file(path: Path, payload: bytes) -> None:
    """Write *payload* beside *path* and move it into place in one step.

    Read-only pages are refused rather than replaced, since the rename would
    otherwise succeed wherever the directory itself is writable.
    """
    if not os.access(path, os.W_OK):
        raise PermissionError(f"{path} is read-only")
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise


__all__ = ["StyleInjector", "inject_all"]
