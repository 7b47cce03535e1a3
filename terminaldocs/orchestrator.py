"""Pipeline orchestration for the landing and inject goals."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .config import TerminalDocsConfig
from .discovery import child_modules, discover
from .landing import LandingPageGenerator
from .layout import existing_output_root, select_output_root
from .logging import get_logger
from .models import InjectionReport, ModuleBuildInfo
from .styles import StyleInjector


@dataclass
class RunOutcome:
    """Result of running both goals for one project."""

    landing_pages: Optional[List[Path]] = None
    injection: Optional[InjectionReport] = None
    skipped: bool = False


class Orchestrator:
    """Coordinates discovery, landing page generation and style injection for a project."""

    def __init__(
        self,
        generator: LandingPageGenerator | None = None,
        injector: StyleInjector | None = None,
    ) -> None:
        self._generator = generator
        self._injector = injector
        self.logger = get_logger("orchestrator")

    def run_landing(
        self,
        config: TerminalDocsConfig,
        modules: Sequence[ModuleBuildInfo] | None = None,
    ) -> Optional[List[Path]]:
        """Generate landing pages for an aggregator project.

        Returns ``None`` when the goal is skipped, otherwise the pages written
        (possibly none when no module produced reports).
        """
        if config.skip:
            self.logger.info("Skipping landing page generation")
            return None
        if not config.aggregator:
            self.logger.debug("Skipping landing page generation: not an aggregator project")
            return None

        selected = self._select_modules(config, modules)
        self.logger.info("Scanning %d module(s) for reports", len(selected))
        result = discover(selected)

        output_root = select_output_root(config.effective_build_dir)
        generator = self._generator or LandingPageGenerator(config.templates_dir)
        return generator.write(result, output_root, config.display_name)

    def run_inject(self, config: TerminalDocsConfig) -> Optional[InjectionReport]:
        """Style every HTML page of the project's output root.

        Returns ``None`` when skipped and an empty report when the project has
        neither a staging nor a site directory.
        """
        if config.skip:
            self.logger.info("Skipping style injection")
            return None

        build_dir = config.effective_build_dir
        output_root = existing_output_root(build_dir)
        if output_root is None:
            self.logger.info("No staging or site directory under %s; nothing to style", build_dir)
            return InjectionReport()

        self.logger.info("Injecting styles into %s", output_root)
        injector = self._injector or StyleInjector(config.styles)
        return injector.inject_all(output_root)

    def run_all(
        self,
        config: TerminalDocsConfig,
        modules: Sequence[ModuleBuildInfo] | None = None,
    ) -> RunOutcome:
        """Run landing page generation followed by style injection."""
        if config.skip:
            self.logger.info("Skipping terminaldocs processing")
            return RunOutcome(skipped=True)
        outcome = RunOutcome()
        outcome.landing_pages = self.run_landing(config, modules)
        outcome.injection = self.run_inject(config)
        return outcome

    def _select_modules(
        self,
        config: TerminalDocsConfig,
        modules: Sequence[ModuleBuildInfo] | None,
    ) -> List[ModuleBuildInfo]:
        if modules is not None:
            return list(modules)
        if config.modules:
            return list(config.modules)
        children = child_modules(config.root)
        self.logger.debug("No modules configured; found %d child module(s) under %s", len(children), config.root)
        return children


__all__ = ["Orchestrator", "RunOutcome"]
