"""CLI entrypoints for terminaldocs commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .config import ConfigError, TerminalDocsConfig, load_config
from .discovery import DuplicateModuleError, modules_from_paths
from .landing import LandingPageError
from .logging import configure_logging
from .models import InjectionReport, ModuleBuildInfo
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .terminaldocs.yml (defaults to the one in the project root).",
    )
    parser.add_argument(
        "--build-dir",
        type=Path,
        default=None,
        help="Build output directory holding staging/ or site/ (defaults to <path>/target).",
    )
    parser.add_argument(
        "--skip",
        action="store_true",
        help="Bypass all processing for this run.",
    )


def _add_landing_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--module",
        dest="modules",
        action="append",
        type=Path,
        default=None,
        metavar="DIR",
        help="Module root or its target/ directory to scan for reports (repeatable).",
    )
    parser.add_argument(
        "--project-name",
        default=None,
        help="Display name used in landing page titles.",
    )
    parser.add_argument(
        "--templates-dir",
        type=Path,
        default=None,
        help="Directory with landing page templates overriding the packaged ones.",
    )


def _add_inject_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--styles-dir",
        default=None,
        help="Name of the resource directory created in the output root (default: terminal-styles).",
    )
    parser.add_argument(
        "--no-nested",
        dest="process_nested",
        action="store_false",
        default=None,
        help="Only style pages directly in the output root, not nested report trees.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terminaldocs",
        description="Generate report landing pages and attach terminal styles to built HTML sites.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    landing_parser = subparsers.add_parser(
        "landing",
        help="Generate coverage and source cross-reference landing pages.",
    )
    _add_common_options(landing_parser)
    _add_landing_options(landing_parser)

    inject_parser = subparsers.add_parser(
        "inject",
        help="Inject page-kind stylesheets into every generated HTML page.",
    )
    _add_common_options(inject_parser)
    _add_inject_options(inject_parser)

    run_parser = subparsers.add_parser(
        "run",
        help="Generate landing pages, then inject styles.",
    )
    _add_common_options(run_parser)
    _add_landing_options(run_parser)
    _add_inject_options(run_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for terminaldocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = _resolve_config(args)
        modules = _resolve_modules(args)
    except ConfigError as exc:
        parser.exit(1, f"terminaldocs: {exc}\n")

    orchestrator = Orchestrator()

    if args.command == "landing":
        try:
            pages = orchestrator.run_landing(config, modules)
        except (LandingPageError, DuplicateModuleError) as exc:
            parser.exit(1, f"terminaldocs landing failed: {exc}\n")
        _print_landing(pages)
    elif args.command == "inject":
        _print_injection(orchestrator.run_inject(config))
    elif args.command == "run":
        try:
            outcome = orchestrator.run_all(config, modules)
        except (LandingPageError, DuplicateModuleError) as exc:
            parser.exit(1, f"terminaldocs run failed: {exc}\n")
        if outcome.skipped:
            print("Skipped")
            return
        _print_landing(outcome.landing_pages)
        _print_injection(outcome.injection)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _resolve_config(args: argparse.Namespace) -> TerminalDocsConfig:
    project_root = Path(args.path).expanduser()
    config = load_config(args.config or project_root)
    if args.config is not None:
        # An explicit config file elsewhere must not move the project root.
        config = replace(config, root=project_root.resolve())

    styles = config.styles
    styles_dir = getattr(args, "styles_dir", None)
    process_nested = getattr(args, "process_nested", None)
    if styles_dir is not None or process_nested is not None:
        styles = replace(
            styles,
            styles_dir=styles_dir if styles_dir is not None else styles.styles_dir,
            process_nested=process_nested if process_nested is not None else styles.process_nested,
        )

    return config.with_overrides(
        skip=True if args.skip else None,
        build_dir=args.build_dir,
        project_name=getattr(args, "project_name", None),
        templates_dir=getattr(args, "templates_dir", None),
        styles=styles,
    )


def _resolve_modules(args: argparse.Namespace) -> Optional[List[ModuleBuildInfo]]:
    paths = getattr(args, "modules", None)
    if not paths:
        return None
    return modules_from_paths(paths)


def _print_landing(pages: Optional[List[Path]]) -> None:
    if pages is None:
        print("Landing pages skipped")
    elif not pages:
        print("No modules with coverage or xref reports found")
    else:
        for page in pages:
            print(f"Landing page written to {_relativize(page)}")


def _print_injection(report: Optional[InjectionReport]) -> None:
    if report is None:
        print("Style injection skipped")
        return
    print(f"Styled {report.count} file(s)")
    if report.skipped_headless:
        print(f"Left {len(report.skipped_headless)} file(s) without </head> unchanged")
    if report.failed:
        print(f"Could not process {len(report.failed)} file(s); see log for details")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
