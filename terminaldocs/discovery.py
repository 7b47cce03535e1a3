"""Discover which modules of a build produced coverage and cross-reference reports."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from .config import ConfigError
from .layout import COVERAGE_INDEX, XREF_INDEX, locate_report
from .logging import get_logger
from .models import DiscoveryResult, ModuleBuildInfo, ModuleSummary

_BUILD_DIR_NAME = "target"
_SKIPPED_CHILDREN = {_BUILD_DIR_NAME, "node_modules", "src"}

logger = get_logger("discovery")


class DuplicateModuleError(ValueError):
    """Raised when two modules of one discovery pass share an identifier."""


def discover(modules: Iterable[ModuleBuildInfo]) -> DiscoveryResult:
    """Return the modules carrying coverage and xref index pages, in input order.

    A module without reports, or whose build directory does not exist at all,
    simply contributes nothing. Identifiers must be unique within one pass.
    """
    result = DiscoveryResult()
    seen: set[str] = set()
    for module in modules:
        if module.identifier in seen:
            raise DuplicateModuleError(f"Duplicate module id: {module.identifier}")
        seen.add(module.identifier)
        if _has_report(module, COVERAGE_INDEX, "coverage"):
            result.coverage.append(_summarise(module))
        if _has_report(module, XREF_INDEX, "xref"):
            result.xref.append(_summarise(module))
    return result


def modules_from_paths(paths: Sequence[Path]) -> List[ModuleBuildInfo]:
    """Build module descriptors from module roots or their ``target`` directories."""
    modules: List[ModuleBuildInfo] = []
    origins: dict[str, Path] = {}
    for raw in paths:
        path = Path(raw).expanduser()
        if path.name == _BUILD_DIR_NAME:
            build_dir = path
            identifier = path.resolve().parent.name
        else:
            build_dir = path / _BUILD_DIR_NAME
            identifier = path.resolve().name
        if identifier in origins:
            raise ConfigError(
                f"Duplicate module id {identifier!r} from {origins[identifier]} and {raw}"
            )
        origins[identifier] = Path(raw)
        modules.append(ModuleBuildInfo(identifier=identifier, build_dir=build_dir))
    return modules


def child_modules(project_root: Path) -> List[ModuleBuildInfo]:
    """Return the direct children of *project_root* that have a ``target`` directory.

    Used when neither the configuration nor the command line names modules.
    Children are returned sorted by directory name.
    """
    root = Path(project_root)
    if not root.is_dir():
        return []
    children = [
        child
        for child in sorted(root.iterdir())
        if child.is_dir()
        and not child.name.startswith(".")
        and child.name not in _SKIPPED_CHILDREN
        and (child / _BUILD_DIR_NAME).is_dir()
    ]
    return modules_from_paths(children)


def _has_report(module: ModuleBuildInfo, relative: str, kind: str) -> bool:
    index = locate_report(module.build_dir, relative)
    if index is None:
        logger.debug("No %s report found for %s under %s", kind, module.identifier, module.build_dir)
        return False
    logger.info("Found %s report in: %s", kind, module.identifier)
    logger.debug("Using %s index at %s", kind, index)
    return True


def _summarise(module: ModuleBuildInfo) -> ModuleSummary:
    return ModuleSummary(
        identifier=module.identifier,
        description=module.description,
        relative_path=module.identifier,
    )


__all__ = ["DuplicateModuleError", "child_modules", "discover", "modules_from_paths"]
