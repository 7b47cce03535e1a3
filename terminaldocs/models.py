"""Core data models shared across terminaldocs components."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

SHARED_SCRIPT = "terminaldocs.min.js"
XREF_SCRIPT = "terminaldocs-jxr.min.js"


class PageKind(Enum):
    """Classification bucket controlling which stylesheet a page receives."""

    LANDING = "landing"
    COVERAGE = "coverage"
    CROSS_REFERENCE = "jxr"
    API_DOCUMENTATION = "javadoc"
    GENERIC_SITE = "site"

    @property
    def label(self) -> str:
        """Short name written into the sentinel marker comment."""
        return self.value

    @property
    def stylesheet(self) -> str:
        return f"terminaldocs-{self.value}.min.css"

    @property
    def scripts(self) -> Tuple[str, ...]:
        return _SCRIPTS_BY_KIND[self]


_SCRIPTS_BY_KIND = {
    PageKind.LANDING: (SHARED_SCRIPT,),
    PageKind.COVERAGE: (),
    PageKind.CROSS_REFERENCE: (SHARED_SCRIPT, XREF_SCRIPT),
    PageKind.API_DOCUMENTATION: (SHARED_SCRIPT,),
    PageKind.GENERIC_SITE: (SHARED_SCRIPT,),
}


@dataclass(frozen=True)
class ModuleBuildInfo:
    """A module of the multi-module build and the directory its reports land in."""

    identifier: str
    build_dir: Path
    description: Optional[str] = None


@dataclass(frozen=True)
class ModuleSummary:
    """A module that produced a given report kind, ready for a landing page row.

    ``description`` is ``None`` when the module never declared one; an empty
    string is kept as an empty string.
    """

    identifier: str
    description: Optional[str]
    relative_path: str

    def __post_init__(self) -> None:
        if not self.identifier:
            raise ValueError("ModuleSummary identifier must be non-empty")


@dataclass
class DiscoveryResult:
    """Modules with coverage and cross-reference reports, in build order."""

    coverage: List[ModuleSummary] = field(default_factory=list)
    xref: List[ModuleSummary] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.coverage and not self.xref


@dataclass(frozen=True)
class InjectionRecord:
    """Per-file view used while styling a page."""

    path: Path
    kind: PageKind
    prefix: str
    already_injected: bool


@dataclass
class InjectionReport:
    """Outcome of a style injection pass over an output root."""

    modified: List[Path] = field(default_factory=list)
    already_injected: List[Path] = field(default_factory=list)
    skipped_headless: List[Path] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of files rewritten during the pass."""
        return len(self.modified)

    @property
    def visited(self) -> int:
        return (
            len(self.modified)
            + len(self.already_injected)
            + len(self.skipped_headless)
            + len(self.failed)
        )
