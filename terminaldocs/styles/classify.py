"""Page kind classification from a file's location in the output tree."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple

from ..models import PageKind

LANDING_FILENAMES = frozenset({"coverage.html", "source-xref.html"})

_Predicate = Callable[[str, Tuple[str, ...]], bool]


def _has_segment(segment: str) -> _Predicate:
    def predicate(filename: str, directories: Tuple[str, ...]) -> bool:
        return segment in directories

    return predicate


# Evaluated top to bottom; the first matching rule wins.
_RULES: Tuple[Tuple[_Predicate, PageKind], ...] = (
    (lambda filename, directories: filename in LANDING_FILENAMES, PageKind.LANDING),
    (_has_segment("jacoco"), PageKind.COVERAGE),
    (_has_segment("xref"), PageKind.CROSS_REFERENCE),
    (_has_segment("apidocs"), PageKind.API_DOCUMENTATION),
)


def classify(path: Path, root: Optional[Path] = None) -> PageKind:
    """Return the page kind for *path*.

    Directory segments are taken relative to *root* when the file lives under
    it, so that a root which itself sits inside e.g. an ``xref`` directory
    does not colour every page below it.
    """
    path = Path(path)
    relative = _relative_parts(path, root)
    filename = relative[-1] if relative else path.name
    directories = tuple(relative[:-1])
    return classify_parts(filename, directories)


def classify_parts(filename: str, directories: Sequence[str]) -> PageKind:
    segments = tuple(directories)
    for predicate, kind in _RULES:
        if predicate(filename, segments):
            return kind
    return PageKind.GENERIC_SITE


def _relative_parts(path: Path, root: Optional[Path]) -> Tuple[str, ...]:
    if root is not None:
        try:
            return path.relative_to(root).parts
        except ValueError:
            pass
    return path.parts


__all__ = ["LANDING_FILENAMES", "classify", "classify_parts"]
