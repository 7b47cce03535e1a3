"""Sentinel markers and head-tag insertion for styled HTML pages."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from markupsafe import escape

from ..models import PageKind

SENTINEL = "terminaldocs-injected"
HEAD_CLOSE = "</head>"
PARENT_STEP = "../"


def relative_prefix(path: Path, root: Path) -> str:
    """Return one ``../`` per directory between *path* and *root*."""
    depth = len(Path(path).relative_to(root).parts) - 1
    return PARENT_STEP * depth


@dataclass(frozen=True)
class StyleBlock:
    """The marker comment and resource tags injected into one page."""

    kind: PageKind
    prefix: str
    styles_dir: str

    MARKER_FMT = "<!-- " + SENTINEL + " [{label}] -->"

    @property
    def marker(self) -> str:
        return self.MARKER_FMT.format(label=self.kind.label)

    def href(self, asset: str) -> str:
        return f"{self.prefix}{self.styles_dir}/{asset}"

    def render(self) -> str:
        lines: List[str] = [
            self.marker,
            f'<link rel="stylesheet" href="{escape(self.href(self.kind.stylesheet))}">',
        ]
        for script in self.kind.scripts:
            lines.append(f'<script src="{escape(self.href(script))}" defer></script>')
        return "\n".join(lines) + "\n"


def is_injected(html: str) -> bool:
    """Return True when *html* already carries the sentinel marker."""
    return SENTINEL in html


def inject(html: str, block: StyleBlock) -> Optional[str]:
    """Return *html* with *block* inserted before the first ``</head>``.

    Returns ``None`` when the document has no closing head tag; such pages
    are left alone rather than repaired. Everything outside the insertion
    point is preserved exactly.
    """
    index = html.find(HEAD_CLOSE)
    if index == -1:
        return None
    return html[:index] + block.render() + html[index:]


__all__ = ["HEAD_CLOSE", "SENTINEL", "StyleBlock", "inject", "is_injected", "relative_prefix"]
