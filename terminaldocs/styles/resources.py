"""Copy stylesheet and script assets into an output root's resource directory."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List, Tuple

from ..logging import get_logger
from ..models import PageKind

DEFAULT_RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"

logger = get_logger("styles.resources")


def known_assets() -> Tuple[str, ...]:
    """Return every asset a page may reference: one stylesheet per kind plus scripts."""
    names: List[str] = []
    for kind in PageKind:
        for name in (kind.stylesheet, *kind.scripts):
            if name not in names:
                names.append(name)
    return tuple(names)


def provision_resources(
    output_root: Path,
    styles_dir: str,
    source_dir: Path | None = None,
) -> Path:
    """Ensure ``output_root/styles_dir`` exists and holds every known asset.

    Assets already present are left untouched. An asset that is missing from
    *source_dir* or cannot be copied is logged and skipped.
    """
    source = Path(source_dir) if source_dir is not None else DEFAULT_RESOURCES_DIR
    target = Path(output_root) / styles_dir
    target.mkdir(parents=True, exist_ok=True)

    copied = 0
    for name in known_assets():
        destination = target / name
        if destination.exists():
            continue
        origin = source / name
        if not origin.is_file():
            logger.warning("Style resource not found: %s", origin)
            continue
        try:
            shutil.copyfile(origin, destination)
        except OSError as exc:
            logger.warning("Could not copy %s to %s: %s", name, target, exc)
            continue
        copied += 1
        logger.debug("Copied %s", destination)

    logger.info("Copied %d style resource(s) to %s", copied, target)
    return target


__all__ = ["DEFAULT_RESOURCES_DIR", "known_assets", "provision_resources"]
