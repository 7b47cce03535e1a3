from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.site_builder import SiteBuilder


@pytest.fixture
def site_builder(tmp_path: Path) -> SiteBuilder:
    """Provide a reusable build tree builder rooted at the pytest tmp_path."""
    return SiteBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_terminaldocs_logger() -> Iterator[None]:
    """Undo CLI logging configuration so caplog keeps seeing terminaldocs records."""
    yield
    logger = logging.getLogger("terminaldocs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
