from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from typing import Callable, Iterator

import pytest

from declgen.parser import SourceUnit, TypeScriptParser
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable TypeScript project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def parse_ts() -> Callable[..., SourceUnit]:
    """Parse dedented TypeScript source into a SourceUnit."""
    parser = TypeScriptParser()

    def _parse(source: str, path: str = "sample.ts") -> SourceUnit:
        return parser.parse(textwrap.dedent(source).lstrip("\n"), path)

    return _parse


@pytest.fixture(autouse=True)
def _reset_declgen_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("declgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
