"""Selection of input files from the configured root and include patterns."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Sequence

from .config import ConfigurationError


def pattern_suffix(pattern: str) -> str:
    """Reduce an include pattern to the text after its last ``*.`` token."""
    return pattern.split("*.")[-1]


def select_files(root_dir: str | Path | None, include_patterns: Sequence[str]) -> List[str]:
    """Return root-relative paths of files whose path contains an include suffix.

    This is a substring test, not glob matching; exclude patterns are not
    consulted.
    """
    if not root_dir:
        raise ConfigurationError("Expected rootDir option in compilerOptions")
    root = Path(root_dir)
    if not root.is_dir():
        raise ConfigurationError(f"rootDir is not a directory: {root}")

    suffixes = [pattern_suffix(pattern) for pattern in include_patterns]
    return [rel_path for rel_path in _iter_files(root) if any(s in rel_path for s in suffixes)]


def _iter_files(root: Path) -> Iterator[str]:
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        # os.walk order is filesystem dependent; sort for a stable output document.
        dirnames.sort()
        for filename in sorted(filenames):
            yield f"{rel_dir}/{filename}" if rel_dir else filename


__all__ = ["pattern_suffix", "select_files"]
