"""Traversal of parsed units and merging of per-file declarations."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .emitters import emitter_for
from .imports import ImportDedupIndex, named_import
from .logging import get_logger
from .models import NodeKind, TopLevelNode
from .parser import SourceUnit


class DeclarationEngine:
    """Walks the top-level children of a unit and dispatches them to emitters."""

    def __init__(self, import_index: ImportDedupIndex | None = None) -> None:
        self.import_index = import_index
        self.logger = get_logger("engine")

    def process_unit(self, unit: SourceUnit) -> Optional[str]:
        """Return the concatenated declarations of ``unit``, or None if it has none."""
        declarations: List[str] = []
        for top in unit.top_level():
            rendered = self._emit(top, unit)
            if rendered:
                declarations.append(rendered)
        self.logger.debug("Emitted %d declarations from %s", len(declarations), unit.path)
        if not declarations:
            return None
        return "".join(declarations)

    def _emit(self, top: TopLevelNode, unit: SourceUnit) -> str:
        if top.kind is NodeKind.IMPORT:
            return self._emit_import(top, unit)
        emitter = emitter_for(top.kind)
        if emitter is None:
            return ""
        return emitter(top, unit)

    def _emit_import(self, top: TopLevelNode, unit: SourceUnit) -> str:
        if self.import_index is None:
            return ""
        parsed = named_import(top.node, unit)
        if parsed is None:
            return ""
        module_path, names = parsed
        return self.import_index.record_and_render(module_path, names)


def merge_results(results: Iterable[Optional[str]]) -> str:
    """Join per-file results in the given order; empty results are dropped."""
    return "".join(f"{result}\n" for result in results if result)


__all__ = ["DeclarationEngine", "merge_results"]
