"""Re-emission of named imports with per-module binding deduplication."""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from tree_sitter import Node

from .parser import SourceUnit


def is_local_specifier(module_path: str) -> bool:
    return module_path.startswith(".") or module_path.startswith("/")


class ImportDedupIndex:
    """Tracks which named bindings were already emitted for each module.

    Only names are deduplicated: a module seen twice may produce two import
    lines, the second one carrying just the bindings not rendered before.
    """

    def __init__(self) -> None:
        self._bindings: Dict[str, Set[str]] = {}

    def record_and_render(self, module_path: str, binding_names: Iterable[str]) -> str:
        if is_local_specifier(module_path):
            return ""

        recorded = self._bindings.get(module_path)
        if recorded is None:
            fresh = list(dict.fromkeys(binding_names))
            self._bindings[module_path] = set(fresh)
        else:
            fresh = []
            for name in binding_names:
                if name not in recorded:
                    recorded.add(name)
                    fresh.append(name)

        if not fresh:
            return ""
        return f"import {{ {', '.join(fresh)} }} from '{module_path}'\n\n"

    def bindings(self, module_path: str) -> FrozenSet[str]:
        return frozenset(self._bindings.get(module_path, ()))

    def __contains__(self, module_path: object) -> bool:
        return module_path in self._bindings


def named_import(node: Node, unit: SourceUnit) -> Optional[Tuple[str, List[str]]]:
    """Return ``(module, bindings)`` for an import with named bindings."""
    source = unit.field(node, "source")
    if source is None:
        return None
    module_path = unit.text(source)[1:-1]

    for clause in unit.children(node):
        if clause.type != "import_clause":
            continue
        for binding in unit.children(clause):
            if binding.type != "named_imports":
                continue
            names = [
                unit.text(specifier)
                for specifier in unit.children(binding)
                if specifier.type == "import_specifier"
            ]
            return module_path, names
    return None


__all__ = ["ImportDedupIndex", "is_local_specifier", "named_import"]
