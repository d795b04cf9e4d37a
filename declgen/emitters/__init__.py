"""Declaration emitters and the dispatch table used by the engine."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from ..models import NodeKind, TopLevelNode
from ..parser import SourceUnit
from .declarations import (
    emit_class,
    emit_enum,
    emit_function,
    emit_interface,
    emit_method,
    emit_type_alias,
    emit_variable,
)
from .signatures import format_doc, format_generics, format_parameters

Emitter = Callable[[TopLevelNode, SourceUnit], str]

# Insertion order is the dispatch priority.
EMITTERS: Dict[NodeKind, Emitter] = {
    NodeKind.ENUM: emit_enum,
    NodeKind.CLASS: emit_class,
    NodeKind.INTERFACE: emit_interface,
    NodeKind.TYPE_ALIAS: emit_type_alias,
    NodeKind.FUNCTION: emit_function,
    NodeKind.METHOD: emit_method,
    NodeKind.VARIABLE: emit_variable,
}


def emitter_for(kind: NodeKind) -> Optional[Emitter]:
    """Return the emitter registered for ``kind``, or None for unhandled kinds."""
    return EMITTERS.get(kind)


__all__ = [
    "EMITTERS",
    "Emitter",
    "emitter_for",
    "format_doc",
    "format_generics",
    "format_parameters",
]
