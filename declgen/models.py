"""Core data models shared across declgen components."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional


class NodeKind(str, Enum):
    """Closed set of top-level construct kinds the engine knows how to emit."""

    ENUM = "enum"
    CLASS = "class"
    INTERFACE = "interface"
    TYPE_ALIAS = "type_alias"
    FUNCTION = "function"
    METHOD = "method"
    VARIABLE = "variable"
    IMPORT = "import"
    UNRECOGNIZED = "unrecognized"


@dataclass
class TopLevelNode:
    """A direct child of a source unit, unwrapped from export/declare wrappers."""

    kind: NodeKind
    node: Any
    anchor: Any
    ambient: bool = False


@dataclass(frozen=True)
class ParameterDescriptor:
    """Name, type and optionality of a single formal parameter."""

    name: str
    type: str
    optional: bool
    doc: str = ""


@dataclass
class DeclaratorConfig:
    """Settings read from the declaration configuration document."""

    config_path: Path
    root_dir: Path
    out_file: Path
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)


@dataclass
class RunResult:
    """Outcome of a full generation run."""

    out_file: Path
    processed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    content: Optional[str] = None
