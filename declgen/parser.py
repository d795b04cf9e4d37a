"""Tree-sitter powered parser adapter for TypeScript sources."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, List, Optional

import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from .logging import get_logger
from .models import NodeKind, TopLevelNode

_GRAMMARS = {
    "typescript": tsts.language_typescript,
    "tsx": tsts.language_tsx,
}

_KIND_BY_NODE_TYPE: Dict[str, NodeKind] = {
    "enum_declaration": NodeKind.ENUM,
    "class_declaration": NodeKind.CLASS,
    "abstract_class_declaration": NodeKind.CLASS,
    "class": NodeKind.CLASS,
    "interface_declaration": NodeKind.INTERFACE,
    "type_alias_declaration": NodeKind.TYPE_ALIAS,
    "function_declaration": NodeKind.FUNCTION,
    "generator_function_declaration": NodeKind.FUNCTION,
    "function_signature": NodeKind.FUNCTION,
    "function_expression": NodeKind.FUNCTION,
    "method_definition": NodeKind.METHOD,
    "method_signature": NodeKind.METHOD,
    "abstract_method_signature": NodeKind.METHOD,
    "lexical_declaration": NodeKind.VARIABLE,
    "variable_declaration": NodeKind.VARIABLE,
    "import_statement": NodeKind.IMPORT,
}


class ParseFailure(RuntimeError):
    """Raised when a source file cannot be turned into a syntax tree."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class SourceUnit:
    """A parsed file plus the text access the emitters rely on."""

    def __init__(self, path: str, source: bytes, root: Node) -> None:
        self.path = path
        self.source = source
        self.root = root

    @property
    def has_error(self) -> bool:
        return self.root.has_error

    def text(self, node: Optional[Node]) -> str:
        """Return the verbatim source text covered by ``node``."""
        if node is None:
            return ""
        return self.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    @staticmethod
    def field(node: Node, name: str) -> Optional[Node]:
        return node.child_by_field_name(name)

    @staticmethod
    def children(node: Optional[Node]) -> List[Node]:
        """Named children of ``node`` with comments filtered out."""
        if node is None:
            return []
        return [child for child in node.named_children if child.type != "comment"]

    @staticmethod
    def has_token(node: Node, token: str) -> bool:
        """True when ``node`` carries the anonymous ``token`` as a direct child."""
        return any(not child.is_named and child.type == token for child in node.children)

    def kind_of(self, node: Node) -> NodeKind:
        return _KIND_BY_NODE_TYPE.get(node.type, NodeKind.UNRECOGNIZED)

    def top_level(self) -> Iterator[TopLevelNode]:
        """Yield the direct children of the unit, one per statement."""
        for child in self.children(self.root):
            yield self._unwrap(child)

    def _unwrap(self, anchor: Node) -> TopLevelNode:
        node = anchor
        ambient = False
        if node.type == "export_statement":
            inner = self.field(node, "declaration") or self.field(node, "value")
            if inner is None:
                return TopLevelNode(kind=NodeKind.UNRECOGNIZED, node=anchor, anchor=anchor)
            node = inner
        if node.type == "ambient_declaration":
            ambient = True
            inner_nodes = self.children(node)
            if not inner_nodes:
                return TopLevelNode(kind=NodeKind.UNRECOGNIZED, node=node, anchor=anchor)
            node = inner_nodes[0]
        return TopLevelNode(kind=self.kind_of(node), node=node, anchor=anchor, ambient=ambient)


class TypeScriptParser:
    """Parses TypeScript and TSX files into :class:`SourceUnit` objects."""

    def __init__(self) -> None:
        self._parsers: Dict[str, Parser] = {}
        self.logger = get_logger("parser")

    def parse(self, text: str, path: str = "<memory>") -> SourceUnit:
        source = text.encode("utf-8")
        parser = self._get_parser(self._grammar_for(path))
        tree = parser.parse(source)
        if tree is None or tree.root_node is None:
            raise ParseFailure(path, "parser returned no tree")
        unit = SourceUnit(path, source, tree.root_node)
        if unit.has_error:
            self.logger.warning("Syntax errors in %s; emitting recoverable declarations", path)
        return unit

    def parse_file(self, path: Path) -> SourceUnit:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseFailure(str(path), str(exc)) from exc
        return self.parse(text, str(path))

    def _get_parser(self, grammar: str) -> Parser:
        parser = self._parsers.get(grammar)
        if parser is not None:
            return parser
        parser = Parser(Language(_GRAMMARS[grammar]()))
        self._parsers[grammar] = parser
        return parser

    @staticmethod
    def _grammar_for(path: str) -> str:
        return "tsx" if path.lower().endswith(".tsx") else "typescript"


__all__ = ["ParseFailure", "SourceUnit", "TypeScriptParser"]
