"""Rendering of parameter lists, generic lists and doc blocks."""

from __future__ import annotations

from typing import List, Optional

from tree_sitter import Node

from ..models import ParameterDescriptor
from ..parser import SourceUnit

UNKNOWN_TYPE = "unknown"
PARAM_PLACEHOLDER = "param"

_PARAMETER_NODES = {"required_parameter", "optional_parameter"}
_DESTRUCTURING_PATTERNS = {"object_pattern", "array_pattern"}


def annotation_text(node: Optional[Node], unit: SourceUnit) -> str:
    """Return the type text of an annotation node without its leading colon."""
    if node is None:
        return ""
    text = unit.text(node).strip()
    if node.type.endswith("annotation") and text.startswith(":"):
        text = text[1:].strip()
    return text


def format_doc(node: Node, unit: SourceUnit) -> str:
    """Collect the ``/** */`` blocks attached to ``node``, newline terminated."""
    blocks: List[str] = []
    previous = node.prev_sibling
    while previous is not None and previous.type == "comment":
        before = previous.prev_sibling
        text = unit.text(previous)
        if _is_doc_block(text) and not _is_trailing(previous, before):
            blocks.append(text)
        previous = before
    if not blocks:
        return ""
    return "\n".join(reversed(blocks)) + "\n"


def _is_doc_block(text: str) -> bool:
    return text.startswith("/**") and text != "/**/"


def _is_trailing(comment: Node, before: Optional[Node]) -> bool:
    # separators and brackets never own a comment
    if before is None or not before.is_named or before.type == "comment":
        return False
    return before.end_point[0] == comment.start_point[0]


def describe_parameter(parameter: Node, unit: SourceUnit) -> ParameterDescriptor:
    pattern = unit.field(parameter, "pattern")
    name = unit.text(pattern)
    if (
        pattern is not None
        and pattern.type in _DESTRUCTURING_PATTERNS
        and len(unit.children(pattern)) > 1
    ):
        name = PARAM_PLACEHOLDER
    type_text = annotation_text(unit.field(parameter, "type"), unit) or UNKNOWN_TYPE
    optional = parameter.type == "optional_parameter" or unit.field(parameter, "value") is not None
    return ParameterDescriptor(
        name=name,
        type=type_text,
        optional=optional,
        doc=format_doc(parameter, unit),
    )


def describe_parameters(parameters: Optional[Node], unit: SourceUnit) -> List[ParameterDescriptor]:
    return [
        describe_parameter(child, unit)
        for child in unit.children(parameters)
        if child.type in _PARAMETER_NODES
    ]


def format_parameters(parameters: Optional[Node], unit: SourceUnit) -> str:
    """Render ``name?: Type`` fragments joined by ``, ``."""
    fragments = []
    for descriptor in describe_parameters(parameters, unit):
        marker = "?" if descriptor.optional else ""
        fragments.append(f"{descriptor.doc}{descriptor.name}{marker}: {descriptor.type}")
    return ", ".join(fragments)


def format_generics(type_parameters: Optional[Node], unit: SourceUnit) -> str:
    """Render the comma-joined type parameter names, or ``""`` when there are none."""
    names = []
    for child in unit.children(type_parameters):
        if child.type != "type_parameter":
            continue
        name = unit.text(unit.field(child, "name"))
        if name:
            names.append(name)
    return ", ".join(names)


def generics_of(node: Node, unit: SourceUnit) -> str:
    return format_generics(unit.field(node, "type_parameters"), unit)


def wrap_generics(generics: str, prefix: str = "") -> str:
    return f"{prefix}<{generics}>" if generics else ""


__all__ = [
    "PARAM_PLACEHOLDER",
    "UNKNOWN_TYPE",
    "annotation_text",
    "describe_parameter",
    "describe_parameters",
    "format_doc",
    "format_generics",
    "format_parameters",
    "generics_of",
    "wrap_generics",
]
