"""Emission rules turning top-level constructs into ambient declarations.

Every emitter takes a :class:`~declgen.models.TopLevelNode` and the
:class:`~declgen.parser.SourceUnit` it came from and returns the rendered
declaration, or ``""`` when there is nothing to emit (for example an
anonymous class). Type text is copied verbatim from the source.
"""

from __future__ import annotations

from typing import List, Set

from tree_sitter import Node

from ..models import TopLevelNode
from ..parser import SourceUnit
from .signatures import (
    UNKNOWN_TYPE,
    annotation_text,
    describe_parameters,
    format_doc,
    format_parameters,
    generics_of,
    wrap_generics,
)

INDENT = "  "
VOID_TYPE = "void"

_PROPERTY_NODES = {"property_signature", "public_field_definition"}
_METHOD_NODES = {"method_signature", "method_definition", "abstract_method_signature"}
_DECLARATOR_NAMES = {"identifier"}


def _member_doc(member: Node, unit: SourceUnit) -> str:
    doc = format_doc(member, unit)
    return f"{INDENT}{doc}" if doc else ""


def _name_of(node: Node, unit: SourceUnit) -> str:
    return unit.text(unit.field(node, "name"))


def render_property(member: Node, unit: SourceUnit) -> str:
    """Render ``name: Type`` for a property signature or class field."""
    name = _name_of(member, unit)
    if not name:
        return ""
    marker = "?" if unit.has_token(member, "?") else ""
    type_text = annotation_text(unit.field(member, "type"), unit) or UNKNOWN_TYPE
    return f"{_member_doc(member, unit)}{INDENT}{name}{marker}: {type_text}\n"


def render_method(member: Node, unit: SourceUnit) -> str:
    """Render ``name<Generics>(params): ReturnType;`` for any method shape."""
    name = _name_of(member, unit)
    if not name:
        return ""
    marker = "?" if unit.has_token(member, "?") else ""
    generics = wrap_generics(generics_of(member, unit))
    parameters = format_parameters(unit.field(member, "parameters"), unit)
    return_type = annotation_text(unit.field(member, "return_type"), unit) or VOID_TYPE
    return (
        f"{_member_doc(member, unit)}"
        f"{INDENT}{name}{marker}{generics}({parameters}): {return_type};\n"
    )


def render_constructor(member: Node, unit: SourceUnit) -> str:
    # constructor generics are independent of the enclosing class
    generics = wrap_generics(generics_of(member, unit))
    parameters = format_parameters(unit.field(member, "parameters"), unit)
    return f"{_member_doc(member, unit)}{INDENT}constructor{generics}({parameters});\n"


def accessor_kind(member: Node, unit: SourceUnit) -> str:
    """Return ``"get"`` or ``"set"`` for accessors, ``""`` for plain methods."""
    for keyword in ("get", "set"):
        if unit.has_token(member, keyword):
            return keyword
    return ""


def render_accessor(member: Node, unit: SourceUnit) -> str:
    """Render a get/set accessor as the ``name: Type`` property it exposes.

    A getter contributes its return type, a setter the type of its value
    parameter.
    """
    name = _name_of(member, unit)
    if not name:
        return ""
    if accessor_kind(member, unit) == "get":
        type_text = annotation_text(unit.field(member, "return_type"), unit)
    else:
        parameters = describe_parameters(unit.field(member, "parameters"), unit)
        type_text = parameters[0].type if parameters else ""
    return f"{_member_doc(member, unit)}{INDENT}{name}: {type_text or UNKNOWN_TYPE}\n"


def _render_body(body: Node, unit: SourceUnit) -> str:
    lines: List[str] = []
    # a get/set pair is one property; the first accessor seen names it
    accessors: Set[str] = set()
    for member in unit.children(body):
        if member.type in _PROPERTY_NODES:
            lines.append(render_property(member, unit))
        elif member.type not in _METHOD_NODES:
            continue
        elif accessor_kind(member, unit):
            name = _name_of(member, unit)
            if name not in accessors:
                accessors.add(name)
                lines.append(render_accessor(member, unit))
        elif member.type == "method_definition" and _name_of(member, unit) == "constructor":
            lines.append(render_constructor(member, unit))
        else:
            lines.append(render_method(member, unit))
    return "".join(lines)


def render_members(body: Node, unit: SourceUnit) -> str:
    """Render the property and method members of an interface or type literal."""
    return _render_body(body, unit)


def emit_enum(decl: TopLevelNode, unit: SourceUnit) -> str:
    name = _name_of(decl.node, unit)
    if not name:
        return ""
    lines: List[str] = []
    for member in unit.children(unit.field(decl.node, "body")):
        if member.type == "enum_assignment":
            member_name = _name_of(member, unit)
            value = unit.text(unit.field(member, "value"))
        else:
            member_name = unit.text(member)
            value = ""
        lines.append(f"{INDENT}{member_name}={value},\n")
    doc = format_doc(decl.anchor, unit)
    return f"{doc}declare enum {name} {{\n{''.join(lines)}}}\n"


def emit_interface(decl: TopLevelNode, unit: SourceUnit) -> str:
    name = _name_of(decl.node, unit)
    if not name:
        return ""
    generics = wrap_generics(generics_of(decl.node, unit), prefix=" ")
    members = render_members(unit.field(decl.node, "body"), unit)
    doc = format_doc(decl.anchor, unit)
    return f"{doc}declare interface {name}{generics} {{\n{members}}}\n\n"


def emit_class(decl: TopLevelNode, unit: SourceUnit) -> str:
    name = _name_of(decl.node, unit)
    if not name:
        return ""
    members = _render_body(unit.field(decl.node, "body"), unit)
    generics = wrap_generics(generics_of(decl.node, unit))
    modifier = "abstract " if decl.node.type == "abstract_class_declaration" else ""
    doc = format_doc(decl.anchor, unit)
    return f"{doc}declare {modifier}class {name}{generics} {{\n{members}}}\n"


def emit_type_alias(decl: TopLevelNode, unit: SourceUnit) -> str:
    name = _name_of(decl.node, unit)
    value = unit.field(decl.node, "value")
    if not name or value is None:
        return ""
    generics = wrap_generics(generics_of(decl.node, unit))
    head = f"{format_doc(decl.anchor, unit)}declare type {name}{generics} = "

    if value.type == "function_type":
        return_type = unit.field(value, "return_type")
        if return_type is not None and return_type.type == "object_type":
            function_generics = wrap_generics(generics_of(value, unit))
            parameters = format_parameters(unit.field(value, "parameters"), unit)
            members = render_members(return_type, unit)
            return f"{head}{function_generics}({parameters}) => {{\n{members}}}\n\n"
    elif value.type == "object_type":
        return f"{head}{{\n{render_members(value, unit)}}}\n\n"

    return f"{head}{unit.text(value)}\n\n"


def emit_function(decl: TopLevelNode, unit: SourceUnit) -> str:
    name = _name_of(decl.node, unit)
    if not name:
        return ""
    generics = wrap_generics(generics_of(decl.node, unit))
    parameters = format_parameters(unit.field(decl.node, "parameters"), unit)
    return_type = annotation_text(unit.field(decl.node, "return_type"), unit) or VOID_TYPE
    doc = format_doc(decl.anchor, unit)
    return f"{doc}declare function {name}{generics}({parameters}): {return_type}\n\n"


def emit_method(decl: TopLevelNode, unit: SourceUnit) -> str:
    return render_method(decl.node, unit)


def emit_variable(decl: TopLevelNode, unit: SourceUnit) -> str:
    """Re-emit ``declare const`` statements; ordinary variables are never emitted."""
    if not decl.ambient:
        return ""
    declarators = []
    for declarator in unit.children(decl.node):
        if declarator.type != "variable_declarator":
            continue
        name = unit.field(declarator, "name")
        if name is not None and name.type in _DECLARATOR_NAMES:
            declarators.append(unit.text(declarator))
    if not declarators:
        return ""
    doc = format_doc(decl.anchor, unit)
    return f"{doc}declare const {', '.join(declarators)}\n\n"


__all__ = [
    "accessor_kind",
    "emit_class",
    "emit_enum",
    "emit_function",
    "emit_interface",
    "emit_method",
    "emit_type_alias",
    "emit_variable",
    "render_accessor",
    "render_constructor",
    "render_members",
    "render_method",
    "render_property",
]
