"""Tests for the signature formatter."""

from __future__ import annotations

from declgen.emitters.signatures import (
    describe_parameters,
    format_doc,
    format_generics,
    format_parameters,
    generics_of,
)


def _first(unit):
    return next(unit.top_level())


def test_untyped_parameters_render_unknown_and_defaults_are_optional(parse_ts) -> None:
    unit = parse_ts("function f(a, b?: string, c = 3) {}\n")
    node = _first(unit).node

    rendered = format_parameters(unit.field(node, "parameters"), unit)

    assert rendered == "a: unknown, b?: string, c?: unknown"


def test_multi_element_destructuring_uses_placeholder_name(parse_ts) -> None:
    unit = parse_ts("function f({ a, b }: Opts, [x]: number[], { c }: C, [y, z]) {}\n")
    node = _first(unit).node

    rendered = format_parameters(unit.field(node, "parameters"), unit)

    assert rendered == "param: Opts, [x]: number[], { c }: C, param: unknown"


def test_parameter_descriptors_capture_optionality(parse_ts) -> None:
    unit = parse_ts("function f(id: string, limit = 10, tag?: string) {}\n")
    node = _first(unit).node

    descriptors = describe_parameters(unit.field(node, "parameters"), unit)

    assert [(d.name, d.type, d.optional) for d in descriptors] == [
        ("id", "string", False),
        ("limit", "unknown", True),
        ("tag", "string", True),
    ]


def test_rest_parameters_keep_their_spread(parse_ts) -> None:
    unit = parse_ts("function f(...args: string[]) {}\n")
    node = _first(unit).node

    assert format_parameters(unit.field(node, "parameters"), unit) == "...args: string[]"


def test_empty_parameter_list_renders_empty_string(parse_ts) -> None:
    unit = parse_ts("function f() {}\n")
    node = _first(unit).node

    assert format_parameters(unit.field(node, "parameters"), unit) == ""
    assert format_parameters(None, unit) == ""


def test_generics_render_names_only(parse_ts) -> None:
    unit = parse_ts('function f<T, U extends string = "a">(value: T): U {}\n')
    node = _first(unit).node

    assert format_generics(unit.field(node, "type_parameters"), unit) == "T, U"
    assert generics_of(node, unit) == "T, U"


def test_generics_empty_without_type_parameters(parse_ts) -> None:
    unit = parse_ts("function f() {}\n")
    node = _first(unit).node

    assert generics_of(node, unit) == ""


def test_doc_collects_consecutive_doc_blocks(parse_ts) -> None:
    unit = parse_ts(
        """
        /** First. */
        // not documentation
        /** Second. */
        function f() {}
        """
    )
    top = _first(unit)

    assert format_doc(top.anchor, unit) == "/** First. */\n/** Second. */\n"


def test_doc_empty_without_comments(parse_ts) -> None:
    unit = parse_ts("// plain comment\nfunction f() {}\n")
    top = _first(unit)

    assert format_doc(top.anchor, unit) == ""


def test_parameter_docs_are_prefixed(parse_ts) -> None:
    unit = parse_ts("function f(/** the id */ id: string) {}\n")
    node = _first(unit).node

    rendered = format_parameters(unit.field(node, "parameters"), unit)

    assert rendered == "/** the id */\nid: string"


def test_docs_on_later_parameters_are_kept(parse_ts) -> None:
    unit = parse_ts("function f(a: number, /** the b */ b: string) {}\n")
    node = _first(unit).node

    descriptors = describe_parameters(unit.field(node, "parameters"), unit)

    assert [d.doc for d in descriptors] == ["", "/** the b */\n"]
    assert format_parameters(unit.field(node, "parameters"), unit) == (
        "a: number, /** the b */\nb: string"
    )


def test_doc_after_separator_attaches_to_next_member(parse_ts) -> None:
    unit = parse_ts(
        """
        interface A {
          x: number; /** doc y */
          y: number;
        }
        """
    )
    node = _first(unit).node
    members = unit.children(unit.field(node, "body"))
    second = [member for member in members if member.type == "property_signature"][1]

    assert format_doc(second, unit) == "/** doc y */\n"
