"""AST and token dumps for --format tree/tokens/json."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from jsxparse.ast import (
    AssignmentExpression,
    ElementExpression,
    FragmentExpression,
    MemberExpression,
    NamespacedName,
    NormalAttribute,
    Program,
    SpreadAttribute,
    Text,
)
from jsxparse.lexer import tokenize
from jsxparse.parser import name_components, name_text
from jsxparse.tokens import Loc, TokenType


def dump_ast(program: Program, source: str, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable AST tree to *file*."""
    file.write("Program\n")
    for node in program.body:
        _dump_node(node, source, 1, file)


def dump_tokens(source: str, *, file: TextIO = sys.stderr, filename: str = "input.jsx") -> None:
    """Print one line per token: kind, span and source text."""
    for tok in tokenize(source, filename):
        file.write(f"{tok.value.name:<20} {_span(tok)} {tok.slice(source)!r}\n")


def _indent(depth: int) -> str:
    return "  " * depth


def _span(loc: Loc[Any]) -> str:
    return f"[{loc.start}, {loc.end})"


def _dump_node(node: Loc[Any], source: str, depth: int, f: TextIO) -> None:
    value = node.value
    if isinstance(value, ElementExpression):
        closing = " /" if value.is_self_closing else ""
        name = name_text(value.name, source)
        f.write(f"{_indent(depth)}Element <{name}{closing}> {_span(node)}\n")
        for attr in value.attrs:
            _dump_attr(attr, source, depth + 1, f)
        for child in value.children or ():
            _dump_node(child, source, depth + 1, f)
    elif isinstance(value, FragmentExpression):
        f.write(f"{_indent(depth)}Fragment {_span(node)}\n")
        for child in value.children:
            _dump_node(child, source, depth + 1, f)
    elif isinstance(value, AssignmentExpression):
        text = source[value.start : value.end]
        f.write(f"{_indent(depth)}Expression {_span(node)} {text!r}\n")
        for inner in value.nodes:
            _dump_node(inner, source, depth + 1, f)
    elif isinstance(value, Text):
        f.write(f"{_indent(depth)}Text {_span(node)} {value.value!r}\n")
    elif value is TokenType.STRING:
        f.write(f"{_indent(depth)}String {_span(node)} {node.slice(source)}\n")


def _dump_attr(attr: Loc[Any], source: str, depth: int, f: TextIO) -> None:
    value = attr.value
    if isinstance(value, SpreadAttribute):
        f.write(f"{_indent(depth)}Spread ...{value.argument.slice(source)} {_span(attr)}\n")
    elif isinstance(value, NormalAttribute):
        f.write(f"{_indent(depth)}Attr {name_text(value.name, source)} {_span(attr)}\n")
        if value.init is not None:
            _dump_node(value.init, source, depth + 1, f)


# ----------------------------------------------------------------------
# JSON-ready conversion
# ----------------------------------------------------------------------


def to_dict(program: Program, source: str) -> dict[str, Any]:
    """Convert a Program into nested dicts suitable for json.dumps()."""
    return {"type": "Program", "body": [_node_dict(n, source) for n in program.body]}


def _name_dict(name: Any, source: str) -> dict[str, Any]:
    if isinstance(name, MemberExpression):
        kind = "MemberExpression"
    elif isinstance(name, NamespacedName):
        kind = "NamespacedName"
    else:
        kind = "Identifier"
    return {
        "type": kind,
        "text": name_text(name, source),
        "parts": [
            {"start": p.start, "end": p.end, "text": p.slice(source)}
            for p in name_components(name)
        ],
    }


def _node_dict(node: Loc[Any], source: str) -> dict[str, Any]:
    value = node.value
    out: dict[str, Any] = {"start": node.start, "end": node.end}
    if isinstance(value, ElementExpression):
        out["type"] = "Element"
        out["name"] = _name_dict(value.name, source)
        out["selfClosing"] = value.is_self_closing
        out["attributes"] = [_attr_dict(a, source) for a in value.attrs]
        out["children"] = (
            None if value.children is None else [_node_dict(c, source) for c in value.children]
        )
    elif isinstance(value, FragmentExpression):
        out["type"] = "Fragment"
        out["children"] = [_node_dict(c, source) for c in value.children]
    elif isinstance(value, AssignmentExpression):
        out["type"] = "Expression"
        out["text"] = source[value.start : value.end]
        out["nodes"] = [_node_dict(n, source) for n in value.nodes]
    elif isinstance(value, Text):
        out["type"] = "Text"
        out["text"] = value.value
    elif value is TokenType.STRING:
        out["type"] = "String"
        out["text"] = node.slice(source)
    return out


def _attr_dict(attr: Loc[Any], source: str) -> dict[str, Any]:
    value = attr.value
    out: dict[str, Any] = {"start": attr.start, "end": attr.end}
    if isinstance(value, SpreadAttribute):
        out["type"] = "SpreadAttribute"
        out["argument"] = value.argument.slice(source)
    elif isinstance(value, NormalAttribute):
        out["type"] = "Attribute"
        out["name"] = _name_dict(value.name, source)
        out["value"] = None if value.init is None else _node_dict(value.init, source)
    return out
