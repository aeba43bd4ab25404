"""AST node types for parsed JSX markup.

Every node that maps to source text is reachable through a Loc, so the
transform stage can recover the exact text of any construct by slicing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from jsxparse.tokens import Loc, TokenType


@dataclass(frozen=True, slots=True)
class NamespacedName:
    """Two-part name: ns:name."""

    ns: Loc[TokenType]
    name: Loc[TokenType]


@dataclass(frozen=True, slots=True)
class MemberExpression:
    """Dotted name of two or more identifiers: a.b.c."""

    members: tuple[Loc[TokenType], ...]


@dataclass(frozen=True, slots=True)
class AssignmentExpression:
    """Opaque host-language expression between a '{' and its matching '}'.

    `nodes` holds the markup found inside the braces, in source order.
    """

    start: int
    end: int
    nodes: tuple[Loc[ElementExpression | FragmentExpression], ...] = ()


@dataclass(frozen=True, slots=True)
class Text:
    """Raw child text, never decoded."""

    value: str


@dataclass(frozen=True, slots=True)
class SpreadAttribute:
    """{...argument}"""

    argument: Loc[TokenType]


@dataclass(frozen=True, slots=True)
class NormalAttribute:
    """name or name=init."""

    name: AttributeName
    init: Initializer | None


@dataclass(frozen=True, slots=True)
class ElementExpression:
    """An element; `children` is None exactly when it is self-closing."""

    is_self_closing: bool
    name: ElementName
    attrs: tuple[Loc[Attribute], ...]
    children: tuple[Child, ...] | None


@dataclass(frozen=True, slots=True)
class FragmentExpression:
    """<>...</>"""

    children: tuple[Child, ...]


@dataclass(frozen=True, slots=True)
class Program:
    """Top-level markup nodes in source order."""

    body: tuple[Loc[ElementExpression | FragmentExpression], ...]


ElementName: TypeAlias = "Loc[TokenType] | NamespacedName | MemberExpression"
AttributeName: TypeAlias = "Loc[TokenType] | NamespacedName"
Attribute: TypeAlias = "SpreadAttribute | NormalAttribute"
Initializer: TypeAlias = (
    "Loc[TokenType | AssignmentExpression | ElementExpression | FragmentExpression]"
)
Child: TypeAlias = (
    "Loc[Text | ElementExpression | FragmentExpression | AssignmentExpression]"
)
Node: TypeAlias = "ElementExpression | FragmentExpression"
