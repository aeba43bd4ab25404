"""Shared test fixtures and helpers."""

from __future__ import annotations

from typing import Any

import pytest

from jsxparse.ast import ElementExpression, FragmentExpression, Program, Text
from jsxparse.lexer import tokenize
from jsxparse.parser import parse
from jsxparse.tokens import Loc, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns its tokens."""

    def _lex(source: str) -> list[Loc[TokenType]]:
        return tokenize(source)

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns a Program."""

    def _parse(source: str) -> Program:
        return parse(source)

    return _parse


def assert_types(tokens: list[Loc[TokenType]], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Loc[TokenType]], source: str, expected: list[str]) -> None:
    """Assert that the tokens slice to the expected source text."""
    actual = [t.slice(source) for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def only_element(program: Program) -> ElementExpression:
    """Return the single top-level element of a program."""
    assert len(program.body) == 1, f"Expected 1 top-level node, got {len(program.body)}"
    node = program.body[0].value
    assert isinstance(node, ElementExpression), f"Expected element, got {type(node).__name__}"
    return node


def only_fragment(program: Program) -> FragmentExpression:
    """Return the single top-level fragment of a program."""
    assert len(program.body) == 1, f"Expected 1 top-level node, got {len(program.body)}"
    node = program.body[0].value
    assert isinstance(node, FragmentExpression), f"Expected fragment, got {type(node).__name__}"
    return node


def child_kinds(children: tuple[Loc[Any], ...] | None) -> list[str]:
    """Return the node class names of a children tuple."""
    assert children is not None, "Expected children, got None"
    return [type(c.value).__name__ for c in children]


def text_children(children: tuple[Loc[Any], ...] | None) -> list[str]:
    """Return the values of the Text children, in order."""
    assert children is not None, "Expected children, got None"
    return [c.value.value for c in children if isinstance(c.value, Text)]
