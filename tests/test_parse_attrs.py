"""Tests for attribute parsing — normal, namespaced, spread, and initializer kinds."""

from __future__ import annotations

import pytest

from jsxparse.ast import (
    AssignmentExpression,
    ElementExpression,
    FragmentExpression,
    NamespacedName,
    NormalAttribute,
    SpreadAttribute,
)
from jsxparse.errors import UnexpectedEndOfStream, UnexpectedToken
from jsxparse.tokens import Loc, TokenType
from tests.conftest import only_element


def attrs_of(parse_source, source):
    return only_element(parse_source(source)).attrs


class TestNormalAttribute:
    def test_boolean_attribute(self, parse_source):
        source = "<input disabled />"
        (attr,) = attrs_of(parse_source, source)
        assert isinstance(attr.value, NormalAttribute)
        assert attr.value.init is None
        assert attr.slice(source) == "disabled"

    def test_string_initializer(self, parse_source):
        source = "<a href='/home'>x</a>"
        (attr,) = attrs_of(parse_source, source)
        init = attr.value.init
        assert init is not None
        assert init.value is TokenType.STRING
        assert init.slice(source) == "'/home'"

    def test_whitespace_around_assign(self, parse_source):
        source = '<a href = "x" />'
        (attr,) = attrs_of(parse_source, source)
        assert attr.slice(source) == 'href = "x"'

    def test_attribute_order(self, parse_source):
        source = '<a one="1" two three={3} />'
        attrs = attrs_of(parse_source, source)
        assert [a.value.name.slice(source) for a in attrs] == ["one", "two", "three"]

    def test_namespaced_attribute_name(self, parse_source):
        source = '<use xlink:href="#icon" />'
        (attr,) = attrs_of(parse_source, source)
        name = attr.value.name
        assert isinstance(name, NamespacedName)
        assert name.ns.slice(source) == "xlink"
        assert name.name.slice(source) == "href"
        assert attr.slice(source) == 'xlink:href="#icon"'

    def test_identical_attributes_compare_equal(self, parse_source):
        first = attrs_of(parse_source, '<a x="1" />')[0]
        second = attrs_of(parse_source, '<b   x="1" />')[0]
        assert first == second


class TestInitializerKinds:
    def test_expression(self, parse_source):
        source = "<C value={1 + 2} />"
        (attr,) = attrs_of(parse_source, source)
        init = attr.value.init
        assert isinstance(init.value, AssignmentExpression)
        assert init.slice(source) == "{1 + 2}"
        assert source[init.value.start : init.value.end] == "1 + 2"

    def test_element(self, parse_source):
        source = "<C icon=<Icon name='x' /> />"
        (attr,) = attrs_of(parse_source, source)
        init = attr.value.init
        assert isinstance(init.value, ElementExpression)
        assert init.value.is_self_closing
        assert init.slice(source) == "<Icon name='x' />"

    def test_element_with_children(self, parse_source):
        source = "<C label=<b>bold</b> other />"
        attrs = attrs_of(parse_source, source)
        assert len(attrs) == 2
        assert attrs[0].value.init.slice(source) == "<b>bold</b>"

    def test_fragment(self, parse_source):
        source = "<C slot=<>a</> />"
        (attr,) = attrs_of(parse_source, source)
        init = attr.value.init
        assert isinstance(init.value, FragmentExpression)
        assert init.slice(source) == "<>a</>"

    def test_bare_identifier_value_fails(self, parse_source):
        with pytest.raises(UnexpectedToken, match="after '='"):
            parse_source("<C a=b />")

    def test_missing_value_fails(self, parse_source):
        with pytest.raises(UnexpectedToken, match="after '='"):
            parse_source("<C a= />")

    def test_value_at_end_of_input(self, parse_source):
        with pytest.raises(UnexpectedEndOfStream):
            parse_source("<C a=")


class TestSpreadAttribute:
    def test_spread(self, parse_source):
        source = "<C {...props} />"
        (attr,) = attrs_of(parse_source, source)
        assert isinstance(attr.value, SpreadAttribute)
        assert attr.value.argument.slice(source) == "props"
        assert attr.value.argument.value is TokenType.IDENTIFIER
        assert attr.slice(source) == "{...props}"

    def test_spread_with_spaces(self, parse_source):
        source = "<C { ...x } />"
        (attr,) = attrs_of(parse_source, source)
        assert attr.value.argument.slice(source) == "x"
        assert attr.slice(source) == "{ ...x }"

    def test_spread_mixed_with_normal(self, parse_source):
        source = '<C a="1" {...rest} b />'
        attrs = attrs_of(parse_source, source)
        kinds = [type(a.value).__name__ for a in attrs]
        assert kinds == ["NormalAttribute", "SpreadAttribute", "NormalAttribute"]

    def test_member_expression_argument_fails(self, parse_source):
        with pytest.raises(UnexpectedToken, match="expected '}'"):
            parse_source("<C { ...x.y } />")

    def test_missing_spread_operator(self, parse_source):
        with pytest.raises(UnexpectedToken, match="expected '...'"):
            parse_source("<C {x} />")

    def test_missing_argument(self, parse_source):
        with pytest.raises(UnexpectedToken, match="after '...'"):
            parse_source("<C {...} />")

    def test_spread_loc_equality_ignores_position(self):
        assert Loc(3, 10, SpreadAttribute(Loc(7, 9, TokenType.IDENTIFIER))) == Loc(
            0, 0, SpreadAttribute(Loc(0, 0, TokenType.IDENTIFIER))
        )
