"""JSX parser — recursive descent over a single-token Lexer."""

from __future__ import annotations

from jsxparse.ast import (
    AssignmentExpression,
    Attribute,
    AttributeName,
    Child,
    ElementExpression,
    ElementName,
    FragmentExpression,
    Initializer,
    MemberExpression,
    NamespacedName,
    Node,
    NormalAttribute,
    Program,
    SpreadAttribute,
    Text,
)
from jsxparse.errors import EndOfStream, UnexpectedEndOfStream, UnexpectedToken
from jsxparse.lexer import Lexer
from jsxparse.tokens import Loc, TokenType


class Parser:
    """Recursive descent parser for JSX embedded in host-language source.

    Conventions: name and attribute productions return with the lexer on
    the token *after* the construct (they need one token of lookahead to
    know where they end). Element, fragment and expression productions
    return with the lexer still on their *last* token, so the caller
    decides how the following input is lexed (raw child text or tokens).
    """

    def __init__(self, source: str, filename: str = "input.jsx") -> None:
        self._source = source
        self._filename = filename
        self._lexer = Lexer(source, filename)
        self.body: list[Loc[Node]] = []

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _at(self, *types: TokenType) -> bool:
        return self._lexer.token in types

    def _current(self) -> Loc[TokenType]:
        start, end = self._lexer.loc()
        assert self._lexer.token is not None
        return Loc(start, end, self._lexer.token)

    def _consume(self) -> TokenType:
        """Advance inside a construct, where running out of input is an error."""
        try:
            return self._lexer.consume()
        except EndOfStream as exc:
            raise UnexpectedEndOfStream(
                "unexpected end of input",
                exc.start,
                exc.end,
                self._source,
                self._filename,
            ) from None

    def _consume_child(self) -> TokenType:
        try:
            return self._lexer.consume_child()
        except EndOfStream as exc:
            raise UnexpectedEndOfStream(
                "unexpected end of input, missing closing tag",
                exc.start,
                exc.end,
                self._source,
                self._filename,
            ) from None

    def _expect(self, tt: TokenType, message: str) -> Loc[TokenType]:
        if not self._at(tt):
            raise self._error(message)
        return self._current()

    def _error(
        self, message: str, start: int | None = None, end: int | None = None
    ) -> UnexpectedToken:
        if start is None or end is None:
            start, end = self._lexer.loc()
        return UnexpectedToken(message, start, end, self._source, self._filename)

    # ------------------------------------------------------------------
    # Top level
    # ------------------------------------------------------------------

    def parse(self) -> Program:
        """Collect every top-level element and fragment; other text is skipped."""
        while True:
            try:
                tt = self._lexer.consume()
            except EndOfStream:
                break

            try:
                if tt is TokenType.FRAGMENT_OPEN:
                    self.body.append(self.parse_fragment())
                elif tt is TokenType.ELEMENT_OPEN:
                    self.body.append(self.parse_elem())
            except RecursionError:
                raise self._error("markup nested too deeply") from None

        return Program(tuple(self.body))

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def parse_elem_name(self) -> ElementName:
        first = self._expect(TokenType.IDENTIFIER, "expected element name")
        self._consume()

        if self._at(TokenType.DOT):
            members = [first]
            while self._at(TokenType.DOT):
                self._consume()
                members.append(self._expect(TokenType.IDENTIFIER, "expected identifier after '.'"))
                self._consume()
            if self._at(TokenType.COLON):
                raise self._error("a member expression name cannot have a namespace")
            return MemberExpression(tuple(members))

        if self._at(TokenType.COLON):
            self._consume()
            name = self._expect(TokenType.IDENTIFIER, "expected name after ':'")
            self._consume()
            if self._at(TokenType.COLON, TokenType.DOT):
                raise self._error("a namespaced name allows exactly one ':'")
            return NamespacedName(first, name)

        return first

    def parse_elem_attr_name(self) -> AttributeName:
        first = self._expect(TokenType.IDENTIFIER, "expected attribute name")
        self._consume()

        if self._at(TokenType.COLON):
            self._consume()
            name = self._expect(TokenType.IDENTIFIER, "expected attribute name after ':'")
            self._consume()
            return NamespacedName(first, name)

        return first

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def parse_elem_attr_value(self) -> Initializer | None:
        if not self._at(TokenType.ASSIGN):
            return None
        self._consume()

        value: Initializer
        if self._at(TokenType.STRING):
            value = self._current()
        elif self._at(TokenType.BRACE_OPEN):
            value = self._parse_expression_container()
        elif self._at(TokenType.ELEMENT_OPEN):
            value = self.parse_elem()
        elif self._at(TokenType.FRAGMENT_OPEN):
            value = self.parse_fragment()
        else:
            raise self._error("expected string, '{', element or fragment after '='")

        self._consume()
        return value

    def parse_elem_attr(self) -> Loc[Attribute] | None:
        """Parse one attribute, or return None when the attribute list is over."""
        if self._at(TokenType.BRACE_OPEN):
            start = self._lexer.start()
            self._consume()
            self._expect(TokenType.SPREAD, "expected '...' in spread attribute")
            self._consume()
            argument = self._expect(TokenType.IDENTIFIER, "expected identifier after '...'")
            self._consume()
            close = self._expect(TokenType.BRACE_CLOSE, "expected '}' after spread attribute")
            self._consume()
            return Loc(start, close.end, SpreadAttribute(argument))

        if self._at(TokenType.IDENTIFIER):
            start = self._lexer.start()
            name = self.parse_elem_attr_name()
            init = self.parse_elem_attr_value()
            end = init.end if init is not None else name_components(name)[-1].end
            return Loc(start, end, NormalAttribute(name, init))

        return None

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def parse_opening_or_self_closing_elem(
        self,
    ) -> tuple[bool, ElementName, tuple[Loc[Attribute], ...]]:
        """Parse `<name attrs... >` or `<name attrs... />`.

        Returns (is_self_closing, name, attrs) with the lexer on the '>' or '/>'.
        """
        self._expect(TokenType.ELEMENT_OPEN, "expected '<'")
        self._consume()
        name = self.parse_elem_name()

        attrs: list[Loc[Attribute]] = []
        while True:
            attr = self.parse_elem_attr()
            if attr is None:
                break
            attrs.append(attr)

        if self._at(TokenType.ELEMENT_CLOSE):
            return False, name, tuple(attrs)
        if self._at(TokenType.SELF_CLOSING_CLOSE):
            return True, name, tuple(attrs)
        raise self._error("expected attribute, '>' or '/>'")

    def parse_closing_elem(self) -> ElementName:
        self._expect(TokenType.CLOSING_ELEMENT_OPEN, "expected '</'")
        self._consume()
        name = self.parse_elem_name()
        self._expect(TokenType.ELEMENT_CLOSE, "expected '>' to end closing tag")
        return name

    def parse_elem(self) -> Loc[ElementExpression]:
        start = self._lexer.start()
        is_self_closing, name, attrs = self.parse_opening_or_self_closing_elem()

        if is_self_closing:
            return Loc(start, self._lexer.end(), ElementExpression(True, name, attrs, None))

        children = self.parse_children()

        if self._at(TokenType.FRAGMENT_CLOSE):
            raise self._error(f"expected '</{name_text(name, self._source)}>', found '</>'")

        closing = self.parse_closing_elem()
        if not self._names_match(name, closing):
            parts = name_components(closing)
            raise self._error(
                f"closing tag '</{name_text(closing, self._source)}>' does not match "
                f"'<{name_text(name, self._source)}>'",
                parts[0].start,
                parts[-1].end,
            )

        return Loc(start, self._lexer.end(), ElementExpression(False, name, attrs, children))

    def _names_match(self, opening: ElementName, closing: ElementName) -> bool:
        """Same name form, and every component is textually identical."""
        if type(opening) is not type(closing):
            return False
        left = name_components(opening)
        right = name_components(closing)
        if len(left) != len(right):
            return False
        return all(
            self._lexer.slice_source(a.start, a.end) == self._lexer.slice_source(b.start, b.end)
            for a, b in zip(left, right)
        )

    # ------------------------------------------------------------------
    # Children and fragments
    # ------------------------------------------------------------------

    def parse_children(self) -> tuple[Child, ...]:
        """Parse children up to, not including, the next '</' or '</>'."""
        children: list[Child] = []
        text_start = self._lexer.end()

        def flush(end: int) -> None:
            if end > text_start:
                text = self._lexer.slice_source(text_start, end)
                children.append(Loc(text_start, end, Text(text)))

        while True:
            tt = self._consume_child()
            flush(self._lexer.start())

            if tt is TokenType.CLOSING_ELEMENT_OPEN or tt is TokenType.FRAGMENT_CLOSE:
                return tuple(children)

            if tt is TokenType.ELEMENT_OPEN:
                children.append(self.parse_elem())
            elif tt is TokenType.FRAGMENT_OPEN:
                children.append(self.parse_fragment())
            elif tt is TokenType.BRACE_OPEN:
                children.append(self._parse_expression_container())

            text_start = self._lexer.end()

    def parse_fragment(self) -> Loc[FragmentExpression]:
        start = self._lexer.start()
        self._expect(TokenType.FRAGMENT_OPEN, "expected '<>'")

        children = self.parse_children()
        self._expect(TokenType.FRAGMENT_CLOSE, "expected '</>' to close fragment")

        return Loc(start, self._lexer.end(), FragmentExpression(children))

    # ------------------------------------------------------------------
    # Host expressions
    # ------------------------------------------------------------------

    def _parse_expression_container(self) -> Loc[AssignmentExpression]:
        """Parse `{ ... }`, returning a Loc that covers both braces."""
        start = self._lexer.start()
        expr = self.parse_assignment_expression()
        return Loc(start, self._lexer.end(), expr)

    def parse_assignment_expression(self) -> AssignmentExpression:
        """Scan to the matching '}', parsing any markup found on the way.

        Only brace balance and nested markup are tracked; everything else
        between the braces is opaque host-language text.
        """
        self._expect(TokenType.BRACE_OPEN, "expected '{'")
        start = self._lexer.end()
        depth = 0
        nodes: list[Loc[Node]] = []

        while True:
            tt = self._consume()
            if tt is TokenType.BRACE_OPEN:
                depth += 1
            elif tt is TokenType.BRACE_CLOSE:
                if depth == 0:
                    break
                depth -= 1
            elif tt is TokenType.ELEMENT_OPEN:
                nodes.append(self.parse_elem())
            elif tt is TokenType.FRAGMENT_OPEN:
                nodes.append(self.parse_fragment())

        return AssignmentExpression(start, self._lexer.start(), tuple(nodes))


def name_components(name: ElementName | AttributeName) -> tuple[Loc[TokenType], ...]:
    """Return the identifier Locs that make up a name, in source order."""
    if isinstance(name, MemberExpression):
        return name.members
    if isinstance(name, NamespacedName):
        return (name.ns, name.name)
    return (name,)


def name_text(name: ElementName | AttributeName, source: str) -> str:
    """Render a name back to its canonical `a`, `a:b` or `a.b.c` text."""
    parts = [p.slice(source) for p in name_components(name)]
    if isinstance(name, MemberExpression):
        return ".".join(parts)
    return ":".join(parts)


def parse(source: str, filename: str = "input.jsx") -> Program:
    """Convenience function: parse source text and return the Program AST."""
    return Parser(source, filename).parse()
