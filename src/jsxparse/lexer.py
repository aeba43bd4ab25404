"""JSX lexer — pulls one token at a time from source text."""

from __future__ import annotations

from jsxparse.errors import EndOfStream, JsxError, UnexpectedEndOfStream, UnexpectedToken
from jsxparse.tokens import Loc, TokenType, is_ident_continue, is_ident_start

# Whitespace allowed inside the multi-character delimiters: < / >, < >, />
_SPACES = frozenset(" \t\r\n")

_SINGLE: dict[str, TokenType] = {
    ">": TokenType.ELEMENT_CLOSE,
    "=": TokenType.ASSIGN,
    "{": TokenType.BRACE_OPEN,
    "}": TokenType.BRACE_CLOSE,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
}


class Lexer:
    """Tokenize JSX source on demand, holding exactly one current token.

    There is no token buffer: every call to consume() overwrites `token`
    and the current span. Disambiguation between `<`, `</`, `<>`, `</>`
    and between `.` and `...` happens here by scanning ahead and
    rewinding the cursor before committing.
    """

    def __init__(self, source: str, filename: str = "input.jsx") -> None:
        self._source = source
        self._filename = filename
        self._pos = 0
        self._token_start = 0
        self.token: TokenType | None = None

    @property
    def source(self) -> str:
        return self._source

    # ------------------------------------------------------------------
    # Current token span
    # ------------------------------------------------------------------

    def start(self) -> int:
        return self._token_start

    def end(self) -> int:
        return self._pos

    def loc(self) -> tuple[int, int]:
        return self._token_start, self._pos

    def slice_source(self, start: int, end: int) -> str:
        """Return the raw source text in [start, end)."""
        if end < start:
            raise ValueError(f"invalid source range [{start}, {end})")
        return self._source[start:end]

    # ------------------------------------------------------------------
    # Token production
    # ------------------------------------------------------------------

    def consume(self) -> TokenType:
        """Advance to the next token and return its type.

        Raises EndOfStream when the input is exhausted between tokens (and on
        every call after that), UnexpectedEndOfStream when it runs out inside
        a multi-character construct, and UnexpectedToken for a stray '/'.
        """
        if self.token is TokenType.EOS:
            raise self._error(EndOfStream, "no tokens left to read", self._pos)

        while self._pos < len(self._source):
            ch = self._source[self._pos]

            if ch == "<":
                return self._lex_angle()

            if ch == "/":
                return self._lex_slash()

            if ch in _SINGLE:
                return self._commit(_SINGLE[ch], self._pos, self._pos + 1)

            if ch == '"' or ch == "'":
                return self._lex_string(ch)

            if ch == ".":
                return self._lex_dot()

            if is_ident_start(ch):
                return self._lex_identifier()

            # Whitespace and stray text between tokens
            self._pos += 1

        self._token_start = self._pos
        self.token = TokenType.EOS
        raise self._error(EndOfStream, "end of input", self._pos)

    def consume_child(self) -> TokenType:
        """Advance past raw child text to the next markup or '{' token.

        Only `<` and `{` are significant between an element's opening and
        closing tags; every other character belongs to the text run.
        """
        if self.token is TokenType.EOS:
            raise self._error(EndOfStream, "no tokens left to read", self._pos)
        while self._pos < len(self._source) and self._source[self._pos] not in "<{":
            self._pos += 1
        return self.consume()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _commit(self, tt: TokenType, start: int, end: int) -> TokenType:
        self.token = tt
        self._token_start = start
        self._pos = end
        return tt

    def _error(self, cls: type[JsxError], message: str, start: int) -> JsxError:
        self._token_start = start
        return cls(message, start, self._pos, self._source, self._filename)

    def _skip_spaces(self, start: int) -> str:
        """Skip delimiter whitespace and return the next character.

        Running out of input here means a `<` or `/` delimiter was cut short.
        """
        while self._pos < len(self._source):
            ch = self._source[self._pos]
            if ch not in _SPACES:
                return ch
            self._pos += 1
        raise self._error(UnexpectedEndOfStream, "unexpected end of input in tag", start)

    # ------------------------------------------------------------------
    # Multi-character tokens
    # ------------------------------------------------------------------

    def _lex_angle(self) -> TokenType:
        start = self._pos
        self._pos += 1  # consume '<'
        after_lt = self._pos

        ch = self._skip_spaces(start)

        if ch == "/":
            self._pos += 1
            after_slash = self._pos
            if self._skip_spaces(start) == ">":
                return self._commit(TokenType.FRAGMENT_CLOSE, start, self._pos + 1)
            return self._commit(TokenType.CLOSING_ELEMENT_OPEN, start, after_slash)

        if ch == ">":
            return self._commit(TokenType.FRAGMENT_OPEN, start, self._pos + 1)

        return self._commit(TokenType.ELEMENT_OPEN, start, after_lt)

    def _lex_slash(self) -> TokenType:
        start = self._pos
        self._pos += 1  # consume '/'

        if self._skip_spaces(start) == ">":
            return self._commit(TokenType.SELF_CLOSING_CLOSE, start, self._pos + 1)

        self.token = TokenType.MALFORMED
        raise self._error(UnexpectedToken, "expected '>' after '/'", start)

    def _lex_string(self, quote: str) -> TokenType:
        start = self._pos
        self._pos += 1  # consume opening quote

        while self._pos < len(self._source):
            ch = self._source[self._pos]
            if ch == "\\":
                # Escapes are not validated, the next character is taken as-is
                self._pos = min(self._pos + 2, len(self._source))
                continue
            self._pos += 1
            if ch == quote:
                return self._commit(TokenType.STRING, start, self._pos)

        raise self._error(UnexpectedEndOfStream, "unterminated string literal", start)

    def _lex_dot(self) -> TokenType:
        start = self._pos
        after_dot = start + 1
        lookahead = self._source[after_dot : after_dot + 2]

        if lookahead == "..":
            return self._commit(TokenType.SPREAD, start, start + 3)

        if lookahead == ".":
            # '..' at the very end is a truncated spread
            self._pos = start + 2
            raise self._error(UnexpectedEndOfStream, "unexpected end of input after '.'", start)

        return self._commit(TokenType.DOT, start, after_dot)

    def _lex_identifier(self) -> TokenType:
        start = self._pos
        self._pos += 1
        while self._pos < len(self._source) and is_ident_continue(self._source[self._pos]):
            self._pos += 1
        return self._commit(TokenType.IDENTIFIER, start, self._pos)


def tokenize(source: str, filename: str = "input.jsx") -> list[Loc[TokenType]]:
    """Convenience function: lex the whole source and return its tokens."""
    lexer = Lexer(source, filename)
    tokens: list[Loc[TokenType]] = []
    while True:
        try:
            tt = lexer.consume()
        except EndOfStream:
            return tokens
        tokens.append(Loc(lexer.start(), lexer.end(), tt))
