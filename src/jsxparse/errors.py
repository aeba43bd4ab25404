"""Error types with formatted source context."""

from __future__ import annotations

from jsxparse.tokens import Position, position_at


class JsxError(Exception):
    """Base class for lexing and parsing failures, with span and source context."""

    def __init__(
        self, message: str, start: int, end: int, source: str, filename: str = "input.jsx"
    ) -> None:
        self.message = message
        self.start = start
        self.end = end
        self.source = source
        self.filename = filename
        self.position: Position = position_at(source, start)
        super().__init__(self.format())

    @property
    def end_position(self) -> Position:
        return position_at(self.source, self.end)

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the full span when on one line, otherwise to end of line
        end = self.end_position
        if end.line == self.position.line:
            underline_len = max(1, end.column - col)
        else:
            underline_len = max(1, len(source_line) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class EndOfStream(JsxError):
    """Input exhausted exactly at a token boundary."""


class UnexpectedEndOfStream(JsxError):
    """Input exhausted inside an unfinished construct."""


class UnexpectedToken(JsxError):
    """The current token does not satisfy the grammar rule in force."""
