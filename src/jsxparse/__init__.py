"""JSX markup parser for host-language source text."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsxparse.ast import Program

__version__ = "0.1.0"


def parse(source: str, filename: str = "input.jsx") -> Program:
    """Parse source text and return the Program AST."""
    from jsxparse.parser import parse as _parse

    return _parse(source, filename)
