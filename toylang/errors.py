"""Error hierarchy for toylang.

Lexer and parser failures carry their position in the source so callers can
render an excerpt with a caret, without parsing the message text.
"""

from __future__ import annotations


class ToylangError(Exception):
    """Base class for all toylang errors"""


class SourceError(ToylangError):
    """An error tied to a position in program text."""

    def __init__(
        self,
        message: str,
        source: str,
        line: int,
        column: int,
        length: int = 1,
    ):
        self.message = message
        self.source = source
        self.line = line
        self.column = column
        self.length = length
        super().__init__(self.format())

    @property
    def source_line(self) -> str:
        lines = self.source.split("\n")
        if 0 <= self.line < len(lines):
            return lines[self.line]
        return ""

    @property
    def pointer(self) -> str:
        return "-" * self.column + "^"

    def format(self) -> str:
        return (
            f"{self.message}\n"
            f"Line {self.line} character {self.column}\n"
            f"{self.source_line}\n"
            f"{self.pointer}\n"
        )

    def __str__(self) -> str:
        return self.format()


class LexError(SourceError):
    """Raised when the tokenizer meets a character it cannot accept"""


class ParseError(SourceError):
    """Raised when the token stream does not form a balanced list"""


class UnbalancedError(ParseError):
    """Raised when the input ends before every open paren is closed"""


class EvalError(ToylangError):
    """Raised when an expression cannot be evaluated"""


class UnboundSymbolError(EvalError):
    """Raised in strict mode when a symbol is used before it is bound"""


class InvalidSymbolError(EvalError):
    """Raised when something other than a symbol is used as a binding name"""