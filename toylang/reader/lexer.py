"""
  Character level tokenizer for toylang source text.

- Pull based: a character is consumed only when the next token is requested.
- Five scanning states: BASE, STRING, NUMBER, SYMBOL, ESCAPE.
- Tokens carry their raw length and start position so the parser can point
  at the exact span of an offending token.

    - (  ) -> LPAREN / RPAREN
    - "..." -> STRING (a backslash copies the next character verbatim;
      there is no escape translation, so "\\n" reads as "n")
    - -6.022e23 -> NUMBER (float)
    - anything else -> SYMBOL (interned)
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional

from toylang import SExpression
from toylang.errors import LexError
from toylang.types.symbol import Symbol

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")
# e.g. 6.022e23, -1.5E-3
NUMBER_CHARS = DIGITS | frozenset(".eE+-")


class TokenKind(Enum):
    LPAREN = auto()
    RPAREN = auto()
    STRING = auto()
    SYMBOL = auto()
    NUMBER = auto()


class _State(Enum):
    BASE = auto()
    STRING = auto()
    NUMBER = auto()
    SYMBOL = auto()
    ESCAPE = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: SExpression
    length: int
    line: int = 0
    column: int = 0


class Tokenizer:
    """Lazy token sequence over a source string.

    `next_token()` returns the next Token, or None once the input is
    exhausted. Iterating the tokenizer yields the same tokens.
    """

    def __init__(self, text: str):
        self.text = text
        self.offset = 0
        self.line = 0
        self.column = 0
        self._pending: deque[Token] = deque()

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def peek_char(self) -> str:
        """The character after the current one, or '' at the end."""
        nxt = self.offset + 1
        return self.text[nxt] if nxt < len(self.text) else ""

    def _advance(self, char: str) -> None:
        self.offset += 1
        if char == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1

    def _error(self, message: str, line=None, column=None, length=1) -> LexError:
        return LexError(
            message,
            self.text,
            self.line if line is None else line,
            self.column if column is None else column,
            length,
        )

    def _emit(self, kind: TokenKind, value: SExpression, start: tuple[int, int, int]) -> Token:
        offset, line, column = start
        token = Token(kind, value, self.offset - offset, line, column)
        logger.debug("token %s %r at %d:%d", kind.name, value, line, column)
        return token

    def _number(self, buffer: list[str], start: tuple[int, int, int]) -> Token:
        raw = "".join(buffer)
        try:
            value = float(raw)
        except ValueError:
            _, line, column = start
            raise self._error(
                f"Malformed numeric literal {raw!r}", line, column, len(raw)
            ) from None
        return self._emit(TokenKind.NUMBER, value, start)

    def _rparen_after(self) -> None:
        # The closing paren ends the pending atom and is emitted right after it.
        start = (self.offset, self.line, self.column)
        self._advance(")")
        self._pending.append(self._emit(TokenKind.RPAREN, ")", start))

    def next_token(self) -> Optional[Token]:
        if self._pending:
            return self._pending.popleft()

        state = _State.BASE
        buffer: list[str] = []
        start = (self.offset, self.line, self.column)
        text = self.text

        while self.offset < len(text):
            char = text[self.offset]

            if state is _State.BASE:
                if char.isspace():
                    self._advance(char)
                    continue
                start = (self.offset, self.line, self.column)
                if char == "(":
                    self._advance(char)
                    return self._emit(TokenKind.LPAREN, "(", start)
                if char == ")":
                    self._advance(char)
                    return self._emit(TokenKind.RPAREN, ")", start)
                if char == '"':
                    state = _State.STRING
                elif char == "-":
                    state = _State.NUMBER if self.peek_char() in DIGITS else _State.SYMBOL
                    buffer.append(char)
                elif char in DIGITS:
                    state = _State.NUMBER
                    buffer.append(char)
                else:
                    state = _State.SYMBOL
                    buffer.append(char)

            elif state is _State.STRING:
                if char == "\\":
                    state = _State.ESCAPE
                elif char == '"':
                    self._advance(char)
                    return self._emit(TokenKind.STRING, "".join(buffer), start)
                else:
                    buffer.append(char)

            elif state is _State.ESCAPE:
                buffer.append(char)
                state = _State.STRING

            elif state is _State.NUMBER:
                if char in NUMBER_CHARS:
                    buffer.append(char)
                elif char.isspace():
                    token = self._number(buffer, start)
                    self._advance(char)
                    return token
                elif char == ")":
                    token = self._number(buffer, start)
                    self._rparen_after()
                    return token
                else:
                    raise self._error("Unexpected character in numeric literal")

            elif state is _State.SYMBOL:
                if char.isspace():
                    token = self._emit(TokenKind.SYMBOL, Symbol("".join(buffer)), start)
                    self._advance(char)
                    return token
                if char == ")":
                    token = self._emit(TokenKind.SYMBOL, Symbol("".join(buffer)), start)
                    self._rparen_after()
                    return token
                buffer.append(char)

            self._advance(char)

        # End of input: flush a pending atom.
        if state is _State.NUMBER:
            return self._number(buffer, start)
        if state is _State.SYMBOL:
            return self._emit(TokenKind.SYMBOL, Symbol("".join(buffer)), start)
        if state in (_State.STRING, _State.ESCAPE):
            offset, line, column = start
            raise self._error(
                "Unterminated string literal", line, column, self.offset - offset
            )
        return None


def tokenize(text: str) -> Tokenizer:
    """Return a fresh lazy token sequence over `text`."""
    return Tokenizer(text)
