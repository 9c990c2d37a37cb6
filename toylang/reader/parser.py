"""
  Recursive descent parser for toylang.

Builds plain Python structures from the token stream:

    - lists -> Python list (possibly empty, arbitrarily nested)
    - numbers -> float
    - strings -> str
    - symbols -> Symbol

Every list handed back corresponds to a balanced run of parens; a stream
that runs out before the matching RPAREN is a ParseError.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from toylang import SExpression
from toylang.config import Config, get_config
from toylang.errors import ParseError, UnbalancedError
from toylang.reader.lexer import Token, TokenKind, Tokenizer

logger = logging.getLogger(__name__)


class Parser:
    def __init__(self, source: str | Tokenizer, config: Config | None = None):
        self.tokens = source if isinstance(source, Tokenizer) else Tokenizer(source)
        self.config = config or get_config()

    def next(self) -> Optional[Token]:
        return self.tokens.next_token()

    def _error_at(
        self, message: str, token: Optional[Token], error=ParseError
    ) -> ParseError:
        if token is None:
            # Point just past the last character read.
            return error(message, self.tokens.text, self.tokens.line, self.tokens.column)
        return error(message, self.tokens.text, token.line, token.column, token.length)

    def expect(self, token: Optional[Token], kind: TokenKind) -> Token:
        if token is None:
            raise self._error_at(f"expected {kind.name}, got end of input", None)
        if token.kind is not kind:
            raise self._error_at(f"expected {kind.name}, got {token.kind.name}", token)
        return token

    def sexpression(self, depth: int = 1) -> list[SExpression]:
        """Read list elements up to and including the closing RPAREN.

        The opening LPAREN has already been consumed by the caller.
        """
        items: list[SExpression] = []
        while True:
            token = self.next()
            if token is None:
                raise self._error_at("unbalanced parenthesis", None, UnbalancedError)
            if token.kind is TokenKind.RPAREN:
                return items
            if token.kind is TokenKind.LPAREN:
                if depth >= self.config.max_depth:
                    raise self._error_at("maximum nesting depth exceeded", token)
                items.append(self.sexpression(depth + 1))
            else:
                items.append(token.value)

    def parse(self) -> list[SExpression]:
        """Parse exactly one top-level list."""
        self.expect(self.next(), TokenKind.LPAREN)
        root = self.sexpression()
        trailing = self.next()
        if trailing is not None:
            raise self._error_at("unexpected trailing input", trailing)
        logger.debug("parsed %r", root)
        return root

    def parse_all(self) -> Iterator[list[SExpression]]:
        """Yield every top-level list in order."""
        while (token := self.next()) is not None:
            self.expect(token, TokenKind.LPAREN)
            expr = self.sexpression()
            logger.debug("parsed %r", expr)
            yield expr


def parse(text: str, config: Config | None = None) -> list[SExpression]:
    return Parser(text, config).parse()


def parse_all(text: str, config: Config | None = None) -> list[list[SExpression]]:
    return list(Parser(text, config).parse_all())
