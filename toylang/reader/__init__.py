from toylang.reader.lexer import Token, TokenKind, Tokenizer, tokenize
from toylang.reader.parser import Parser, parse, parse_all

__all__ = ["Token", "TokenKind", "Tokenizer", "tokenize", "Parser", "parse", "parse_all"]
