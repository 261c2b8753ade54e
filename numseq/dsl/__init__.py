"""numseq DSL: tokenizer, parser, validator, and formatter for number shorthand.

Usage:
    from numseq.dsl import Lexer, Parser, validate_shorthand

    tokens = Lexer(source).tokenize()
    sequence = Parser(tokens).parse()
    errors = validate_shorthand(source)
"""

from numseq.dsl.ast_nodes import Loop, Node, Sequence, Value
from numseq.dsl.formatter import format_node
from numseq.dsl.lexer import Lexer, LexerError, lex
from numseq.dsl.parser import ParseError, Parser, parse_sequence
from numseq.dsl.tokens import Token, TokenKind
from numseq.dsl.validator import is_valid, validate_shorthand

__all__ = [
    "Lexer",
    "LexerError",
    "Loop",
    "Node",
    "ParseError",
    "Parser",
    "Sequence",
    "Token",
    "TokenKind",
    "Value",
    "format_node",
    "is_valid",
    "lex",
    "parse_sequence",
    "validate_shorthand",
]
