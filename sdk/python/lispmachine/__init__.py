from .types import Lexeme, LexemeKind, Node, NodeKind
from .errors import LexError, UnterminatedString, DanglingEscape, ParseError, UnclosedBracket, SuperfluousBracket
from .lexer import tokenize
from .parser import parse, read
from .printer import to_source, to_data

__all__ = [
    "tokenize", "parse", "read", "to_source", "to_data",
    "Lexeme", "LexemeKind", "Node", "NodeKind",
    "LexError", "UnterminatedString", "DanglingEscape",
    "ParseError", "UnclosedBracket", "SuperfluousBracket",
]
