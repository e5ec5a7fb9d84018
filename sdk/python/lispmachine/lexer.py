"""Character-level tokenizer for lispmachine source text."""

import logging
from enum import Enum, auto

from .errors import DanglingEscape, UnterminatedString
from .types import Lexeme, LexemeKind

logger = logging.getLogger(__name__)

OPEN_BRACKET = "("
CLOSE_BRACKET = ")"
DOUBLE_QUOTE = '"'
BACK_SLASH = "\\"
SEMICOLON = ";"
NEW_LINE = "\n"

STRUCTURAL = frozenset((OPEN_BRACKET, CLOSE_BRACKET, DOUBLE_QUOTE, SEMICOLON))
DELIMITERS = frozenset(("\t", " ", NEW_LINE, "\r"))


class State(Enum):
    BASE = auto()
    SYMBOL = auto()
    STRING = auto()
    ESCAPE = auto()
    COMMENT = auto()


def is_structural(ch: str) -> bool:
    return ch in STRUCTURAL


def is_delimiter(ch: str) -> bool:
    return ch in DELIMITERS


def is_symbol(ch: str) -> bool:
    return ch not in STRUCTURAL and ch not in DELIMITERS


def tokenize(src: str) -> list[Lexeme]:
    """Split source text into lexemes.

    Escaped characters inside strings are passed through verbatim:
    `\\n` yields `n`, `\\"` yields `"`.

    Raises:
        UnterminatedString: input ends inside a string.
        DanglingEscape: input ends right after a backslash in a string.
    """
    lexemes: list[Lexeme] = []
    state = State.BASE
    buf: list[str] = []
    start = 0
    pos = 0
    end = len(src)

    while pos < end:
        ch = src[pos]

        if state is State.BASE:
            if ch == OPEN_BRACKET:
                lexemes.append(Lexeme(LexemeKind.OPEN_BRACKET, position=pos))
            elif ch == CLOSE_BRACKET:
                lexemes.append(Lexeme(LexemeKind.CLOSE_BRACKET, position=pos))
            elif ch == DOUBLE_QUOTE:
                buf = []
                start = pos
                state = State.STRING
            elif ch == SEMICOLON:
                state = State.COMMENT
            elif not is_delimiter(ch):
                buf = [ch]
                start = pos
                state = State.SYMBOL

        elif state is State.SYMBOL:
            if not is_symbol(ch):
                lexemes.append(Lexeme(LexemeKind.SYMBOL, "".join(buf), start))
                state = State.BASE
                # Reprocess the terminating character in BASE.
                continue
            buf.append(ch)

        elif state is State.STRING:
            if ch == DOUBLE_QUOTE:
                lexemes.append(Lexeme(LexemeKind.STRING, "".join(buf), start))
                state = State.BASE
            elif ch == BACK_SLASH:
                state = State.ESCAPE
            else:
                buf.append(ch)

        elif state is State.ESCAPE:
            buf.append(ch)
            state = State.STRING

        elif state is State.COMMENT:
            if ch == NEW_LINE:
                state = State.BASE

        pos += 1

    if state is State.SYMBOL:
        lexemes.append(Lexeme(LexemeKind.SYMBOL, "".join(buf), start))
    elif state is State.STRING:
        raise UnterminatedString("".join(buf), start)
    elif state is State.ESCAPE:
        raise DanglingEscape("".join(buf), start)

    logger.debug("tokenized %d characters into %d lexemes", end, len(lexemes))
    return lexemes
