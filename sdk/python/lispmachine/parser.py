"""Tree builder: folds a flat lexeme sequence into lispmachine AST nodes."""

import logging
from collections.abc import Iterable

from .errors import SuperfluousBracket, UnclosedBracket
from .lexer import tokenize
from .types import Lexeme, LexemeKind, Node

logger = logging.getLogger(__name__)

# A program is the ordered sequence of top-level nodes.
Program = tuple[Node, ...]


def parse(lexemes: Iterable[Lexeme]) -> Program:
    """Build the AST for a sequence of lexemes.

    Nesting is tracked with an explicit stack of open frames, so depth is
    bounded only by memory.

    Raises:
        UnclosedBracket: an open bracket has no matching close bracket.
        SuperfluousBracket: a close bracket has no matching open bracket.
    """
    # Each frame holds the sibling list of the enclosing level and the
    # lexeme that opened the current one.
    frames: list[tuple[list[Node], Lexeme]] = []
    nodes: list[Node] = []
    count = 0
    for lexeme in lexemes:
        count += 1
        kind = lexeme.kind
        if kind is LexemeKind.OPEN_BRACKET:
            frames.append((nodes, lexeme))
            nodes = []
        elif kind is LexemeKind.CLOSE_BRACKET:
            if not frames:
                raise SuperfluousBracket(lexeme.position)
            parent, _ = frames.pop()
            parent.append(Node.expression(nodes))
            nodes = parent
        elif kind is LexemeKind.SYMBOL:
            nodes.append(Node.symbol(lexeme.value))
        elif kind is LexemeKind.STRING:
            nodes.append(Node.string(lexeme.value))

    if frames:
        # The outermost unmatched bracket is the first one a left-to-right
        # reading fails to close.
        raise UnclosedBracket(frames[0][1].position)

    program = tuple(nodes)
    logger.debug("built %d top-level nodes from %d lexemes", len(program), count)
    return program


def read(src: str) -> Program:
    """Tokenize and parse source text in one call."""
    return parse(tokenize(src))
