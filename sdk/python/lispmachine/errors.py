"""Lexical and syntactic errors raised by the reader.

Both families derive from the builtin SyntaxError, so callers that only
care about "the source is malformed" can catch that.
"""

from typing import Optional


def _with_offset(message: str, position: Optional[int]) -> str:
    if position is None:
        return message
    return f"{message} at offset {position}"


class LexError(SyntaxError):
    def __init__(self, message: str, buffer: str = "", position: Optional[int] = None):
        super().__init__(_with_offset(message, position))
        self.message = message
        self.buffer = buffer
        self.position = position


class UnterminatedString(LexError):
    def __init__(self, buffer: str, position: Optional[int] = None):
        super().__init__(f'Unexpected end of string after "{buffer}"', buffer, position)


class DanglingEscape(LexError):
    def __init__(self, buffer: str, position: Optional[int] = None):
        super().__init__(f'Unused escape character after "{buffer}"', buffer, position)


class ParseError(SyntaxError):
    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(_with_offset(message, position))
        self.message = message
        self.position = position


class UnclosedBracket(ParseError):
    def __init__(self, position: Optional[int] = None):
        super().__init__("Unclosed bracket found", position)


class SuperfluousBracket(ParseError):
    def __init__(self, position: Optional[int] = None):
        super().__init__("Superfluous bracket found", position)
