import pytest
from lispmachine.lexer import tokenize, is_symbol, is_delimiter, is_structural
from lispmachine.types import Lexeme, LexemeKind
from lispmachine.errors import LexError, UnterminatedString, DanglingEscape

OPEN = Lexeme(LexemeKind.OPEN_BRACKET)
CLOSE = Lexeme(LexemeKind.CLOSE_BRACKET)


def sym(v):
    return Lexeme(LexemeKind.SYMBOL, v)


def string(v):
    return Lexeme(LexemeKind.STRING, v)


def test_empty_source():
    assert tokenize("") == []


def test_only_delimiters():
    assert tokenize(" \t\r\n ") == []


def test_two_symbols():
    assert tokenize("1 2") == [sym("1"), sym("2")]


def test_simple_expression():
    assert tokenize("(+ 1 2)") == [OPEN, sym("+"), sym("1"), sym("2"), CLOSE]


def test_symbol_ends_at_bracket():
    assert tokenize("(foo)") == [OPEN, sym("foo"), CLOSE]


def test_symbol_ends_at_quote():
    assert tokenize('foo"bar"') == [sym("foo"), string("bar")]


def test_symbol_ends_at_comment():
    assert tokenize("foo;comment") == [sym("foo")]


def test_symbol_at_end_of_input():
    assert tokenize("hello-world!") == [sym("hello-world!")]


def test_long_symbol():
    assert tokenize("x" * 100_000) == [sym("x" * 100_000)]


def test_string():
    assert tokenize('"hello world"') == [string("hello world")]


def test_empty_string():
    assert tokenize('""') == [string("")]


def test_string_keeps_structural_chars():
    assert tokenize('"(a ; b)"') == [string("(a ; b)")]


def test_escaped_quote():
    assert tokenize('"a\\"b"') == [string('a"b')]


def test_escaped_backslash():
    assert tokenize('"a\\\\b"') == [string("a\\b")]


def test_escape_is_literal_passthrough():
    assert tokenize('"\\n\\t"') == [string("nt")]


def test_string_followed_by_symbol():
    assert tokenize('"a"b') == [string("a"), sym("b")]


def test_comment_until_newline():
    assert tokenize("; nothing here\n(a)") == [OPEN, sym("a"), CLOSE]


def test_trailing_comment_without_newline():
    assert tokenize("a ; trailing") == [sym("a")]


def test_positions():
    lexemes = tokenize('(ab "cd")')
    assert [lx.position for lx in lexemes] == [0, 1, 4, 8]


def test_unterminated_string():
    with pytest.raises(UnterminatedString, match='after "abc"') as exc:
        tokenize('(x "abc')
    assert exc.value.buffer == "abc"
    assert exc.value.position == 3


def test_dangling_escape():
    with pytest.raises(DanglingEscape, match="Unused escape character") as exc:
        tokenize('"ab\\')
    assert exc.value.buffer == "ab"


def test_lex_errors_are_syntax_errors():
    with pytest.raises(SyntaxError):
        tokenize('"')
    assert issubclass(UnterminatedString, LexError)
    assert issubclass(DanglingEscape, LexError)


def test_character_classes():
    for ch in "()\";":
        assert is_structural(ch)
        assert not is_symbol(ch)
    for ch in "\t \n\r":
        assert is_delimiter(ch)
        assert not is_symbol(ch)
    for ch in "a+-*/#\\λ":
        assert is_symbol(ch)


def test_deterministic():
    src = '(define (f x) "x\\"y") ; c\n(f 1)'
    assert tokenize(src) == tokenize(src)


def test_carriage_return_does_not_end_comment():
    assert tokenize("; x\r(a)") == []


def test_symbols_end_at_tab_and_carriage_return():
    assert tokenize("a\tb\rc") == [sym("a"), sym("b"), sym("c")]
