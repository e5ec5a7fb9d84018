"""CLI: python -m lispmachine <source-file|-> [sexp|json|lexemes]"""

import json
import logging
import os
import sys
from pathlib import Path

from .errors import LexError, ParseError
from .lexer import tokenize
from .parser import parse
from .printer import to_data, to_source

USAGE = "Usage: python -m lispmachine <source-file|-> [sexp|json|lexemes]"
FORMATS = ("sexp", "json", "lexemes")


def _get_log_level() -> int:
    """Log level from the LOGLEVEL environment variable, WARNING if unset."""
    loglevel_env = os.getenv("LOGLEVEL", "").upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return logging.WARNING


def _read_source(arg: str) -> str:
    if arg == "-":
        return sys.stdin.read()
    return Path(arg).read_text(encoding="utf-8")


def main(argv=None) -> int:
    logging.basicConfig(level=_get_log_level(), format="%(message)s", stream=sys.stderr)
    args = sys.argv[1:] if argv is None else argv

    if not 1 <= len(args) <= 2 or (len(args) == 2 and args[1] not in FORMATS):
        print(USAGE, file=sys.stderr)
        return 1
    fmt = args[1] if len(args) == 2 else "sexp"

    try:
        src = _read_source(args[0])
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Error reading {args[0]}: {e}")
        return 1

    try:
        lexemes = tokenize(src)
        if fmt == "lexemes":
            for lexeme in lexemes:
                value = "" if lexeme.value is None else f" {json.dumps(lexeme.value)}"
                print(f"{lexeme.position}\t{lexeme.kind.value}{value}")
            return 0
        program = parse(lexemes)
    except (LexError, ParseError) as e:
        logging.error(f"Error: {e}")
        return 1

    logging.info(f"parsed {len(program)} top-level node(s) from {args[0]}")
    if fmt == "json":
        print(json.dumps(to_data(program), indent=2))
    else:
        print(to_source(program))
    return 0


if __name__ == "__main__":
    sys.exit(main())
