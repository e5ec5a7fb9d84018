"""
lispmachine End-to-End Example (Python)

Demonstrates the full reader pipeline:
1. Tokenize source text into lexemes
2. Build the AST from the lexemes
3. Render the AST back to canonical source and JSON-able data
4. Report lexical and syntactic errors

Run: pip install -e . && python examples/e2e/e2e.py
"""

import json

from lispmachine import tokenize, parse, to_source, to_data, LexError, ParseError

print("=== lispmachine E2E Demo ===\n")

source = """; a template expression
(@concat "Hello, "
  (@concat name "!"))"""

# 1. Tokenize
lexemes = tokenize(source)
print(f"1. Tokenized into {len(lexemes)} lexemes")
for lexeme in lexemes:
    print(f"   {lexeme.position:>3} {lexeme.kind.value:<14} {lexeme.value or ''}")
print()

# 2. Parse
program = parse(lexemes)
print(f"2. Parsed {len(program)} top-level node(s), depth {max(n.depth for n in program)}\n")

# 3. Render
print("3. Canonical source")
print(f"   {to_source(program)}")
print("   JSON")
print("   " + json.dumps(to_data(program)))
print()

# 4. Errors
print("4. Errors")
for bad in ['(@concat "unterminated', '"dangling\\', "(a (b)", "(a))"]:
    try:
        parse(tokenize(bad))
    except (LexError, ParseError) as e:
        print(f"   {bad!r:<26} -> {type(e).__name__}: {e}")

print("\n=== Done ===")
