"""
  Kappa tokenizer

Turns source text into a flat stream of typed tokens:

    - ( ) [ ]        -> open / close / openbracket / closebracket
    - '              -> quote (must be followed by a datum, not whitespace)
    - .              -> dot (only when standing alone)
    - #t #f          -> boolean (case-insensitive)
    - 12 -3 +4       -> integer
    - 1.5 -.5 3.     -> double
    - "text"         -> string (no escapes; runs to the next double quote)
    - anything else  -> symbol, if it starts with a letter, a sign or one of
                        ! $ % & * / : < = > ? ~ _ ^

    ; starts a comment that runs to the end of the line.
"""

from __future__ import annotations

import re
from io import StringIO
from typing import Iterable, Iterator, NamedTuple

from kappa.errors import KappaSyntaxError


class Token(NamedTuple):
    kind: str
    value: object
    line: int


DELIMITERS = "()[]\";'"
SYMBOL_INITIALS = "!$%&*/:<=>?~_^"

ATOM_RE = re.compile(r"[^\s()\[\]\";']+")
INTEGER_RE = re.compile(r"[+-]?\d+")
DOUBLE_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+)")

PUNCTUATION: dict[str, str] = {
    "(": "open",
    ")": "close",
    "[": "openbracket",
    "]": "closebracket",
}


def _classify_atom(text: str, line: int) -> Token:
    if text == ".":
        return Token("dot", text, line)
    if INTEGER_RE.fullmatch(text):
        try:
            return Token("integer", int(text), line)
        except ValueError:
            # beyond sys.get_int_max_str_digits()
            raise KappaSyntaxError(f"Integer literal too long on line {line}") from None
    if DOUBLE_RE.fullmatch(text):
        return Token("double", float(text), line)

    first = text[0]
    if first == "#":
        lowered = text.lower()
        if lowered in ("#t", "#f"):
            return Token("boolean", lowered == "#t", line)
        raise KappaSyntaxError(f"Invalid boolean token {text!r} on line {line}")
    if first.isdigit() or first == ".":
        raise KappaSyntaxError(f"Invalid number token {text!r} on line {line}")
    if first in "+-":
        # A sign not followed by a number reads as a symbol, e.g. + or ->
        if len(text) > 1 and (text[1].isdigit() or text[1] == "."):
            raise KappaSyntaxError(f"Invalid number token {text!r} on line {line}")
        return Token("symbol", text, line)
    if first.isalpha() or first in SYMBOL_INITIALS:
        return Token("symbol", text, line)
    raise KappaSyntaxError(f"Unexpected character {first!r} on line {line}")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, value, line) tuples."""
    pos = 0
    line = 1
    n = len(source)

    while pos < n:
        current_char = source[pos]

        if current_char == "\n":
            line += 1
            pos += 1
            continue

        if current_char.isspace():
            pos += 1
            continue

        # ----------------------
        # Comments
        # ----------------------
        if current_char == ";":
            end = source.find("\n", pos)
            pos = n if end == -1 else end
            continue

        if current_char in PUNCTUATION:
            yield Token(PUNCTUATION[current_char], current_char, line)
            pos += 1
            continue

        if current_char == "'":
            if pos + 1 >= n or source[pos + 1].isspace():
                raise KappaSyntaxError(f"Whitespace after single quote on line {line}")
            yield Token("quote", current_char, line)
            pos += 1
            continue

        # ----------------------
        # Strings
        # ----------------------
        if current_char == '"':
            end = source.find('"', pos + 1)
            if end == -1:
                raise KappaSyntaxError(
                    f"Reached end of input while reading string starting on line {line}"
                )
            text = source[pos + 1 : end]
            yield Token("string", text, line)
            line += text.count("\n")
            pos = end + 1
            continue

        m = ATOM_RE.match(source, pos)
        if not m:
            raise KappaSyntaxError(f"Unexpected character {current_char!r} on line {line}")
        yield _classify_atom(m.group(), line)
        pos = m.end()


def display_tokens(tokens: Iterable[Token]) -> str:
    """One `value:kind` line per token, the format printed by `kappa --tokens`."""
    with StringIO() as buffer:
        for tok in tokens:
            if tok.kind == "boolean":
                text = "#t" if tok.value else "#f"
            elif tok.kind == "string":
                text = f'"{tok.value}"'
            else:
                text = str(tok.value)
            buffer.write(f"{text}:{tok.kind}\n")
        return buffer.getvalue()
