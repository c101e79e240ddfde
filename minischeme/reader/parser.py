"""
  Lisp Reader: tokenizer and recursive-descent parser

- Every '(' and ')' is a token of its own; everything else is split on whitespace.
- No strings, quoting or comments.
- Emits Python primitives:

    - integers -> int (signed 64-bit range only)
    - floats -> float
    - symbols -> Symbol
    - lists -> tuple (the tree is immutable once read)
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, NamedTuple, Sequence

from minischeme import SExpression
from minischeme.errors import (
    SchemeUnexpectedCloseParen,
    SchemeUnexpectedEOF,
    SchemeUnterminatedList,
)
from minischeme.types.number import in_i64_range
from minischeme.types.symbol import Symbol

_logger = logging.getLogger("minischeme.reader")

LPAREN = "("
RPAREN = ")"

INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


class ReadResult(NamedTuple):
    result: SExpression
    remain: list[str]


def tokenize(program: str) -> list[str]:
    """Split program text into tokens."""
    return program.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ").split()


def atom(token: str) -> SExpression:
    """Integer if possible, else float, else a symbol."""
    if INTEGER_RE.fullmatch(token):
        value = int(token)
        if in_i64_range(value):
            return value
    # float() is laxer than a plain numeric literal
    if token.isascii() and "_" not in token:
        try:
            return float(token)
        except ValueError:
            pass
    return Symbol(token)


def _read(tokens: Sequence[str], pos: int) -> tuple[SExpression, int]:
    if pos >= len(tokens):
        raise SchemeUnexpectedEOF("unexpected EOF while reading")
    token = tokens[pos]
    pos += 1
    if token == LPAREN:
        children = []
        while pos < len(tokens) and tokens[pos] != RPAREN:
            child, pos = _read(tokens, pos)
            children.append(child)
        if pos >= len(tokens):
            raise SchemeUnterminatedList("unterminated list: expected ')'")
        return tuple(children), pos + 1
    if token == RPAREN:
        raise SchemeUnexpectedCloseParen("unexpected )")
    return atom(token), pos


def read_from_tokens(tokens: Sequence[str]) -> ReadResult:
    """Read one form from the front of `tokens`; also return what is left over."""
    expr, pos = _read(tokens, 0)
    return ReadResult(expr, list(tokens[pos:]))


def parse(program: str) -> ReadResult:
    """Read the first form of `program`."""
    _logger.debug("program: %s", program)
    tokens = tokenize(program)
    _logger.debug("tokens: %s", tokens)
    ast = read_from_tokens(tokens)
    _logger.debug("ast: %s", ast)
    return ast


def parse_all(program: str) -> Iterator[SExpression]:
    """Lazily read every top-level form of `program`, in order."""
    _logger.debug("program: %s", program)
    tokens = tokenize(program)
    _logger.debug("tokens: %s", tokens)
    while tokens:
        expr, tokens = read_from_tokens(tokens)
        _logger.debug("ast: %s", expr)
        yield expr
