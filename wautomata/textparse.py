"""Parsers for tokens, bracketed lists and automaton transitions."""

from __future__ import annotations

import re
from typing import Any, Callable, TypeVar

from wautomata.transition import Transition

T = TypeVar("T")

_QUOTED = re.compile(r'"((?:[^"\\]|\\.)*)"', re.DOTALL)
_UNQUOTED = re.compile(r'[^\s,()\[\]"]+')
_WEIGHT = re.compile(r"\S+")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


class ParseError(ValueError):
    """Raised when text does not have the expected form."""


def _unescape(body: str) -> str:
    return re.sub(r"\\(.)", lambda m: _ESCAPES.get(m[1], m[1]), body, flags=re.DOTALL)


def parse_token(text: str) -> tuple[str, str]:
    """Read one token, quoted or bare, and return it with the remaining text.

    A quoted token may contain backslash escapes; a bare token ends at
    whitespace, a comma, a bracket, a parenthesis or a quotation mark.
    """
    if text.startswith('"'):
        match = _QUOTED.match(text)
        if match is None:
            raise ParseError(f"unterminated quoted token: {text!r}")
        return _unescape(match[1]), text[match.end():]
    match = _UNQUOTED.match(text)
    if match is None:
        raise ParseError(f"expected a token: {text!r}")
    return match[0], text[match.end():]


def parse_vec(
    text: str,
    parse_item: Callable[[str], tuple[T, str]],
    opening: str,
    closing: str,
    separator: str,
) -> tuple[list[T], str]:
    """Read a delimited, separated list of items and return it with the remaining text."""
    if not text.startswith(opening):
        raise ParseError(f"expected {opening!r}: {text!r}")
    rest = text[len(opening):].lstrip()
    items: list[T] = []
    if rest.startswith(closing):
        return items, rest[len(closing):]
    while True:
        item, rest = parse_item(rest)
        items.append(item)
        rest = rest.lstrip()
        if rest.startswith(separator):
            rest = rest[len(separator):].lstrip()
        elif rest.startswith(closing):
            return items, rest[len(closing):]
        else:
            raise ParseError(f"expected {separator!r} or {closing!r}: {rest!r}")


def parse_word(text: str) -> tuple[list[str], str]:
    """Read a word such as ``[a, "b", c]`` and return its symbols with the remaining text."""
    return parse_vec(text, parse_token, "[", "]", ",")


def _convert(convert: Callable[[str], Any], text: str, what: str) -> Any:
    try:
        return convert(text)
    except (ValueError, TypeError) as error:
        raise ParseError(f"invalid {what}: {text!r}") from error


def parse_transition(
    text: str,
    parse_instruction: Callable[[str], Any] = str,
    parse_terminal: Callable[[str], Any] = str,
    parse_weight: Callable[[str], Any] = float,
) -> Transition:
    """Parse ``Transition [word] (instruction) # weight % comment``.

    The weight and the comment are optional; a missing weight is the one
    written as ``1``. Text after the comment marker is ignored.
    """
    if not text.startswith("Transition"):
        raise ParseError(f"expected 'Transition': {text!r}")
    rest = text[len("Transition"):].lstrip(" \t")
    symbols, rest = parse_word(rest)
    word = [_convert(parse_terminal, symbol, "terminal") for symbol in symbols]
    rest = rest.lstrip(" \t")
    if not rest.startswith("("):
        raise ParseError(f"expected '(': {rest!r}")
    close = rest.find(")", 1)
    if close < 0:
        raise ParseError(f"unterminated instruction: {rest!r}")
    instruction = _convert(parse_instruction, rest[1:close], "instruction")
    rest = rest[close + 1:].lstrip(" \t")
    if rest.startswith("#"):
        match = _WEIGHT.match(rest[1:].lstrip(" \t"))
        if match is None:
            raise ParseError(f"missing weight after '#': {text!r}")
        weight = _convert(parse_weight, match[0], "weight")
    else:
        weight = _convert(parse_weight, "1", "weight")
    return Transition(word, weight, instruction)