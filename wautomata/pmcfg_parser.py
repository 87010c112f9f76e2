"""Text parsers for PMCFG rules and grammars."""

from __future__ import annotations

import re
from typing import Any, Callable

from wautomata.pmcfg import PMCFG, Composition, PMCFGRule, Terminal, Var
from wautomata.textparse import ParseError, parse_token, parse_vec

_VAR = re.compile(r"Var[ \t]*(\d+)[ \t]*(\d+)")
_TERMINAL = re.compile(r"T[ \t]*")
_WEIGHT = re.compile(r"\S+")
_ARROWS = ("→", "->", "=>")
_INITIAL = "initial:"


def _skip_space(text: str) -> str:
    return text.lstrip(" \t")


def parse_var_t(text: str) -> tuple[Var | Terminal, str]:
    """Read ``Var i j`` or ``T token`` and return it with the remaining text."""
    match = _VAR.match(text)
    if match is not None:
        return Var(int(match[1]), int(match[2])), text[match.end():]
    match = _TERMINAL.match(text)
    if match is not None:
        token, rest = parse_token(text[match.end():])
        return Terminal(token), rest
    raise ParseError(f"expected a variable or a terminal: {text!r}")


def _parse_projection(text: str) -> tuple[list[Var | Terminal], str]:
    return parse_vec(text, parse_var_t, "[", "]", ",")


def parse_composition(text: str) -> tuple[Composition, str]:
    """Read a composition such as ``[[T a, Var 0 0], []]`` and return it with the rest."""
    components, rest = parse_vec(text, _parse_projection, "[", "]", ",")
    return Composition(components), rest


def _parse_successors(text: str) -> tuple[list[str], str]:
    return parse_vec(text, parse_token, "(", ")", ",")


def parse_pmcfg_rule(text: str, parse_weight: Callable[[str], Any] = float) -> PMCFGRule:
    """Parse ``head → composition (tail) # weight``.

    The weight is optional and defaults to the one written as ``1``; anything
    after the weight, such as a ``%`` comment, is ignored.
    """
    head, rest = parse_token(text)
    rest = _skip_space(rest)
    for arrow in _ARROWS:
        if rest.startswith(arrow):
            rest = rest[len(arrow):]
            break
    else:
        raise ParseError(f"expected an arrow: {rest!r}")
    composition, rest = parse_composition(_skip_space(rest))
    tail, rest = _parse_successors(_skip_space(rest))
    rest = _skip_space(rest)
    weight_text = "1"
    if rest.startswith("#"):
        match = _WEIGHT.match(_skip_space(rest[1:]))
        if match is None:
            raise ParseError(f"missing weight after '#': {text!r}")
        weight_text = match[0]
    try:
        weight = parse_weight(weight_text)
    except (ValueError, TypeError) as error:
        raise ParseError(f"invalid weight: {weight_text!r}") from error
    return PMCFGRule(head, tail, composition, weight)


def parse_pmcfg(text: str, parse_weight: Callable[[str], Any] = float) -> PMCFG:
    """Parse a grammar: an ``initial: [...]`` line followed by one rule per line.

    Blank lines and lines starting with ``%`` are skipped.
    """
    lines = (line.strip() for line in text.splitlines())
    meaningful = [line for line in lines if line and not line.startswith("%")]
    if not meaningful or not meaningful[0].startswith(_INITIAL):
        raise ParseError("a grammar must start with an 'initial:' line")
    initial, rest = parse_vec(
        meaningful[0][len(_INITIAL):].strip(), parse_token, "[", "]", ","
    )
    rest = rest.strip()
    if rest and not rest.startswith("%"):
        raise ParseError(f"unexpected text after initial nonterminals: {rest!r}")
    rules = [parse_pmcfg_rule(line, parse_weight) for line in meaningful[1:]]
    return PMCFG(initial, rules)