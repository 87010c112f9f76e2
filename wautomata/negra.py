"""Export of PMCFG derivation trees in the NEGRA export format."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from wautomata.gorn_tree import GornTree
from wautomata.pmcfg import Composition, Terminal, Var
from wautomata.pmcfg_trees import evaluate, to_term

_FIRST_RULE_NUMBER = 500

_CRITERIA_MESSAGE = (
    "The given tree does not meet the negra criteria! All rules must either consist "
    "only of nonterminals or of exactly one terminal symbol."
)


class NegraCriteriaError(ValueError):
    """Raised when a derivation tree cannot be written in the NEGRA format."""


@dataclass(frozen=True, order=True)
class TermId:
    """Identifies a terminal by the address of its rule and its position in the composition."""

    address: tuple
    compos_var_pos: int

    def __init__(self, address: Iterable[int], compos_var_pos: int) -> None:
        object.__setattr__(self, "address", tuple(address))
        object.__setattr__(self, "compos_var_pos", compos_var_pos)

    def __str__(self) -> str:
        return f"({list(self.address)}, {self.compos_var_pos})"


def identify_terminals(tree_map: GornTree) -> tuple[GornTree, dict[TermId, Any]]:
    """Replace every terminal by a unique :class:`TermId`.

    Returns the identified tree of compositions and the map from ids back to
    the terminals. Positions are counted across all components of a composition.
    """
    identified_tree = GornTree()
    terminal_map: dict[TermId, Any] = {}

    for address, composition in tree_map.items():
        identified: list[list[Var | Terminal]] = []
        position = 0
        for component in composition:
            identified_component: list[Var | Terminal] = []
            for symbol in component:
                if isinstance(symbol, Var):
                    identified_component.append(symbol)
                else:
                    term_id = TermId(address, position)
                    identified_component.append(Terminal(term_id))
                    terminal_map[term_id] = symbol.symbol
                position += 1
            identified.append(identified_component)
        identified_tree[address] = Composition(identified)

    return identified_tree, terminal_map


def meets_negra_criteria(tree_map: GornTree) -> bool:
    """Return whether every rule holds either only variables or exactly one terminal."""
    for rule in tree_map.values():
        has_nonterminal = False
        has_terminal = False
        for component in rule.composition:
            for symbol in component:
                if isinstance(symbol, Var):
                    if has_terminal:
                        return False
                    has_nonterminal = True
                else:
                    if has_nonterminal or has_terminal:
                        return False
                    has_terminal = True
    return True


class _RuleNumbering:
    """Hands out NEGRA node numbers: 0 for the root, then 500, 501, …"""

    def __init__(self) -> None:
        self.queue: deque[tuple[tuple, int]] = deque()
        self._numbers: dict[tuple, int] = {}
        self._next = _FIRST_RULE_NUMBER

    def number(self, address: tuple) -> int:
        known = self._numbers.get(address)
        if known is not None:
            return known
        if address:
            number = self._next
            self._next += 1
        else:
            number = 0
        self._numbers[address] = number
        self.queue.append((address, number))
        return number


def to_negra_vector(
    tree_map: GornTree, positions: Sequence[Any] | None = None
) -> list[tuple[str, str, int]]:
    """Return the ``(word, tag, parent)`` lines of the NEGRA form of ``tree_map``.

    Terminal lines come first, in the order of the derived word; the inner
    nodes follow in the order they were numbered. If ``positions`` is given,
    its entries replace the words of the terminals, in order.
    """
    term_map, nonterminal_map = to_term(tree_map)
    identified_tree, terminal_map = identify_terminals(term_map)
    evaluated = evaluate(identified_tree)

    replacements = iter(positions) if positions is not None else None
    numbering = _RuleNumbering()
    lines: list[tuple[str, str, int]] = []

    for component in evaluated:
        for symbol in component:
            if isinstance(symbol, Var):
                raise NegraCriteriaError(
                    "Nonterminals must not appear in a fully evaluated configuration!"
                )
            term_id: TermId = symbol.symbol
            if replacements is not None:
                try:
                    word = str(next(replacements))
                except StopIteration:
                    raise ValueError(
                        "fewer positions given than terminals in the tree"
                    ) from None
            else:
                word = str(terminal_map[term_id])
            address = term_id.address
            if not address:
                raise NegraCriteriaError(
                    "Terminals must have a nonterminal-only rule as their parent!"
                )
            label = nonterminal_map[address]
            lines.append((word, str(label), numbering.number(address[:-1])))

    while numbering.queue:
        address, number = numbering.queue.popleft()
        if address:
            parent = numbering.number(address[:-1])
            lines.append((f"#{number}", str(nonterminal_map[address]), parent))

    return lines


def to_negra(
    tree_map: GornTree, sentence_id: int, positions: Sequence[Any] | None = None
) -> str:
    """Render ``tree_map`` as one NEGRA sentence block with the given id."""
    if not meets_negra_criteria(tree_map):
        raise NegraCriteriaError(_CRITERIA_MESSAGE)
    body = "".join(
        f"{word}\t{tag}\t--\t--\t{parent}\n"
        for word, tag, parent in to_negra_vector(tree_map, positions)
    )
    return f"#BOS {sentence_id}\n{body}#EOS {sentence_id}"


def noparse(
    sentence: Sequence[Any], sentence_id: int, positions: Sequence[Any] | None = None
) -> str:
    """Render a sentence that could not be parsed, attached to a NOPARSE node."""
    if positions is not None:
        body = "".join(
            f"{word}\t{pos}\t--\t--\t500\n" for pos, word in zip(sentence, positions)
        )
    else:
        body = "".join(f"{word}\t--\t--\t--\t500\n" for word in sentence)
    return (
        f"#BOS {sentence_id}\n{body}"
        f"#500\tNOPARSE\t--\t--\t0\n#EOS {sentence_id}"
    )