"""Derivation trees of PMCFG rules, stored as Gorn trees, and their evaluation."""

from __future__ import annotations

from typing import Any, Iterable

from wautomata.gorn_tree import GornTree
from wautomata.pmcfg import Composition, PMCFGRule, Terminal, Var


class CompositionError(ValueError):
    """Raised when a composition refers to a component a successor does not have."""


def evaluate(term_map: GornTree) -> Composition:
    """Evaluate the term tree from its root, yielding a composition of terminals only."""
    return evaluate_pos(term_map, ())


def evaluate_pos(term_map: GornTree, address: Iterable[int]) -> Composition:
    """Evaluate the subtree of ``term_map`` rooted at ``address``.

    Raises KeyError if a referenced successor is missing from the tree and
    CompositionError if a component index is out of range.
    """
    address = tuple(address)
    unexpanded = term_map[address]
    expanded_successors: dict[int, tuple] = {}
    expanded: list[list[Terminal]] = []

    for component in unexpanded:
        expanded_component: list[Terminal] = []
        for symbol in component:
            if isinstance(symbol, Var):
                successor = symbol.successor
                if successor not in expanded_successors:
                    expanded_successors[successor] = evaluate_pos(
                        term_map, address + (successor,)
                    ).components
                components = expanded_successors[successor]
                if symbol.component >= len(components):
                    raise CompositionError(
                        f"{unexpanded}: use of {symbol.component}-th component of "
                        f"nonterminal {successor} that has only {len(components)} components!"
                    )
                expanded_component.extend(components[symbol.component])
            else:
                expanded_component.append(Terminal(symbol.symbol))
        expanded.append(expanded_component)

    return Composition(expanded)


def to_term(tree_map: GornTree) -> tuple[GornTree, GornTree]:
    """Split a tree of rules into a tree of compositions and a tree of heads."""
    term_map = GornTree()
    head_map = GornTree()
    for address, rule in tree_map.items():
        term_map[address] = rule.composition
        head_map[address] = rule.head
    return term_map, head_map


def _is_single_terminal_rule(composition: Composition) -> bool:
    # Mirrors the normal-form test: the flag is raised by a terminal in the very
    # first position and lowered by any later terminal.
    only_one_terminal = False
    first = True
    for component in composition:
        for symbol in component:
            if isinstance(symbol, Terminal):
                only_one_terminal = first
            first = False
    return only_one_terminal


def separate_terminal_rules(tree_map: GornTree) -> GornTree:
    """Bring every rule of a derivation tree into terminal-separated normal form.

    Each resulting rule either consists of a single terminal symbol or holds
    no terminals at all; terminals are moved into fresh child rules whose head
    is the terminal, repeated until it differs from every existing head. The
    derived word stays the same.
    """
    new_tree = GornTree()
    old_heads = [rule.head for rule in tree_map.values()]

    for address, rule in tree_map.items():
        next_child = len(rule.tail)
        child_numbers: dict[Any, int] = {}
        terminal_children: list[Any] = []
        new_composition: list[list[Var]] = []

        for component in rule.composition:
            new_component: list[Var] = []
            for symbol in component:
                if isinstance(symbol, Var):
                    new_component.append(symbol)
                    continue
                terminal = symbol.symbol
                if terminal not in child_numbers:
                    child_numbers[terminal] = next_child
                    terminal_children.append(terminal)
                    next_child += 1
                new_component.append(Var(child_numbers[terminal], 0))
            new_composition.append(new_component)

        if _is_single_terminal_rule(rule.composition):
            new_rule = PMCFGRule(rule.head, rule.tail, rule.composition, rule.weight)
        else:
            unique_children = []
            for original in terminal_children:
                name = original
                while name in old_heads:
                    name = name + original
                unique_children.append(name)
                new_tree[address + (child_numbers[original],)] = PMCFGRule(
                    name, (), Composition([[Terminal(original)]]), rule.weight
                )
            new_rule = PMCFGRule(
                rule.head,
                rule.tail + tuple(unique_children),
                Composition(new_composition),
                rule.weight,
            )

        new_tree[address] = new_rule

    return new_tree