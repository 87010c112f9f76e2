import pytest

from wautomata.gorn_tree import GornTree
from wautomata.pmcfg import Composition, Terminal as T, Var
from wautomata.pmcfg_parser import parse_pmcfg_rule
from wautomata.pmcfg_trees import (
    CompositionError,
    evaluate,
    evaluate_pos,
    separate_terminal_rules,
    to_term,
)


def rule(text):
    return parse_pmcfg_rule(text, int)


def example_tree_map():
    return GornTree(
        {
            (): rule("S -> [[Var 0 0, Var 1 0, Var 0 1, Var 1 1]] (A, B) # 1"),
            (0,): rule("A -> [[Var 1 0, Var 0 0], [Var 2 0, Var 0 1]] (A, a, c) # 1"),
            (0, 0): rule("A -> [[Var 1 0, Var 0 0], [Var 2 0, Var 0 1]] (A, a, c) # 1"),
            (0, 0, 0): rule("A -> [[], []] () # 1"),
            (0, 0, 1): rule("a -> [[T a]] () # 1"),
            (0, 0, 2): rule("c -> [[T c]] () # 1"),
            (0, 1): rule("a -> [[T a]] () # 1"),
            (0, 2): rule("c -> [[T c]] () # 1"),
            (1,): rule("B -> [[Var 1 0, Var 0 0], [Var 2 0, Var 0 1]] (B, b, d) # 1"),
            (1, 0): rule("B -> [[], []] () # 1"),
            (1, 1): rule("b -> [[T b]] () # 1"),
            (1, 2): rule("d -> [[T d]] () # 1"),
        }
    )


def test_evaluate():
    term_map = GornTree(
        (address, r.composition) for address, r in example_tree_map().items()
    )
    expected = Composition([[T("a"), T("a"), T("b"), T("c"), T("c"), T("d")]])
    assert evaluate(term_map) == expected


def test_evaluate_invalid_composition():
    term_map = GornTree()
    term_map[()] = Composition([[Var(0, 0), Var(0, 1)]])
    term_map[(0,)] = Composition([[T("a")]])
    with pytest.raises(CompositionError) as info:
        evaluate(term_map)
    assert str(info.value) == (
        "[[Var 0 0, Var 0 1]]: use of 1-th component of nonterminal 0 "
        "that has only 1 components!"
    )


def test_evaluate_missing_child():
    term_map = GornTree({(): Composition([[Var(0, 0)]])})
    with pytest.raises(KeyError):
        evaluate(term_map)


def test_evaluate_pos_subtree():
    term_map, _ = to_term(example_tree_map())
    assert evaluate_pos(term_map, [1]) == Composition([[T("b")], [T("d")]])


def test_to_term():
    tree_map = GornTree(
        {
            (): rule("A -> [[Var 0 0, T a, Var 0 1, T b]] (B) # 1"),
            (0,): rule("B -> [[Var 1 0], [T c]] (C) # 1"),
            (0, 1): rule("C -> [[], []] () # 1"),
        }
    )
    term_map = GornTree(
        {
            (): Composition([[Var(0, 0), T("a"), Var(0, 1), T("b")]]),
            (0,): Composition([[Var(1, 0)], [T("c")]]),
            (0, 1): Composition([[], []]),
        }
    )
    head_map = GornTree({(): "A", (0,): "B", (0, 1): "C"})
    assert to_term(tree_map) == (term_map, head_map)


def test_to_term_inverse():
    tree_map = example_tree_map()
    term_map, head_map = to_term(tree_map)
    assert list(term_map) == list(tree_map)
    for address, original in tree_map.items():
        assert head_map[address] == original.head
        assert term_map[address] == original.composition


def test_separate_terminal_rules():
    tree_map = GornTree(
        {
            (): rule("S -> [[Var 0 0, T b, Var 1 0, T d]] (A, B) # 1"),
            (0,): rule("A -> [[Var 0 0], [T x]] (C) # 1"),
            (0, 0): rule("C -> [[T a]] () # 1"),
            (1,): rule("B -> [[T c]] () # 1"),
        }
    )
    control = GornTree(
        {
            (): rule("S -> [[Var 0 0, Var 2 0, Var 1 0, Var 3 0]] (A, B, b, d) # 1"),
            (0,): rule("A -> [[Var 0 0], [Var 1 0]] (C, x) # 1"),
            (0, 0): rule("C -> [[T a]] () # 1"),
            (0, 1): rule("x -> [[T x]] () # 1"),
            (1,): rule("B -> [[T c]] () # 1"),
            (2,): rule("b -> [[T b]] () # 1"),
            (3,): rule("d -> [[T d]] () # 1"),
        }
    )
    separated = separate_terminal_rules(tree_map)
    assert len(separated) == len(control)
    for address, r in separated.items():
        assert (address, control[address]) == (address, r)


def test_separate_terminal_rules_idempotence():
    tree_map = example_tree_map()
    separated1 = separate_terminal_rules(tree_map)
    assert tree_map == separated1
    separated2 = separate_terminal_rules(separated1)
    assert tree_map == separated2


def test_separate_terminal_rules_conflicting_names():
    tree_map = GornTree(
        {
            (): rule("S -> [[Var 0 0, T a, Var 1 0, T b]] (a, b) # 1"),
            (0,): rule("a -> [[T b]] () # 1"),
            (1,): rule("b -> [[Var 0 0]] (bb) # 1"),
            (1, 0): rule("bb -> [[T c]] () # 1"),
        }
    )
    control = GornTree(
        {
            (): rule("S -> [[Var 0 0, Var 2 0, Var 1 0, Var 3 0]] (a, b, aa, bbb) # 1"),
            (0,): rule("a -> [[T b]] () # 1"),
            (1,): rule("b -> [[Var 0 0]] (bb) # 1"),
            (1, 0): rule("bb -> [[T c]] () # 1"),
            (2,): rule("aa -> [[T a]] () # 1"),
            (3,): rule("bbb -> [[T b]] () # 1"),
        }
    )
    separated = separate_terminal_rules(tree_map)
    assert len(separated) == len(control)
    for address, r in separated.items():
        assert (address, control[address]) == (address, r)