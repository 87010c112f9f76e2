import pytest

from wautomata.gorn_tree import GornTree
from wautomata.negra import (
    NegraCriteriaError,
    TermId,
    identify_terminals,
    meets_negra_criteria,
    noparse,
    to_negra,
    to_negra_vector,
)
from wautomata.pmcfg import Composition, Terminal, Var
from wautomata.pmcfg_parser import parse_pmcfg_rule
from wautomata.pmcfg_trees import to_term


def rule(text):
    return parse_pmcfg_rule(text, int)


def example_tree_map():
    tree = GornTree()
    tree[()] = rule("S -> [[Var 0 0, Var 1 0, Var 0 1, Var 1 1]] (A, B) # 1")
    tree[(0,)] = rule("A -> [[Var 1 0, Var 0 0], [Var 2 0, Var 0 1]] (A, a, c) # 1")
    tree[(0, 0)] = rule("A -> [[Var 1 0, Var 0 0], [Var 2 0, Var 0 1]] (A, a, c) # 1")
    tree[(0, 0, 0)] = rule("A -> [[], []] () # 1")
    tree[(0, 0, 1)] = rule("a -> [[T a]] () # 1")
    tree[(0, 0, 2)] = rule("c -> [[T c]] () # 1")
    tree[(0, 1)] = rule("a -> [[T a]] () # 1")
    tree[(0, 2)] = rule("c -> [[T c]] () # 1")
    tree[(1,)] = rule("B -> [[Var 1 0, Var 0 0], [Var 2 0, Var 0 1]] (B, b, d) # 1")
    tree[(1, 0)] = rule("B -> [[], []] () # 1")
    tree[(1, 1)] = rule("b -> [[T b]] () # 1")
    tree[(1, 2)] = rule("d -> [[T d]] () # 1")
    return tree


EXPECTED_VECTOR = [
    ("a", "a", 500),
    ("a", "a", 501),
    ("b", "b", 502),
    ("c", "c", 500),
    ("c", "c", 501),
    ("d", "d", 502),
    ("#500", "A", 0),
    ("#501", "A", 500),
    ("#502", "B", 0),
]


def test_identify_terminals():
    tree = GornTree()
    tree[()] = Composition([[Var(0, 0), Terminal("a"), Var(0, 1), Terminal("b")]])
    tree[(0,)] = Composition([[Var(1, 0)], [Terminal("c")]])
    tree[(0, 1)] = Composition([[Terminal("d")]])

    expected_tree = GornTree()
    expected_tree[()] = Composition(
        [[Var(0, 0), Terminal(TermId((), 1)), Var(0, 1), Terminal(TermId((), 3))]]
    )
    expected_tree[(0,)] = Composition([[Var(1, 0)], [Terminal(TermId((0,), 1))]])
    expected_tree[(0, 1)] = Composition([[Terminal(TermId((0, 1), 0))]])

    expected_terminals = {
        TermId((), 1): "a",
        TermId((), 3): "b",
        TermId((0,), 1): "c",
        TermId((0, 1), 0): "d",
    }

    identified, terminals = identify_terminals(tree)
    assert identified == expected_tree
    assert terminals == expected_terminals


def test_identify_terminals_inverse():
    term_map, _ = to_term(example_tree_map())
    identified, terminals = identify_terminals(term_map)
    restored = GornTree()
    for address, composition in identified.items():
        restored[address] = Composition(
            [
                [
                    symbol if isinstance(symbol, Var) else Terminal(terminals[symbol.symbol])
                    for symbol in component
                ]
                for component in composition
            ]
        )
    assert restored == term_map


def test_term_id_str():
    assert str(TermId((0, 1), 2)) == "([0, 1], 2)"


def test_to_negra_vector():
    assert to_negra_vector(example_tree_map()) == EXPECTED_VECTOR


def test_to_negra_vector_with_pos():
    expected = [
        ("Ah", "a", 500),
        ("Ah", "a", 501),
        ("Beh", "b", 502),
        ("Zeh", "c", 500),
        ("Zeh", "c", 501),
        ("Deh", "d", 502),
        ("#500", "A", 0),
        ("#501", "A", 500),
        ("#502", "B", 0),
    ]
    positions = ["Ah", "Ah", "Beh", "Zeh", "Zeh", "Deh"]
    assert to_negra_vector(example_tree_map(), positions) == expected


def test_to_negra_vector_too_few_positions():
    with pytest.raises(ValueError):
        to_negra_vector(example_tree_map(), ["Ah"])


def test_meets_negra_criteria():
    tree = GornTree()
    tree[()] = rule("S -> [[T a, T b]] () #1")
    assert meets_negra_criteria(tree) is False

    tree[()] = rule("S -> [[Var 0 0, T a]] (A) #1")
    assert meets_negra_criteria(tree) is False

    tree[()] = rule("S -> [[Var 0 0], [Var 1 0]] (a, b) #1")
    tree[()] = rule("A -> [[T a]] () #1")
    assert meets_negra_criteria(tree) is True


def test_example_meets_negra_criteria():
    assert meets_negra_criteria(example_tree_map()) is True


def test_to_negra_violated_criteria():
    tree = GornTree()
    tree[()] = rule("S -> [[T a, T b]] () #1")
    with pytest.raises(NegraCriteriaError, match="does not meet the negra criteria"):
        to_negra(tree, 0)


def test_to_negra_output():
    expected = "#BOS 3\n" + "".join(
        f"{word}\t{tag}\t--\t--\t{parent}\n" for word, tag, parent in EXPECTED_VECTOR
    ) + "#EOS 3"
    result = to_negra(example_tree_map(), 3)
    assert result == expected
    assert result.splitlines()[1] == "a\ta\t--\t--\t500"


def test_noparse_default():
    assert noparse(["x", "y"], 7) == (
        "#BOS 7\n"
        "x\t--\t--\t--\t500\n"
        "y\t--\t--\t--\t500\n"
        "#500\tNOPARSE\t--\t--\t0\n"
        "#EOS 7"
    )


def test_noparse_with_positions():
    assert noparse(["NN", "VB"], 2, ["dog", "runs"]) == (
        "#BOS 2\n"
        "dog\tNN\t--\t--\t500\n"
        "runs\tVB\t--\t--\t500\n"
        "#500\tNOPARSE\t--\t--\t0\n"
        "#EOS 2"
    )