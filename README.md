# wautomata

Building blocks for weighted automata and for parallel multiple context-free
grammars (PMCFGs). The package has no dependencies beyond the standard library.

## What is in it

Recognition with weighted automata:

- `wautomata.pushdown.Pushdown`: an immutable stack with structural sharing.
  `push`, `set`, `pop`, `peek` and `map` return new push-downs. `pop`, `peek`
  and `set` on an empty one raise `EmptyPushdownError`. Runs of transitions
  are recorded in push-downs.
- `wautomata.configuration.Configuration`: the word still to be read, a
  storage value and a weight. Equality and hashing ignore the weight.
  Ordering compares the weight first, then prefers shorter remaining words.
- `wautomata.transition.Transition`: reads a word, applies an instruction to
  the storage and multiplies the weight. `apply(configuration)` returns the
  successor configurations.
- `wautomata.textparse.parse_transition`: reads text such as
  `Transition [a, "b"] (instr) # 0.5 % comment`. The weight is optional and
  defaults to `1`. `parse_token`, `parse_vec` and `parse_word` are the
  building blocks. Malformed text raises `ParseError`.
- `wautomata.recognition`:
  - `Instruction`: an abstract class with `apply(storage)`, which returns a list
    of successor storages.
  - `Item`: a configuration together with its run.
  - `Automaton`: an abstract base class built as
    `Automaton(transitions, initial, one=1)`.
  - `recognise(automaton, word)`: yields accepting items, heaviest first.
  - `recognise_beam(automaton, beam, word)`: does the same, but keeps at most
    `beam` items on the agenda.
- `wautomata.coarse_to_fine`:
  - `CoarseToFineRecogniser`: recognises with a coarser sublevel and replays
    each coarse run on the fine automaton with `check_run`.
  - `coarse_to_fine_recogniser(automaton, *strategies)`: chains strategy
    objects. Each strategy provides `approximate_automaton(automaton)` and
    returns the coarser automaton and an instance. That instance provides
    `unapproximate_run(run)`.

Grammars and derivation trees:

- `wautomata.pmcfg`: `Var`, `Terminal`, `Composition`, `PMCFGRule` and
  `PMCFG`. Rule equality ignores the weight. `str()` writes rules and grammars
  in the text form below.
- `wautomata.pmcfg_parser`: `parse_pmcfg(text, parse_weight)` and
  `parse_pmcfg_rule(text, parse_weight)`, plus `parse_var_t` and
  `parse_composition`.
- `wautomata.gorn_tree.GornTree`: a mutable mapping from Gorn addresses
  (tuples of child positions, `()` for the root) to values. It iterates in
  address order.
- `wautomata.pmcfg_trees`:
  - `to_term`: splits a tree of rules into compositions and heads.
  - `evaluate` and `evaluate_pos`: expand a composition tree into terminals.
    They raise `CompositionError` for a missing component.
  - `separate_terminal_rules`: moves terminals into their own child rules.
- `wautomata.negra`:
  - `to_negra(tree_map, sentence_id, positions=None)`: writes a derivation in
    the NEGRA export format. It raises `NegraCriteriaError` unless every rule
    holds only variables or exactly one terminal.
  - `noparse(sentence, sentence_id, positions=None)`: writes the block for a
    sentence without a parse.
  - `to_negra_vector`, `identify_terminals` and `meets_negra_criteria`: the
    steps that `to_negra` is built from.

Helpers:

- `HashIntegeriser`: values to consecutive integers and back.
- `Partition`: disjoint cells. Overlapping cells raise `OverlappingCellsError`.
  It reads and writes JSON.
- `Reverse`: a weight with inverted ordering.
- `factorize`: splits a weight into `n` equal factors.
- `UniqueHeap`: a max-heap that holds each item at most once.
- `VecMultiMap`: a list of lists that grows on demand.

Rule text has the form `head → composition (successors) # weight % comment`.
`->` and `=>` may stand in place of `→`, and a missing weight means `1`. A
grammar starts with an `initial: [...]` line. Blank lines and lines starting
with `%` are skipped.

## Installation

```
pip install .
```

## Examples

Grammars and NEGRA output:

```python
from wautomata.gorn_tree import GornTree
from wautomata.pmcfg_parser import parse_pmcfg, parse_pmcfg_rule
from wautomata.pmcfg_trees import evaluate, to_term
from wautomata.negra import to_negra

grammar = parse_pmcfg(
    "initial: [S]\n"
    "S → [[Var 0 0, Var 0 1]] (A)\n"
    "A → [[T a, Var 0 0, T b], [T c, Var 0 1]] (A) # 0.4\n"
    "A → [[], []] () # 0.6",
    float,
)
print(grammar)

tree = GornTree()
tree[()] = parse_pmcfg_rule("S → [[Var 0 0, Var 1 0]] (A, B)", float)
tree[(0,)] = parse_pmcfg_rule("A → [[T a]] ()", float)
tree[(1,)] = parse_pmcfg_rule("B → [[T b]] ()", float)

term_map, heads = to_term(tree)
print(evaluate(term_map))        # [[T "a", T "b"]]
print(to_negra(tree, 1))
```

A small automaton. A subclass of `Automaton` supplies `extract_key`,
`is_terminal` and `_transition_key`. The two keys decide which transitions are
tried on a configuration. Instructions must be orderable, because transitions
of equal weight and word are ordered by their instruction.

```python
from dataclasses import dataclass

from wautomata.recognition import Automaton, recognise
from wautomata.transition import Transition


@dataclass(frozen=True, order=True)
class Step:
    delta: int

    def apply(self, count):
        return [count + self.delta] if count + self.delta >= 0 else []


class Counting(Automaton):
    def extract_key(self, configuration):
        return configuration.word[:1]

    def _transition_key(self, transition):
        return transition.word[:1]

    def is_terminal(self, configuration):
        return not configuration.word and configuration.storage == 0


automaton = Counting(
    [Transition(["a"], 0.5, Step(1)), Transition(["b"], 0.5, Step(-1))],
    0,
    one=1.0,
)
best = next(recognise(automaton, "aabb"))
print(best.weight(), len(best.run))        # 0.0625 4
print(next(recognise(automaton, "abb"), None))  # None
```

## What it does not do

The package has no command-line program and starts no benchmark runs. It
ships no concrete automata: there is no tree-stack or push-down automaton,
and no conversion from a `PMCFG` into an automaton. It also ships no
approximation strategies. To use `recognise` or `coarse_to_fine_recogniser`,
you subclass `Automaton` and supply strategy objects yourself.

## Tests

```
pip install .[test]
pytest
```