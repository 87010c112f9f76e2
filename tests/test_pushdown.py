import pytest

from wautomata.integeriser import HashIntegeriser
from wautomata.pushdown import EmptyPushdownError, Pushdown


def test_pushdown_legal_operations_correctness():
    result = Pushdown().push(1).push(1).set(2).push(3).pop()[0]
    assert Pushdown.from_iterable([1, 2]) == result


def test_pushdown_illegal_operations_on_empty():
    with pytest.raises(EmptyPushdownError):
        Pushdown().pop()
    with pytest.raises(EmptyPushdownError):
        Pushdown().peek()
    with pytest.raises(EmptyPushdownError):
        Pushdown().set(1)


def test_pushdown_eq():
    pushdown1 = Pushdown().push(1).push(2)
    pushdown2 = Pushdown().push(1).push(2)
    assert pushdown1 == pushdown2

    pushdown1 = pushdown1.push(3)
    assert pushdown1 != pushdown2

    pushdown2 = pushdown2.push(3)
    assert pushdown1 == pushdown2


def test_pushdown_push_inverse():
    assert Pushdown() == Pushdown().push(1).pop()[0]


def test_pushdown_map_correctness():
    pushdown = Pushdown().push(1).push(2).push(3)
    assert Pushdown().push(2).push(4).push(6) == pushdown.map(lambda x: x * 2)


def test_pushdown_map_inverse():
    pushdown = Pushdown().push(1).push(2).push(3)
    mapped = pushdown.map(lambda x: x * 2)
    assert pushdown == mapped.map(lambda x: x // 2)


def test_pushdown_to_vec_correctness():
    pushdown = Pushdown().push(1).push(2).push(3)
    assert pushdown.to_list() == [1, 2, 3]
    assert list(pushdown) == [1, 2, 3]


def test_pushdown_to_vec_inverse():
    pushdown = Pushdown().push(1).push(2).push(3)
    assert pushdown == Pushdown.from_iterable(pushdown.to_list())


def test_pushdown_integerise_inverse():
    pushdown = Pushdown().push(1).push(2).push(3)
    integeriser = HashIntegeriser()
    integerised = pushdown.integerise(integeriser)
    assert len(integeriser) == 3
    assert pushdown == Pushdown.un_integerise(integerised, integeriser)


def test_peek_and_len():
    pushdown = Pushdown().push("a").push("b")
    assert pushdown.peek() == "b"
    assert len(pushdown) == 2
    assert pushdown.is_empty() is False
    assert Pushdown().is_empty() is True


def test_pushdown_is_persistent():
    base = Pushdown().push(1)
    extended = base.push(2)
    assert base.to_list() == [1]
    assert extended.to_list() == [1, 2]


def test_ordering_empty_is_smallest_and_top_decides():
    empty = Pushdown()
    assert empty < Pushdown().push(0)
    assert Pushdown().push(5).push(1) < Pushdown().push(0).push(2)
    assert sorted([Pushdown().push(3), empty]) == [empty, Pushdown().push(3)]


def test_hash_agrees_with_equality():
    assert hash(Pushdown.from_iterable([1, 2])) == hash(Pushdown().push(1).push(2))
    assert len({Pushdown.from_iterable([1, 2]), Pushdown().push(1).push(2)}) == 1


def test_display():
    assert str(Pushdown()) == "@"
    assert str(Pushdown().push(1).push(2)) == "@, 1, 2"