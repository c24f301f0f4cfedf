import pytest

from progstruct.nonempty import NonEmptyList


def test_single_element_first_and_last():
    v = NonEmptyList(1)
    assert v.first() == 1
    assert v.last() == 1
    assert len(v) == 1


def test_push_and_pop():
    v = NonEmptyList(1)
    v.push(2)
    assert v.pop() == 2
    assert v.pop() is None
    assert v.to_list() == [1]


def test_len():
    v = NonEmptyList(1)
    v.push(2)
    v.push(3)
    assert len(v) == 3


def test_iteration_order():
    v = NonEmptyList.from_iterable([1, 2, 3])
    assert list(v) == [1, 2, 3]
    assert v.first() == 1
    assert v.last() == 3


def test_from_iterable_accepts_generators():
    v = NonEmptyList.from_iterable(x for x in "abc")
    assert v.to_list() == ["a", "b", "c"]


def test_from_empty_iterable_raises():
    with pytest.raises(ValueError, match="empty"):
        NonEmptyList.from_iterable([])


def test_indexing_and_assignment():
    v = NonEmptyList(1, 2, 3)
    assert [v[i] for i in range(len(v))] == [1, 2, 3]
    v[0] = 10
    v[2] = 30
    assert v.to_list() == [10, 2, 30]
    assert v.first() == 10
    assert v.last() == 30


def test_index_out_of_range():
    v = NonEmptyList(1)
    with pytest.raises(IndexError):
        v[1]
    assert v[0] == 1
    assert v.to_list() == [1]


def test_slicing_rejected():
    v = NonEmptyList(1, 2)
    with pytest.raises(TypeError):
        v[0:1]
    assert v.to_list() == [1, 2]


def test_equality():
    assert NonEmptyList(1, 2) == NonEmptyList.from_iterable([1, 2])
    assert not (NonEmptyList(1, 2) == NonEmptyList(2, 1))
    assert not (NonEmptyList(1) == [1])


def test_to_list_is_a_copy():
    v = NonEmptyList(1, 2)
    items = v.to_list()
    items.append(3)
    assert len(v) == 2


def test_pop_never_empties():
    v = NonEmptyList.from_iterable(range(5))
    popped = []
    while (item := v.pop()) is not None:
        popped.append(item)
    assert popped == [4, 3, 2, 1]
    assert v.to_list() == [0]