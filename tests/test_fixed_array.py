import pytest

from lineards.fixed_array import FixedArray


def _filled(values, capacity=10):
    array = FixedArray(capacity)
    for value in values:
        array.add_last(value)
    return array


def test_add_round_trip():
    array = _filled([1, 2])
    array.add_first(0)
    assert list(array) == [0, 1, 2]


@pytest.mark.parametrize(
    "operation",
    [
        lambda array: array.add_last("c"),
        lambda array: array.add_first("c"),
        lambda array: array.add_at(0, "c"),
    ],
)
def test_holds_one_less_than_capacity(operation):
    array = _filled(["a", "b"], capacity=3)
    with pytest.raises(OverflowError):
        operation(array)
    assert list(array) == ["a", "b"]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        FixedArray(-1)


@pytest.mark.parametrize("index, expected", [(0, 7), (1, None), (-1, None)])
def test_get(index, expected):
    assert _filled([7], capacity=5).get(index) == expected


def test_set_replaces_and_rejects_bad_index():
    array = _filled([1], capacity=5)
    array.set(0, 9)
    assert list(array) == [9]
    with pytest.raises(IndexError):
        array.set(1, 3)


@pytest.mark.parametrize(
    "operation",
    [
        lambda array: array.delete_first(),
        lambda array: array.delete_last(),
        lambda array: array.delete_at(0),
    ],
)
def test_delete_on_empty_raises(operation):
    with pytest.raises(IndexError):
        operation(FixedArray(5))


def test_add_at_and_delete_at():
    array = _filled([1, 2, 4])
    array.add_at(2, 3)
    array.add_at(len(array), 5)
    assert list(array) == [1, 2, 3, 4, 5]
    array.delete_at(0)
    array.delete_last()
    array.delete_first()
    assert list(array) == [3, 4]
    with pytest.raises(IndexError):
        array.add_at(5, 6)