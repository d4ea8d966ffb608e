import pytest

from framer.twosum import two_sum, two_sum_linear


@pytest.mark.parametrize(
    "array, target, expected",
    [
        ([2, 3, 5, 7, 11], 12, [2, 3]),
        ([2, 3, 5, 7, 11, 3], 10, [1, 3]),
        ([2, 3, 5, 7, 11], 4, []),
        ([], 0, []),
    ],
)
def test_two_sum_linear(array, target, expected):
    assert two_sum_linear(array, target) == expected


@pytest.mark.parametrize(
    "array, target, expected",
    [
        ([2, 3, 5, 7, 11], 12, [[2, 3]]),
        ([2, 3, 5, 7, 11, 3], 10, [[1, 3], [3, 5]]),
        ([2, 3, 5, 7, 11], 4, []),
        ([], 0, []),
    ],
)
def test_two_sum(array, target, expected):
    assert two_sum(array, target) == expected


def test_linear_finds_same_value_pair():
    assert two_sum_linear([3, 3], 6) == [0, 1]