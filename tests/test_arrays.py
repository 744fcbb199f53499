import pytest

from dsakit.arrays import max_subarray_sum, pair_sum


def test_pair_sum_source_example():
    assert pair_sum([2, 7, 11, 15], 9) == (0, 1)


def test_pair_sum_not_found():
    assert pair_sum([2, 7, 11, 15], 100) is None


@pytest.mark.parametrize("values", [[], [5]])
def test_pair_sum_too_short(values):
    assert pair_sum(values, 5) is None


@pytest.mark.parametrize("target", [4, 7, 10, 14, 19])
def test_pair_sum_result_adds_up(target):
    values = [1, 3, 4, 6, 8, 11]
    result = pair_sum(values, target)
    assert result is not None
    i, j = result
    assert i < j
    assert values[i] + values[j] == target


def test_max_subarray_source_example():
    assert max_subarray_sum([1, 2, 3, 4, 5]) == 15


def test_max_subarray_all_negative_picks_largest():
    assert max_subarray_sum([-3, -1, -2]) == -1


def test_max_subarray_single_element():
    assert max_subarray_sum([7]) == 7


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


@pytest.mark.parametrize(
    "values",
    [[5, -10, 3], [-2, 1, -3, 4, -1, 2, 1, -5, 4], [0, 0, 0], [4, -1, 4]],
)
def test_max_subarray_bounds(values):
    result = max_subarray_sum(values)
    assert result >= max(values)
    assert result >= sum(values)