import pytest

from sort_lab.generate_statistics import count_comparisons, generate_random_array
from sort_lab.sorting_algorithms.impl.quick_sort import algorithm, partition, quicksort

# longer than the default recursion limit
N = 1500


def test_partition():
    arr = [7, 2, 9, 4, 1, 5]
    p = partition(arr, 0, len(arr) - 1)
    assert arr[p] == 5
    assert all(x < 5 for x in arr[:p])
    assert all(not x < 5 for x in arr[p + 1 :])
    assert sorted(arr) == [1, 2, 4, 5, 7, 9]


def test_partition_sub_range():
    arr = [9, 3, 8, 1, 2, 0]
    p = partition(arr, 1, 4)
    assert (arr[0], arr[5]) == (9, 0)
    assert p == 2
    assert arr[1:5] == [1, 2, 3, 8]


@pytest.mark.parametrize("seed", range(3))
def test_partition_random(seed):
    arr = generate_random_array(50, seed=seed)
    pivot = arr[-1]
    p = partition(arr, 0, len(arr) - 1)
    assert arr[p] == pivot
    assert all(x < pivot for x in arr[:p])
    assert all(x >= pivot for x in arr[p + 1 :])


@pytest.mark.parametrize(
    "arr",
    [list(range(N)), list(range(N, 0, -1)), [7] * N, [0, 1] * (N // 2)],
    ids=["sorted", "reverse", "all-equal", "alternating"],
)
def test_adversarial_input_terminates(arr):
    expected = sorted(arr)
    quicksort(arr)
    assert arr == expected


def test_last_element_pivot_is_quadratic_on_sorted_input():
    assert count_comparisons(algorithm, list(range(100))) == 100 * 99 // 2


def test_empty_and_single():
    arr = []
    quicksort(arr)
    assert arr == []
    arr = [5]
    quicksort(arr)
    assert arr == [5]
