from sort_lab.generate_statistics import count_comparisons
from sort_lab.sorting_algorithms.impl.insertion_sort import algorithm, insertion_sort


def test_empty_and_single():
    arr = []
    insertion_sort(arr)
    assert arr == []
    arr = [5]
    insertion_sort(arr)
    assert arr == [5]


def test_ten_items():
    arr = [3, 2, 0, 5, 8, 9, 6, 3, 2, 0]
    insertion_sort(arr)
    assert arr == [0, 0, 2, 2, 3, 3, 5, 6, 8, 9]


def test_linear_on_sorted_input():
    assert count_comparisons(algorithm, list(range(100))) == 99


def test_quadratic_on_reverse_input():
    assert count_comparisons(algorithm, list(range(100, 0, -1))) == 100 * 99 // 2
