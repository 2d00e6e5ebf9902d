from collections.abc import MutableSequence

from ..SortingAlgorithm import SortingAlgorithm, T, swap


def partition(arr: MutableSequence[T], lo: int, hi: int) -> int:
    """Lomuto partition of arr[lo : hi + 1] around the last element.

    Returns the pivot's final index p: everything in arr[lo:p] is less than
    the pivot, nothing in arr[p + 1 : hi + 1] is.
    """
    pivot = arr[hi]
    i = lo
    for j in range(lo, hi):
        if arr[j] < pivot:
            swap(arr, i, j)
            i += 1
    swap(arr, i, hi)
    return i


def quicksort(arr: MutableSequence[T]) -> None:
    """Sort arr in place. Not stable.

    The pivot is always the last element of the range, so sorted, reverse
    sorted and all-equal input take O(n^2) comparisons. Recursing into the
    smaller side only keeps the stack depth at O(log n) regardless.
    """

    def impl(lo: int, hi: int) -> None:
        while lo < hi:
            p = partition(arr, lo, hi)
            if p - lo < hi - p:
                impl(lo, p - 1)
                lo = p + 1
            else:
                impl(p + 1, hi)
                hi = p - 1

    impl(0, len(arr) - 1)


algorithm = SortingAlgorithm("quicksort", quicksort, in_place=True, stable=False, max_N=50000)
