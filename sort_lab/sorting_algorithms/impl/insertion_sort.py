from collections.abc import MutableSequence

from ..SortingAlgorithm import SortingAlgorithm, T, swap


def insertion_sort(arr: MutableSequence[T]) -> None:
    # arr[:i] is sorted; walk arr[i] left until its neighbour is not greater
    for i in range(1, len(arr)):
        j = i
        while j > 0 and arr[j - 1] > arr[j]:
            swap(arr, j - 1, j)
            j -= 1


algorithm = SortingAlgorithm("insertion sort", insertion_sort, in_place=True, stable=True, max_N=10000)
