from collections.abc import Sequence

from ..SortingAlgorithm import SortingAlgorithm, T


def merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        # ties and incomparable pairs take from the left
        if left[i] > right[j]:
            result.append(right[j])
            j += 1
        else:
            result.append(left[i])
            i += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(arr: Sequence[T]) -> list[T]:
    "Return a new sorted list; arr is left untouched. Stable."
    if len(arr) <= 1:
        return list(arr)
    middle = (len(arr) + 1) // 2
    return merge(merge_sort(arr[:middle]), merge_sort(arr[middle:]))


algorithm = SortingAlgorithm("merge sort", merge_sort, in_place=False, stable=True, max_N=50000)
