import sys
from typing import Optional

from .Config import *
from .generate_statistics import InvalidArgumentError, generate_random_array, time_algorithm
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import is_sorted


def parse_size(argv: list[str]) -> int:
    if len(argv) < 2:
        return DEFAULT_N
    try:
        size = int(argv[1])
    except ValueError:
        raise InvalidArgumentError(f"size must be an integer, got {argv[1]!r}") from None
    if size < 0:
        raise InvalidArgumentError(f"size must be non-negative, got {size}")
    return size


def main(argv: Optional[list[str]] = None) -> int:
    # raise the size to see insertion sort fall behind the two O(N log N) sorts
    size = parse_size(sys.argv if argv is None else argv)
    v = generate_random_array(size)

    results = []
    for algorithm in sorting_algorithms:
        result, seconds = time_algorithm(algorithm, v)
        print(f"Elapsed time for {algorithm.name} was {seconds:.6f}{TIME_UNIT}.")
        results.append((algorithm.name, result))

    print(f"Is the original, random list in order?: {is_sorted(v)}")
    for name, result in results:
        print(f"Was {name} in order?: {is_sorted(result)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
