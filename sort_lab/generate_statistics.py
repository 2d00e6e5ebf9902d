from collections.abc import Iterable, Sequence
from itertools import product
from time import perf_counter
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .comparisons import ComparisonCounter
from .Config import *
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid sorting algorithm: `{name}` produced an unsorted result")


class InvalidArgumentError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__("Invalid argument: " + msg)


class Statistic(NamedTuple):
    name: str
    N: int
    seconds: float
    comparisons: int


def generate_random_array(size: int, low: int = 0, high: Optional[int] = None, seed: Optional[int] = None) -> list[int]:
    "`size` integers drawn uniformly from [low, high); high defaults to size"
    if size < 0:
        raise InvalidArgumentError(f"size must be non-negative, got {size}")
    if size == 0:
        return []
    if high is None:
        high = size
    if low >= high:
        raise InvalidArgumentError(f"empty range [{low}, {high})")
    return np.random.default_rng(seed).integers(low, high, size).tolist()


def time_algorithm(algorithm: SortingAlgorithm, arr: Sequence) -> tuple[list, float]:
    start_time = perf_counter()
    result = algorithm.run(arr)
    return result, perf_counter() - start_time


def count_comparisons(algorithm: SortingAlgorithm, arr: Sequence) -> int:
    counter = ComparisonCounter()
    algorithm.run(counter.wrap(arr))
    return counter.cnt


def measure(algorithm: SortingAlgorithm, N: int, seed: Optional[int] = SAMPLE_SEED) -> Statistic:
    arr = generate_random_array(N, seed=seed)
    result, seconds = time_algorithm(algorithm, arr)
    if not algorithm.validator(result):
        raise InvalidSortingAlgorithmError(algorithm.name)
    return Statistic(algorithm.name, N, seconds, count_comparisons(algorithm, arr))


def generate_statistics(Ns: Iterable[int] = STATISTICS_NS, seed: Optional[int] = SAMPLE_SEED) -> pd.DataFrame:
    tasks = [(algorithm, N) for algorithm, N in product(sorting_algorithms, Ns) if N <= algorithm.max_N]
    rows = [measure(algorithm, N, seed) for algorithm, N in tqdm(tasks, total=len(tasks))]
    df = pd.DataFrame(rows, columns=Statistic._fields)
    RESULT_DIR.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(RESULT_DIR, index=False)
    return df


def sort_result() -> None:
    df = pd.read_csv(RESULT_DIR)
    df = df.sort_values(["name", "N"])
    df.to_csv(RESULT_DIR, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(RESULT_DIR.parent / f"{name}.csv", index=False)


if __name__ == "__main__":
    generate_statistics()
    sort_result()
