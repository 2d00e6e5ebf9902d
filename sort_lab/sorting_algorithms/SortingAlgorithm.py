from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, NamedTuple, Optional, Protocol, TypeVar


class Orderable(Protocol):
    "Incomparable pairs answer False to both `<` and `>`"

    def __lt__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...


T = TypeVar("T", bound=Orderable)


def is_sorted(arr: Sequence[Orderable]) -> bool:
    return not any(arr[i] > arr[i + 1] for i in range(len(arr) - 1))


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[Any], Optional[list]]
    in_place: bool
    stable: bool
    max_N: int
    validator: Callable[[Sequence], bool] = is_sorted

    def run(self, arr: Sequence[T]) -> list[T]:
        if not self.in_place:
            return self.func(arr)
        result = list(arr)
        self.func(result)
        return result


def swap(arr: MutableSequence, i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]
