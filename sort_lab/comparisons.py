from collections.abc import Iterable
from typing import Any


class ComparisonCounter:
    def __init__(self) -> None:
        self.cnt = 0

    def wrap(self, arr: Iterable[Any]) -> list["Counted"]:
        return [Counted(x, self) for x in arr]

    @staticmethod
    def unwrap(arr: Iterable["Counted"]) -> list[Any]:
        return [x.obj for x in arr]


# same shape as functools.cmp_to_key's K, but every comparison is tallied
# fmt: off
class Counted:
    __slots__ = ['obj', 'counter']
    def __init__(self, obj, counter: ComparisonCounter):
        self.obj = obj
        self.counter = counter
    def __lt__(self, other):
        self.counter.cnt += 1
        return self.obj < other.obj
    def __gt__(self, other):
        self.counter.cnt += 1
        return self.obj > other.obj
    def __le__(self, other):
        self.counter.cnt += 1
        return self.obj <= other.obj
    def __ge__(self, other):
        self.counter.cnt += 1
        return self.obj >= other.obj
    __hash__ = None
# fmt: on
