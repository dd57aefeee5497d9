from __future__ import annotations

from ..sequence import Seq
from ..types import *


class CycleSeq(Seq[T]):
    def __init__(self, items: List[T], loops: int):
        self._items = items
        self._i = -1
        self._loop = 0
        self._loops = loops

    def advance(self) -> bool:
        self._i += 1
        if self._i == len(self._items):
            self._loop += 1
            self._i = 0
        return self._loop < self._loops

    def current(self) -> T:
        return self._items[self._i]


class RepeatSeq(Seq[T]):
    def __init__(self, items: List[T]):
        self._items = items
        self._i = -1

    def advance(self) -> bool:
        self._i = (self._i + 1) % len(self._items)
        return True

    def current(self) -> T:
        return self._items[self._i]


class RangeSeq(Seq[T]):
    """
    start, start + step, ... while the value stays below stop, or forever when stop is None.
    performs addition on every step, so floats accumulate rounding error and
    fixed-width numpy integers wrap around.
    """

    def __init__(self, start: T, stop: Optional[T], step: T):
        self._value = start
        self._stop = stop
        self._step = step
        self._started = False

    def advance(self) -> bool:
        if self._started:
            self._value += self._step
        else:
            self._started = True
        return self._stop is None or self._value < self._stop

    def current(self) -> T:
        return self._value


class RepeatedlyApplySeq(Seq[T]):
    def __init__(self, f: Callable[[T], T], v: T):
        self._f = f
        self._v = v
        self._started = False

    def advance(self) -> bool:
        if self._started:
            self._v = self._f(self._v)
        else:
            self._started = True
        return True

    def current(self) -> T:
        return self._v
