from __future__ import annotations

from ..sequence import Seq, ISeq
from ..types import *


class ZipSeq(Seq[List[T]]):
    """
    one element from every source per step, stopping at the shortest.
    current() returns the same list on every step; current_copy() an owned one.
    """

    def __init__(self, sources: List[ISeq[T]]):
        self._sources = sources
        self._dest: List[T] = [None] * len(sources)
        self._err: Optional[Exception] = None

    def advance(self) -> bool:
        if not self._sources:
            return False
        for n, source in enumerate(self._sources):
            if not source.advance():
                # remaining sources are not exhausted and must not be asked for errors
                self._err = source.error()
                return False
            self._dest[n] = source.current()
        return True

    def current(self) -> List[T]:
        return self._dest

    def current_copy(self) -> List[T]:
        return list(self._dest)

    def error(self) -> Optional[Exception]:
        return self._err


class ZipLongestSeq(Seq[List[T]]):
    """
    like ZipSeq, but runs until every source is exhausted, padding finished ones with fill.
    only the first error encountered is kept; it is reported once all sources are done.
    """

    def __init__(self, fill: T, sources: List[ISeq[T]]):
        self._fill = fill
        self._sources = sources
        self._done = [False] * len(sources)
        self._dest: List[T] = [fill] * len(sources)
        self._err: Optional[Exception] = None

    def advance(self) -> bool:
        any_alive = False
        for n, source in enumerate(self._sources):
            if not self._done[n]:
                if source.advance():
                    self._dest[n] = source.current()
                    any_alive = True
                    continue
                self._done[n] = True
                if self._err is None:
                    self._err = source.error()
            self._dest[n] = self._fill
        return any_alive

    def current(self) -> List[T]:
        return self._dest

    def current_copy(self) -> List[T]:
        return list(self._dest)

    def error(self) -> Optional[Exception]:
        return self._err


class PairwiseSeq(Seq[Pair[T, U]]):
    def __init__(self, first: ISeq[T], second: ISeq[U]):
        self._first = first
        self._second = second
        self._err: Optional[Exception] = None

    def advance(self) -> bool:
        if not self._first.advance():
            self._err = self._first.error()
            return False
        if not self._second.advance():
            self._err = self._second.error()
            return False
        return True

    def current(self) -> Pair[T, U]:
        return Pair(self._first.current(), self._second.current())

    def error(self) -> Optional[Exception]:
        return self._err


class PairwiseLongestSeq(Seq[Pair[T, U]]):
    def __init__(self, first: ISeq[T], second: ISeq[U], fill_first: T, fill_second: U):
        self._first = first
        self._second = second
        self._fill_first = fill_first
        self._fill_second = fill_second
        self._first_done = False
        self._second_done = False
        self._e: Optional[Pair[T, U]] = None
        self._err: Optional[Exception] = None

    def _pull(self, source: ISeq[Any], fill: Any, done: bool) -> Tuple[Any, bool, bool]:
        """returns (value, alive, done) for one source"""
        if done:
            return fill, False, True
        if source.advance():
            return source.current(), True, False
        if self._err is None:
            self._err = source.error()
        return fill, False, True

    def advance(self) -> bool:
        a, a_alive, self._first_done = self._pull(self._first, self._fill_first, self._first_done)
        b, b_alive, self._second_done = self._pull(self._second, self._fill_second, self._second_done)
        self._e = Pair(a, b)
        return a_alive or b_alive

    def current(self) -> Pair[T, U]:
        return self._e

    def error(self) -> Optional[Exception]:
        return self._err


class CompressSeq(Seq[T]):
    """keeps data elements whose paired value satisfies keep; stops at the shorter input"""

    def __init__(self, data: ISeq[T], values: ISeq[U], keep: Predicate[U]):
        self._data = data
        self._values = values
        self._keep = keep
        self._e = None
        self._err: Optional[Exception] = None

    def advance(self) -> bool:
        while True:
            if not self._data.advance():
                self._err = self._data.error()
                return False
            if not self._values.advance():
                self._err = self._values.error()
                return False
            self._e = self._data.current()
            if self._keep(self._values.current()):
                return True

    def current(self) -> T:
        return self._e

    def error(self) -> Optional[Exception]:
        return self._err
