from __future__ import annotations

import logging
from functools import cache, cmp_to_key

from ..sequence import Seq, ISeq, SupportsCurrentCopy, non_volatile
from ..types import *

logger = logging.getLogger(__name__)


class MapSeq(Seq[U]):
    """f runs on every current() call, exactly once per step for a single-read consumer"""

    def __init__(self, source: ISeq[T], f: Selector[T, U]):
        self._source = source
        self._f = f

    def advance(self) -> bool:
        return self._source.advance()

    def current(self) -> U:
        return self._f(self._source.current())

    def error(self) -> Optional[Exception]:
        return self._source.error()


class MapWithErrorSeq(Seq[U]):
    def __init__(self, source: ISeq[T], f: Selector[T, U]):
        self._source = source
        self._f = f
        self._e = None
        self._err: Optional[Exception] = None
        self._done = False

    def advance(self) -> bool:
        if self._done:
            return False
        if not self._source.advance():
            self._done = True
            self._err = self._source.error()
            return False
        try:
            self._e = self._f(self._source.current())
        except Exception as e:
            # first failure wins, the source is never queried again
            logger.debug(f"map function failed, ending sequence: {e!r}")
            self._done = True
            self._err = e
            return False
        return True

    def current(self) -> U:
        return self._e

    def error(self) -> Optional[Exception]:
        return self._err


class FilterSeq(Seq[T]):
    def __init__(self, source: ISeq[T], keep: Predicate[T]):
        self._source = source
        self._keep = keep
        self._e = None

    def advance(self) -> bool:
        while self._source.advance():
            self._e = self._source.current()
            if self._keep(self._e):
                return True
        return False

    def current(self) -> T:
        return self._e

    def error(self) -> Optional[Exception]:
        return self._source.error()


class DropWhileSeq(Seq[T]):
    def __init__(self, source: ISeq[T], pred: Predicate[T]):
        self._source = source
        self._pred = pred
        self._e = None
        self._skipped = False

    def advance(self) -> bool:
        while self._source.advance():
            self._e = self._source.current()
            if self._skipped:
                return True
            if not self._pred(self._e):
                self._skipped = True
                return True
        return False

    def current(self) -> T:
        return self._e

    def error(self) -> Optional[Exception]:
        return self._source.error()


class TakeWhileSeq(Seq[T]):
    """stops for good at the first element failing pred. the source is left unexhausted."""

    def __init__(self, source: ISeq[T], pred: Predicate[T]):
        self._source = source
        self._pred = pred
        self._e = None
        self._stopped = False
        self._source_done = False

    def advance(self) -> bool:
        if self._stopped or self._source_done:
            return False
        if not self._source.advance():
            self._source_done = True
            return False
        self._e = self._source.current()
        if self._pred(self._e):
            return True
        self._stopped = True
        return False

    def current(self) -> T:
        return self._e

    def error(self) -> Optional[Exception]:
        return self._source.error() if self._source_done else None


class LimitSeq(Seq[T]):
    def __init__(self, source: ISeq[T], n: int):
        self._source = source
        self._left = n
        self._source_done = False

    def advance(self) -> bool:
        if self._left <= 0 or self._source_done:
            return False
        if not self._source.advance():
            self._source_done = True
            return False
        self._left -= 1
        return True

    def current(self) -> T:
        return self._source.current()

    def error(self) -> Optional[Exception]:
        # only an exhausted source may be asked for its error
        return self._source.error() if self._source_done else None


class SkipSeq(Seq[T]):
    """drops the first n elements on the first advance() call"""

    def __init__(self, source: ISeq[T], n: int):
        self._source = source
        self._n = n

    def advance(self) -> bool:
        while self._n > 0:
            self._n -= 1
            if not self._source.advance():
                self._n = 0
                return False
        return self._source.advance()

    def current(self) -> T:
        return self._source.current()

    def error(self) -> Optional[Exception]:
        return self._source.error()


class EnumerateSeq(Seq[Pair[int, T]]):
    def __init__(self, source: ISeq[T], start: int):
        self._source = source
        self._n = start - 1

    def advance(self) -> bool:
        has = self._source.advance()
        if has:
            self._n += 1
        return has

    def current(self) -> Pair[int, T]:
        return Pair(self._n, self._source.current())

    def current_copy(self) -> Pair[int, T]:
        if isinstance(self._source, SupportsCurrentCopy):
            return Pair(self._n, self._source.current_copy())
        return self.current()

    def error(self) -> Optional[Exception]:
        return self._source.error()


class AccumulateSeq(Seq[R]):
    """
    partial results of folding the source. with no initial value the first
    element seeds the accumulator; with one, the initial value is emitted first.
    """

    _NO_INITIAL = object()

    def __init__(self, source: ISeq[T], f: Accumulator[R, T], initial: Any = _NO_INITIAL):
        self._source = source
        self._f = f
        self._acc = initial
        self._pending_initial = initial is not self._NO_INITIAL
        self._seeded = self._pending_initial

    def advance(self) -> bool:
        if self._pending_initial:
            self._pending_initial = False
            return True
        if not self._source.advance():
            return False
        if self._seeded:
            self._acc = self._f(self._acc, self._source.current())
        else:
            self._acc = self._source.current()
            self._seeded = True
        return True

    def current(self) -> R:
        return self._acc

    def error(self) -> Optional[Exception]:
        return self._source.error()


class ChainSeq(Seq[T]):
    """
    concatenates sequences pulled one by one from `sources`.
    the first inner sequence ending with an error stops the whole chain.
    """

    def __init__(self, sources: ISeq[ISeq[T]]):
        self._sources = sources
        self._inner: Optional[ISeq[T]] = None
        self._err: Optional[Exception] = None
        self._done = False

    def advance(self) -> bool:
        while not self._done:
            if self._inner is not None:
                if self._inner.advance():
                    return True
                self._err = self._inner.error()
                self._inner = None
                if self._err is not None:
                    self._done = True
                    return False

            if self._sources.advance():
                self._inner = self._sources.current()
            else:
                self._err = self._sources.error()
                self._done = True
        return False

    def current(self) -> T:
        return self._inner.current()

    def current_copy(self) -> T:
        # inner sequences differ in volatility, so the check is per element
        if isinstance(self._inner, SupportsCurrentCopy):
            return self._inner.current_copy()
        return self._inner.current()

    def error(self) -> Optional[Exception]:
        return self._err


class SortedSeq(Seq[T]):
    """
    collects the whole source on the first advance(), sorts it and replays it.
    python's sort is stable, so every ordering here is stable.
    """

    def __init__(self, source: ISeq[T], less: Optional[Less[T]] = None):
        self._source = source
        self._less = less
        self._items: Optional[List[T]] = None
        self._i = -1

    def _materialize(self) -> List[T]:
        it = non_volatile(self._source)
        items = []
        while it.advance():
            items.append(it.current())

        if self._less is None:
            items.sort()
        else:
            less = self._less
            items.sort(key=cmp_to_key(lambda a, b: -1 if less(a, b) else (1 if less(b, a) else 0)))
        logger.debug(f"sorted {len(items)} materialized elements")
        return items

    def advance(self) -> bool:
        if self._items is None:
            self._items = self._materialize()
        if self._i >= len(self._items):
            return False
        self._i += 1
        return self._i < len(self._items)

    def current(self) -> T:
        return self._items[self._i]

    def error(self) -> Optional[Exception]:
        return self._source.error()


# --- volatility forwarding ---

class _ForwardsCopy:
    def current_copy(self):
        # pass-through sequences sit on the same position as their source
        return self._source.current_copy()


@cache
def _copy_forwarding(cls: type) -> type:
    class Forwarding(_ForwardsCopy, cls):
        pass

    Forwarding.__name__ = Forwarding.__qualname__ = cls.__name__
    return Forwarding


def pass_through(cls: type, source: ISeq[T], *args: Any) -> Seq[T]:
    """
    builds a sequence whose current() hands out the source's elements unchanged.
    when the source is volatile the result is volatile too, so collectors still copy.
    """
    if isinstance(source, SupportsCurrentCopy):
        cls = _copy_forwarding(cls)
    return cls(source, *args)
