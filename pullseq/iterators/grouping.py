from __future__ import annotations

from collections import deque
from typing import Deque

from ..sequence import Seq, ISeq
from ..types import *


class GroupBySeq(Seq[Pair[K, Seq[T]]]):
    """
    splits the source into runs of consecutive elements with equal keys.
    only one run is buffered at a time: moving to the next group drains
    whatever the consumer left of the previous one.
    """

    def __init__(self, source: ISeq[T], key: KeySelector[T, K], eq: Callable[[K, K], bool]):
        self._source = source
        self._key = key
        self._eq = eq
        self._group: Optional[_GroupSeq[K, T]] = None
        self._pending = None
        self._pending_key = None
        self._has_pending = False
        self._source_done = False

    # --- shared with _GroupSeq ---

    def _pull(self) -> bool:
        """advance the shared source, remembering exhaustion so it's never advanced again"""
        if self._source_done:
            return False
        if self._source.advance():
            self._pending = self._source.current()
            self._pending_key = self._key(self._pending)
            self._has_pending = True
            return True
        self._source_done = True
        return False

    def advance(self) -> bool:
        if self._group is not None:
            self._group._drain()
        if not self._has_pending and not self._pull():
            return False

        self._group = _GroupSeq(self, self._pending_key)
        return True

    def current(self) -> Pair[K, Seq[T]]:
        return Pair(self._group.key, self._group)

    def error(self) -> Optional[Exception]:
        return self._source.error()


class _GroupSeq(Seq[T], Generic[K, T]):
    """members of one run; the first member is the element which opened the run"""

    def __init__(self, parent: GroupBySeq[K, T], key: K):
        self._parent = parent
        self.key = key
        self._e = None
        self._finished = False

    def advance(self) -> bool:
        p = self._parent
        if self._finished:
            return False
        if not p._has_pending and not p._pull():
            self._finished = True
            return False
        if not p._eq(p._pending_key, self.key):
            # element opens the next group, leave it pending for the parent
            self._finished = True
            return False
        self._e = p._pending
        p._has_pending = False
        return True

    def _drain(self) -> None:
        while self.advance():
            pass

    def current(self) -> T:
        return self._e

    def error(self) -> Optional[Exception]:
        return self._parent.error() if self._parent._source_done else None


class WindowSeq(Seq[List[T]]):
    """
    sliding windows of `size` consecutive elements, one step apart.
    nothing is yielded when the source is shorter than `size`.
    """

    def __init__(self, source: ISeq[T], size: int):
        self._source = source
        self._size = size
        self._window: Deque[T] = deque(maxlen=size)
        self._source_done = False

    def advance(self) -> bool:
        if self._source_done:
            return False
        while True:
            if not self._source.advance():
                self._source_done = True
                return False
            self._window.append(self._source.current())
            if len(self._window) == self._size:
                return True

    def current(self) -> List[T]:
        return list(self._window)

    def error(self) -> Optional[Exception]:
        return self._source.error()


class BatchedSeq(Seq[List[T]]):
    """consecutive batches of `size` elements; the last one may be smaller"""

    def __init__(self, source: ISeq[T], size: int):
        self._source = source
        self._size = size
        self._batch: List[T] = []
        self._source_done = False

    def advance(self) -> bool:
        if self._source_done:
            return False
        self._batch = []
        while len(self._batch) < self._size:
            if not self._source.advance():
                self._source_done = True
                break
            self._batch.append(self._source.current())
        return len(self._batch) > 0

    def current(self) -> List[T]:
        return self._batch

    def error(self) -> Optional[Exception]:
        return self._source.error()
