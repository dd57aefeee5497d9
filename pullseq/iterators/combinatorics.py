from __future__ import annotations

from ..sequence import Seq
from ..types import *

# every generator below overwrites and returns the same list on each step.
# current_copy() hands out an owned snapshot instead.


class _BufferedSeq(Seq[List[T]]):
    _dest: List[T]

    def current_copy(self) -> List[T]:
        return list(self.current())


class CartesianProductSeq(_BufferedSeq[T]):
    """odometer over one index per input list, rightmost index moving fastest"""

    def __init__(self, lists: List[List[T]]):
        self._lists = lists
        self._indices = [0] * len(lists)
        self._dest = [None] * len(lists)
        self._started = False

    def advance(self) -> bool:
        if not self._started:
            self._started = True
            return True

        for n in range(len(self._lists) - 1, -1, -1):
            self._indices[n] += 1
            if n > 0 and self._indices[n] >= len(self._lists[n]):
                self._indices[n] = 0
            else:
                break

        return self._indices[0] < len(self._lists[0])

    def current(self) -> List[T]:
        for n, inner in enumerate(self._lists):
            self._dest[n] = inner[self._indices[n]]
        return self._dest


class CombinationsSeq(_BufferedSeq[T]):
    """r-length subsequences in lexicographic index order, every index at most once"""

    def __init__(self, items: List[T], r: int):
        self._items = items
        self._r = r
        self._n = len(items)
        self._indices = list(range(r))
        self._dest = [None] * r
        self._started = False

    def advance(self) -> bool:
        if not self._started:
            self._started = True
            return True

        n, r, indices = self._n, self._r, self._indices
        i = r - 1
        while i >= 0 and indices[i] == i + n - r:
            i -= 1
        if i < 0:
            return False

        indices[i] += 1
        for j in range(i + 1, r):
            indices[j] = indices[j - 1] + 1
        return True

    def current(self) -> List[T]:
        for n, index in enumerate(self._indices):
            self._dest[n] = self._items[index]
        return self._dest


class CombinationsWithReplacementSeq(_BufferedSeq[T]):
    """like CombinationsSeq, but an index may repeat (indices are non-decreasing)"""

    def __init__(self, items: List[T], r: int):
        self._items = items
        self._r = r
        self._n = len(items)
        self._indices = [0] * r
        self._dest = [None] * r
        self._started = False

    def advance(self) -> bool:
        if not self._started:
            self._started = True
            return True

        i = self._r - 1
        while i >= 0 and self._indices[i] == self._n - 1:
            i -= 1
        if i < 0:
            return False

        new_index = self._indices[i] + 1
        for j in range(i, self._r):
            self._indices[j] = new_index
        return True

    def current(self) -> List[T]:
        for n, index in enumerate(self._indices):
            self._dest[n] = self._items[index]
        return self._dest


class PermutationsSeq(_BufferedSeq[T]):
    """
    r-length orderings in lexicographic index order, using a cycle counter per
    output position. the first r indices form the current permutation.
    a rotation at position i moves n - i indices but happens once every n - i
    visits to that position, so a step costs O(r) amortized.
    """

    def __init__(self, items: List[T], r: int):
        self._items = items
        self._r = r
        self._n = len(items)
        self._indices = list(range(self._n))
        self._cycles = [self._n - i for i in range(r)]
        self._dest = [None] * r
        self._started = False

    def advance(self) -> bool:
        if not self._started:
            self._started = True
            return True

        n, indices, cycles = self._n, self._indices, self._cycles
        for i in range(self._r - 1, -1, -1):
            cycles[i] -= 1
            if cycles[i] == 0:
                # rotate position i to the end, in place, and reset its counter
                indices.append(indices.pop(i))
                cycles[i] = n - i
            else:
                j = n - cycles[i]
                indices[i], indices[j] = indices[j], indices[i]
                return True
        return False

    def current(self) -> List[T]:
        for n in range(self._r):
            self._dest[n] = self._items[self._indices[n]]
        return self._dest


class PowerSetSeq(_BufferedSeq[T]):
    """every subset, in the order of a counter whose bit i selects items[i]"""

    def __init__(self, items: List[T]):
        self._items = items
        self._mask = 0
        self._end = 1 << len(items)
        self._dest = []
        self._started = False

    def advance(self) -> bool:
        if self._started:
            self._mask += 1
        else:
            self._started = True
        return self._mask < self._end

    def current(self) -> List[T]:
        dest = self._dest
        dest.clear()
        mask = self._mask
        for item in self._items:
            if mask == 0:
                break
            if mask & 1:
                dest.append(item)
            mask >>= 1
        return dest
