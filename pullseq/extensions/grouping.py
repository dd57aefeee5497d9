from __future__ import annotations
import typing
import logging
from collections import defaultdict
from operator import eq as _equal
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

logger = logging.getLogger(__name__)


class GroupingAccessor(Generic[T]):
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def group_by(self, key: KeySelector[T, K]) -> 'Seq[Pair[K, Seq[T]]]':
        """
        split into runs of consecutive elements sharing key(elem).
        the input should already be sorted by the key; otherwise a key shows up
        once per run:

            group_by(["Alice" "Andrew" "Bob" "Adam"], name => name[0])
            -> [("A", ["Alice" "Andrew"]) ("B", ["Bob"]) ("A", ["Adam"])]

        each group is itself a sequence sharing the source, so it's only valid
        until the next group is requested.
        """
        return self.group_by_func(key, _equal)

    def group_by_func(self, key: KeySelector[T, K], eq: Callable[[K, K], bool]) -> 'Seq[Pair[K, Seq[T]]]':
        """group_by with a custom key equality. the first key of a run represents it."""
        from ..iterators.grouping import GroupBySeq
        return GroupBySeq(self._seq.non_volatile(), key, eq)

    def window(self, size: int) -> 'Seq[List[T]]':
        """
        sliding windows of size consecutive elements.
        window([1 2 3 4], 2) -> [[1 2] [2 3] [3 4]]; shorter input yields nothing.
        """
        from ..iterators.grouping import WindowSeq
        if size <= 0:
            raise ValueError("window size must be positive")
        return WindowSeq(self._seq.non_volatile(), size)

    def batched(self, size: int) -> 'Seq[List[T]]':
        """
        split into lists of size elements, pulled lazily. the last batch may be smaller.
        batched([1 2 3 4 5], 2) -> [[1 2] [3 4] [5]]
        """
        from ..iterators.grouping import BatchedSeq
        if size <= 0:
            raise ValueError("batch size must be positive")
        return BatchedSeq(self._seq.non_volatile(), size)

    def aggregate_by(self, key: KeySelector[T, K]) -> Dict[K, List[T]]:
        """
        collect every element into a dict of lists keyed by key(elem), in any input order.
        unlike group_by this materializes the whole sequence.
        a terminal error is left for the caller to check with error().
        """
        groups = defaultdict(list)
        count = 0
        it = self._seq.non_volatile()
        while it.advance():
            item = it.current()
            groups[key(item)].append(item)
            count += 1
        logger.debug(f"aggregated {count} elements into {len(groups)} groups")
        return dict(groups)
