import typing
import logging
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq, ISeq

logger = logging.getLogger(__name__)

# a 64-bit counter enumerates at most 2^63 subsets
MAX_POWER_SET_ITEMS = 63


class CombinatoricsAccessor(Generic[T]):
    """
    combinatorial generators over the materialized sequence.
    results reuse one list per step, see the factory functions of the same names.
    """

    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def _items(self, operation: str) -> List[T]:
        items = self._seq.to.list()
        logger.debug(f"{operation}: materialized {len(items)} elements")
        return items

    def permutations(self, r: Optional[int] = None) -> 'Seq[List[T]]':
        """r-length orderings, every element when r is None"""
        from ..factories import permutations
        items = self._items("permutations")
        return permutations(len(items) if r is None else r, *items)

    def combinations(self, r: int) -> 'Seq[List[T]]':
        """r-length subsequences, each element used at most once"""
        from ..factories import combinations
        return combinations(r, *self._items("combinations"))

    def combinations_with_replacement(self, r: int) -> 'Seq[List[T]]':
        """r-length subsequences where an element may repeat"""
        from ..factories import combinations_with_replacement
        return combinations_with_replacement(r, *self._items("combinations_with_replacement"))

    def power_set(self) -> 'Seq[List[T]]':
        """every subset, starting with the empty one"""
        from ..factories import power_set
        return power_set(*self._items("power_set"))

    def cartesian_product(self, *others: 'ISeq[Any]') -> 'Seq[List[Any]]':
        """cartesian product of this sequence with others, rightmost varying fastest"""
        from ..factories import cartesian_product
        lists = [self._items("cartesian_product")]
        lists.extend(materialize(o) for o in others)
        return cartesian_product(*lists)


def materialize(source: Any) -> List[Any]:
    """materialize a sequence, or a plain python iterable"""
    from ..sequence import ISeq, non_volatile
    if not isinstance(source, ISeq):
        return list(source)
    it = non_volatile(source)
    items = []
    while it.advance():
        items.append(it.current())
    return items
