from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

class _CoreOperations(Generic[T]):
    def map(self: 'Seq[T]', f: Selector[T, U]) -> 'Seq[U]':
        """
        apply f to every element. f runs on each current() call, so a consumer
        reading every element once calls it exactly once per step.
        """
        from ..iterators.elementwise import MapSeq
        return MapSeq(self, f)

    def map_with_error(self: 'Seq[T]', f: Selector[T, U]) -> 'Seq[U]':
        """
        like map, but an exception raised by f halts the sequence and becomes its error().
        the source's own error is not reported once f has failed.
        """
        from ..iterators.elementwise import MapWithErrorSeq
        return MapWithErrorSeq(self, f)

    def filter(self: 'Seq[T]', keep: Predicate[T]) -> 'Seq[T]':
        """keep elements for which keep(elem) is true"""
        from ..iterators.elementwise import FilterSeq, pass_through
        return pass_through(FilterSeq, self, keep)

    def drop_while(self: 'Seq[T]', pred: Predicate[T]) -> 'Seq[T]':
        """skip leading elements while pred holds, then yield everything"""
        from ..iterators.elementwise import DropWhileSeq, pass_through
        return pass_through(DropWhileSeq, self, pred)

    def take_while(self: 'Seq[T]', pred: Predicate[T]) -> 'Seq[T]':
        """yield leading elements while pred holds. never resumes after the first failure."""
        from ..iterators.elementwise import TakeWhileSeq, pass_through
        return pass_through(TakeWhileSeq, self, pred)

    def limit(self: 'Seq[T]', n: int) -> 'Seq[T]':
        """at most the first n elements"""
        from ..iterators.elementwise import LimitSeq, pass_through
        if n < 0:
            raise ValueError(f"limit count can't be negative, got {n}")
        return pass_through(LimitSeq, self, n)

    def skip(self: 'Seq[T]', n: int) -> 'Seq[T]':
        """everything after the first n elements. skipping past the end yields nothing."""
        from ..iterators.elementwise import SkipSeq, pass_through
        if n < 0:
            raise ValueError(f"skip count can't be negative, got {n}")
        return pass_through(SkipSeq, self, n)

    def slice(self: 'Seq[T]', start: int, stop: int) -> 'Seq[T]':
        """elements with positions in [start, stop), i.e. skip(start).limit(stop - start)"""
        if start < 0 or stop < 0 or start > stop:
            raise ValueError(f"invalid slice: [{start}:{stop}]")
        return self.skip(start).limit(stop - start)

    def enumerate(self: 'Seq[T]', start: int = 0) -> 'Seq[Pair[int, T]]':
        """pair each element with a running index"""
        from ..iterators.elementwise import EnumerateSeq
        return EnumerateSeq(self, start)

    def chain(self: 'Seq[T]', *others: 'Seq[T]') -> 'Seq[T]':
        """this sequence followed by every one of others"""
        from ..factories import chain
        return chain(self, *others)

    def chain_map(self: 'Seq[T]', f: Callable[[T], 'Seq[U]']) -> 'Seq[U]':
        """map every element to a sequence and flatten the results"""
        from ..factories import chain_from_iterator
        return chain_from_iterator(self.map(f))

    def accumulate(self: 'Seq[T]', f: Accumulator[T, T]) -> 'Seq[T]':
        """
        running results of folding with f, seeded by the first element.
        accumulate([1 2 3 4 5], add) -> [1 3 6 10 15]
        """
        from ..iterators.elementwise import AccumulateSeq
        return AccumulateSeq(self, f)

    def accumulate_with_initial(self: 'Seq[T]', f: Accumulator[R, T], initial: R) -> 'Seq[R]':
        """
        running results of folding with f, starting with (and emitting) initial.
        accumulate_with_initial([1 2 3], add, 5) -> [5 6 8 11]
        """
        from ..iterators.elementwise import AccumulateSeq
        return AccumulateSeq(self, f, initial)

    def sort(self: 'Seq[T]') -> 'Seq[T]':
        """natural ordering. materializes the whole sequence on the first advance()."""
        from ..iterators.elementwise import SortedSeq
        return SortedSeq(self)

    def sort_func(self: 'Seq[T]', less: Less[T]) -> 'Seq[T]':
        """order by a less(a, b) comparator. materializes the whole sequence."""
        from ..iterators.elementwise import SortedSeq
        return SortedSeq(self, less)

    def sort_stable_func(self: 'Seq[T]', less: Less[T]) -> 'Seq[T]':
        """
        like sort_func, keeping equal elements in their original order.
        list.sort is always stable, so this only documents the guarantee.
        """
        return self.sort_func(less)
