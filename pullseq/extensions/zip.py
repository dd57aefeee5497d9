from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq, ISeq


class ZipAccessor(Generic[T]):
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def with_(self, *others: 'ISeq[Any]') -> 'Seq[List[Any]]':
        """zip with other sequences, stopping at the shortest. elements are a reused list."""
        from ..factories import zip_all
        return zip_all(self._seq, *others)

    def longest(self, fill: Any, *others: 'ISeq[Any]') -> 'Seq[List[Any]]':
        """zip with other sequences until all are exhausted, padding with fill"""
        from ..factories import zip_longest
        return zip_longest(fill, self._seq, *others)

    def pairwise(self, other: 'ISeq[U]') -> 'Seq[Pair[T, U]]':
        """pairs of corresponding elements, stopping at the shorter sequence"""
        from ..factories import pairwise
        return pairwise(self._seq, other)

    def pairwise_longest(self, other: 'ISeq[U]', fill_self: T, fill_other: U) -> 'Seq[Pair[T, U]]':
        """pairs of corresponding elements, padding the shorter sequence"""
        from ..factories import pairwise_longest
        return pairwise_longest(self._seq, other, fill_self, fill_other)

    def compress(self, selectors: 'ISeq[bool]') -> 'Seq[T]':
        """
        elements whose paired selector is true.
        compress([1 2 3 4], [true false true false]) -> [1 3]
        """
        from ..iterators.multi import CompressSeq
        return CompressSeq(self._seq, selectors, bool)

    def compress_func(self, values: 'ISeq[U]', keep: Predicate[U]) -> 'Seq[T]':
        """elements whose paired value satisfies keep"""
        from ..iterators.multi import CompressSeq
        return CompressSeq(self._seq, values, keep)
