from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.zip import ZipAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.combinatorics import CombinatoricsAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class ISeq(ABC, Generic[T]):
    """
    pull-based iteration protocol. a sequence starts before its first element:

        while seq.advance():
            elem = seq.current()
        err = seq.error()

    advance() must not be called again once it returned false.
    """

    @abstractmethod
    def advance(self) -> bool:
        """move to the next (or first) element. returns whether one is available."""
        pass

    @abstractmethod
    def current(self) -> T:
        """element at the current position, only valid after advance() returned true"""
        pass

    def error(self) -> Optional[Exception]:
        """terminal error, only meaningful after advance() returned false"""
        return None


@runtime_checkable
class SupportsCurrentCopy(Protocol[T]):
    """
    volatile capability. sequences whose current() hands out a reused buffer
    also offer current_copy(), which returns an independent equivalent value.
    """

    def current_copy(self) -> T:
        ...

# --- main sequence class ---

class Seq(ISeq[T], _CoreOperations[T]):
    """base of every sequence in the library, adds fluent combinators and accessors."""

    @property
    def zip(self) -> ZipAccessor[T]:
        return ZipAccessor(self)

    @property
    def group(self) -> GroupingAccessor[T]:
        return GroupingAccessor(self)

    @property
    def comb(self) -> CombinatoricsAccessor[T]:
        return CombinatoricsAccessor(self)

    @property
    def to(self) -> TerminalAccessor[T]:
        return TerminalAccessor(self)

    def non_volatile(self) -> 'Seq[T]':
        """view of this sequence whose current() always returns an owned value"""
        return non_volatile(self)

    def __iter__(self) -> Iterator[T]:
        # the terminal error surfaces once the loop is over, never mid-iteration
        it = non_volatile(self)
        while it.advance():
            yield it.current()
        err = it.error()
        if err is not None:
            raise err

# --- volatile adapter ---

class _NonVolatileSeq(Seq[T]):
    def __init__(self, inner: ISeq[T]):
        self._inner = inner

    def advance(self) -> bool:
        return self._inner.advance()

    def current(self) -> T:
        return self._inner.current_copy()

    def error(self) -> Optional[Exception]:
        return self._inner.error()


def non_volatile(seq: ISeq[T]) -> Seq[T]:
    """
    wraps seq so that current() delegates to current_copy() when seq is volatile.
    sequences without the capability are returned unchanged.
    """
    if isinstance(seq, SupportsCurrentCopy):
        return _NonVolatileSeq(seq)
    return seq
