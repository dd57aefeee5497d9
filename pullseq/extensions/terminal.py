from __future__ import annotations
import typing
import logging
import queue
import threading
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

logger = logging.getLogger(__name__)


class TerminalAccessor(Generic[T]):
    """
    reductions and collectors. none of them raise the sequence's terminal error:
    check seq.error() afterwards to tell a clean end from a failure.
    """

    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    # --- collectors ---
    # all of them read through non_volatile(), so reused buffers are copied

    def list(self) -> List[T]:
        """convert to list"""
        it = self._seq.non_volatile()
        result = []
        while it.advance():
            result.append(it.current())
        return result

    def dict(self, key_selector: Optional[KeySelector[T, K]] = None,
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """
        convert to dictionary. by default elements are (key, value) pairs;
        with selectors any element works. later keys overwrite earlier ones.
        """
        result = {}
        it = self._seq.non_volatile()
        while it.advance():
            item = it.current()
            if key_selector is None:
                k, v = item
                result[k] = v if value_selector is None else value_selector(item)
            else:
                result[key_selector(item)] = item if value_selector is None else value_selector(item)
        return result

    def string(self) -> str:
        """concatenate code points (1-char strings or ints)"""
        return "".join(chr(c) if isinstance(c, int) else c for c in self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self.list())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def frame(self) -> pd.DataFrame:
        """convert to pandas dataframe, one row per element"""
        return pd.DataFrame(self.list())

    def channel(self, maxsize: int = 0) -> 'queue.Queue[T]':
        """
        start a daemon thread sending every element over a new queue, then CLOSED.
        if the receiver stops early on a bounded queue, the thread stays blocked forever.
        """
        ch = queue.Queue(maxsize)

        def worker():
            logger.debug("channel worker started")
            try:
                self.send_over(ch)
            finally:
                ch.put(CLOSED)
                logger.debug("channel worker finished, channel closed")

        threading.Thread(target=worker, name="pullseq-channel", daemon=True).start()
        return ch

    def send_over(self, ch: 'queue.Queue[T]') -> None:
        """put every element on ch, blocking until done. ch is not closed."""
        it = self._seq.non_volatile()
        while it.advance():
            ch.put(it.current())

    # --- reductions ---

    def count(self) -> int:
        """exhaust the sequence, returning the number of elements"""
        n = 0
        while self._seq.advance():
            n += 1
        return n

    def exhaust(self) -> None:
        """advance until the end, ignoring the elements"""
        while self._seq.advance():
            pass

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """whether any element (or predicate(elem)) is true. stops at the first one."""
        while self._seq.advance():
            e = self._seq.current()
            if (predicate(e) if predicate else e):
                return True
        return False

    def all(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """whether every element (or predicate(elem)) is true. stops at the first false."""
        while self._seq.advance():
            e = self._seq.current()
            if not (predicate(e) if predicate else e):
                return False
        return True

    def none(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """whether no element (or predicate(elem)) is true. stops at the first true."""
        return not self.any(predicate)

    def min(self, less: Optional[Less[T]] = None) -> Tuple[Optional[T], bool]:
        """smallest element by < or less(a, b), as (value, found)"""
        return self._extreme(less or (lambda a, b: a < b))

    def max(self, greater: Optional[Less[T]] = None) -> Tuple[Optional[T], bool]:
        """biggest element by > or greater(a, b), as (value, found)"""
        return self._extreme(greater or (lambda a, b: a > b))

    def _extreme(self, better: Less[T]) -> Tuple[Optional[T], bool]:
        best, found = None, False
        it = self._seq.non_volatile()
        while it.advance():
            e = it.current()
            if not found or better(e, best):
                best, found = e, True
        return best, found

    def reduce(self, f: Accumulator[T, T]) -> Tuple[Optional[T], bool]:
        """
        fold with f, seeded by the first element, as (value, found).
        reduce([1 2 3 4 5], add) -> (15, True); reduce([], add) -> (None, False)
        """
        acc, found = None, False
        it = self._seq.non_volatile()
        while it.advance():
            if found:
                acc = f(acc, it.current())
            else:
                acc, found = it.current(), True
        return acc, found

    def reduce_with_initial(self, f: Accumulator[R, T], initial: R) -> R:
        """fold with f starting from initial"""
        acc = initial
        it = self._seq.non_volatile()
        while it.advance():
            acc = f(acc, it.current())
        return acc

    def sum(self) -> T:
        """sum of all elements, 0 when empty"""
        r = 0
        while self._seq.advance():
            r += self._seq.current()
        return r

    def product(self) -> T:
        """product of all elements, 1 when empty"""
        r = 1
        while self._seq.advance():
            r *= self._seq.current()
        return r

    def for_each(self, action: Callable[[T], Any]) -> None:
        """call action on every element, exhausting the sequence"""
        while self._seq.advance():
            action(self._seq.current())

    def for_each_with_error(self, action: Callable[[T], Any]) -> Optional[Exception]:
        """
        call action on every element, stopping at the first exception it raises.
        that exception is returned (not stored on the sequence); None when all calls succeed.
        errors of the sequence itself are not checked.
        """
        while self._seq.advance():
            try:
                action(self._seq.current())
            except Exception as e:
                return e
        return None
