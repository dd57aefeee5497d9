from __future__ import annotations

import logging
import queue

from ..sequence import Seq
from ..types import *

logger = logging.getLogger(__name__)


class ListSeq(Seq[T]):
    """advances by index over a list. never errors."""

    def __init__(self, items: List[T]):
        self._items = items
        self._i = -1

    def advance(self) -> bool:
        if self._i >= len(self._items):
            return False
        self._i += 1
        return self._i < len(self._items)

    def current(self) -> T:
        return self._items[self._i]


class DictItemsSeq(Seq[Pair[K, V]]):
    def __init__(self, d: Dict[K, V]):
        self._it = iter(d.items())
        self._e: Optional[Pair[K, V]] = None

    def advance(self) -> bool:
        try:
            self._e = Pair(*next(self._it))
        except StopIteration:
            return False
        return True

    def current(self) -> Pair[K, V]:
        return self._e


class DictViewSeq(Seq[T]):
    """iterates dict keys or values"""

    def __init__(self, view: Iterable[T]):
        self._it = iter(view)
        self._e = None

    def advance(self) -> bool:
        try:
            self._e = next(self._it)
        except StopIteration:
            return False
        return True

    def current(self) -> T:
        return self._e


# lead byte -> length of the utf-8 encoded code point
def _utf8_length(lead: int) -> int:
    if lead < 0x80: return 1
    if 0xC2 <= lead <= 0xDF: return 2
    if 0xE0 <= lead <= 0xEF: return 3
    if 0xF0 <= lead <= 0xF4: return 4
    return 0


class StringSeq(Seq[str]):
    """
    code points of a str, or of utf-8 bytes decoded one code point at a time.
    every invalid byte becomes U+FFFD and moves the position by exactly one byte.
    """

    REPLACEMENT = "\ufffd"

    def __init__(self, s: Union[str, bytes]):
        self._s = s
        self._pos = 0
        self._e = ""

    def advance(self) -> bool:
        if self._pos >= len(self._s):
            return False
        if isinstance(self._s, str):
            self._e = self._s[self._pos]
            self._pos += 1
            return True

        n = _utf8_length(self._s[self._pos])
        decoded = None
        if n and self._pos + n <= len(self._s):
            try:
                decoded = self._s[self._pos:self._pos + n].decode("utf-8")
            except UnicodeDecodeError:
                pass

        if decoded is None:
            self._e = self.REPLACEMENT
            self._pos += 1
        else:
            self._e = decoded
            self._pos += n
        return True

    def current(self) -> str:
        return self._e


class ChannelSeq(Seq[T]):
    """
    receives from a queue until CLOSED arrives. advance() blocks while the queue is empty.
    the sentinel is put back so every other receiver also sees the channel as closed.
    never errors.
    """

    def __init__(self, ch: 'queue.Queue[T]'):
        self._ch = ch
        self._e = None

    def advance(self) -> bool:
        e = self._ch.get()
        if e is CLOSED:
            self._ch.put(CLOSED)
            return False
        self._e = e
        return True

    def current(self) -> T:
        return self._e


class ReaderSeq(Seq[T]):
    """
    calls read() once per step. EOFError and StopIteration mean a clean end,
    any other exception ends the sequence and becomes its terminal error.
    """

    def __init__(self, read: Callable[[], T]):
        self._read = read
        self._e = None
        self._err: Optional[Exception] = None

    def advance(self) -> bool:
        try:
            self._e = self._read()
        except (EOFError, StopIteration):
            return False
        except Exception as e:
            logger.debug(f"reader failed, ending sequence: {e!r}")
            self._err = e
            return False
        return True

    def current(self) -> T:
        return self._e

    def error(self) -> Optional[Exception]:
        return self._err


class EmptySeq(Seq[T]):
    def advance(self) -> bool:
        return False

    def current(self) -> T:
        raise RuntimeError("can't get from an empty sequence")


class ErrorSeq(Seq[T]):
    """no elements, reports a fixed error"""

    def __init__(self, err: Exception):
        self._err = err

    def advance(self) -> bool:
        return False

    def current(self) -> T:
        raise RuntimeError("can't get from an error sequence")

    def error(self) -> Optional[Exception]:
        return self._err
