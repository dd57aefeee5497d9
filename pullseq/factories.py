import queue
import typing
from .types import *
from .sequence import non_volatile
from .extensions.combinatorics import MAX_POWER_SET_ITEMS, materialize

if typing.TYPE_CHECKING:
    from .sequence import Seq, ISeq

# --- sources ---

def over(*items: T) -> 'Seq[T]':
    """sequence over the arguments"""
    from .iterators.sources import ListSeq
    return ListSeq(list(items))

def over_list(items: List[T]) -> 'Seq[T]':
    """sequence over a list, without copying it"""
    from .iterators.sources import ListSeq
    return ListSeq(items)

def over_map(d: Dict[K, V]) -> 'Seq[Pair[K, V]]':
    """key-value pairs of a dict. callers must not rely on the order."""
    from .iterators.sources import DictItemsSeq
    return DictItemsSeq(d)

def over_map_keys(d: Dict[K, V]) -> 'Seq[K]':
    """keys of a dict, in no guaranteed order"""
    from .iterators.sources import DictViewSeq
    return DictViewSeq(d.keys())

def over_map_values(d: Dict[K, V]) -> 'Seq[V]':
    """values of a dict, in no guaranteed order"""
    from .iterators.sources import DictViewSeq
    return DictViewSeq(d.values())

def over_string(s: Union[str, bytes]) -> 'Seq[str]':
    """code points of s. invalid utf-8 bytes each become U+FFFD."""
    from .iterators.sources import StringSeq
    return StringSeq(s)

def over_channel(ch: 'queue.Queue[T]') -> 'Seq[T]':
    """
    elements received from ch until CLOSED. advance() blocks until something arrives.
    abandoning the sequence early may leave the producer blocked on a bounded queue.
    """
    from .iterators.sources import ChannelSeq
    return ChannelSeq(ch)

def over_reader(read: Callable[[], T]) -> 'Seq[T]':
    """
    one record per read() call. EOFError or StopIteration end the sequence
    cleanly; any other exception becomes its error().

        over_reader(csv.DictReader(f).__next__)
    """
    from .iterators.sources import ReaderSeq
    return ReaderSeq(read)

def from_iterable(data: Iterable[T]) -> 'Seq[T]':
    """lazy sequence over any python iterable; exceptions it raises become error()"""
    return over_reader(iter(data).__next__)

def empty() -> 'Seq[Any]':
    """no elements, no error"""
    from .iterators.sources import EmptySeq
    return EmptySeq()

def error(err: Exception) -> 'Seq[Any]':
    """no elements, error() returns err"""
    from .iterators.sources import ErrorSeq
    return ErrorSeq(err)

# --- ranges and repetition ---

def from_range(start: Numeric, stop: Optional[Numeric] = None, step: Numeric = 1) -> 'Seq[Numeric]':
    """
    numbers from start, adding step, while below stop. with one argument it's
    the stop and counting starts at 0. a negative step never reaches the bound.

        from_range(5) -> [0 1 2 3 4]
        from_range(5, 12, 2) -> [5 7 9 11]
    """
    from .iterators.infinite import RangeSeq
    if stop is None:
        start, stop = type(start)(0), start
    return RangeSeq(start, stop, step)

def infinite_range(start: Numeric = 0, step: Numeric = 1) -> 'Seq[Numeric]':
    """start, start + step, start + 2*step, ... forever"""
    from .iterators.infinite import RangeSeq
    return RangeSeq(start, None, step)

def cycle(n: int, *items: T) -> 'Seq[T]':
    """
    items, n times over.
    cycle(3, "a", "b", "c") -> "abcabcabc"; cycle(0, ...) and cycle(n) are empty.
    """
    from .iterators.infinite import CycleSeq
    if n < 0:
        raise ValueError(f"can't cycle {n} (negative) times")
    if not items or n == 0:
        return empty()
    return CycleSeq(list(items), n)

def cycle_seq(seq: 'ISeq[T]', n: int) -> 'Seq[T]':
    """collect seq, then cycle through it n times"""
    return cycle(n, *materialize(seq))

def repeat(*items: T) -> 'Seq[T]':
    """items over and over, forever"""
    from .iterators.infinite import RepeatSeq
    if not items:
        raise ValueError("can't repeat zero elements")
    return RepeatSeq(list(items))

def repeat_seq(seq: 'ISeq[T]') -> 'Seq[T]':
    """collect seq, then repeat it forever. seq must not be empty."""
    return repeat(*materialize(seq))

def repeatedly_apply(f: Callable[[T], T], v: T) -> 'Seq[T]':
    """v, f(v), f(f(v)), ..."""
    from .iterators.infinite import RepeatedlyApplySeq
    return RepeatedlyApplySeq(f, v)

# --- multiple sequences ---

def chain(*seqs: 'ISeq[T]') -> 'Seq[T]':
    """every sequence in turn"""
    return chain_from_iterator(over(*seqs))

def chain_from_iterator(seqs: 'ISeq[ISeq[T]]') -> 'Seq[T]':
    """every sequence produced by seqs in turn, pulled lazily"""
    from .iterators.elementwise import ChainSeq
    return ChainSeq(seqs)

def zip_all(*seqs: 'ISeq[T]') -> 'Seq[List[T]]':
    """
    one element of every sequence per step, stopping at the shortest.
    the list is reused between steps; use current_copy() or a collector to keep it.
    """
    from .iterators.multi import ZipSeq
    return ZipSeq([non_volatile(s) for s in seqs])

def zip_longest(fill: T, *seqs: 'ISeq[T]') -> 'Seq[List[T]]':
    """
    like zip_all, but runs to the longest sequence, padding with fill.
    zip_longest("-", "ab", "123", "x") -> ["a1x" "b2-" "-3-"]
    """
    from .iterators.multi import ZipLongestSeq
    return ZipLongestSeq(fill, [non_volatile(s) for s in seqs])

def pairwise(a: 'ISeq[T]', b: 'ISeq[U]') -> 'Seq[Pair[T, U]]':
    """pairs of corresponding elements, stopping at the shorter sequence"""
    from .iterators.multi import PairwiseSeq
    return PairwiseSeq(non_volatile(a), non_volatile(b))

def pairwise_longest(a: 'ISeq[T]', b: 'ISeq[U]', fill_a: T, fill_b: U) -> 'Seq[Pair[T, U]]':
    """pairs of corresponding elements, padding the shorter sequence"""
    from .iterators.multi import PairwiseLongestSeq
    return PairwiseLongestSeq(non_volatile(a), non_volatile(b), fill_a, fill_b)

# --- combinatorics ---
# every sequence here reuses one list between steps, see SupportsCurrentCopy

def cartesian_product(*lists: List[T]) -> 'Seq[List[T]]':
    """
    cartesian product, equivalent to nested for loops.
    empty when there are no lists or any of them is empty.
    """
    from .iterators.combinatorics import CartesianProductSeq
    if not lists or any(len(inner) == 0 for inner in lists):
        return empty()
    return CartesianProductSeq(list(lists))

def cartesian_product_seq(seqs: 'ISeq[ISeq[T]]') -> 'Seq[List[T]]':
    """collect the outer and every inner sequence, then build their cartesian product"""
    return cartesian_product(*[materialize(inner) for inner in materialize(seqs)])

def _check_r(r: int) -> None:
    if r < 0:
        raise ValueError(f"r can't be negative, got {r}")

def combinations(r: int, *items: T) -> 'Seq[List[T]]':
    """
    r-length subsequences in lexicographic order (by position); an element is used once.
    combinations(2, "a", "b", "c", "d") -> ["ab" "ac" "ad" "bc" "bd" "cd"]
    """
    from .iterators.combinatorics import CombinationsSeq
    _check_r(r)
    if r > len(items):
        return empty()
    if r == 0:
        return over([])
    return CombinationsSeq(list(items), r)

def combinations_with_replacement(r: int, *items: T) -> 'Seq[List[T]]':
    """
    r-length subsequences in lexicographic order where elements may repeat.
    combinations_with_replacement(2, "a", "b", "c") -> ["aa" "ab" "ac" "bb" "bc" "cc"]
    """
    from .iterators.combinatorics import CombinationsWithReplacementSeq
    _check_r(r)
    if r == 0:
        return over([])
    if not items:
        return empty()
    return CombinationsWithReplacementSeq(list(items), r)

def permutations(r: int, *items: T) -> 'Seq[List[T]]':
    """
    r-length orderings in lexicographic order (by position).
    permutations(2, "a", "b", "c") -> ["ab" "ac" "ba" "bc" "ca" "cb"]
    """
    from .iterators.combinatorics import PermutationsSeq
    _check_r(r)
    if r > len(items):
        return empty()
    if r == 0:
        return over([])
    return PermutationsSeq(list(items), r)

def power_set(*items: T) -> 'Seq[List[T]]':
    """
    every subset of items, the empty one first.
    power_set(1, 2) -> [[] [1] [2] [1 2]]
    """
    from .iterators.combinatorics import PowerSetSeq
    if len(items) > MAX_POWER_SET_ITEMS:
        raise ValueError(f"power_set only supports up to {MAX_POWER_SET_ITEMS} elements, got {len(items)}")
    return PowerSetSeq(list(items))

# --- aliases ---
S = from_iterable
