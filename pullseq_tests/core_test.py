import importlib.util
import operator
import warnings
import suite
import pullseq
from pullseq import (
    over, over_reader, from_iterable, from_range, infinite_range, cycle, chain,
    chain_from_iterator, empty, error, power_set, combinations, zip_all, non_volatile,
    SupportsCurrentCopy, Pair
)

assert_that = suite.assert_that
assert_eq = suite.assert_eq

# --- helpers ---

def failing(items, err):
    def gen():
        yield from items
        raise err
    return from_iterable(gen())


class Counted:
    """a reader over items that counts how often it was called"""
    def __init__(self, items):
        self.calls = 0
        self._it = iter(items)

    def __call__(self):
        self.calls += 1
        return next(self._it)

# --- map ---

@suite.test("map applies f to every element")
def test_map():
    assert_eq(over(1, 2, 3).map(lambda x: x * 10).to.list(), [10, 20, 30])
    assert_eq(empty().map(str).to.list(), [])


@suite.test("map calls f once per step for a single-read consumer")
def test_map_call_count():
    calls = []
    over("a", "b", "c").map(lambda s: calls.append(s) or s.upper()).to.list()
    assert_eq(calls, ["a", "b", "c"])


@suite.test("map forwards the source's error")
def test_map_error():
    err = ValueError("boom")
    seq = failing([1], err).map(str)
    assert_eq(seq.to.list(), ["1"])
    suite.assert_error_is(seq, err)


@suite.test("map_with_error stops at the first exception raised by f")
def test_map_with_error():
    err = ZeroDivisionError("bad divisor")

    def invert(x):
        if x == 0:
            raise err
        return 1 / x

    seq = over(1, 2, 0, 4).map_with_error(invert)
    assert_eq(seq.to.list(), [1.0, 0.5])
    suite.assert_error_is(seq, err)


@suite.test("map_with_error reports the source's error when f never fails")
def test_map_with_error_source_error():
    err = RuntimeError("source broke")
    seq = failing([1, 2], err).map_with_error(lambda x: x + 1)
    assert_eq(seq.to.list(), [2, 3])
    suite.assert_error_is(seq, err)

# --- filtering ---

@suite.test("filter keeps matching elements")
def test_filter():
    assert_eq(from_range(10).filter(lambda x: x % 3 == 0).to.list(), [0, 3, 6, 9])
    assert_eq(over(1, 3).filter(lambda x: x % 2 == 0).to.count(), 0)


@suite.test("drop_while skips only the leading run")
def test_drop_while():
    assert_eq(over(1, 2, 3, 1).drop_while(lambda x: x < 3).to.list(), [3, 1])
    assert_eq(over(1, 2).drop_while(lambda x: x < 10).to.list(), [])


@suite.test("take_while stops at the first failure and leaves the rest of the source")
def test_take_while():
    source = over(1, 2, 3, 4)
    assert_eq(source.take_while(lambda x: x < 3).to.list(), [1, 2])
    assert_eq(source.to.list(), [4], "the failing element is consumed, the rest is not")


@suite.test("take_while only reports the error of an exhausted source")
def test_take_while_error():
    err = OSError("read failed")
    stopped = failing([1, 5], err).take_while(lambda x: x < 3)
    assert_eq(stopped.to.list(), [1])
    suite.assert_error_is(stopped, None)

    ran_out = failing([1, 2], err).take_while(lambda x: x < 3)
    assert_eq(ran_out.to.list(), [1, 2])
    suite.assert_error_is(ran_out, err)

# --- limit, skip and slice ---

@suite.test("limit yields at most n elements")
def test_limit():
    assert_eq(infinite_range().limit(4).to.list(), [0, 1, 2, 3])
    assert_eq(over(1, 2).limit(10).to.list(), [1, 2])
    suite.assert_raises(ValueError, lambda: over(1).limit(-1))


@suite.test("limit(0) never advances the source")
def test_limit_zero():
    reader = Counted([1, 2, 3])
    assert_eq(over_reader(reader).limit(0).to.list(), [])
    assert_eq(reader.calls, 0)


@suite.test("limit does not pull past the last element it yields")
def test_limit_lazy():
    reader = Counted(range(100))
    assert_eq(over_reader(reader).limit(3).to.list(), [0, 1, 2])
    assert_eq(reader.calls, 3)


@suite.test("limit has no error when it stopped at its count")
def test_limit_error():
    err = ValueError("late failure")
    cut = failing([1, 2, 3], err).limit(2)
    assert_eq(cut.to.list(), [1, 2])
    suite.assert_error_is(cut, None)

    short = failing([1], err).limit(5)
    assert_eq(short.to.list(), [1])
    suite.assert_error_is(short, err)


@suite.test("skip drops the first n elements lazily")
def test_skip():
    assert_eq(over(1, 2, 3, 4, 5).skip(2).to.list(), [3, 4, 5])
    assert_eq(over(1, 2).skip(10).to.list(), [], "skipping past the end yields nothing")
    assert_eq(over(1, 2).skip(0).to.list(), [1, 2])
    suite.assert_raises(ValueError, lambda: over(1).skip(-1))

    reader = Counted([1, 2, 3])
    skipped = over_reader(reader).skip(2)
    assert_eq(reader.calls, 0, "nothing is pulled before the first advance")
    assert_eq(skipped.to.list(), [3])


@suite.test("slice takes positions in [start, stop)")
def test_slice():
    letters = lambda: over("a", "b", "c", "d", "e")
    assert_eq(letters().slice(1, 3).to.string(), "bc")
    assert_eq(letters().slice(2, 2).to.count(), 0)
    assert_eq(letters().slice(3, 99).to.string(), "de")


@suite.test("slice rejects negative or inverted bounds")
def test_slice_errors():
    suite.assert_raises(ValueError, lambda: over(1).slice(2, 1))
    suite.assert_raises(ValueError, lambda: over(1).slice(-1, 2))
    suite.assert_raises(ValueError, lambda: over(1).slice(0, -2))

# --- enumerate ---

@suite.test("enumerate pairs elements with a running index")
def test_enumerate():
    pairs = over("a", "b").enumerate().to.list()
    assert_eq(pairs, [Pair(0, "a"), Pair(1, "b")])
    assert_eq(pairs[1].first, 1)
    assert_eq(pairs[1].second, "b")
    assert_eq(over("x").enumerate(1).to.list(), [(1, "x")])

# --- chaining ---

@suite.test("chain concatenates sequences")
def test_chain():
    assert_eq(chain(over(1, 2), over(3, 4), over(5, 6)).to.list(), [1, 2, 3, 4, 5, 6])
    assert_eq(over(1).chain(empty(), over(2)).to.list(), [1, 2])
    assert_eq(chain().to.count(), 0)


@suite.test("chain stops at the first inner sequence that errors")
def test_chain_error():
    err = ValueError("inner failed")
    seq = chain(over(1), error(err), over(2))
    assert_eq(seq.to.list(), [1])
    suite.assert_error_is(seq, err)


@suite.test("chain_from_iterator pulls inner sequences lazily")
def test_chain_from_iterator():
    made = []

    def inner(n):
        made.append(n)
        return cycle(n, n)

    seq = chain_from_iterator(from_range(1, 4).map(inner))
    assert_eq(made, [])
    assert_eq(seq.limit(1).to.list(), [1])
    assert_eq(made, [1], "only the first inner sequence should exist")


@suite.test("chain_map flattens mapped sequences")
def test_chain_map():
    assert_eq(over(1, 2, 3).chain_map(lambda n: cycle(n, n)).to.list(), [1, 2, 2, 3, 3, 3])
    assert_eq(over().chain_map(lambda n: over(n)).to.list(), [])

# --- accumulate ---

@suite.test("accumulate yields running results")
def test_accumulate():
    assert_eq(over(1, 2, 3, 4, 5).accumulate(operator.add).to.list(), [1, 3, 6, 10, 15])
    assert_eq(over("a", "b", "c").accumulate(operator.add).to.list(), ["a", "ab", "abc"])
    assert_eq(empty().accumulate(operator.add).to.list(), [])


@suite.test("accumulate_with_initial emits the initial value first")
def test_accumulate_with_initial():
    assert_eq(over(1, 2, 3).accumulate_with_initial(operator.add, 5).to.list(), [5, 6, 8, 11])
    assert_eq(empty().accumulate_with_initial(operator.add, 5).to.list(), [5])
    lengths = over("ab", "c").accumulate_with_initial(lambda acc, s: acc + len(s), 0)
    assert_eq(lengths.to.list(), [0, 2, 3])

# --- sorting ---

@suite.test("sort uses the natural order")
def test_sort():
    assert_eq(over(3, 1, 2).sort().to.list(), [1, 2, 3])
    assert_eq(empty().sort().to.list(), [])


@suite.test("sort_func orders by a comparator")
def test_sort_func():
    assert_eq(over(3, 1, 2).sort_func(lambda a, b: a > b).to.list(), [3, 2, 1])


@suite.test("sort_stable_func keeps equal elements in input order")
def test_sort_stable_func():
    rows = [("b", 1), ("a", 1), ("c", 0), ("d", 1)]
    ordered = over(*rows).sort_stable_func(lambda x, y: x[1] < y[1]).to.list()
    assert_eq(ordered, [("c", 0), ("b", 1), ("a", 1), ("d", 1)])

# --- volatility ---

@suite.test("non_volatile leaves ordinary sequences alone")
def test_non_volatile_passthrough():
    seq = over(1)
    assert_that(non_volatile(seq) is seq, "a non-volatile sequence should be returned as is")
    assert_that(not isinstance(seq, SupportsCurrentCopy), "list sources are not volatile")


@suite.test("pass-through combinators keep the volatile capability")
def test_pass_through_volatility():
    filtered = power_set(1, 2, 3).filter(lambda s: len(s) == 1)
    assert_that(isinstance(filtered, SupportsCurrentCopy), "filter over a volatile source is volatile")
    singles = filtered.to.list()
    assert_eq(singles, [[1], [2], [3]], "collected buffers should be independent copies")

    limited = power_set(1, 2).skip(1).limit(2)
    assert_that(isinstance(limited, SupportsCurrentCopy), "skip and limit should stay volatile")
    assert_eq(limited.to.list(), [[1], [2]])


@suite.test("chain copies elements of volatile inner sequences")
def test_chain_volatile():
    chained = chain(combinations(1, "a", "b"), power_set(1))
    assert_eq(chained.to.list(), [["a"], ["b"], [], [1]])

    mixed = chain(over([0]), zip_all(over(1, 2), over(3, 4)))
    assert_eq(mixed.to.list(), [[0], [1, 3], [2, 4]], "plain and volatile inner sequences can be mixed")


@suite.test("chain_map copies elements of volatile mapped sequences")
def test_chain_map_volatile():
    flattened = over(2, 3).chain_map(lambda n: combinations(n - 1, *range(n)))
    assert_eq(flattened.to.list(), [[0], [1], [0, 1], [0, 2], [1, 2]])


@suite.test("enumerate pairs indices with copies of volatile elements")
def test_enumerate_volatile():
    numbered = power_set("x", "y").enumerate(1)
    assert_that(isinstance(numbered, SupportsCurrentCopy), "enumerate over a volatile source offers copies")
    assert_eq(numbered.to.list(), [(1, []), (2, ["x"]), (3, ["y"]), (4, ["x", "y"])])
    assert_eq(over("a").enumerate().to.list(), [Pair(0, "a")])

# --- package ---

@suite.test("the package source compiles without escape warnings")
def test_package_banner():
    path = importlib.util.find_spec("pullseq").origin
    with open(path, encoding="utf-8") as f:
        source = f.read()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        compile(source, path, "exec")
    assert_that(r"| '_ \| | | |" in pullseq.__doc__, "the banner keeps its backslashes")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="pullseq core test")
