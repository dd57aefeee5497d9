import numpy as np
import suite
from pullseq import (
    over, cycle, cycle_seq, repeat, repeat_seq, from_range, infinite_range, repeatedly_apply
)

assert_that = suite.assert_that
assert_eq = suite.assert_eq

# --- cycle ---

@suite.test("cycle repeats its items n times")
def test_cycle():
    assert_eq(cycle(3, "a", "b", "c").to.string(), "abcabcabc")
    assert_eq(cycle(1, 7).to.list(), [7])


@suite.test("cycle edge cases: zero loops, no items, negative loops")
def test_cycle_edges():
    assert_eq(cycle(0, 1, 2).to.count(), 0)
    assert_eq(cycle(5).to.count(), 0)
    suite.assert_raises(ValueError, lambda: cycle(-1, "a"))


@suite.test("cycle_seq collects a sequence before cycling it")
def test_cycle_seq():
    assert_eq(cycle_seq(over(1, 2), 2).to.list(), [1, 2, 1, 2])
    assert_eq(cycle_seq(over(), 4).to.list(), [])

# --- repeat ---

@suite.test("repeat goes on forever")
def test_repeat():
    assert_eq(repeat("x", "y").limit(5).to.string(), "xyxyx")
    assert_eq(repeat(0).limit(1000).to.count(), 1000)
    suite.assert_raises(ValueError, repeat)


@suite.test("repeat_seq repeats a collected sequence")
def test_repeat_seq():
    assert_eq(repeat_seq(over(1)).limit(3).to.list(), [1, 1, 1])
    suite.assert_raises(ValueError, lambda: repeat_seq(over()))

# --- ranges ---

@suite.test("from_range counts from start to stop by step")
def test_from_range():
    assert_eq(from_range(5).to.list(), [0, 1, 2, 3, 4])
    assert_eq(from_range(5, 12, 2).to.list(), [5, 7, 9, 11])
    assert_eq(from_range(3, 3).to.count(), 0)
    assert_eq(from_range(5, 0, -1).to.count(), 0, "a bound below start is never reached")


@suite.test("from_range works with floats and numpy scalars")
def test_from_range_numeric_types():
    assert_eq(from_range(0.0, 1.0, 0.25).to.list(), [0.0, 0.25, 0.5, 0.75])
    values = from_range(np.int64(3)).to.list()
    assert_eq(values, [0, 1, 2])
    assert_that(all(isinstance(v, np.int64) for v in values), "the start type should be kept")


@suite.test("infinite_range never ends")
def test_infinite_range():
    assert_eq(infinite_range().limit(3).to.list(), [0, 1, 2])
    assert_eq(infinite_range(10, 5).limit(3).to.list(), [10, 15, 20])
    assert_eq(infinite_range(0, -2).limit(3).to.list(), [0, -2, -4])


@suite.test("repeatedly_apply yields v, f(v), f(f(v)), ...")
def test_repeatedly_apply():
    assert_eq(repeatedly_apply(lambda x: x * 2, 1).limit(5).to.list(), [1, 2, 4, 8, 16])
    collatz = repeatedly_apply(lambda n: n // 2 if n % 2 == 0 else 3 * n + 1, 6)
    assert_eq(collatz.take_while(lambda n: n != 1).to.list(), [6, 3, 10, 5, 16, 8, 4, 2])


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="pullseq infinite sources test")
