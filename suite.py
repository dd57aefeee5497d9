import time
import traceback
from typing import List, Dict, Any, Callable, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- custom exception for assertions ---

class TestAssertionError(AssertionError):
    """raised by the assert helpers, so failures read differently from crashes."""
    __test__ = False

# --- public api ---

def test(description: str) -> Callable:
    """
    register a function as a test case. the function itself is returned untouched,
    so pytest can collect the same module.
    """

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})
        return func

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_eq(actual: Any, expected: Any, message: str = "values differ") -> None:
    """equality check that reports both sides"""
    if actual != expected:
        raise TestAssertionError(f"{message}: expected {expected!r}, got {actual!r}")


def assert_raises(exc_type: Type[BaseException], func: Callable[[], Any], message: str = "") -> BaseException:
    """call func, which must raise exc_type. the exception is returned for further checks."""
    try:
        func()
    except exc_type as e:
        return e
    raise TestAssertionError(message or f"expected {exc_type.__name__} to be raised")


def assert_error_is(seq: Any, expected: Optional[BaseException], message: str = "unexpected terminal error") -> None:
    """the sequence's error() must be exactly expected (by identity)"""
    actual = seq.error()
    if actual is not expected:
        raise TestAssertionError(f"{message}: expected {expected!r}, got {actual!r}")


def run(title: str = "test run", verbose: bool = False) -> None:
    """executes all registered tests and prints a report."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        func = test_item['func']
        description = test_item['description']

        passed = False
        error = None

        try:
            func()
            passed = True
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose:
                traceback.print_exc()

        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    _print_summary(start_time)

    # clear tests after run to allow for multiple, separate suite runs in a single script
    _suite_state['tests'] = []


def _print_summary(start_time: float) -> None:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
