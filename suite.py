import time
import logging
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_registered: List[Dict[str, Any]] = []

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'

_OK, _FAIL, _WARN, _INFO, _GREY, _RESET = (
    '\033[92m', '\033[91m', '\033[93m', '\033[94m', '\033[90m', '\033[0m')


class SuiteAssertionError(AssertionError):
    """a failed check, reported as a failure rather than a crash."""


def test(description: str) -> Callable:
    """register a zero-argument function as a case."""

    def decorator(func: Callable) -> Callable:
        _registered.append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """require func(*args) to raise error_type and hand the error back."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} from {getattr(func, '__name__', func)}")


def _run_case(func: Callable) -> Optional[str]:
    try:
        func()
    except SuiteAssertionError as e:
        return f"assertion failed: {e}"
    except Exception as e:
        return f"{type(e).__name__}: {e}"
    return None


def run(title: str = "test run", verbose: bool = False) -> bool:
    """run every registered case, print a report, return True when all passed."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(message)s')

    print(f"\n{_INFO}--- starting: {title} ---{_RESET}")
    started = time.perf_counter()

    failures = 0
    for case in _registered:
        error = _run_case(case['func'])
        if error is None:
            print(f"  {_OK}✔ pass{_RESET}  {PASS_FACE}  {case['description']}")
        else:
            failures += 1
            print(f"  {_FAIL}✖ fail{_RESET}  {FAIL_FACE}  {case['description']}")
            print(f"    {_GREY}└─> {error}{_RESET}")

    total = len(_registered)
    elapsed_ms = (time.perf_counter() - started) * 1000
    colour = _OK if failures == 0 else _FAIL
    print(f"\n{colour}--- summary ---{_RESET}")
    print(f"  {SUMMARY_FACE}  ran {_INFO}{total}{_RESET} tests in {_WARN}{elapsed_ms:.2f}ms{_RESET}")
    print(f"  {_OK}passed: {total - failures}{_RESET}, {_FAIL}failed: {failures}{_RESET}")
    print(f"{colour}---------------{_RESET}\n")

    _registered.clear()
    return failures == 0
