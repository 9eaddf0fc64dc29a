"""
Table-Driven Test Runner

Runs literal (input, expected output) tables against functions and
reports pass/fail per case, per function and overall.

Each table is a TestCase:
    TestCase("gcd", uncurry(gcd), [((12, 16), 4), ((65, 40), 5)])

Inputs with several arguments are stored as tuples and spread into the
function with uncurry/uncurry3. An exception raised by the function under
test is reported as an ERROR outcome; the runner itself keeps going.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Tuple


log = logging.getLogger(__name__)


# ============================================================================
# Helpers
# ============================================================================

def uncurry(function: Callable[[Any, Any], Any]) -> Callable[[Tuple[Any, Any]], Any]:
    """Turn a two-argument function into one taking a 2-tuple."""
    def wrapper(args: Tuple[Any, Any]) -> Any:
        a, b = args
        return function(a, b)
    wrapper.__name__ = getattr(function, '__name__', 'uncurried')
    return wrapper


def uncurry3(function: Callable[[Any, Any, Any], Any]) -> Callable[[Tuple[Any, Any, Any]], Any]:
    """Turn a three-argument function into one taking a 3-tuple."""
    def wrapper(args: Tuple[Any, Any, Any]) -> Any:
        a, b, c = args
        return function(a, b, c)
    wrapper.__name__ = getattr(function, '__name__', 'uncurried')
    return wrapper


# ============================================================================
# Result Types
# ============================================================================

class Outcome(Enum):
    """Result of running a single table row."""
    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"


@dataclass
class TestCase:
    """
    A named function together with its (input, expected) table.
    """
    __test__ = False  # not a pytest test class

    name: str
    function: Callable[[Any], Any]
    cases: List[Tuple[Any, Any]]

    def __len__(self) -> int:
        return len(self.cases)


@dataclass
class CaseResult:
    """Outcome of one (input, expected) row."""
    name: str
    arguments: Any
    expected: Any
    actual: Any = None
    outcome: Outcome = Outcome.PASS
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.outcome == Outcome.PASS

    def describe(self) -> str:
        """One-line human readable description."""
        if self.outcome == Outcome.ERROR:
            return f"{self.arguments} => {self.expected}, raised {self.error}"
        if self.outcome == Outcome.FAIL:
            return f"{self.arguments} => {self.expected}, got {self.actual}"
        return f"{self.arguments} => {self.actual}"


@dataclass
class SuiteReport:
    """Collected results of a suite run."""
    results: List[CaseResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failures(self) -> List[CaseResult]:
        """Results that did not pass (FAIL or ERROR)."""
        return [r for r in self.results if not r.passed]

    @property
    def all_passed(self) -> bool:
        return self.passed == self.total

    def for_function(self, name: str) -> List[CaseResult]:
        return [r for r in self.results if r.name == name]


# ============================================================================
# Runner
# ============================================================================

def run_test_case(test_case: TestCase) -> List[CaseResult]:
    """
    Run every row of one table.

    Args:
        test_case: The named function and its table

    Returns:
        One CaseResult per row, in table order
    """
    results = []
    for arguments, expected in test_case.cases:
        result = CaseResult(test_case.name, arguments, expected)
        try:
            result.actual = test_case.function(arguments)
        except Exception as exc:
            result.outcome = Outcome.ERROR
            result.error = f"{type(exc).__name__}: {exc}"
            log.debug("%s%r raised %s", test_case.name, arguments, result.error)
        else:
            if result.actual != expected:
                result.outcome = Outcome.FAIL
        results.append(result)
    return results


def run_suite(test_cases: Iterable[TestCase],
              out: Callable[[str], None] = print) -> SuiteReport:
    """
    Run a list of tables and print a report.

    Args:
        test_cases: Tables to run, in order
        out: Where report lines go (print by default)

    Returns:
        SuiteReport with every row's result
    """
    report = SuiteReport()

    for test_case in test_cases:
        results = run_test_case(test_case)
        report.results.extend(results)

        passed = sum(1 for r in results if r.passed)
        status = "✓ PASS" if passed == len(results) else "✗ FAIL"
        out(f"[{test_case.name}] {passed}/{len(results)} {status}")
        for result in results:
            if not result.passed:
                out(f"  {result.outcome.value.upper()}: {result.describe()}")

    out("=" * 70)
    out(f"Overall: {report.passed}/{report.total} tests passed!")

    return report
