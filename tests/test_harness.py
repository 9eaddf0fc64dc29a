"""
Tests for the table-driven runner and the literal tables.
"""

import pytest

from textbook_crypto.harness.cases import (
    ALL_TEST_CASES, LETTER_TEST_CASES, NUMBER_THEORY_TEST_CASES, RSA_TEST_CASES
)
from textbook_crypto.harness.suite import (
    CaseResult, Outcome, SuiteReport, TestCase, run_suite, run_test_case,
    uncurry, uncurry3
)


def _divide(a, b):
    return a // b


class TestUncurry:
    """Tests for argument spreading helpers."""

    def test_uncurry(self):
        assert uncurry(_divide)((7, 2)) == 3

    def test_uncurry3(self):
        assert uncurry3(pow)((2, 10, 1000)) == 24

    def test_keeps_function_name(self):
        assert uncurry(_divide).__name__ == "_divide"


class TestRunTestCase:
    """Tests for running a single table."""

    def test_all_pass(self):
        table = TestCase("divide", uncurry(_divide), [((8, 2), 4), ((9, 3), 3)])
        results = run_test_case(table)
        assert [r.outcome for r in results] == [Outcome.PASS, Outcome.PASS]
        assert results[0].actual == 4

    def test_wrong_answer_is_fail(self):
        table = TestCase("divide", uncurry(_divide), [((8, 2), 5)])
        result, = run_test_case(table)
        assert result.outcome == Outcome.FAIL
        assert result.actual == 4
        assert "got 4" in result.describe()

    def test_exception_is_error(self):
        """A raising function is reported, not propagated."""
        table = TestCase("divide", uncurry(_divide), [((1, 0), 0), ((4, 2), 2)])
        results = run_test_case(table)
        assert results[0].outcome == Outcome.ERROR
        assert "ZeroDivisionError" in results[0].error
        assert results[1].passed

    def test_len(self):
        assert len(TestCase("empty", _divide, [])) == 0


class TestRunSuite:
    """Tests for the suite report."""

    def test_report_counts(self):
        tables = [
            TestCase("ok", uncurry(_divide), [((8, 2), 4)]),
            TestCase("bad", uncurry(_divide), [((8, 2), 3), ((1, 0), 0)]),
        ]
        lines = []
        report = run_suite(tables, out=lines.append)

        assert report.total == 3
        assert report.passed == 1
        assert not report.all_passed
        assert [r.outcome for r in report.failures] == [Outcome.FAIL, Outcome.ERROR]
        assert len(report.for_function("bad")) == 2

        assert lines[0] == "[ok] 1/1 ✓ PASS"
        assert lines[1] == "[bad] 0/2 ✗ FAIL"
        assert lines[-1] == "Overall: 1/3 tests passed!"

    def test_empty_report(self):
        report = SuiteReport()
        assert report.total == 0
        assert report.all_passed

    def test_case_result_defaults(self):
        result = CaseResult("f", 1, 2)
        assert result.passed
        assert result.error is None


class TestLiteralTables:
    """Every literal table should pass."""

    @pytest.mark.parametrize("table", ALL_TEST_CASES, ids=lambda t: t.name)
    def test_table_passes(self, table):
        results = run_test_case(table)
        failures = [r.describe() for r in results if not r.passed]
        assert not failures, failures

    def test_every_function_has_a_table(self):
        names = [t.name for t in ALL_TEST_CASES]
        assert names == [
            "gcd", "phi", "mod_pow", "compute_coeffs", "inverse",
            "smallest_coprime_of", "gen_keys", "rsa_encrypt", "rsa_decrypt",
            "to_int", "to_char", "add", "substract", "ecb_encrypt",
            "ecb_decrypt", "cbc_encrypt", "cbc_decrypt",
        ]

    def test_groups_make_up_all(self):
        assert ALL_TEST_CASES == NUMBER_THEORY_TEST_CASES + RSA_TEST_CASES + LETTER_TEST_CASES

    def test_full_suite_all_passed(self):
        lines = []
        report = run_suite(ALL_TEST_CASES, out=lines.append)
        assert report.all_passed
        assert report.total == sum(len(t) for t in ALL_TEST_CASES)
        assert lines[-1] == f"Overall: {report.total}/{report.total} tests passed!"
