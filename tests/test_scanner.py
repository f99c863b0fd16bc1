#!/usr/bin/env python3
"""
Scanner Tests

Tests proving:
1. Acceptance of digit runs and digit-operator-digit chains
2. Rejection of empty input, leading operators, doubled operators and
   foreign characters
3. Trailing operator after a digit is reported valid ("3+" -> True)
4. Any input that reaches ERROR is reported invalid
5. Determinism: repeated and concurrent scans agree
"""

import dataclasses
import itertools
import os
import re
import sys
import unittest
from concurrent.futures import ThreadPoolExecutor

_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(_REPO_ROOT, 'src'))

from expr_fsm import (
    FsmState,
    ScanResult,
    scan,
    final_state,
    is_valid_expression,
)

# Same language as the FSM, including a trailing operator
_REFERENCE_PATTERN = re.compile(r'[0-9]+([+-][0-9]+)*[+-]?')


class TestAcceptedExpressions(unittest.TestCase):

    def test_single_digits(self):
        for ch in "0123456789":
            self.assertTrue(is_valid_expression(ch), f"{ch!r} should be valid")

    def test_multi_digit_numbers(self):
        for text in ["12", "123", "0000", "9876543210"]:
            self.assertTrue(is_valid_expression(text), f"{text!r} should be valid")

    def test_operator_chains(self):
        for text in ["3+2-1", "1+1", "10-20", "1-2-3-4+5", "007+8"]:
            self.assertTrue(is_valid_expression(text), f"{text!r} should be valid")

    def test_known_scenarios(self):
        self.assertTrue(is_valid_expression("3+2-1"))
        self.assertFalse(is_valid_expression("3++2"))
        self.assertFalse(is_valid_expression(""))
        self.assertTrue(is_valid_expression("7"))
        self.assertFalse(is_valid_expression("+7"))


class TestRejectedExpressions(unittest.TestCase):

    def test_empty_input(self):
        self.assertFalse(is_valid_expression(""))
        self.assertEqual(final_state(""), FsmState.START)

    def test_leading_operator(self):
        for text in ["+3", "-1", "+", "-", "-12+3"]:
            self.assertFalse(is_valid_expression(text), f"{text!r} should be invalid")

    def test_consecutive_operators(self):
        for text in ["3++2", "3+-2", "3--2", "1-+1", "3+2--1"]:
            self.assertFalse(is_valid_expression(text), f"{text!r} should be invalid")

    def test_foreign_characters(self):
        for text in ["3a2", "3*2", "3/2", "(3)", "3.5", "3 + 2", " 3", "3\n", "٣"]:
            self.assertFalse(is_valid_expression(text), f"{text!r} should be invalid")


class TestTrailingOperator(unittest.TestCase):
    """
    A digit followed by a final operator ends in ACCEPT_AFTER_OPERATOR,
    which is an accepting state, so the input is reported valid.
    """

    def test_trailing_plus_is_valid(self):
        self.assertTrue(is_valid_expression("3+"))
        self.assertEqual(final_state("3+"), FsmState.ACCEPT_AFTER_OPERATOR)

    def test_trailing_minus_is_valid(self):
        self.assertTrue(is_valid_expression("12-"))
        self.assertTrue(is_valid_expression("1+2-"))

    def test_trailing_double_operator_is_invalid(self):
        self.assertFalse(is_valid_expression("3+-"))


class TestScanResult(unittest.TestCase):

    def test_full_scan(self):
        self.assertEqual(
            scan("3+2-1"),
            ScanResult(valid=True, final_state=FsmState.ACCEPT_DIGIT)
        )

    def test_empty_scan(self):
        self.assertEqual(
            scan(""),
            ScanResult(valid=False, final_state=FsmState.START)
        )

    def test_error_state_is_final(self):
        for text in ["+123", "3++2", "3a2", "12345a6"]:
            self.assertEqual(
                scan(text),
                ScanResult(valid=False, final_state=FsmState.ERROR)
            )

    def test_result_has_no_position_field(self):
        self.assertEqual(
            sorted(f.name for f in dataclasses.fields(ScanResult)),
            ["final_state", "valid"]
        )

    def test_result_is_frozen(self):
        result = scan("1")
        with self.assertRaises(AttributeError):
            result.valid = False

    def test_scan_logs_at_debug(self):
        with self.assertLogs('expr_fsm.scanner', level='DEBUG') as cm:
            scan("3+2")
        self.assertEqual(len(cm.output), 1)
        self.assertIn("final_state=ACCEPT_DIGIT", cm.output[0])


class TestAgainstReference(unittest.TestCase):
    """Exhaustive comparison with an equivalent regular expression."""

    def test_all_short_strings(self):
        alphabet = "07+-a "
        for length in range(6):
            for chars in itertools.product(alphabet, repeat=length):
                text = "".join(chars)
                expected = _REFERENCE_PATTERN.fullmatch(text) is not None
                self.assertEqual(
                    is_valid_expression(text), expected,
                    f"Mismatch for {text!r}"
                )


class TestDeterminism(unittest.TestCase):

    def test_repeated_calls_agree(self):
        for text in ["3+2-1", "3++2", "", "3+", "x"]:
            first = scan(text)
            for _ in range(10):
                self.assertEqual(scan(text), first)

    def test_no_state_leaks_between_calls(self):
        self.assertFalse(is_valid_expression("+"))
        self.assertTrue(is_valid_expression("5"))
        self.assertFalse(is_valid_expression("a"))
        self.assertTrue(is_valid_expression("5"))

    def test_concurrent_scans(self):
        inputs = ["3+2-1", "3++2", "", "7", "+7", "3+", "12a"] * 50
        expected = [is_valid_expression(text) for text in inputs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(is_valid_expression, inputs))
        self.assertEqual(results, expected)

    def test_long_input(self):
        text = "1+" * 10000 + "1"
        self.assertTrue(is_valid_expression(text))
        self.assertFalse(is_valid_expression("+" + text))


if __name__ == '__main__':
    unittest.main()
