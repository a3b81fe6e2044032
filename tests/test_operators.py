import math
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core.operators import Operators


class TestOperators(unittest.TestCase):
    def test_binary_order(self):
        self.assertEqual(Operators.apply('-', 5.0, 2.0), 3.0)
        self.assertEqual(Operators.apply('/', 6.0, 4.0), 1.5)
        self.assertEqual(Operators.apply('^', 2.0, 3.0), 8.0)
        self.assertEqual(Operators.apply('*', 2.5, 4.0), 10.0)
        self.assertEqual(Operators.apply('+', 0.5, 0.25), 0.75)

    def test_division_by_zero_follows_float_semantics(self):
        self.assertEqual(float(Operators.div(1.0, 0.0)), math.inf)
        self.assertEqual(float(Operators.div(-1.0, 0.0)), -math.inf)
        self.assertTrue(math.isnan(float(Operators.div(0.0, 0.0))))

    def test_pow_of_negative_base_is_nan(self):
        self.assertTrue(math.isnan(float(Operators.pow(-8.0, 1.0 / 3.0))))

    def test_precedence_table(self):
        self.assertEqual(Operators.precedence('^'), 3)
        self.assertEqual(Operators.precedence('*'), 2)
        self.assertEqual(Operators.precedence('/'), 2)
        self.assertEqual(Operators.precedence('+'), 1)
        self.assertEqual(Operators.precedence('-'), 1)
        for ch in '({)}x':
            self.assertEqual(Operators.precedence(ch), -1)

    def test_unknown_operator(self):
        with self.assertRaises(ValueError):
            Operators.apply('%', 1.0, 2.0)


if __name__ == "__main__":
    unittest.main()
