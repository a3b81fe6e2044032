import math
import tempfile
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from utils.batch import load_expressions, evaluate_expressions, summarize_results


class TestBatch(unittest.TestCase):
    def test_evaluate_expressions(self):
        results = evaluate_expressions(["2+3*4", "", "2 3", "(2+3)*4"])
        self.assertEqual(list(results.columns), ["expression", "result", "error"])
        self.assertEqual(len(results), 3)
        self.assertEqual(results.loc[0, "result"], 14.0)
        self.assertTrue(math.isnan(results.loc[1, "result"]))
        self.assertIn("multiple operands", results.loc[1, "error"])
        self.assertEqual(results.loc[2, "result"], 20.0)

    def test_summarize_results(self):
        results = evaluate_expressions(["1+1", "2++3", "x"])
        self.assertEqual(summarize_results(results), {"total": 3, "valid": 1, "invalid": 2})

    def test_load_expressions_skips_blank_lines(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "expressions.txt"
            path.write_text("1+2\n\n  3*4  \n", encoding="utf-8")
            self.assertEqual(load_expressions(str(path)), ["1+2", "3*4"])


if __name__ == "__main__":
    unittest.main()
