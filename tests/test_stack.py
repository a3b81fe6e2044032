import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core.stack import ArrayStack, EmptyStackError


class TestArrayStack(unittest.TestCase):
    def test_lifo_order(self):
        stack = ArrayStack()
        for item in (1, 2, 3):
            stack.push(item)
        self.assertEqual(stack.peek(), 3)
        self.assertEqual([stack.pop(), stack.pop(), stack.pop()], [3, 2, 1])
        self.assertTrue(stack.is_empty())

    def test_empty_pop_and_peek_fail(self):
        stack = ArrayStack()
        with self.assertRaises(EmptyStackError):
            stack.pop()
        with self.assertRaises(EmptyStackError):
            stack.peek()

    def test_underflow_is_index_error(self):
        with self.assertRaises(IndexError):
            ArrayStack().pop()

    def test_len_and_clear(self):
        stack = ArrayStack([1.0, 2.0])
        self.assertEqual(len(stack), 2)
        stack.clear()
        self.assertEqual(len(stack), 0)
        self.assertTrue(stack.is_empty())


if __name__ == "__main__":
    unittest.main()
