"""core/stack.py"""


class EmptyStackError(IndexError):
    """对空栈执行 pop/peek"""
    pass


class ArrayStack:
    """基于列表的后进先出栈"""

    def __init__(self, items=None):
        self._items = list(items) if items else []

    def push(self, item):
        self._items.append(item)

    def pop(self):
        if not self._items:
            raise EmptyStackError("pop from empty stack")
        return self._items.pop()

    def peek(self):
        if not self._items:
            raise EmptyStackError("peek at empty stack")
        return self._items[-1]

    def is_empty(self):
        return not self._items

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"ArrayStack({self._items!r})"
