# -*- coding: utf-8 -*-

from collections import deque


class SimpleStack:
    """LIFO container on a deque; only the right end is ever touched"""

    __slots__ = ['_stack', 'max_size', 'push_count', 'pop_count']

    def __init__(self):
        self._stack = deque()
        self.max_size = 0
        self.push_count = 0
        self.pop_count = 0

    def is_empty(self):
        return len(self._stack) == 0

    def push(self, item):
        """Push item on top, tracking the high-water mark"""
        self._stack.append(item)
        self.push_count += 1
        current_size = len(self._stack)
        if current_size > self.max_size:
            self.max_size = current_size

    def pop(self):
        """Remove and return the top item, None when empty"""
        if self._stack:
            self.pop_count += 1
            return self._stack.pop()
        return None

    def peek(self):
        """Top item without removing it, None when empty"""
        if self._stack:
            return self._stack[-1]
        return None

    def __iter__(self):
        # bottom -> top, read only
        return iter(self._stack)

    def __len__(self):
        return len(self._stack)

    def __bool__(self):
        return len(self._stack) > 0

    def __repr__(self):
        return f'SimpleStack({list(self._stack)!r})'
