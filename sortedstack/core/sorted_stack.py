# -*- coding: utf-8 -*-

'''
Sorted collection of integers kept with two stacks:
  * main stack holds every value, bottom -> top ascending
  * aux stack is scratch space, only non-empty inside insert()

Only push/pop/peek/is_empty are used to maintain order, no sort call.
'''
import logging
import numbers
from typing import List

from sortedstack.utils.simpleStack import SimpleStack

sorted_stack_logger = logging.getLogger(__name__)


class SortedIntegerStack:
    """Integers in ascending order, maintained by stack insertion"""

    __slots__ = ['_main', '_aux', 'logger', 'DBG']

    def __init__(self):
        self._main = SimpleStack()
        self._aux = SimpleStack()
        self._setup_logger()

    def _setup_logger(self):
        self.logger = sorted_stack_logger
        g_logger = logging.getLogger('main')
        if g_logger.level != logging.NOTSET:
            self.logger.setLevel(g_logger.level)

        self.DBG = self.logger.debug

    def insert(self, value: int):
        """
        Add value and restore the ascending bottom -> top order.

        Elements greater than value are moved onto the aux stack, value is
        pushed, then the aux stack is poured back. Equal values stay below,
        so the new value lands above its duplicates.
        """
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f'only integer values can be inserted, got {type(value).__name__}')
        value = int(value)

        main = self._main
        aux = self._aux
        while not main.is_empty() and main.peek() > value:
            aux.push(main.pop())

        displaced = len(aux)
        main.push(value)

        while not aux.is_empty():
            main.push(aux.pop())

        self.DBG(f'insert {value}: displaced={displaced} size={len(main)}')

    def snapshot(self) -> List[int]:
        """New list of all values, smallest first; internal state untouched"""
        return list(self._main)

    def is_empty(self):
        return self._main.is_empty()

    @property
    def aux_size(self):
        return len(self._aux)

    @property
    def aux_peak(self):
        """Deepest the aux stack has been, i.e. the worst single displacement"""
        return self._aux.max_size

    @property
    def op_counts(self):
        """(pushes, pops) performed on both stacks since creation"""
        return (self._main.push_count + self._aux.push_count,
                self._main.pop_count + self._aux.pop_count)

    def __len__(self):
        return len(self._main)

    def __repr__(self):
        return f'SortedIntegerStack({self.snapshot()!r})'
