# -*- coding: utf-8 -*-

import sys
from typing import Optional, Sequence, TextIO

from sortedstack.utils import text_util


class ConsoleDisplayManager:
    """Welcome banner and final results on a text stream"""

    def __init__(self, out: Optional[TextIO] = None):
        self.out = out if out is not None else sys.stdout

    def show_welcome(self):
        print(text_util.WELCOME_TITLE, file=self.out)
        for line in text_util.WELCOME_LINES:
            print(line, file=self.out)
        print(file=self.out)

    def show_results(self, numbers: Sequence[int]):
        print(f'\n{text_util.RESULTS_TITLE}', file=self.out)
        print(text_util.RESULTS_SORTED_LABEL + text_util.format_numbers(numbers), file=self.out)
        print(f'{text_util.RESULTS_TOTAL_LABEL}{len(numbers)}', file=self.out)
