# -*- coding: utf-8 -*-

import logging
import sys
from typing import Iterator, Optional, TextIO

from sortedstack.utils import text_util

input_logger = logging.getLogger(__name__)


def _tolerant_stdin():
    """sys.stdin with undecodable bytes replaced, so a bad line is rejected like any other"""
    stream = sys.stdin
    if hasattr(stream, 'reconfigure'):
        stream.reconfigure(errors='replace')
    return stream


class ConsoleInputHandler:
    """Reads integers line by line until a blank line or end of input"""

    def __init__(self, stream: Optional[TextIO] = None, out: Optional[TextIO] = None,
                 prompt: bool = True, owns_stream: bool = False):
        self.stream = stream if stream is not None else _tolerant_stdin()
        self.out = out if out is not None else sys.stdout
        self.prompt = prompt
        self.owns_stream = owns_stream and self.stream is not sys.stdin
        self.rejected = 0

    def _readline(self):
        if self.prompt:
            self.out.write(text_util.INPUT_PROMPT)
            self.out.flush()
        return self.stream.readline()

    def read_numbers(self) -> Iterator[int]:
        """Yield each valid integer; malformed lines are reported and skipped"""
        while True:
            line = self._readline()
            if line == '':
                input_logger.debug('end of input stream')
                break

            token = line.strip()
            if not token:
                input_logger.debug('blank line, input finished')
                break

            try:
                value = text_util.parse_int(token)
            except ValueError:
                self.rejected += 1
                input_logger.warning(f'rejected input line {token!r}')
                print(text_util.INVALID_INPUT_MSG.format(token), file=self.out)
                continue

            yield value

    def read_into(self, collection) -> int:
        """Insert every read integer into collection, return how many"""
        count = 0
        for value in self.read_numbers():
            collection.insert(value)
            count += 1
        input_logger.info(f'accepted {count} numbers, rejected {self.rejected}')
        return count

    def close(self):
        if self.owns_stream:
            self.stream.close()
