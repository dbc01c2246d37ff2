# -*- coding: utf-8 -*-

'''
Program flow: welcome banner -> read integers -> print them sorted.

The collection, input handler and display are plain objects passed in by the
caller; main() wires the console versions together.
'''
import argparse
import logging
import sys
import traceback

from sortedstack.core.sorted_stack import SortedIntegerStack
from sortedstack.console.input_handler import ConsoleInputHandler
from sortedstack.console.display import ConsoleDisplayManager
from sortedstack.utils import text_util

#### Logging ####
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_LEVEL = 'WARNING'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')

#### Exit status ####
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CANCELLED = 130


class SortedStackApp:
    """Coordinates input, collection and display"""

    __slots__ = ['collection', 'input_handler', 'display', 'logger']

    def __init__(self, collection=None, input_handler=None, display=None):
        self.collection = collection if collection is not None else SortedIntegerStack()
        self.input_handler = input_handler if input_handler is not None else ConsoleInputHandler()
        self.display = display if display is not None else ConsoleDisplayManager()
        self.logger = logging.getLogger('main')

    def run(self, welcome=True):
        if welcome:
            self.display.show_welcome()
        accepted = self.input_handler.read_into(self.collection)
        numbers = self.collection.snapshot()
        self.logger.info(f'{accepted} numbers read, stack size={len(numbers)}')
        self.display.show_results(numbers)
        return numbers

    def cleanup(self):
        self.input_handler.close()


def setup_logging(level=DEFAULT_LOG_LEVEL, log_file=None):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    logging.getLogger('main').setLevel(level)


def build_parser():
    p = argparse.ArgumentParser(
        prog='sorted-stack',
        description='Read integers from standard input and print them sorted using two stacks')
    p.add_argument('--log-level', default=DEFAULT_LOG_LEVEL, choices=LOG_LEVELS,
                   help=f'Logging level (default {DEFAULT_LOG_LEVEL})')
    p.add_argument('--log-file', help='Also write log records to this file')
    p.add_argument('--quiet', '-q', action='store_true',
                   help='Skip the welcome banner and input prompts (for piped input)')
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    logger = logging.getLogger('main')

    app = None
    try:
        setup_logging(args.log_level, args.log_file)
        app = SortedStackApp(input_handler=ConsoleInputHandler(prompt=not args.quiet))
        app.run(welcome=not args.quiet)
    except KeyboardInterrupt:
        print(text_util.CANCELLED_MSG, file=sys.stderr)
        return EXIT_CANCELLED
    except Exception as e:
        # the user-facing message below is the only stderr report
        logger.debug(f'run failed: {e}\n{traceback.format_exc()}')
        print(text_util.UNEXPECTED_ERROR_MSG.format(e), file=sys.stderr)
        return EXIT_ERROR
    finally:
        if app is not None:
            app.cleanup()
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
