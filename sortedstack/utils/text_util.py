# -*- coding: utf-8 -*-

#### Console texts ####
WELCOME_TITLE = '=== Sorted Stack Program ==='
WELCOME_LINES = (
    'Enter integer numbers (one per line).',
    'Press Enter on an empty line to finish input.',
    'Numbers will be stored in a Stack and displayed sorted from smallest to largest.',
)
INPUT_PROMPT = 'Enter a number: '
INVALID_INPUT_MSG = "Invalid input: '{}'. Please enter a valid integer or press Enter to finish."

RESULTS_TITLE = '=== Final Results ==='
RESULTS_SORTED_LABEL = 'Stack contents sorted (smallest to largest): '
RESULTS_TOTAL_LABEL = 'Total numbers in Stack: '
EMPTY_STACK_MARK = '[Stack Empty]'

UNEXPECTED_ERROR_MSG = 'An unexpected error occurred: {}'
CANCELLED_MSG = 'Input cancelled.'


def format_numbers(numbers):
    """Render numbers as '[a, b, c]', or the empty-stack mark"""
    if not numbers:
        return EMPTY_STACK_MARK
    return '[' + ', '.join(str(n) for n in numbers) + ']'


def parse_int(text: str) -> int:
    """Parse a stripped line as a base-10 integer; raises ValueError"""
    text = text.strip()
    # int() also accepts '1_000'; plain digits with an optional sign only
    if '_' in text:
        raise ValueError(f'invalid literal for int(): {text!r}')
    return int(text, 10)
