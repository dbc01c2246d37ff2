import io

from sortedstack.console.input_handler import ConsoleInputHandler
from sortedstack.console.display import ConsoleDisplayManager
from sortedstack.core.sorted_stack import SortedIntegerStack


def handler_for(text, prompt=False):
    out = io.StringIO()
    return ConsoleInputHandler(io.StringIO(text), out, prompt=prompt), out


def test_reads_until_blank_line():
    handler, _ = handler_for("3\n-1\n  42 \n\n99\n")
    assert list(handler.read_numbers()) == [3, -1, 42]


def test_end_of_stream_finishes_input():
    handler, _ = handler_for("8\n+2")
    assert list(handler.read_numbers()) == [8, 2]


def test_whitespace_only_line_is_blank():
    handler, _ = handler_for("1\n   \n2\n")
    assert list(handler.read_numbers()) == [1]


def test_malformed_lines_are_reported_and_skipped():
    handler, out = handler_for("abc\n4\n1.5\n1_000\n-\n5\n\n")
    assert list(handler.read_numbers()) == [4, 5]
    assert handler.rejected == 4
    text = out.getvalue()
    assert "Invalid input: 'abc'." in text
    assert "Invalid input: '1.5'." in text
    assert "Invalid input: '1_000'." in text


def test_undecodable_stdin_line_is_rejected(monkeypatch):
    raw = io.TextIOWrapper(io.BytesIO(b"3\n\xff\n1\n\n"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", raw)
    out = io.StringIO()
    handler = ConsoleInputHandler(out=out, prompt=False)
    assert list(handler.read_numbers()) == [3, 1]
    assert handler.rejected == 1
    assert "Invalid input: '\ufffd'." in out.getvalue()


def test_prompt_written_per_line():
    handler, out = handler_for("1\n\n", prompt=True)
    list(handler.read_numbers())
    assert out.getvalue().count("Enter a number: ") == 2


def test_read_into_collection():
    handler, _ = handler_for("5\n1\nx\n4\n\n")
    stack = SortedIntegerStack()
    assert handler.read_into(stack) == 3
    assert stack.snapshot() == [1, 4, 5]


def test_close_only_owned_streams():
    stream = io.StringIO("")
    ConsoleInputHandler(stream, io.StringIO()).close()
    assert not stream.closed

    ConsoleInputHandler(stream, io.StringIO(), owns_stream=True).close()
    assert stream.closed


def test_welcome_banner():
    out = io.StringIO()
    ConsoleDisplayManager(out).show_welcome()
    lines = out.getvalue().splitlines()
    assert lines[0] == "=== Sorted Stack Program ==="
    assert lines[2] == "Press Enter on an empty line to finish input."
    assert lines[-1] == ""


def test_results_format():
    out = io.StringIO()
    ConsoleDisplayManager(out).show_results([-2, 0, 7])
    assert out.getvalue() == (
        "\n=== Final Results ===\n"
        "Stack contents sorted (smallest to largest): [-2, 0, 7]\n"
        "Total numbers in Stack: 3\n"
    )


def test_results_empty():
    out = io.StringIO()
    ConsoleDisplayManager(out).show_results([])
    assert "(smallest to largest): [Stack Empty]\n" in out.getvalue()
    assert "Total numbers in Stack: 0" in out.getvalue()
