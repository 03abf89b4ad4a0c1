#!/usr/bin/env python3
"""
End-to-end runs through the api facade.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfrun import BufferSink, RunOptions, StepLimitExceeded, UnmatchedOpenError, run_file, run_string

HELLO = "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."


def test_increment_then_output():
    result = run_string("++.")
    assert result.output == bytes([2])


def test_copy_loop():
    result = run_string("+[>+<-]")
    assert result.tape[0] == 0
    assert result.tape[1] == 1


def test_echo_input():
    result = run_string(",.", input_data=b"A")
    assert result.output == b"A"


def test_hello_world():
    assert run_string(HELLO).output == b"Hello World!\n"


def test_commented_program():
    src = """
    add two       ++
    print it      .
    """
    assert run_string(src).output == b"\x02"


def test_small_tape_options():
    result = run_string(">>>+", options=RunOptions(tape_size=1, grow_by=2))
    assert result.dp == 3
    assert len(result.tape) == 5
    assert result.tape[3] == 1


def test_uppercase_filter():
    # subtract 32 from every input byte until input runs dry
    src = ",[" + "-" * 32 + ".,]"
    result = run_string(src, input_data=b"abc\x00")
    assert result.output == b"ABC"


def test_watchdog():
    with pytest.raises(StepLimitExceeded):
        run_string("+[]", options=RunOptions(max_steps=50))


def test_translation_error_propagates():
    with pytest.raises(UnmatchedOpenError):
        run_string("[.")


def test_trace_in_result():
    result = run_string("++", options=RunOptions(trace=True))
    assert len(result.trace) == 2
    assert result.steps == 2


def test_run_file(tmp_path):
    path = tmp_path / "two.bf"
    path.write_text("++ .", encoding="utf-8")
    assert run_file(path).output == b"\x02"
    assert run_file(str(path), input_data=b"").steps == 3


def test_custom_sink_leaves_output_unset():
    sink = BufferSink()
    result = run_string("++.", write=sink)
    assert result.output is None
    assert sink.data == bytearray(b"\x02")


def test_run_file_with_latin1_comment(tmp_path):
    path = tmp_path / "cafe.bf"
    path.write_bytes(b"caf\xe9 ++.")
    assert run_file(path).output == b"\x02"
