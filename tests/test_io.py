#!/usr/bin/env python3
"""
Byte source and sink adapters.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

from bfrun import BufferSink, BytesSource, Engine, LineSource, StreamSink, StreamSource, translate


def test_bytes_source():
    src = BytesSource(b"\x00\xff")
    assert src() == 0
    assert src() == 255
    assert src() is None


def test_stream_source():
    src = StreamSource(io.BytesIO(b"hi"))
    assert src() == ord("h")
    assert src() == ord("i")
    assert src() is None


def test_line_source_takes_first_character():
    src = LineSource(io.StringIO("hello\n  B\n\n"))
    assert src() == ord("h")
    assert src() == ord("B")
    assert src() is None


def test_line_source_masks_wide_characters():
    src = LineSource(io.StringIO("Ł\n"))
    assert src() == 0x41


def test_stream_sink_writes_each_byte():
    stream = io.BytesIO()
    sink = StreamSink(stream)
    sink(72)
    sink(0)
    assert stream.getvalue() == b"H\x00"


def test_engine_with_streams():
    out = io.BytesIO()
    engine = Engine(translate(",+.,+."), read=StreamSource(io.BytesIO(b"ab")), write=StreamSink(out))
    engine.run()
    assert out.getvalue() == b"bc"


def test_plain_callables():
    seen = []
    engine = Engine(translate(",."), read=lambda: 9, write=seen.append)
    engine.run()
    assert seen == [9]


def test_buffer_sink():
    sink = BufferSink()
    sink(1)
    assert bytes(sink.data) == b"\x01"
