from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .engine import BufferSink, ByteSink, ByteSource, BytesSource, Engine
from .state import DEFAULT_GROW_BY, DEFAULT_TAPE_SIZE
from .translator import translate


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = DEFAULT_TAPE_SIZE
    grow_by: int = DEFAULT_GROW_BY
    max_steps: Optional[int] = None
    trace: bool = False


@dataclass(frozen=True)
class RunResult:
    output: Optional[bytes]  # None when the caller supplied its own sink
    tape: bytes
    dp: int
    steps: int
    trace: List[str] = field(default_factory=list)


def run_string(
    source: str,
    *,
    input_data: bytes = b"",
    options: Optional[RunOptions] = None,
    read: Optional[ByteSource] = None,
    write: Optional[ByteSink] = None,
) -> RunResult:
    """
    Translate and run ``source``.

    ``read``/``write`` override the in-memory defaults. With a custom ``write``
    the bytes go only to that sink and ``RunResult.output`` is None.
    """
    opts = options if options is not None else RunOptions()
    sink = BufferSink()
    engine = Engine(
        translate(source),
        read=read if read is not None else BytesSource(input_data),
        write=write if write is not None else sink,
        tape_size=opts.tape_size,
        grow_by=opts.grow_by,
        max_steps=opts.max_steps,
        trace=opts.trace,
    )
    st = engine.run()
    return RunResult(
        output=bytes(sink.data) if write is None else None,
        tape=bytes(st.tape),
        dp=st.dp,
        steps=st.steps,
        trace=list(st.trace),
    )


def read_source(path: str | Path, *, encoding: str = "utf-8") -> str:
    # only the eight ASCII symbols matter; undecodable comment bytes are replaced
    return Path(path).read_text(encoding=encoding, errors="replace")


def run_file(path: str | Path, *, options: Optional[RunOptions] = None, encoding: str = "utf-8", **kwargs) -> RunResult:
    return run_string(read_source(path, encoding=encoding), options=options, **kwargs)
