from __future__ import annotations

import logging
import sys
from typing import BinaryIO, Callable, Iterable, Optional, TextIO

from .errors import InputError, OutOfBoundsError, StepLimitExceeded
from .instructions import (
    Decrement,
    Increment,
    Input,
    Instruction,
    LoopBegin,
    LoopEnd,
    MoveLeft,
    MoveRight,
    Output,
    Program,
    symbol_of,
)
from .state import DEFAULT_GROW_BY, DEFAULT_TAPE_SIZE, ExecutionState

logger = logging.getLogger(__name__)

ByteSource = Callable[[], Optional[int]]
ByteSink = Callable[[int], None]


# ---------------- I/O adapters ----------------
class BytesSource:
    """Serves bytes from an in-memory buffer; None once exhausted."""

    def __init__(self, data: bytes = b"") -> None:
        self.data = bytes(data)
        self.pos = 0

    def __call__(self) -> Optional[int]:
        if self.pos >= len(self.data):
            return None
        b = self.data[self.pos]
        self.pos += 1
        return b


class StreamSource:
    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdin.buffer

    def __call__(self) -> Optional[int]:
        chunk = self.stream.read(1)
        return chunk[0] if chunk else None


class LineSource:
    """
    Reads a whole line per request and keeps its first character.

    An empty line (after stripping) or EOF counts as exhausted input.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdin

    def __call__(self) -> Optional[int]:
        line = self.stream.readline().strip()
        if not line:
            return None
        return ord(line[0]) & 0xFF


class BufferSink:
    def __init__(self) -> None:
        self.data = bytearray()

    def __call__(self, value: int) -> None:
        self.data.append(value)


class StreamSink:
    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout.buffer

    def __call__(self, value: int) -> None:
        self.stream.write(bytes((value,)))
        self.stream.flush()


# ---------------- Engine ----------------
class Engine:
    def __init__(
        self,
        program: Iterable[Instruction],
        *,
        read: Optional[ByteSource] = None,
        write: Optional[ByteSink] = None,
        tape_size: int = DEFAULT_TAPE_SIZE,
        grow_by: int = DEFAULT_GROW_BY,
        max_steps: Optional[int] = None,
        trace: bool = False,
        trace_sink: Optional[Callable[[str], None]] = None,
    ) -> None:
        if tape_size < 1:
            raise ValueError(f"tape_size must be positive, got {tape_size}")
        if grow_by < 1:
            raise ValueError(f"grow_by must be positive, got {grow_by}")
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")

        self.program: Program = tuple(program)
        self.read: ByteSource = read if read is not None else BytesSource()
        self.write: ByteSink = write if write is not None else BufferSink()
        self.grow_by = grow_by
        self.max_steps = max_steps
        self.state = ExecutionState.fresh(
            tape_size,
            is_tracing=trace or trace_sink is not None,
            trace_sink=trace_sink,
        )

    @property
    def tape(self) -> bytes:
        return bytes(self.state.tape)

    @property
    def cell(self) -> int:
        return self.state.cell

    @property
    def finished(self) -> bool:
        return self.state.ip >= len(self.program)

    def step(self) -> bool:
        """Execute one instruction. Returns False if the program had already finished."""
        st = self.state
        if st.ip >= len(self.program):
            return False
        if self.max_steps is not None and st.steps >= self.max_steps:
            raise StepLimitExceeded(
                message=f"StepLimitExceeded: gave up after {st.steps} steps (ip {st.ip}, dp {st.dp})",
                ip=st.ip,
                dp=st.dp,
                steps=st.steps,
            )

        ins = self.program[st.ip]
        at = st.ip

        if isinstance(ins, MoveRight):
            st.dp += 1
            if st.dp >= len(st.tape):
                st.grow(self.grow_by)
                logger.debug("tape grown to %d cells", len(st.tape))
        elif isinstance(ins, MoveLeft):
            if st.dp == 0:
                raise OutOfBoundsError(
                    message=f"OutOfBoundsError: '<' at ip {st.ip} would move below cell 0",
                    ip=st.ip,
                    dp=st.dp,
                )
            st.dp -= 1
        elif isinstance(ins, Increment):
            st.tape[st.dp] = (st.tape[st.dp] + 1) & 0xFF
        elif isinstance(ins, Decrement):
            st.tape[st.dp] = (st.tape[st.dp] - 1) & 0xFF
        elif isinstance(ins, Output):
            self.write(st.tape[st.dp])
        elif isinstance(ins, Input):
            value = self.read()
            if value is None:
                raise InputError(
                    message=f"InputError: ',' at ip {st.ip} found no input byte",
                    ip=st.ip,
                    dp=st.dp,
                )
            if not 0 <= value <= 0xFF:
                raise InputError(
                    message=f"InputError: ',' at ip {st.ip} got {value!r}, not a byte",
                    ip=st.ip,
                    dp=st.dp,
                )
            st.tape[st.dp] = value
        elif isinstance(ins, LoopBegin):
            if st.tape[st.dp] == 0:
                st.ip = ins.target
        elif isinstance(ins, LoopEnd):
            if st.tape[st.dp] != 0:
                st.ip = ins.target - 1
        else:
            raise TypeError(f"unknown instruction at ip {st.ip}: {ins!r}")

        st.ip += 1
        st.steps += 1
        if st.is_tracing:
            st.add_trace(f"{st.steps:6d} ip={at} {symbol_of(ins)} dp={st.dp} cell={st.tape[st.dp]}")
        return True

    def run(self) -> ExecutionState:
        logger.debug("run start: %d instructions, tape %d cells", len(self.program), len(self.state.tape))
        while self.step():
            pass
        logger.debug("run end: %d steps, tape %d cells", self.state.steps, len(self.state.tape))
        return self.state
