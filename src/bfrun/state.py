from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, List, Optional

DEFAULT_TAPE_SIZE = 1024
DEFAULT_GROW_BY = 128
TRACE_KEEP = 256  # most recent trace lines kept in memory


@dataclass
class ExecutionState:
    tape: bytearray = field(default_factory=lambda: bytearray(DEFAULT_TAPE_SIZE))
    dp: int = 0
    ip: int = 0
    steps: int = 0
    trace: Deque[str] = field(default_factory=lambda: deque(maxlen=TRACE_KEEP))
    is_tracing: bool = False
    trace_sink: Optional[Callable[[str], None]] = None

    @classmethod
    def fresh(
        cls,
        tape_size: int = DEFAULT_TAPE_SIZE,
        *,
        is_tracing: bool = False,
        trace_sink: Optional[Callable[[str], None]] = None,
    ) -> "ExecutionState":
        return cls(tape=bytearray(tape_size), is_tracing=is_tracing, trace_sink=trace_sink)

    @property
    def cell(self) -> int:
        return self.tape[self.dp]

    def grow(self, by: int) -> None:
        self.tape.extend(bytes(by))

    def dump(self, n: int) -> List[int]:
        return list(self.tape[:n])

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
            if self.trace_sink is not None:
                self.trace_sink(message)
