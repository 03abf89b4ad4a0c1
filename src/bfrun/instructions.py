from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Type, Union


# ---------------- Instruction nodes ----------------
@dataclass(frozen=True)
class MoveRight:
    pass


@dataclass(frozen=True)
class MoveLeft:
    pass


@dataclass(frozen=True)
class Increment:
    pass


@dataclass(frozen=True)
class Decrement:
    pass


@dataclass(frozen=True)
class Output:
    pass


@dataclass(frozen=True)
class Input:
    pass


@dataclass(frozen=True)
class LoopBegin:
    target: int  # position of the matching LoopEnd


@dataclass(frozen=True)
class LoopEnd:
    target: int  # position of the matching LoopBegin


Instruction = Union[MoveRight, MoveLeft, Increment, Decrement, Output, Input, LoopBegin, LoopEnd]
Program = Tuple[Instruction, ...]

SYMBOLS = "><+-.,[]"

# Non-branching symbols map 1:1 onto a shared instance.
SIMPLE: Dict[str, Instruction] = {
    '>': MoveRight(),
    '<': MoveLeft(),
    '+': Increment(),
    '-': Decrement(),
    '.': Output(),
    ',': Input(),
}

_SYMBOL_OF: Dict[Type, str] = {
    MoveRight: '>',
    MoveLeft: '<',
    Increment: '+',
    Decrement: '-',
    Output: '.',
    Input: ',',
    LoopBegin: '[',
    LoopEnd: ']',
}


def is_code_char(ch: str) -> bool:
    return ch in SYMBOLS


def symbol_of(ins: Instruction) -> str:
    return _SYMBOL_OF[type(ins)]
