from __future__ import annotations

from typing import Iterable, List, Union

from .errors import make_unmatched_close, make_unmatched_open
from .instructions import SIMPLE, Instruction, LoopBegin, LoopEnd, Program, is_code_char, symbol_of


def filter_source(source: Union[str, Iterable[str]]) -> str:
    """Keep only the eight recognized symbols; everything else is a comment."""
    return ''.join(ch for ch in source if is_code_char(ch))


def translate(source: Union[str, Iterable[str]]) -> Program:
    """
    Translate source text into a resolved instruction sequence.

    Positions are indices into the filtered stream, which is also the index
    of each instruction in the result. Every LoopBegin targets its LoopEnd
    and vice versa.

    Raises UnmatchedCloseError / UnmatchedOpenError on unbalanced brackets.
    """
    code = filter_source(source)
    out: List[Instruction] = []
    stack: List[int] = []

    for ch in code:
        if ch == '[':
            stack.append(len(out))
            out.append(LoopBegin(-1))
        elif ch == ']':
            if not stack:
                raise make_unmatched_close(code=code, position=len(out))
            start = stack.pop()
            out[start] = LoopBegin(len(out))
            out.append(LoopEnd(start))
        else:
            out.append(SIMPLE[ch])

    if stack:
        raise make_unmatched_open(code=code, position=stack[-1])
    return tuple(out)


def render(program: Iterable[Instruction]) -> str:
    return ''.join(symbol_of(ins) for ins in program)
