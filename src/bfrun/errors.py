from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


def _build_context(code: str, pos: int, *, context: int = 16) -> str:
    """Excerpt of the filtered program around ``pos`` with a caret under it."""
    start = max(0, pos - context)
    end = min(len(code), pos + context + 1)
    out: List[str] = [f"  {start:4d} | {code[start:end]}"]
    out.append("  " + " " * 4 + " | " + " " * (pos - start) + "^")
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'close':
        return 'Remove the extra "]" or add the "[" it should close.'
    if kind == 'open':
        return 'Every "[" needs a matching "]" later in the program.'
    return None


@dataclass
class BFRunError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


# ---------------- Translation ----------------
@dataclass
class TranslateError(BFRunError):
    position: int
    context: str


@dataclass
class UnmatchedCloseError(TranslateError):
    pass


@dataclass
class UnmatchedOpenError(TranslateError):
    pass


def make_unmatched_close(*, code: str, position: int) -> UnmatchedCloseError:
    ctx = _build_context(code, position)
    hint = _hint_for('close')
    return UnmatchedCloseError(
        message=f"UnmatchedCloseError: ']' without matching '[' (position {position})\n{ctx}\nHint: {hint}",
        position=position,
        context=ctx,
    )


def make_unmatched_open(*, code: str, position: int) -> UnmatchedOpenError:
    ctx = _build_context(code, position)
    hint = _hint_for('open')
    return UnmatchedOpenError(
        message=f"UnmatchedOpenError: '[' is never closed (position {position})\n{ctx}\nHint: {hint}",
        position=position,
        context=ctx,
    )


# ---------------- Execution ----------------
@dataclass
class ExecutionError(BFRunError):
    ip: int
    dp: int


@dataclass
class OutOfBoundsError(ExecutionError):
    pass


@dataclass
class InputError(ExecutionError):
    pass


@dataclass
class StepLimitExceeded(ExecutionError):
    steps: int
