from .api import RunOptions, RunResult, read_source, run_file, run_string
from .engine import BufferSink, BytesSource, Engine, LineSource, StreamSink, StreamSource
from .errors import (
    BFRunError,
    ExecutionError,
    InputError,
    OutOfBoundsError,
    StepLimitExceeded,
    TranslateError,
    UnmatchedCloseError,
    UnmatchedOpenError,
)
from .state import ExecutionState
from .translator import filter_source, render, translate

__all__ = [
    'Engine',
    'ExecutionState',
    'translate',
    'filter_source',
    'render',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
    'read_source',
    'BytesSource',
    'StreamSource',
    'LineSource',
    'BufferSink',
    'StreamSink',
    'BFRunError',
    'TranslateError',
    'UnmatchedCloseError',
    'UnmatchedOpenError',
    'ExecutionError',
    'OutOfBoundsError',
    'InputError',
    'StepLimitExceeded',
]
