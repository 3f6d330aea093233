"""Typed process invocation with explicit output capture policies."""

from proccall.api import call, call_, call_from, call_from_, call_process
from proccall.capture import (
    CapturePolicy,
    CaptureResult,
    Err,
    Out,
    OutErr,
    Pass,
    decode_result,
)
from proccall.errors import (
    CaptureDecodeError,
    ExitFailure,
    ExitStatus,
    LaunchOrIOException,
    ProcessError,
    UnwrapError,
)
from proccall.execution import run_process
from proccall.process import Process
from proccall.result import Failure, Result, Success

__all__ = [
    "CaptureDecodeError",
    "CapturePolicy",
    "CaptureResult",
    "Err",
    "ExitFailure",
    "ExitStatus",
    "Failure",
    "LaunchOrIOException",
    "Out",
    "OutErr",
    "Pass",
    "Process",
    "ProcessError",
    "Result",
    "Success",
    "UnwrapError",
    "call",
    "call_",
    "call_from",
    "call_from_",
    "call_process",
    "decode_result",
    "run_process",
]

__version__ = "0.1.0"
