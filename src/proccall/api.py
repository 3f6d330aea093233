"""Convenience entry points for calling processes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable, TypeVar

from proccall.capture import CapturePolicy, CaptureResult, Pass, decode_result
from proccall.errors import ProcessError
from proccall.execution.engine import run_process
from proccall.process import Argument, Directory, File, Process
from proccall.result import Failure, Result, Success

E = TypeVar("E")


def call_process(
    to_error: Callable[[ProcessError], E],
    process: Process,
    capture: CapturePolicy = CapturePolicy.PASS,
    *,
    text: bool = False,
) -> Result[CaptureResult[Any], Any]:
    """Run a fully specified process.

    Args:
        to_error: Maps a ProcessError into the caller's error type.
        process: Descriptor of the process to run.
        capture: Which output streams to capture.
        text: Decode captured output as UTF-8 when true.

    Returns:
        Success with the capture variant, or Failure with ``to_error`` applied
        to the process error. A text decode failure is returned as an unmapped
        CaptureDecodeError.
    """

    result = run_process(process, capture).map_error(to_error)
    if text and isinstance(result, Success):
        return decode_result(result.value, process)
    return result


def call(
    to_error: Callable[[ProcessError], E],
    command: File,
    arguments: Sequence[Argument],
    capture: CapturePolicy = CapturePolicy.PASS,
    *,
    text: bool = False,
) -> Result[CaptureResult[Any], Any]:
    """Call a process with arguments."""

    return call_process(to_error, Process(command, tuple(arguments)), capture, text=text)


def call_(
    to_error: Callable[[ProcessError], E],
    command: File,
    arguments: Sequence[Argument],
) -> Result[None, E]:
    """Call a process with arguments, passing the output through to stdout/stderr."""

    return _discard_pass(call(to_error, command, arguments))


def call_from(
    to_error: Callable[[ProcessError], E],
    directory: Directory,
    command: File,
    arguments: Sequence[Argument],
    capture: CapturePolicy = CapturePolicy.PASS,
    *,
    text: bool = False,
) -> Result[CaptureResult[Any], Any]:
    """Call a process with arguments from inside a working directory."""

    process = Process(command, tuple(arguments), directory=directory)
    return call_process(to_error, process, capture, text=text)


def call_from_(
    to_error: Callable[[ProcessError], E],
    directory: Directory,
    command: File,
    arguments: Sequence[Argument],
) -> Result[None, E]:
    """Call a process from inside a working directory, passing the output through."""

    return _discard_pass(call_from(to_error, directory, command, arguments))


def _discard_pass(result: Result[CaptureResult[Any], E]) -> Result[None, E]:
    if isinstance(result, Failure):
        return result
    assert isinstance(result.value, Pass), f"expected Pass, got {result.value!r}"
    return Success(None)
