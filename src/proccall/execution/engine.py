"""Process execution engine: spawn, drain, wait, classify."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

from proccall.capture import CapturePolicy, CaptureResult, build_result
from proccall.errors import ExitFailure, LaunchOrIOException, ProcessError
from proccall.execution.drain import DrainWorker, read_to_end
from proccall.process import Process
from proccall.result import Failure, Result, Success
from proccall.util.logging import get_logger
from proccall.util.observability import EventLogger, create_event_logger

_LOGGER = get_logger("proccall.execution")
_SPAWN_ERRORS = (OSError, ValueError, subprocess.SubprocessError)


@dataclass(frozen=True)
class ProcessOutcome:
    """Exit code and captured payload of a process that ran to completion."""

    exit_code: int
    captured: CaptureResult[bytes]


def classify(process: Process, outcome: ProcessOutcome) -> Result[CaptureResult[bytes], ProcessError]:
    """Turn a completed outcome into a success or an ExitFailure."""

    if outcome.exit_code == 0:
        return Success(outcome.captured)
    return Failure(ExitFailure(process, outcome.exit_code))


def run_process(
    process: Process,
    policy: CapturePolicy,
    events: EventLogger | None = None,
) -> Result[CaptureResult[bytes], ProcessError]:
    """Run a process to completion under a capture policy.

    stdin is always inherited. stdout and stderr are piped only where the
    policy captures them. No exception escapes: launch, drain and wait
    failures are returned as LaunchOrIOException.

    Args:
        process: Descriptor of the process to run.
        policy: Which output streams to capture.
        events: Optional structured event logger; defaults to ``proccall.events``.

    Returns:
        Success with the byte capture variant for ``policy``, or Failure with
        an ExitFailure or LaunchOrIOException carrying ``process``.
    """

    events = events or create_event_logger()
    _LOGGER.debug("Spawning %s with capture policy %s", process.argv, policy.value)
    try:
        child = subprocess.Popen(
            process.argv,
            cwd=process.directory,
            env=process.environment_map(),
            stdin=None,
            stdout=subprocess.PIPE if policy.captures_stdout else None,
            stderr=subprocess.PIPE if policy.captures_stderr else None,
        )
    except _SPAWN_ERRORS as exc:
        return _launch_failure(process, exc, "spawn", events)

    events.log("process.spawned", {"argv": process.argv, "pid": child.pid, "policy": policy.value})
    with child:
        try:
            stdout, stderr = _collect(child, policy)
            exit_code = child.wait()
        except Exception as exc:
            return _launch_failure(process, exc, "collect", events)

    events.log("process.completed", {"argv": process.argv, "exit_code": exit_code})
    result = classify(process, ProcessOutcome(exit_code, build_result(policy, stdout, stderr)))
    if not result.is_success:
        _LOGGER.info("Process %s exited with status %s", process.describe(), exit_code)
    return result


def _collect(child: subprocess.Popen[bytes], policy: CapturePolicy) -> tuple[bytes | None, bytes | None]:
    if policy is CapturePolicy.OUT_ERR:
        assert child.stdout is not None and child.stderr is not None
        out_worker = DrainWorker(child.stdout, name=f"proccall-stdout-{child.pid}").start()
        err_worker = DrainWorker(child.stderr, name=f"proccall-stderr-{child.pid}").start()
        out_worker.wait()
        err_worker.wait()
        return out_worker.result(), err_worker.result()
    if policy is CapturePolicy.OUT:
        assert child.stdout is not None
        return read_to_end(child.stdout), None
    if policy is CapturePolicy.ERR:
        assert child.stderr is not None
        return None, read_to_end(child.stderr)
    return None, None


def _launch_failure(
    process: Process,
    exc: BaseException,
    stage: str,
    events: EventLogger,
) -> Failure[ProcessError]:
    _LOGGER.warning("Process %s failed during %s: %s", process.describe(), stage, exc)
    events.log(
        "process.failed",
        {"argv": process.argv, "stage": stage, "error": repr(exc)},
        level="WARNING",
    )
    return Failure(LaunchOrIOException(process, exc))
