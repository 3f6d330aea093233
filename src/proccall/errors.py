"""Error taxonomy for process invocations."""

from __future__ import annotations

from typing import Any

from proccall.process import Process

ExitStatus = int


class ProcessError(RuntimeError):
    """Base class for errors produced while running a process.

    Instances are returned as values by the execution engine and compare
    structurally, so they can be matched in tests and carried through
    result containers. They can still be raised by callers that prefer
    exceptions (see ``Failure.unwrap``).

    ``args`` holds the constructor arguments, so instances copy and pickle.
    """

    def __init__(self, process: Process, *details: Any) -> None:
        self.process = process
        super().__init__(process, *details)

    def _fields(self) -> tuple[Any, ...]:
        return (self.process,)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._fields()))

    def __str__(self) -> str:
        return f"Process error: {self.process.describe()}"


class ExitFailure(ProcessError):
    """Raised when a process terminates with a nonzero exit status.

    A process killed by a signal reports the negative signal number, as
    ``subprocess`` does.
    """

    def __init__(self, process: Process, exit_status: ExitStatus) -> None:
        self.exit_status = exit_status
        super().__init__(process, exit_status)

    def _fields(self) -> tuple[Any, ...]:
        return (self.process, self.exit_status)

    def __str__(self) -> str:
        return f"Process failed with exit status {self.exit_status}: {self.process.describe()}"

    def __repr__(self) -> str:
        return f"ExitFailure(process={self.process!r}, exit_status={self.exit_status!r})"


class LaunchOrIOException(ProcessError):
    """Raised when a process could not be started, drained, or waited on."""

    def __init__(self, process: Process, underlying: BaseException) -> None:
        self.underlying = underlying
        super().__init__(process, underlying)

    def _fields(self) -> tuple[Any, ...]:
        return (self.process, type(self.underlying), str(self.underlying))

    def __str__(self) -> str:
        return f"Process could not be run: {self.process.describe()}: {self.underlying}"

    def __repr__(self) -> str:
        return f"LaunchOrIOException(process={self.process!r}, underlying={self.underlying!r})"


class CaptureDecodeError(ValueError):
    """Raised when captured output is not valid text in the requested encoding.

    Not a ProcessError: the process ran and its bytes were
    delivered; only the text view of them failed.
    """

    def __init__(self, process: Process, stream: str, underlying: UnicodeDecodeError) -> None:
        self.process = process
        self.stream = stream
        self.underlying = underlying
        super().__init__(process, stream, underlying)

    def __str__(self) -> str:
        return f"Captured {self.stream} is not valid {self.underlying.encoding}: {self.underlying.reason}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CaptureDecodeError):
            return NotImplemented
        return (self.process, self.stream, str(self.underlying)) == (
            other.process,
            other.stream,
            str(other.underlying),
        )

    def __hash__(self) -> int:
        return hash((self.process, self.stream, str(self.underlying)))


class UnwrapError(RuntimeError):
    """Raised when unwrapping a failure whose error is not an exception."""

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(error)

    def __str__(self) -> str:
        return f"Called unwrap on a failure: {self.error!r}"
