"""Capture policies and the result variants they produce."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar, Union

from proccall.errors import CaptureDecodeError
from proccall.process import Process
from proccall.result import Failure, Result, Success

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_ENCODING = "utf-8"


class CapturePolicy(str, Enum):
    """Which of a child's output streams are captured through pipes."""

    PASS = "pass"
    OUT = "out"
    ERR = "err"
    OUT_ERR = "out-err"

    @property
    def captures_stdout(self) -> bool:
        return self in (CapturePolicy.OUT, CapturePolicy.OUT_ERR)

    @property
    def captures_stderr(self) -> bool:
        return self in (CapturePolicy.ERR, CapturePolicy.OUT_ERR)


@dataclass(frozen=True, order=True)
class Pass:
    """Pass ``stdout`` and ``stderr`` through to the console."""

    policy = CapturePolicy.PASS


@dataclass(frozen=True, order=True)
class Out(Generic[T]):
    """Capture ``stdout`` and pass ``stderr`` through to the console."""

    out: T

    policy = CapturePolicy.OUT

    def map(self, fn: Callable[[T], U]) -> Out[U]:
        return Out(fn(self.out))


@dataclass(frozen=True, order=True)
class Err(Generic[T]):
    """Capture ``stderr`` and pass ``stdout`` through to the console."""

    err: T

    policy = CapturePolicy.ERR

    def map(self, fn: Callable[[T], U]) -> Err[U]:
        return Err(fn(self.err))


@dataclass(frozen=True, order=True)
class OutErr(Generic[T]):
    """Capture both ``stdout`` and ``stderr``."""

    out: T
    err: T

    policy = CapturePolicy.OUT_ERR

    def map(self, fn: Callable[[T], U]) -> OutErr[U]:
        return OutErr(fn(self.out), fn(self.err))


CaptureResult = Union[Pass, Out[T], Err[T], OutErr[T]]


def build_result(policy: CapturePolicy, stdout: bytes | None, stderr: bytes | None) -> CaptureResult[bytes]:
    """Wrap drained stream contents in the variant matching ``policy``."""

    if policy is CapturePolicy.PASS:
        return Pass()
    if policy is CapturePolicy.OUT:
        return Out(stdout or b"")
    if policy is CapturePolicy.ERR:
        return Err(stderr or b"")
    return OutErr(stdout or b"", stderr or b"")


def decode_result(
    result: CaptureResult[bytes],
    process: Process,
    encoding: str = DEFAULT_ENCODING,
) -> Result[CaptureResult[str], CaptureDecodeError]:
    """Decode an already-captured byte result into its text variant.

    Decoding is strict; invalid input yields a CaptureDecodeError naming the
    offending stream rather than a lossy replacement.

    Args:
        result: The byte variant returned by the engine.
        process: The descriptor that produced ``result``.
        encoding: Text encoding of the captured streams.

    Returns:
        Success with the text variant, or Failure with a CaptureDecodeError.
    """

    def decode(stream: str, data: bytes) -> str:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as exc:
            raise CaptureDecodeError(process, stream, exc) from exc

    try:
        if isinstance(result, Pass):
            return Success(result)
        if isinstance(result, Out):
            return Success(Out(decode("stdout", result.out)))
        if isinstance(result, Err):
            return Success(Err(decode("stderr", result.err)))
        return Success(OutErr(decode("stdout", result.out), decode("stderr", result.err)))
    except CaptureDecodeError as exc:
        return Failure(exc)
