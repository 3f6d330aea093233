from __future__ import annotations

from proccall.capture import (
    CapturePolicy,
    Err,
    Out,
    OutErr,
    Pass,
    build_result,
    decode_result,
)
from proccall.errors import CaptureDecodeError, ProcessError
from proccall.process import Process
from proccall.result import Failure, Success

PROCESS = Process("tool", ("--flag",))


def test_policy_stream_selection() -> None:
    assert not CapturePolicy.PASS.captures_stdout
    assert not CapturePolicy.PASS.captures_stderr
    assert CapturePolicy.OUT.captures_stdout and not CapturePolicy.OUT.captures_stderr
    assert CapturePolicy.ERR.captures_stderr and not CapturePolicy.ERR.captures_stdout
    assert CapturePolicy.OUT_ERR.captures_stdout and CapturePolicy.OUT_ERR.captures_stderr


def test_build_result_matches_policy() -> None:
    assert build_result(CapturePolicy.PASS, None, None) == Pass()
    assert build_result(CapturePolicy.OUT, b"o", None) == Out(b"o")
    assert build_result(CapturePolicy.ERR, None, b"e") == Err(b"e")
    assert build_result(CapturePolicy.OUT_ERR, b"o", b"e") == OutErr(b"o", b"e")


def test_variants_report_their_policy() -> None:
    assert Pass().policy is CapturePolicy.PASS
    assert Out(b"").policy is CapturePolicy.OUT
    assert Err(b"").policy is CapturePolicy.ERR
    assert OutErr(b"", b"").policy is CapturePolicy.OUT_ERR


def test_map_applies_to_every_payload() -> None:
    assert Out("a").map(str.upper) == Out("A")
    assert Err("b").map(str.upper) == Err("B")
    assert OutErr("a", "b").map(str.upper) == OutErr("A", "B")


def test_decode_result_matches_independent_decode() -> None:
    payload = "héllo ☃\n".encode("utf-8")

    result = decode_result(OutErr(payload, b"warn\n"), PROCESS)

    assert result == Success(OutErr(payload.decode("utf-8"), "warn\n"))


def test_decode_result_passes_pass_through() -> None:
    assert decode_result(Pass(), PROCESS) == Success(Pass())


def test_decode_failure_names_stream_and_is_not_process_error() -> None:
    result = decode_result(OutErr(b"fine", b"\xff\xfe"), PROCESS)

    assert isinstance(result, Failure)
    error = result.error
    assert isinstance(error, CaptureDecodeError)
    assert not isinstance(error, ProcessError)
    assert error.stream == "stderr"
    assert error.process == PROCESS
    assert isinstance(error.underlying, UnicodeDecodeError)


def test_decode_failure_on_stdout() -> None:
    result = decode_result(Out(b"\xc3"), PROCESS)

    assert isinstance(result, Failure)
    assert result.error.stream == "stdout"
