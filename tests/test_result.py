from __future__ import annotations

import pytest

from proccall.errors import ExitFailure, UnwrapError
from proccall.process import Process
from proccall.result import Failure, Success


def test_success_maps_value() -> None:
    result = Success(2).map(lambda value: value * 3)

    assert result == Success(6)
    assert result.is_success
    assert result.unwrap() == 6
    assert result.map_error(str) == result


def test_failure_maps_error_only() -> None:
    result = Failure("boom").map(lambda value: value * 3).map_error(str.upper)

    assert result == Failure("BOOM")
    assert not result.is_success


def test_bind_short_circuits_on_failure() -> None:
    calls: list[int] = []

    def step(value: int) -> Success[int]:
        calls.append(value)
        return Success(value + 1)

    assert Success(1).bind(step) == Success(2)
    assert Failure("stop").bind(step) == Failure("stop")
    assert calls == [1]


def test_unwrap_raises_exception_errors() -> None:
    error = ExitFailure(Process("false"), 1)

    with pytest.raises(ExitFailure) as excinfo:
        Failure(error).unwrap()

    assert excinfo.value is error


def test_unwrap_wraps_plain_errors() -> None:
    with pytest.raises(UnwrapError) as excinfo:
        Failure({"code": 3}).unwrap()

    assert excinfo.value.error == {"code": 3}
