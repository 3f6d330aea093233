"""Process descriptors: immutable values describing a process to launch."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Union

File = Union[str, "os.PathLike[str]"]
Directory = Union[str, "os.PathLike[str]"]
Argument = str
EnvKey = str
EnvValue = str


@total_ordering
@dataclass(frozen=True)
class Process:
    """Immutable description of a process invocation.

    Attributes:
        command: Path or name of the executable.
        arguments: Arguments passed after the command.
        directory: Working directory, or None to use the caller's.
        environment: Sorted ``(key, value)`` pairs replacing the caller's
            environment, or None to inherit it unchanged.
    """

    command: str
    arguments: tuple[Argument, ...] = ()
    directory: str | None = None
    environment: tuple[tuple[EnvKey, EnvValue], ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "command", os.fspath(self.command))
        object.__setattr__(self, "arguments", tuple(str(arg) for arg in self.arguments))
        if self.directory is not None:
            object.__setattr__(self, "directory", os.fspath(self.directory))
        if self.environment is not None:
            object.__setattr__(self, "environment", _normalize_environment(self.environment))

    @property
    def argv(self) -> list[str]:
        """Return the full argument vector, command first."""

        return [self.command, *self.arguments]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Process):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def _sort_key(self) -> tuple[Any, ...]:
        # An absent directory or environment sorts before any present one.
        return (
            self.command,
            self.arguments,
            (self.directory is not None, self.directory or ""),
            (self.environment is not None, self.environment or ()),
        )

    def environment_map(self) -> dict[EnvKey, EnvValue] | None:
        """Return the environment override as a new dict, or None to inherit."""

        if self.environment is None:
            return None
        return dict(self.environment)

    def describe(self) -> str:
        """Return a short human-readable rendering for messages."""

        rendered = " ".join(self.argv)
        if self.directory is not None:
            rendered = f"{rendered} (in {self.directory})"
        return rendered


def _normalize_environment(
    environment: Mapping[str, str] | Iterable[tuple[str, str]],
) -> tuple[tuple[str, str], ...]:
    items = environment.items() if isinstance(environment, Mapping) else environment
    return tuple(sorted((str(key), str(value)) for key, value in items))
