"""Application wiring for CLI-friendly process calls."""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import Any

from proccall.api import call_process
from proccall.capture import CapturePolicy, CaptureResult
from proccall.config import RunConfig, config_to_dict, load_config, update_capture
from proccall.errors import CaptureDecodeError, ExitFailure, LaunchOrIOException
from proccall.process import Process
from proccall.result import Result
from proccall.util.logging import get_logger

LAUNCH_FAILURE_EXIT_CODE = 127
DECODE_FAILURE_EXIT_CODE = 1


class AppConfigError(RuntimeError):
    """Raised when configuration or runtime setup fails."""


_LOGGER = get_logger("proccall.app")


def initialize_config(workspace: Path) -> Path:
    """Create a default configuration file in the workspace.

    Args:
        workspace: Directory where the config should be written.

    Returns:
        Path to the generated configuration file.

    Raises:
        AppConfigError: If the config file already exists.
    """

    workspace = workspace.resolve()
    config_path = workspace / "proccall.yaml"
    if config_path.exists():
        raise AppConfigError(
            f"Config file already exists at {config_path}. Remove it or choose another "
            "directory."
        )
    config_path.write_text(json.dumps(config_to_dict(RunConfig()), indent=2), encoding="utf-8")
    _LOGGER.info("Initialized configuration at %s", config_path)
    return config_path


def resolve_config(
    config_path: Path | None,
    capture: CapturePolicy | None = None,
    text: bool | None = None,
) -> RunConfig:
    """Load configuration and apply command-line overrides.

    Raises:
        AppConfigError: If the configuration cannot be loaded.
    """

    try:
        config = load_config(config_path)
    except (OSError, ValueError) as exc:
        raise AppConfigError(f"Unable to load configuration: {exc}") from exc
    if capture is not None:
        config = update_capture(config, capture)
    if text is not None:
        config = replace(config, text=text)
    return config


def build_process(
    argv: Sequence[str],
    config: RunConfig,
    directory: Path | None = None,
    env_pairs: Sequence[str] = (),
) -> Process:
    """Build a process descriptor from a command line and configuration.

    ``KEY=VALUE`` pairs are layered over the configured environment, or over
    the current environment when none is configured. Without either, the
    descriptor inherits the caller's environment unchanged.

    Raises:
        AppConfigError: If the command is empty or a pair is malformed.
    """

    if not argv:
        raise AppConfigError("A command is required.")
    environment: dict[str, str] | None = None
    if config.environment is not None:
        environment = dict(config.environment)
    if env_pairs:
        environment = environment if environment is not None else dict(os.environ)
        environment.update(_parse_env_pairs(env_pairs))
    working_directory = directory if directory is not None else config.directory
    return Process(
        argv[0],
        tuple(argv[1:]),
        directory=working_directory,
        environment=environment,
    )


def run_command(process: Process, config: RunConfig) -> Result[CaptureResult[Any], Any]:
    """Run ``process`` under the configured capture policy."""

    _LOGGER.debug("Running %s", process.describe())
    return call_process(lambda error: error, process, config.capture, text=config.text)


def exit_code_for(error: object) -> int:
    """Map a call error to the exit code reported by the CLI."""

    if isinstance(error, ExitFailure):
        if error.exit_status < 0:
            return 128 - error.exit_status
        return error.exit_status
    if isinstance(error, LaunchOrIOException):
        return LAUNCH_FAILURE_EXIT_CODE
    if isinstance(error, CaptureDecodeError):
        return DECODE_FAILURE_EXIT_CODE
    return 1


def _parse_env_pairs(pairs: Sequence[str]) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise AppConfigError(f"Environment entries must look like KEY=VALUE: {pair!r}")
        parsed[key] = value
    return parsed
