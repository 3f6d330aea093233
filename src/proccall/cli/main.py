"""CLI entrypoints for proccall."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from proccall.app import (
    AppConfigError,
    build_process,
    exit_code_for,
    initialize_config,
    resolve_config,
    run_command,
)
from proccall.capture import CapturePolicy, Err, Out, OutErr
from proccall.result import Failure
from proccall.util.logging import configure_logging

app = typer.Typer(help="Run external processes with typed output capture.")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (e.g., DEBUG, INFO, WARNING). Overrides the config file.",
    ),
) -> None:
    """Configure CLI-level options."""

    ctx.obj = log_level


@app.command()
def init(ctx: typer.Context, directory: Path = typer.Argument(Path("."))) -> None:
    """Write a default proccall.yaml into a directory."""

    configure_logging(ctx.obj or "INFO")
    try:
        config_path = initialize_config(directory)
    except AppConfigError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(f"Created configuration at {config_path}")


@app.command("run")
def run_cmd(
    ctx: typer.Context,
    command: list[str] = typer.Argument(..., help="Command and arguments to run."),
    capture: Optional[CapturePolicy] = typer.Option(
        None,
        "--capture",
        "-c",
        help="Streams to capture: pass|out|err|out-err.",
    ),
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="Working directory."),
    env: list[str] = typer.Option([], "--env", "-e", help="Environment entry KEY=VALUE."),
    raw_bytes: bool = typer.Option(False, "--bytes", help="Write captured output undecoded."),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to a configuration file or directory.",
    ),
) -> None:
    """Run a command and report its classified outcome."""

    try:
        config = resolve_config(config_path, capture, text=False if raw_bytes else None)
        configure_logging(ctx.obj or config.log_level)
        process = build_process(command, config, directory=cwd, env_pairs=env)
    except AppConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    result = run_command(process, config)
    if isinstance(result, Failure):
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=exit_code_for(result.error))
    _echo_captured(result.value)


def _echo_captured(captured: object) -> None:
    if isinstance(captured, (Out, OutErr)):
        _echo_stream(captured.out, err=False)
    if isinstance(captured, (Err, OutErr)):
        _echo_stream(captured.err, err=True)


def _echo_stream(data: str | bytes, *, err: bool) -> None:
    if data:
        typer.echo(data, nl=False, err=err)
