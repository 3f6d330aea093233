"""Configuration models and loaders for proccall."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from proccall.capture import CapturePolicy

CONFIG_FILE_NAMES: tuple[str, ...] = ("proccall.yaml", "proccall.yml", "pyproject.toml")
_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})


@dataclass(frozen=True)
class RunConfig:
    """Defaults applied to processes launched from the command line.

    Attributes:
        capture: Capture policy used when none is given on the command line.
        text: Whether captured output is decoded as UTF-8.
        directory: Working directory, or None for the current directory.
        environment: Environment override, or None to inherit the caller's.
        log_level: Logging level name.
    """

    capture: CapturePolicy = CapturePolicy.PASS
    text: bool = True
    directory: Path | None = None
    environment: dict[str, str] | None = None
    log_level: str = "INFO"


def load_config(path: Path | None = None) -> RunConfig:
    """Load run configuration from disk.

    Args:
        path: Optional path to a configuration file or directory.

    Returns:
        Parsed RunConfig with defaults applied when no config exists.
    """

    config_path = _resolve_config_path(path)
    if config_path is None:
        return RunConfig()

    if config_path.suffix in {".yaml", ".yml"}:
        raw_data = _load_yaml(config_path)
    elif config_path.suffix == ".toml":
        raw_data = _load_toml(config_path)
    else:
        raise ValueError(f"Unsupported config file type: {config_path}")

    return _parse_run_config(raw_data, base_path=config_path.parent)


def config_to_dict(config: RunConfig) -> dict[str, Any]:
    """Serialize a RunConfig into a JSON-compatible dictionary."""

    return {
        "capture": config.capture.value,
        "text": config.text,
        "directory": str(config.directory) if config.directory is not None else None,
        "environment": dict(config.environment) if config.environment is not None else None,
        "log_level": config.log_level,
    }


def update_capture(config: RunConfig, capture: CapturePolicy) -> RunConfig:
    """Return a config copy with an updated capture policy."""

    return replace(config, capture=capture)


def _resolve_config_path(path: Path | None) -> Path | None:
    if path is None:
        candidate_paths = [Path(name) for name in CONFIG_FILE_NAMES]
    elif path.is_dir():
        candidate_paths = [path / name for name in CONFIG_FILE_NAMES]
    else:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path

    for candidate in candidate_paths:
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        data = tomllib.load(handle)
    if path.name == "pyproject.toml":
        tool_config = data.get("tool", {}).get("proccall", {})
        if not isinstance(tool_config, dict):
            raise ValueError("tool.proccall must be a mapping.")
        return tool_config
    return data


def _load_yaml(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("YAML configuration must be a mapping.")
    return data


def _parse_run_config(raw: dict[str, Any], base_path: Path) -> RunConfig:
    directory = raw.get("directory")
    directory_path: Path | None = None
    if directory is not None:
        directory_path = Path(str(directory))
        if not directory_path.is_absolute():
            directory_path = (base_path / directory_path).resolve()

    return RunConfig(
        capture=_parse_capture(raw.get("capture", CapturePolicy.PASS.value)),
        text=_parse_bool("text", raw.get("text", True)),
        directory=directory_path,
        environment=_parse_environment(raw.get("environment")),
        log_level=str(raw.get("log_level", "INFO")),
    )


def _parse_capture(raw: Any) -> CapturePolicy:
    try:
        return CapturePolicy(str(raw).strip().lower())
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in CapturePolicy)
        raise ValueError(f"capture must be one of: {choices}.") from exc


def _parse_bool(name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}.")


def _parse_environment(raw: Any) -> dict[str, str] | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError("environment must be a mapping of names to values.")
    return {str(key): str(value) for key, value in raw.items()}
