from pathlib import Path

import pytest

from proccall.capture import CapturePolicy
from proccall.config import RunConfig, config_to_dict, load_config, update_capture


def test_run_config_defaults() -> None:
    config = RunConfig()
    assert config.capture is CapturePolicy.PASS
    assert config.text is True
    assert config.directory is None
    assert config.environment is None
    assert config.log_level == "INFO"


def test_load_config_without_files_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path) == RunConfig()


def test_load_config_from_pyproject(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        """
[tool.proccall]
capture = "out-err"
text = false
directory = "work"
log_level = "DEBUG"

[tool.proccall.environment]
LANG = "C"
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.capture is CapturePolicy.OUT_ERR
    assert config.text is False
    assert config.directory == (tmp_path / "work").resolve()
    assert config.environment == {"LANG": "C"}
    assert config.log_level == "DEBUG"


def test_load_config_from_json_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "proccall.yaml"
    config_path.write_text('{"capture": "err", "environment": {"A": 1}}', encoding="utf-8")

    config = load_config(config_path)

    assert config.capture is CapturePolicy.ERR
    assert config.environment == {"A": "1"}


def test_load_config_from_non_json_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "proccall.yml"
    config_path.write_text(
        """
capture: OUT
environment:
  HOME: /nowhere
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.capture is CapturePolicy.OUT
    assert config.environment == {"HOME": "/nowhere"}


def test_load_config_rejects_unknown_capture(tmp_path: Path) -> None:
    config_path = tmp_path / "proccall.yaml"
    config_path.write_text("capture: everything\n", encoding="utf-8")

    with pytest.raises(ValueError, match="capture must be one of"):
        load_config(config_path)


def test_load_config_rejects_non_mapping_environment(tmp_path: Path) -> None:
    config_path = tmp_path / "proccall.yaml"
    config_path.write_text("environment: [A, B]\n", encoding="utf-8")

    with pytest.raises(ValueError, match="environment"):
        load_config(config_path)


def test_load_config_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_config_round_trips_through_dict(tmp_path: Path) -> None:
    config = update_capture(RunConfig(environment={"K": "V"}), CapturePolicy.OUT)

    data = config_to_dict(config)

    assert data == {
        "capture": "out",
        "text": True,
        "directory": None,
        "environment": {"K": "V"},
        "log_level": "INFO",
    }


@pytest.mark.parametrize(("raw", "expected"), [("false", False), ("No", False), ("true", True), ("on", True)])
def test_load_config_parses_string_booleans(tmp_path: Path, raw: str, expected: bool) -> None:
    config_path = tmp_path / "proccall.yaml"
    config_path.write_text(f'{{"text": "{raw}"}}', encoding="utf-8")

    assert load_config(config_path).text is expected


def test_load_config_rejects_non_boolean_text(tmp_path: Path) -> None:
    config_path = tmp_path / "proccall.yaml"
    config_path.write_text('{"text": "sometimes"}', encoding="utf-8")

    with pytest.raises(ValueError, match="text must be a boolean"):
        load_config(config_path)
