from __future__ import annotations

from pathlib import Path

import pytest

from goldbach_pair.config.loader import ConfigError, load_config, parse_config
from goldbach_pair.usecases.config_models import SUPPORTED_MAX_EVEN, AppConfig


def _write(tmp_path: Path, lines: list[str]) -> Path:
    path = tmp_path / "config.yml"
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def test_load_config_happy_path(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        [
            "version: 1",
            "search:",
            "  step_limit: 1000",
            "  max_even: 1000000",
            "logging:",
            "  sink: jsonl",
            "  level: debug",
            "  jsonl:",
            "    path: logs/run.jsonl",
        ],
    )
    cfg = load_config(path)
    assert isinstance(cfg, AppConfig)
    assert cfg.search.step_limit == 1000
    assert cfg.search.max_even == 1_000_000
    assert cfg.logging.sink == "jsonl"
    assert cfg.logging.level == "debug"
    assert cfg.logging.jsonl is not None
    assert cfg.logging.jsonl.path == "logs/run.jsonl"


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    cfg = load_config(_write(tmp_path, [""]))
    assert cfg == AppConfig()
    assert cfg.search.step_limit == 5_000_000
    assert cfg.search.max_even == SUPPORTED_MAX_EVEN
    assert cfg.logging.sink == "stdout"


def test_load_config_unknown_top_level_key_fails(tmp_path: Path) -> None:
    # Unknown top-level keys are rejected (fail fast).
    with pytest.raises(ConfigError, match="Unknown top-level keys"):
        load_config(_write(tmp_path, ["version: 1", "output: x.txt"]))


def test_load_config_unknown_nested_key_fails(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, ["search:", "  steps: 10"]))


def test_load_config_non_mapping_root_fails(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write(tmp_path, ["- 1", "- 2"]))


def test_load_config_invalid_yaml_fails(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, ["search: [unclosed"]))


def test_load_config_missing_file_fails(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yml")


@pytest.mark.parametrize(
    "raw",
    [
        {"search": {"step_limit": 0}},
        {"search": {"max_even": 2}},
        {"search": {"max_even": SUPPORTED_MAX_EVEN + 2}},
        {"logging": {"sink": "jsonl"}},
        {"logging": {"sink": "syslog"}},
        {"logging": {"level": "trace"}},
    ],
)
def test_parse_config_rejects_invalid_values(raw: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        parse_config(raw)
