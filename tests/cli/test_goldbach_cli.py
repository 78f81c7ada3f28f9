from __future__ import annotations

import io
import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from goldbach_pair.app.cli import apply_overrides, parse_args, run
from goldbach_pair.main import main
from goldbach_pair.usecases.config_models import AppConfig


def _run(argv: list[str], stdin_text: str = "") -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    code = run(argv, stdin=io.StringIO(stdin_text), stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


def test_parse_args_reads_flags() -> None:
    args = parse_args(
        [
            "100",
            "1000",
            "--config",
            "cfg.yml",
            "--step-limit",
            "10",
            "--json",
            "--log",
            "jsonl",
            "--log-path",
            "log.jsonl",
            "--verify",
        ]
    )
    assert args.values == ["100", "1000"]
    assert args.config == "cfg.yml"
    assert args.step_limit == 10
    assert args.json is True
    assert args.log == "jsonl"
    assert args.log_path == "log.jsonl"
    assert args.verify is True


def test_apply_overrides_updates_config() -> None:
    # CLI overrides win over config values; a log path alone selects the jsonl sink.
    args = SimpleNamespace(step_limit=7, log=None, log_path="out.jsonl")
    config = apply_overrides(AppConfig(), args)
    assert config.search.step_limit == 7
    assert config.logging.sink == "jsonl"
    assert config.logging.jsonl is not None
    assert config.logging.jsonl.path == "out.jsonl"


def test_apply_overrides_keeps_config_without_flags() -> None:
    config = AppConfig.model_validate({"search": {"step_limit": 9}})
    args = SimpleNamespace(step_limit=None, log=None, log_path=None)
    assert apply_overrides(config, args) == config


def test_cli_text_output() -> None:
    code, out, err = _run(["100", "--log", "none"])
    assert code == 0
    assert err == ""
    lines = out.splitlines()
    assert lines[0] == "Goldbach pair: 47 + 53 = 100"
    assert lines[1] == "Displacement: t = 3, Gap delta = 6"
    assert lines[2].startswith("Normalized f(E) = 0.14")
    assert lines[3] == "Nearest Riemann zero gamma ~ 14.134725"


def test_cli_json_output_and_exit_code() -> None:
    code, out, _ = _run(["8", "12a4", "--json", "--log", "none"])
    assert code == 1
    first, second = (json.loads(line) for line in out.splitlines())
    assert first["ok"] is True
    assert (first["p"], first["q"], first["t"], first["delta"]) == ("3", "5", "1", "2")
    assert second == {
        "input": "12a4",
        "ok": False,
        "error": "INVALID_INPUT",
        "message": "Invalid input. Enter an even integer (digits only).",
    }


def test_cli_reads_values_from_stdin() -> None:
    code, out, _ = _run(["--json", "--log", "none"], stdin_text="10\n\n101\n")
    assert code == 1
    records = [json.loads(line) for line in out.splitlines()]
    assert [r["ok"] for r in records] == [True, False]
    assert records[1]["error"] == "OUT_OF_DOMAIN"


def test_cli_text_error_line() -> None:
    code, out, _ = _run(["4000000000000000002", "--log", "none"])
    assert code == 1
    assert out.startswith("error: TOO_LARGE: ")


def test_cli_step_limit_override_exhausts() -> None:
    code, out, _ = _run(["4", "--step-limit", "10", "--json", "--log", "none"])
    assert code == 1
    assert json.loads(out)["error"] == "SEARCH_EXHAUSTED"


def test_cli_verify_flag() -> None:
    code, out, _ = _run(["1000", "--json", "--verify", "--log", "none"])
    assert code == 0
    assert json.loads(out)["verified"] is True

    code, out, _ = _run(["4000000000000000000", "--json", "--verify", "--log", "none"])
    assert code == 0
    assert "verified" not in json.loads(out)


def test_cli_writes_jsonl_log(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "run.jsonl"
    code, _, _ = _run(["100", "abc", "--log-path", str(log_path)])
    assert code == 1
    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert [r["message"] for r in records] == ["solve.found", "solve.rejected"]


def test_cli_stdout_log_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, _ = _run(["8"])
    assert code == 0
    assert "solve.found" not in out
    assert "solve.found" in capsys.readouterr().err


def test_cli_uses_config_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yml"
    config_path.write_text(
        "search:\n  max_even: 1000\nlogging:\n  sink: none\n", encoding="utf-8"
    )
    code, out, _ = _run(["1002", "--config", str(config_path)])
    assert code == 1
    assert out.startswith("error: TOO_LARGE: ")


def test_cli_reports_config_errors(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yml"
    config_path.write_text("unknown: 1\n", encoding="utf-8")
    code, out, err = _run(["100", "--config", str(config_path)])
    assert code == 2
    assert out == ""
    assert err.startswith("configuration error:")


def test_cli_rejects_invalid_override() -> None:
    code, _, err = _run(["100", "--step-limit", "0"])
    assert code == 2
    assert "configuration error" in err


def test_main_entrypoint(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["8", "--log", "none"]) == 0
    assert "Goldbach pair: 3 + 5 = 8" in capsys.readouterr().out


def test_cli_reports_unwritable_log_path(tmp_path: Path) -> None:
    # A directory cannot be opened as the JSONL log file.
    code, out, err = _run(["8", "--log-path", str(tmp_path)])
    assert code == 2
    assert out == ""
    assert err.startswith("configuration error:")


def test_cli_very_long_input_is_rejected_as_too_large() -> None:
    code, out, _ = _run(["2" * 5000, "--json", "--log", "none"])
    assert code == 1
    assert json.loads(out)["error"] == "TOO_LARGE"
