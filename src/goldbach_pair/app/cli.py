from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from goldbach_pair.adapters.log_sinks import build_log_sink
from goldbach_pair.adapters.prime_checker import TrialDivisionPrimeChecker
from goldbach_pair.config.loader import ConfigError, load_config
from goldbach_pair.domain.results import Rejected, SolveOutcome, Solved
from goldbach_pair.usecases.config_models import AppConfig, LogJsonlConfig
from goldbach_pair.usecases.report import build_report
from goldbach_pair.usecases.solve import SolveGoldbach

# --verify falls back to trial division, so it is only attempted up to this q.
VERIFY_LIMIT = 10**12


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goldbach-pair",
        description="Find the minimal symmetric Goldbach pair p + q = E around E/2",
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Even integers to decompose; read one per line from stdin when omitted",
    )
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--step-limit", type=int, help="Override search.step_limit")
    parser.add_argument("--json", action="store_true", help="Emit one JSON object per value")
    parser.add_argument(
        "--log",
        choices=["stdout", "jsonl", "none"],
        help="Override logging.sink",
    )
    parser.add_argument("--log-path", help="Override logging.jsonl.path")
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Re-check found pairs by trial division (q up to 10^12)",
    )
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    # CLI flags take precedence over config values.
    search = config.search
    if args.step_limit is not None:
        search = search.model_copy(update={"step_limit": args.step_limit})

    logging = config.logging
    if args.log is not None:
        logging = logging.model_copy(update={"sink": args.log})
    if args.log_path is not None:
        logging = logging.model_copy(update={"jsonl": LogJsonlConfig(path=args.log_path)})
        if args.log is None:
            logging = logging.model_copy(update={"sink": "jsonl"})

    # Re-validate so overrides obey the same rules as the file.
    return AppConfig.model_validate(
        {
            "version": config.version,
            "search": search.model_dump(),
            "logging": logging.model_dump(),
        }
    )


def iter_values(args: argparse.Namespace, stdin: TextIO) -> Iterable[str]:
    if args.values:
        yield from args.values
        return
    for line in stdin:
        if line.strip():
            yield line.rstrip("\n")


def format_outcome(outcome: SolveOutcome, *, as_json: bool, verify: bool) -> str:
    # One line (JSON) or a short text block per value.
    if isinstance(outcome, Rejected):
        if as_json:
            payload = {
                "input": outcome.raw,
                "ok": False,
                "error": outcome.error.value,
                "message": outcome.message,
            }
            return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        return f"error: {outcome.error.value}: {outcome.message}"

    report = build_report(outcome)
    verified = verify_pair(outcome) if verify else None
    if as_json:
        payload: dict[str, object] = {"input": outcome.raw, "ok": True}
        payload.update(report)
        if verified is not None:
            payload["verified"] = verified
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

    lines = [
        f"Goldbach pair: {report['p']} + {report['q']} = {report['even']}",
        f"Displacement: t = {report['t']}, Gap delta = {report['delta']}",
        f"Normalized f(E) = {report['f_norm']}",
        f"Nearest Riemann zero gamma ~ {report['nearest_gamma']}",
    ]
    if verified is not None:
        lines.append(f"Verified by trial division: {'yes' if verified else 'NO'}")
    return "\n".join(lines)


def verify_pair(solved: Solved) -> bool | None:
    # None means the pair is too large for the reference oracle.
    found = solved.found
    if found.q > VERIFY_LIMIT:
        return None
    checker = TrialDivisionPrimeChecker()
    return (
        found.p + found.q == solved.even
        and checker.is_prime(found.p)
        and checker.is_prime(found.q)
    )


def run(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    # Exit codes: 0 all solved, 1 any value rejected, 2 configuration error.
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = parse_args(argv)
    try:
        config = load_config(Path(args.config)) if args.config else AppConfig()
        config = apply_overrides(config, args)
        jsonl_path = config.logging.jsonl.path if config.logging.jsonl is not None else None
        log_sink = build_log_sink(config.logging.sink, jsonl_path)
    except (ConfigError, ValueError, OSError) as exc:
        stderr.write(f"configuration error: {exc}\n")
        return 2

    solver = SolveGoldbach.from_config(config, log_sink=log_sink)

    exit_code = 0
    try:
        for value in iter_values(args, stdin):
            outcome = solver(value)
            if not outcome.ok:
                exit_code = 1
            stdout.write(format_outcome(outcome, as_json=args.json, verify=args.verify) + "\n")
    finally:
        log_sink.close()
    return exit_code
